# qa_service/api/questions.py

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from qa_service.api.common import (
    get_store,
    internal_error,
    log_request,
    parse_id,
    read_json_body,
)
from qa_service.db.errors import QuestionNotFound, StorageError
from qa_service.db.store import QAStore
from qa_service.models.answers import AnswerCreate, AnswerOut
from qa_service.models.questions import (
    QuestionCreate,
    QuestionOut,
    QuestionWithAnswersOut,
)

router = APIRouter(prefix="/questions", tags=["questions"])


async def _question_payload(request: Request) -> QuestionCreate:
    return await read_json_body(request, QuestionCreate)


async def _answer_payload(request: Request) -> AnswerCreate:
    return await read_json_body(request, AnswerCreate)


@router.get("", response_model=List[QuestionOut])
def list_questions(
    request: Request,
    store: QAStore = Depends(get_store),
) -> List[QuestionOut]:
    """
    Return every question, without answers.
    """
    log_request(request, "listing questions")
    try:
        rows = store.list_questions()
    except StorageError as exc:
        log_request(request, "list questions failed: %s", exc, level=logging.ERROR)
        internal_error(exc)

    log_request(request, "list questions succeeded count=%d", len(rows))
    return [QuestionOut(**row) for row in rows]


@router.post("", response_model=QuestionOut, status_code=status.HTTP_201_CREATED)
def create_question(
    request: Request,
    payload: QuestionCreate = Depends(_question_payload),
    store: QAStore = Depends(get_store),
) -> QuestionOut:
    log_request(request, "creating question")
    if not payload.text.strip():
        log_request(request, "validation failed: empty text")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="text is required")

    try:
        row = store.create_question(payload.text)
    except StorageError as exc:
        log_request(request, "create question failed: %s", exc, level=logging.ERROR)
        internal_error(exc)

    log_request(request, "question created id=%d", row["id"])
    return QuestionOut(**row)


@router.get("/{question_id}", response_model=QuestionWithAnswersOut)
@router.get("/{question_id}/", response_model=QuestionWithAnswersOut, include_in_schema=False)
def get_question(
    question_id: str,
    request: Request,
    store: QAStore = Depends(get_store),
) -> QuestionWithAnswersOut:
    """
    Return one question with all of its answers.
    """
    qid = parse_id(request, question_id, "question")
    log_request(request, "retrieving question id=%d", qid)
    try:
        row = store.get_question_with_answers(qid)
    except QuestionNotFound:
        log_request(request, "question id=%d not found", qid)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="question not found")
    except StorageError as exc:
        log_request(request, "get question id=%d failed: %s", qid, exc, level=logging.ERROR)
        internal_error(exc)

    log_request(request, "question id=%d retrieved", qid)
    return QuestionWithAnswersOut(**row)


@router.delete("/{question_id}", status_code=status.HTTP_204_NO_CONTENT)
@router.delete("/{question_id}/", status_code=status.HTTP_204_NO_CONTENT, include_in_schema=False)
def delete_question(
    question_id: str,
    request: Request,
    store: QAStore = Depends(get_store),
) -> Response:
    """
    Delete a question and its answers. Unknown ids are not an error.
    """
    qid = parse_id(request, question_id, "question")
    log_request(request, "deleting question id=%d", qid)
    try:
        store.delete_question(qid)
    except StorageError as exc:
        log_request(request, "delete question id=%d failed: %s", qid, exc, level=logging.ERROR)
        internal_error(exc)

    log_request(request, "question id=%d deleted", qid)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{question_id}/answers",
    response_model=AnswerOut,
    status_code=status.HTTP_201_CREATED,
)
@router.post(
    "/{question_id}/answers/",
    response_model=AnswerOut,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
def create_answer(
    question_id: str,
    request: Request,
    payload: AnswerCreate = Depends(_answer_payload),
    store: QAStore = Depends(get_store),
) -> AnswerOut:
    qid = parse_id(request, question_id, "question")
    log_request(request, "creating answer for question id=%d", qid)
    if not payload.user_id.strip() or not payload.text.strip():
        log_request(request, "validation failed: user_id or text empty")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="user_id and text are required",
        )

    try:
        row = store.create_answer(qid, payload.user_id, payload.text)
    except QuestionNotFound:
        log_request(request, "question id=%d not found while creating answer", qid)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="question not found")
    except StorageError as exc:
        log_request(request, "create answer failed: %s", exc, level=logging.ERROR)
        internal_error(exc)

    log_request(request, "answer created id=%d for question id=%d", row["id"], qid)
    return AnswerOut(**row)
