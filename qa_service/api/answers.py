# qa_service/api/answers.py

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from qa_service.api.common import get_store, internal_error, log_request, parse_id
from qa_service.db.errors import AnswerNotFound, StorageError
from qa_service.db.store import QAStore
from qa_service.models.answers import AnswerOut

router = APIRouter(prefix="/answers", tags=["answers"])


@router.get("/{answer_id}", response_model=AnswerOut)
@router.get("/{answer_id}/", response_model=AnswerOut, include_in_schema=False)
def get_answer(
    answer_id: str,
    request: Request,
    store: QAStore = Depends(get_store),
) -> AnswerOut:
    aid = parse_id(request, answer_id, "answer")
    log_request(request, "retrieving answer id=%d", aid)
    try:
        row = store.get_answer(aid)
    except AnswerNotFound:
        log_request(request, "answer id=%d not found", aid)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="answer not found")
    except StorageError as exc:
        log_request(request, "get answer id=%d failed: %s", aid, exc, level=logging.ERROR)
        internal_error(exc)

    log_request(request, "answer id=%d retrieved", aid)
    return AnswerOut(**row)


@router.delete("/{answer_id}", status_code=status.HTTP_204_NO_CONTENT)
@router.delete("/{answer_id}/", status_code=status.HTTP_204_NO_CONTENT, include_in_schema=False)
def delete_answer(
    answer_id: str,
    request: Request,
    store: QAStore = Depends(get_store),
) -> Response:
    aid = parse_id(request, answer_id, "answer")
    log_request(request, "deleting answer id=%d", aid)
    try:
        store.delete_answer(aid)
    except StorageError as exc:
        log_request(request, "delete answer id=%d failed: %s", aid, exc, level=logging.ERROR)
        internal_error(exc)

    log_request(request, "answer id=%d deleted", aid)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
