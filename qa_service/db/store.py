# qa_service/db/store.py

from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List

from sqlalchemy import delete, insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from qa_service.db.errors import AnswerNotFound, QuestionNotFound, StorageError
from qa_service.db.schema import answers, questions


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands timestamps back without tzinfo
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _row_to_question(row) -> Dict[str, Any]:
    return {
        "id": row["id"],
        "text": row["text"],
        "created_at": _as_utc(row["created_at"]),
    }


def _row_to_answer(row) -> Dict[str, Any]:
    return {
        "id": row["id"],
        "question_id": row["question_id"],
        "user_id": row["user_id"],
        "text": row["text"],
        "created_at": _as_utc(row["created_at"]),
    }


@contextmanager
def _storage_errors(action: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        raise StorageError(f"{action} failed: {exc}") from exc


class QAStore:
    """
    Question/answer persistence on top of a SQLAlchemy engine.

    The engine is the only state held here, so one instance is shared by
    all requests. Reads run on a plain connection, writes inside
    ``engine.begin()`` so each operation commits or rolls back as a unit.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    # Questions

    def list_questions(self) -> List[Dict[str, Any]]:
        stmt = select(
            questions.c.id,
            questions.c.text,
            questions.c.created_at,
        ).order_by(questions.c.id)

        with _storage_errors("list questions"):
            with self.engine.connect() as conn:
                rows = conn.execute(stmt).mappings().all()

        return [_row_to_question(row) for row in rows]

    def create_question(self, text: str) -> Dict[str, Any]:
        created_at = _utcnow()

        with _storage_errors("create question"):
            with self.engine.begin() as conn:
                result = conn.execute(
                    insert(questions).values(text=text, created_at=created_at)
                )
                question_id = result.inserted_primary_key[0]

        return {"id": question_id, "text": text, "created_at": created_at}

    def get_question_with_answers(self, question_id: int) -> Dict[str, Any]:
        """
        Load a question and all of its answers in one read.

        Raises QuestionNotFound when no question has this id.
        """
        question_stmt = select(
            questions.c.id,
            questions.c.text,
            questions.c.created_at,
        ).where(questions.c.id == question_id)

        answers_stmt = (
            select(
                answers.c.id,
                answers.c.question_id,
                answers.c.user_id,
                answers.c.text,
                answers.c.created_at,
            )
            .where(answers.c.question_id == question_id)
            .order_by(answers.c.id)
        )

        with _storage_errors("get question"):
            with self.engine.connect() as conn:
                row = conn.execute(question_stmt).mappings().first()
                if row is None:
                    raise QuestionNotFound(question_id)
                answer_rows = conn.execute(answers_stmt).mappings().all()

        question = _row_to_question(row)
        question["answers"] = [_row_to_answer(a) for a in answer_rows]
        return question

    def delete_question(self, question_id: int) -> None:
        # answers go with it through ON DELETE CASCADE
        with _storage_errors("delete question"):
            with self.engine.begin() as conn:
                conn.execute(delete(questions).where(questions.c.id == question_id))

    # Answers

    def create_answer(self, question_id: int, user_id: str, text: str) -> Dict[str, Any]:
        """
        Attach an answer to an existing question.

        The existence check and the insert share one transaction.
        Raises QuestionNotFound when the parent question is missing.
        """
        created_at = _utcnow()
        exists_stmt = select(questions.c.id).where(questions.c.id == question_id)

        with _storage_errors("create answer"):
            with self.engine.begin() as conn:
                if conn.execute(exists_stmt).first() is None:
                    raise QuestionNotFound(question_id)

                result = conn.execute(
                    insert(answers).values(
                        question_id=question_id,
                        user_id=user_id,
                        text=text,
                        created_at=created_at,
                    )
                )
                answer_id = result.inserted_primary_key[0]

        return {
            "id": answer_id,
            "question_id": question_id,
            "user_id": user_id,
            "text": text,
            "created_at": created_at,
        }

    def get_answer(self, answer_id: int) -> Dict[str, Any]:
        stmt = select(
            answers.c.id,
            answers.c.question_id,
            answers.c.user_id,
            answers.c.text,
            answers.c.created_at,
        ).where(answers.c.id == answer_id)

        with _storage_errors("get answer"):
            with self.engine.connect() as conn:
                row = conn.execute(stmt).mappings().first()

        if row is None:
            raise AnswerNotFound(answer_id)

        return _row_to_answer(row)

    def delete_answer(self, answer_id: int) -> None:
        with _storage_errors("delete answer"):
            with self.engine.begin() as conn:
                conn.execute(delete(answers).where(answers.c.id == answer_id))
