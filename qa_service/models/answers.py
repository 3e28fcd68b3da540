# qa_service/models/answers.py

from datetime import datetime

from pydantic import BaseModel


class AnswerCreate(BaseModel):
    user_id: str = ""
    text: str = ""


class AnswerOut(BaseModel):
    id: int
    question_id: int
    user_id: str
    text: str
    created_at: datetime
