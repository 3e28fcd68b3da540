# qa_service/models/questions.py

from datetime import datetime
from typing import List

from pydantic import BaseModel

from qa_service.models.answers import AnswerOut


class QuestionCreate(BaseModel):
    # missing field reads as blank so the handler reports it as required
    text: str = ""


class QuestionOut(BaseModel):
    id: int
    text: str
    created_at: datetime


class QuestionWithAnswersOut(QuestionOut):
    answers: List[AnswerOut] = []
