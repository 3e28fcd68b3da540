# qa_service/db/errors.py
"""
Errors raised by the persistence layer.

Routers only need to tell the two not-found kinds apart from everything
else; any other failure surfaces as StorageError.
"""


class StoreError(Exception):
    pass


class NotFoundError(StoreError):
    entity = "entity"

    def __init__(self, entity_id: int):
        self.entity_id = entity_id
        super().__init__(f"{self.entity} {entity_id} not found")


class QuestionNotFound(NotFoundError):
    entity = "question"


class AnswerNotFound(NotFoundError):
    entity = "answer"


class StorageError(StoreError):
    pass
