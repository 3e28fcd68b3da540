# qa_service/api/common.py

import logging
import re
from typing import NoReturn, Type, TypeVar

from fastapi import HTTPException, Request, status
from pydantic import BaseModel, ValidationError

from qa_service.db.store import QAStore

logger = logging.getLogger("qa_service.api")

_ID_PATTERN = re.compile(r"[0-9]+")
MAX_ID = 2**63 - 1  # signed 64-bit key range of the storage engine

ModelT = TypeVar("ModelT", bound=BaseModel)


def get_store(request: Request) -> QAStore:
    return request.app.state.store


def log_request(request: Request, message: str, *args, level: int = logging.INFO) -> None:
    logger.log(
        level,
        "%s %s - " + message,
        request.method,
        request.url.path,
        *args,
    )


def parse_id(request: Request, raw: str, kind: str) -> int:
    """
    Parse a path identifier as a base-10 unsigned integer or answer 400.
    """
    if _ID_PATTERN.fullmatch(raw) is None or int(raw) > MAX_ID:
        log_request(request, "invalid %s id: %r", kind, raw)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid id")
    return int(raw)


def internal_error(exc: Exception) -> NoReturn:
    # detail stays in the server log
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="internal server error",
    ) from exc


async def read_json_body(request: Request, model: Type[ModelT]) -> ModelT:
    """
    Decode the raw request body into ``model`` whatever the Content-Type says.

    Anything that is not a JSON object of the right shape is a 400
    "invalid json"; blank fields are left for the handler to reject.
    """
    body = await request.body()
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        log_request(request, "invalid json: %s", exc.errors(), level=logging.WARNING)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid json")
