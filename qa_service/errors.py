"""
Exception handlers for the QA service.

Routing misses (unknown path, wrong method) never reach a route handler,
so they are logged here before FastAPI's default response is sent.
"""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from qa_service.api.common import log_request


def register_error_handlers(app: FastAPI) -> None:
    """Register the global exception handlers on the app."""

    @app.exception_handler(StarletteHTTPException)
    async def routing_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        # route handlers log their own failures; only routing misses land here unlogged
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            log_request(request, "method %s not allowed", request.method)
        elif "endpoint" not in request.scope:
            log_request(request, "path not found")
        return await http_exception_handler(request, exc)
