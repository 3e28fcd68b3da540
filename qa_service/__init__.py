# qa_service/__init__.py
"""
Package entrypoint for the FastAPI application.

This lets us run:
    uvicorn qa_service:app --reload
or, on the fixed service address:
    python -m qa_service
"""

from .main import app

__all__ = ["app"]
