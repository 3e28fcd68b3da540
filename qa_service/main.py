import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from qa_service.api.answers import router as answers_router
from qa_service.api.questions import router as questions_router
from qa_service.config import get_settings
from qa_service.db.engine import get_engine
from qa_service.db.schema import metadata
from qa_service.db.store import QAStore
from qa_service.errors import register_error_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = app.state.store.engine
    logger.info("initializing database connection")
    metadata.create_all(engine)
    logger.info("database connection established")
    try:
        yield
    finally:
        engine.dispose()


def create_app(database_url: Optional[str] = None) -> FastAPI:
    if database_url is None:
        settings = get_settings()
        if settings.using_default_database:
            logger.warning("DATABASE_URL not set, using default: %s", settings.database_url)
        database_url = settings.database_url

    app = FastAPI(
        title="QA Service",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
        lifespan=lifespan,
    )

    # create_engine does not connect, so building the app touches no database
    app.state.store = QAStore(get_engine(database_url))

    app.include_router(questions_router)
    app.include_router(answers_router)
    register_error_handlers(app)
    return app


app = create_app()
