# scripts/init_db.py
"""
Drop and recreate the QA tables (local development reset).

Usage:
    python -m scripts.init_db
"""

import logging

from qa_service.config import configure_logging, get_settings
from qa_service.db.engine import get_engine
from qa_service.db.schema import metadata

logger = logging.getLogger(__name__)


def main(database_url=None):
    engine = get_engine(database_url or get_settings().database_url)
    metadata.drop_all(engine)
    metadata.create_all(engine)
    logger.info("DB schema created at %s", engine.url)
    return engine


if __name__ == "__main__":
    configure_logging()
    main()
