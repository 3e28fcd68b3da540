import logging

import uvicorn

from qa_service.config import LISTEN_HOST, LISTEN_PORT, configure_logging

logger = logging.getLogger("qa_service")


def main():
    configure_logging()
    logger.info("starting server on %s:%d", LISTEN_HOST, LISTEN_PORT)
    uvicorn.run("qa_service:app", host=LISTEN_HOST, port=LISTEN_PORT, log_config=None)


if __name__ == "__main__":
    main()
