import logging
from pathlib import Path

import uvicorn

from bookcatalog.app import app
from bookcatalog.config import API_PREFIX, DB_PATH, HOST, LOG_LEVEL, PORT

logger = logging.getLogger("bookcatalog")


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Ensure the database directory exists
    Path(DB_PATH).parent.mkdir(parents=True, exist_ok=True)

    logger.info("Serving books at http://%s:%d%s/books", HOST, PORT, API_PREFIX)
    if not API_PREFIX:
        logger.info("Set BOOKCATALOG_API_PREFIX=/api to serve /api/books for the browser client")
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
