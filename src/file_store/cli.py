import logging
import sys

import uvicorn

from file_store.app.core.config import settings
from file_store.app.core.logging import configure_logging
from file_store.app.core.startup import prepare_storage_dirs
from file_store.app.domain.files.errors import StorageRootUnavailable

logger = logging.getLogger(__name__)


def main() -> None:
    configure_logging(settings.LOG_LEVEL)
    try:
        prepare_storage_dirs(settings)
    except StorageRootUnavailable as e:
        logger.critical("%s", e)
        sys.exit(1)

    logger.info("Starting API on http://%s:%d", settings.API_HOST, settings.API_PORT)
    uvicorn.run(
        "file_store.app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
