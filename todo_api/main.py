import logging
import sys

import uvicorn

from todo_api.app import create_app
from todo_api.config import ConfigError, Settings

logger = logging.getLogger(__name__)


def main():
    try:
        settings = Settings.from_env()
    except ConfigError as e:
        logging.basicConfig(level=logging.ERROR)
        logger.error(str(e))
        sys.exit(1)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
