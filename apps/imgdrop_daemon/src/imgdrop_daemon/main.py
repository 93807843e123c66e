from __future__ import annotations

import logging

import uvicorn
from dotenv import load_dotenv

from imgdrop_daemon.config import Settings
from imgdrop_daemon.http import create_app
from imgdrop_daemon.observability import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    load_dotenv()
    settings = Settings()
    setup_logging(settings.log_level, settings.log_format)
    settings.ensure_dirs()

    app = create_app(settings=settings)
    logger.info("Secure file upload running at http://%s:%s", settings.app_host, settings.app_port)
    uvicorn.run(app, host=settings.app_host, port=settings.app_port, log_config=None)


if __name__ == "__main__":
    main()
