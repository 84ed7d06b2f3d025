"""
Logging setup for the Payment API.

Configures the root logger once at application startup. Records go to
stdout and, when LOG_FILE_PATH is set, to a UTF-8 log file as well.
Modules obtain their own logger with logging.getLogger(__name__).
"""

import logging
import sys
from pathlib import Path

from app.config import settings


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging() -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if settings.LOG_FILE_PATH:
        log_path = Path(settings.LOG_FILE_PATH)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format=LOG_FORMAT,
        handlers=handlers,
    )
