import logging
import sys
from pathlib import Path
from logging.handlers import TimedRotatingFileHandler

from .config import Settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def setup_logging(settings: Settings) -> None:
    """Configure the root logger once: console, plus a daily log file if LOG_FILE is set."""
    global _configured
    if _configured:
        return

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers: list[logging.Handler] = []

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    handlers.append(console)

    if settings.LOG_FILE:
        Path(settings.LOG_FILE).parent.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            settings.LOG_FILE, when="midnight", backupCount=7, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    root = logging.getLogger()
    root.setLevel(settings.LOG_LEVEL.upper())
    for handler in handlers:
        root.addHandler(handler)
    _configured = True
