from __future__ import annotations

import logging
import logging.handlers
import os

LOG_FILE = "city_explorer.log"

# Chatty third-party loggers; the blob store is rewritten on every click
_QUIET_LOGGERS = ("sqlalchemy.engine", "httpx")


def _file_handler(log_dir: str) -> logging.Handler:
    os.makedirs(log_dir, exist_ok=True)
    return logging.handlers.RotatingFileHandler(
        filename=os.path.join(log_dir, LOG_FILE),
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )


def configure_logging(*, log_dir: str, level: str = "INFO") -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    # Configured once per process; uvicorn/pytest may have installed handlers already
    if root.handlers:
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    for handler in (logging.StreamHandler(), _file_handler(log_dir)):
        handler.setFormatter(formatter)
        root.addHandler(handler)
