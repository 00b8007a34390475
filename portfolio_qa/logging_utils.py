"""portfolio_qa.logging_utils

One named logger shared by the API, the Streamlit demo and the scripts.

- Rotating file log: <LOG_DIR>/app.log, 2 MB x 5 backups
- Console echo so uvicorn / streamlit runs show the same lines
- Question ids, statuses and tiers are logged by QuestionService; step detail lives in TraceCollector
"""

from __future__ import annotations
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
LOG_FILE = "app.log"
MAX_BYTES = 2_000_000
BACKUP_COUNT = 5


def _level(level: str | None) -> int:
    value = logging.getLevelName((level or "INFO").upper())
    return value if isinstance(value, int) else logging.INFO


def build_logger(log_dir: str, name: str = "portfolio_qa", level: str = "INFO", console: bool = True) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(_level(level))

    # Streamlit reruns and create_app() calls come back here with the same name
    if logger.handlers:
        return logger

    Path(log_dir).mkdir(parents=True, exist_ok=True)
    fmt = logging.Formatter(LOG_FORMAT)

    file_handler = RotatingFileHandler(
        str(Path(log_dir) / LOG_FILE), maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8"
    )
    file_handler.setFormatter(fmt)
    logger.addHandler(file_handler)

    if console:
        stream = logging.StreamHandler()
        stream.setFormatter(fmt)
        logger.addHandler(stream)
    return logger
