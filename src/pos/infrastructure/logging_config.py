"""Configure application logging using the Python standard library.

Logs are written as one JSON object per line to a rotating file. There
is no console handler: the terminal belongs to the interactive menu.
"""

from __future__ import annotations

import json
import logging
import logging.handlers
from datetime import datetime, timezone
from pathlib import Path

LOG_FILE_NAME = "pos.log"


class JsonFormatter(logging.Formatter):
    """Format log records as JSON strings."""

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "module": record.module,
            "message": record.getMessage(),
        }
        # Merge the ``extra={"extra": {...}}`` dict into the top level
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            log_record.update(extra)
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_record, default=str)


def configure_logging(log_dir: Path, level: int = logging.INFO) -> None:
    """Configure the root logger with JSON formatting and a rotating file.

    Args:
        log_dir: Directory where log files are written. Created if it
            does not exist.
        level: Logging level for the root logger.
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    logger = logging.getLogger()
    logger.setLevel(level)
    # Remove any default handlers (e.g. from basicConfig)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    file_handler = logging.handlers.RotatingFileHandler(
        filename=log_dir / LOG_FILE_NAME,
        maxBytes=5 * 1024 * 1024,  # 5 MB per log file
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setFormatter(JsonFormatter())
    file_handler.setLevel(level)
    logger.addHandler(file_handler)
