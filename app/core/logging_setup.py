# app/core/logging_setup.py
"""Logging configuration driven by ``settings.log_level`` and ``settings.log_format``."""

import json
import logging
import sys
from datetime import datetime, timezone

from app.core.config import LogFormatEnum, Settings, settings

# Third-party loggers that only reach the console at WARNING and above.
NOISY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite", "httpx")


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def build_formatter(log_format: LogFormatEnum) -> logging.Formatter:
    if log_format == LogFormatEnum.json:
        return JsonFormatter()
    return logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def setup_logging(config: Settings | None = None, stream=None) -> None:
    """
    Configure the root logger.

    Call this once, early, from an entry point (API startup or the validation
    harness). Pre-existing root handlers are replaced so repeated calls do not
    duplicate output.
    """
    config = config or settings

    root = logging.getLogger()
    root.setLevel(config.log_level.value)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(build_formatter(config.log_format))
    root.addHandler(handler)

    # SQL echo is requested explicitly through settings.debug
    if not config.debug:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
