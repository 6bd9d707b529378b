"""Structured JSON logging for the pay_sdk loggers."""
import json
import logging
from datetime import datetime, timezone
from typing import Optional

# Attributes every LogRecord carries; anything else came in through `extra`.
_RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per line. Never include credential values in `extra`."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED and not key.startswith("_"):
                entry[key] = value
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a JSON stream handler to the "pay_sdk" logger.

    Args:
        level: Log level name. Defaults to PAY_LOG_LEVEL from the environment.

    Returns:
        The configured "pay_sdk" logger. Calling again replaces the handler
        instead of adding a second one.
    """
    from pay_sdk.config import PAY_LOG_LEVEL

    logger = logging.getLogger("pay_sdk")
    logger.setLevel((level or PAY_LOG_LEVEL).upper())
    for handler in list(logger.handlers):
        if isinstance(handler.formatter, JsonFormatter):
            logger.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    return logger
