"""
Process-wide logging for the Worldometer API.

main.py calls configure_logging() once at import; modules ask for their own
logger through get_logger(__name__). With LOG_JSON set every line is a JSON
object, and anything passed through ``extra=`` becomes a top-level key, e.g.

    logger.debug("cache hit", extra={"cache_key": key})
"""

import json
import logging
import logging.config
from typing import Optional

# Attributes every LogRecord carries; anything else arrived through `extra`.
_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime"}

CONSOLE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _json_formatter(record: logging.LogRecord) -> str:
    payload = {
        "level": record.levelname,
        "logger": record.name,
        "message": record.getMessage(),
    }
    payload.update(
        (key, value)
        for key, value in record.__dict__.items()
        if key not in _STANDARD_ATTRS and not key.startswith("_")
    )
    if record.exc_info:
        payload["exc_info"] = logging.Formatter().formatException(record.exc_info)
    return json.dumps(payload, default=str)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        return _json_formatter(record)


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    # existing loggers (uvicorn's access log among them) stay enabled
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {"format": CONSOLE_FORMAT, "datefmt": "%Y-%m-%d %H:%M:%S"},
                "json": {"()": JsonFormatter},
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "formatter": "json" if json_logs else "console",
                }
            },
            "root": {"handlers": ["stderr"], "level": level},
        }
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name)
