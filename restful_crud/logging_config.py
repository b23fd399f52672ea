import logging
import logging.config
from typing import Optional

from restful_crud.config import Settings, get_settings

# Third-party loggers routed to the console handler at a fixed level
_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _console_logger(level: str, propagate: bool = False) -> dict:
    return {"handlers": ["console"], "level": level, "propagate": propagate}


def build_logging_config(settings: Settings) -> dict:
    """
    Build the dictConfig mapping for the given settings

    The application package follows settings.log_level, the server loggers stay
    at INFO and SQLAlchemy engine output is governed by SQL_LOG_LEVEL.
    """
    level = settings.log_level

    loggers = {"root": _console_logger(level, propagate=True)}
    loggers.update({name: _console_logger("INFO") for name in _SERVER_LOGGERS})
    loggers["sqlalchemy.engine"] = _console_logger(settings.SQL_LOG_LEVEL)
    loggers["restful_crud"] = _console_logger(level)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": loggers,
    }


def setup_logging(settings: Optional[Settings] = None):
    """Apply the console logging configuration for the service"""
    logging.config.dictConfig(build_logging_config(settings or get_settings()))
