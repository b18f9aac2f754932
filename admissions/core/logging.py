"""Logging setup: JSON or plain records stamped with the current request ID"""

import logging
import sys
from contextvars import ContextVar
from typing import Optional

from pythonjsonlogger import jsonlogger

from admissions.config import settings

request_id_ctx: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

HANDLER_NAME = "admissions"


class RequestContextFilter(logging.Filter):
    """Copies the request ID of the running request onto every record"""

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "request_id", None) is None:
            record.request_id = request_id_ctx.get()
        return True


class AdmissionsJsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["level"] = record.levelname
        log_record["service"] = settings.APP_NAME
        log_record["environment"] = settings.ENVIRONMENT
        if log_record.get("request_id") is None:
            log_record.pop("request_id", None)


def build_handler(log_format: str) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.addFilter(RequestContextFilter())
    if log_format == "json":
        handler.setFormatter(AdmissionsJsonFormatter(
            fmt="%(asctime)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        ))
    else:
        handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s (%(request_id)s): %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
    return handler


def setup_logging() -> None:
    """
    Install the service handler on the root logger.

    Calling it again replaces the handler instead of stacking a second one.
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            root_logger.removeHandler(handler)

    root_logger.addHandler(build_handler(settings.LOG_FORMAT))
    root_logger.setLevel(settings.LOG_LEVEL.upper())

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
