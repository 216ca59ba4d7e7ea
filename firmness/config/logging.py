"""
Logging configuration for the inventory API.

Standard library loggers are used throughout the code base
(``logging.getLogger(__name__)``); this module wires them to a JSON or plain
console handler and configures structlog on top of the same handlers so that
request-scoped context (request id, principal) flows into every record.
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import structlog
from pythonjsonlogger import jsonlogger

from firmness.config.settings import Settings, settings

SENSITIVE_KEYS = ("password", "token", "secret", "key", "authorization", "credentials")


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter with a fixed set of service fields"""

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["environment"] = settings.ENVIRONMENT

        if hasattr(record, "request_id"):
            log_record["request_id"] = record.request_id

        if record.exc_info and record.exc_info[0] is not None:
            log_record["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info),
            }


class SecurityLogProcessor:
    """Mask sensitive values before a structlog event is rendered"""

    def __call__(self, logger, method_name, event_dict):
        self._sanitize(event_dict)
        return event_dict

    def _sanitize(self, event_dict: Dict[str, Any]) -> None:
        for key in list(event_dict.keys()):
            if key == "event":
                continue
            if any(sensitive in key.lower() for sensitive in SENSITIVE_KEYS):
                event_dict[key] = "[REDACTED]"
            elif isinstance(event_dict[key], dict):
                self._sanitize(event_dict[key])


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "json":
        return CustomJsonFormatter("%(timestamp)s %(level)s %(logger)s %(message)s")
    return logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")


def configure_structlog(log_format: str) -> None:
    """
    Configure structlog to render through the stdlib handlers.

    In json mode the event dict is handed to the stdlib record as ``extra``,
    so ``CustomJsonFormatter`` is the only renderer and each line is encoded once.
    """
    processors = [
        structlog.contextvars.merge_contextvars,
        SecurityLogProcessor(),
        structlog.stdlib.filter_by_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "json":
        processors.append(structlog.stdlib.render_to_log_kwargs)
    else:
        processors.extend(
            [
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                structlog.processors.format_exc_info,
                structlog.processors.KeyValueRenderer(key_order=["event"]),
            ]
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def configure_logging(config: Optional[Settings] = None) -> None:
    """Initialize root logging and structlog from settings"""
    config = config or settings
    level = getattr(logging, config.LOG_LEVEL, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(_build_formatter(config.LOG_FORMAT))
    root_logger.addHandler(console_handler)

    configure_structlog(config.LOG_FORMAT)

    # Reduce noise from external libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if config.DB_ECHO else logging.WARNING
    )

    logging.getLogger(__name__).info(
        "Logging system initialized",
        extra={"log_level": config.LOG_LEVEL, "log_format": config.LOG_FORMAT},
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to ``name``"""
    return structlog.get_logger(name)


__all__ = [
    "CustomJsonFormatter",
    "SecurityLogProcessor",
    "configure_logging",
    "configure_structlog",
    "get_logger",
]
