"""Structured logging configuration for the CLI and build hooks."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Optional, TextIO


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def __init__(self, service_name: str):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if hasattr(record, "run_id"):
            log_data["run_id"] = record.run_id

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": self.formatException(record.exc_info),
            }

        # Add extra fields from record.__dict__ that start with "extra_"
        for key, value in record.__dict__.items():
            if key.startswith("extra_"):
                log_data[key.replace("extra_", "")] = value

        return json.dumps(log_data, ensure_ascii=False, default=str)


def setup_logging(
    service_name: str,
    level: str = "INFO",
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """Configure structured logging for a service.

    Logs go to stderr by default: stdout is reserved for the JSON reports
    that CI parses.

    Args:
        service_name: Name of the service (e.g., "inventory")
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        stream: Output stream override

    Returns:
        The installed handler
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(StructuredFormatter(service_name))

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    return handler


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    run_id: Optional[str] = None,
    **extra_fields: Any,
):
    """Log a message with additional context fields.

    Args:
        logger: Logger instance
        level: Log level (debug, info, warning, error, critical)
        message: Log message
        run_id: Optional CI run identifier
        **extra_fields: Additional fields to include in structured log
    """
    extra = {f"extra_{k}": v for k, v in extra_fields.items()}

    if run_id:
        extra["run_id"] = run_id

    log_method = getattr(logger, level.lower())
    log_method(message, extra=extra)
