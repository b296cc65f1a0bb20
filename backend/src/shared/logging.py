"""Structured logging configuration."""

import logging
import sys
import time
import structlog
from typing import Any, Optional


def setup_logging(
    log_level: str = "INFO",
    json_logs: bool = True
) -> None:
    """Configure structlog on top of stdlib logging."""

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    # Replace rather than stack handlers when the app factory runs twice.
    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


class LoggerMixin:
    """Mixin to add logging capabilities to classes."""

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        if not hasattr(self, "_logger"):
            self._logger = get_logger(self.__class__.__name__)
        return self._logger

    def log_event(
        self,
        event: str,
        level: str = "info",
        **kwargs: Any
    ) -> None:
        """Log an event with structured data."""
        log_method = getattr(self.logger, level)
        log_method(event, **kwargs)

    def log_error(
        self,
        error: Exception,
        event: str = "error_occurred",
        **kwargs: Any
    ) -> None:
        """Log an error with context."""
        self.logger.error(
            event,
            error_type=type(error).__name__,
            error_message=str(error),
            **kwargs
        )


class RequestLogger:
    """Context manager that logs the start, end and duration of a request."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger,
        request_id: str,
        operation: str,
        **context: Any
    ):
        self.logger = logger.bind(request_id=request_id, operation=operation, **context)
        self.request_id = request_id
        self.operation = operation
        self.start_time: Optional[float] = None

    def __enter__(self) -> "RequestLogger":
        self.start_time = time.perf_counter()
        self.logger.info("request_started")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        duration_ms = (time.perf_counter() - self.start_time) * 1000

        if exc_type:
            self.logger.warning(
                "request_failed",
                duration_ms=round(duration_ms, 2),
                error_type=exc_type.__name__,
                error_message=str(exc_val)
            )
        else:
            self.logger.info(
                "request_completed",
                duration_ms=round(duration_ms, 2)
            )
