"""Shared core utilities for the product and inventory services.

Provides health checks, structured logging and the error-to-status mapping
common to both services.
"""

from .errors import (
    ErrorKind,
    ServiceError,
    ResourceNotFoundError,
    InvalidArgumentError,
    ErrorDetails,
    register_exception_handlers,
)
from .health import ServiceHealth, HealthStatus
from .logging_config import (
    setup_logging,
    get_logger,
    RequestLoggingMiddleware,
    set_request_context,
    generate_request_id,
    LoggerAdapter,
)

__all__ = [
    # Errors
    "ErrorKind",
    "ServiceError",
    "ResourceNotFoundError",
    "InvalidArgumentError",
    "ErrorDetails",
    "register_exception_handlers",
    # Health checks
    "ServiceHealth",
    "HealthStatus",
    # Logging
    "setup_logging",
    "get_logger",
    "RequestLoggingMiddleware",
    "set_request_context",
    "generate_request_id",
    "LoggerAdapter",
]
