"""
Structured logging configuration shared by the product and inventory services.

Every record is emitted as one JSON object per line so that log shippers
(ELK, CloudWatch, Datadog) can index it without a grok pattern. Request
context (request id, correlation id) is carried in context variables and
attached to every record logged while the request is in flight.
"""

import json
import logging
import logging.handlers
import re
import sys
import time
import traceback
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

# Context variables for request tracking
request_id_var: ContextVar[Optional[str]] = ContextVar('request_id', default=None)
correlation_id_var: ContextVar[Optional[str]] = ContextVar('correlation_id', default=None)


class StructuredFormatter(logging.Formatter):
    """JSON formatter tagging each record with service, environment and trace context"""

    def __init__(self, service_name: str, environment: str = "development", version: str = "1.0.0"):
        super().__init__()
        self.service_name = service_name
        self.environment = environment
        self.version = version

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "@timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
            "environment": self.environment,
            "version": self.version,
        }

        trace_context = self._get_trace_context()
        if trace_context:
            log_obj["trace"] = trace_context

        log_obj["location"] = {
            "file": record.pathname,
            "line": record.lineno,
            "function": record.funcName,
            "module": record.module
        }

        if record.exc_info:
            log_obj["error"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "stacktrace": traceback.format_exception(*record.exc_info)
            }

        if hasattr(record, 'extra_fields'):
            log_obj["custom"] = record.extra_fields

        return json.dumps(log_obj, default=str)

    def _get_trace_context(self) -> Optional[Dict[str, Any]]:
        context = {}
        request_id = request_id_var.get()
        if request_id:
            context["request_id"] = request_id
        correlation_id = correlation_id_var.get()
        if correlation_id:
            context["correlation_id"] = correlation_id
        return context or None


class SecurityFilter(logging.Filter):
    """Masks the value following anything that looks like a credential name"""

    SENSITIVE_PATTERN = re.compile(
        r"(password|token|api_key|secret|authorization)([\s=:]+)(\S+)", re.IGNORECASE
    )

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = self.SENSITIVE_PATTERN.sub(r"\1=***REDACTED***", message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def setup_logging(
    service_name: str,
    level: str = "INFO",
    environment: str = "development",
    version: str = "1.0.0",
    log_file: Optional[str] = None
) -> None:
    """
    Configure the root logger for a service.

    Args:
        service_name: Name stamped on every record
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        environment: Deployment environment (development/staging/production)
        version: Service version stamped on every record
        log_file: Optional path of a rotating log file
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.handlers = []

    formatter = StructuredFormatter(service_name, environment, version)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(SecurityFilter())
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10485760,  # 10MB
            backupCount=5
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(SecurityFilter())
        root_logger.addHandler(file_handler)

    # Configure third-party loggers
    logging.getLogger('uvicorn').setLevel(logging.WARNING)
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)

    root_logger.info(
        "Logging initialized",
        extra={'extra_fields': {'service': service_name, 'level': level, 'file': log_file}}
    )


class LoggerAdapter(logging.LoggerAdapter):
    """Injects the current request context into the extra fields of every call"""

    def process(self, msg, kwargs):
        extra = kwargs.get('extra', {})

        request_id = request_id_var.get()
        if request_id:
            extra['request_id'] = request_id

        correlation_id = correlation_id_var.get()
        if correlation_id:
            extra['correlation_id'] = correlation_id

        kwargs['extra'] = extra
        return msg, kwargs


def get_logger(name: str) -> LoggerAdapter:
    return LoggerAdapter(logging.getLogger(name), {})


def set_request_context(request_id: Optional[str] = None, correlation_id: Optional[str] = None) -> None:
    if request_id:
        request_id_var.set(request_id)
    if correlation_id:
        correlation_id_var.set(correlation_id)


def generate_request_id() -> str:
    return str(uuid.uuid4())


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs every request and response with its duration.
    Reuses an incoming X-Request-ID header or generates one, and echoes it back.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get('X-Request-ID') or generate_request_id()
        set_request_context(
            request_id=request_id,
            correlation_id=request.headers.get('X-Correlation-ID')
        )

        logger = get_logger(__name__)
        logger.info(
            f"Request started: {request.method} {request.url.path}",
            extra={
                'extra_fields': {
                    'method': request.method,
                    'path': request.url.path,
                    'client_host': request.client.host if request.client else None
                }
            }
        )

        start_time = time.time()
        try:
            response = await call_next(request)
        except Exception:
            logger.error(
                f"Request failed: {request.method} {request.url.path}",
                exc_info=True,
                extra={
                    'extra_fields': {
                        'method': request.method,
                        'path': request.url.path,
                        'duration_ms': (time.time() - start_time) * 1000
                    }
                }
            )
            raise

        duration_ms = (time.time() - start_time) * 1000
        logger.info(
            f"Request completed: {request.method} {request.url.path}",
            extra={
                'extra_fields': {
                    'method': request.method,
                    'path': request.url.path,
                    'status_code': response.status_code,
                    'duration_ms': duration_ms
                }
            }
        )
        response.headers['X-Request-ID'] = request_id
        return response
