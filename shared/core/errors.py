"""
Error taxonomy and the FastAPI handlers that turn it into HTTP responses.

Domain code raises ServiceError subclasses tagged with an ErrorKind; the
handlers registered here look up the status code for that kind. Request
validation errors become a flat field -> message map.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .logging_config import get_logger

logger = get_logger(__name__)


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    INVALID_ARGUMENT = "invalid_argument"
    VALIDATION_FAILURE = "validation_failure"
    UNHANDLED = "unhandled"


STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.VALIDATION_FAILURE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNHANDLED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class ServiceError(Exception):
    kind: ErrorKind = ErrorKind.UNHANDLED

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ResourceNotFoundError(ServiceError):
    kind = ErrorKind.NOT_FOUND


class InvalidArgumentError(ServiceError):
    kind = ErrorKind.INVALID_ARGUMENT


class ErrorDetails(BaseModel):
    timestamp: datetime
    message: str
    details: str


def error_response(kind: ErrorKind, message: str, request: Request) -> JSONResponse:
    body = ErrorDetails(
        timestamp=datetime.now(timezone.utc),
        message=message,
        details=f"uri={request.url.path}",
    )
    return JSONResponse(status_code=STATUS_BY_KIND[kind], content=body.model_dump(mode="json"))


def validation_errors(exc: RequestValidationError) -> Dict[str, str]:
    """Flatten pydantic errors to {field: message}, keeping custom validator messages as written"""
    errors: Dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc") or ("body",)
        # Malformed JSON reports a byte offset as its location
        field = "body" if error.get("type") == "json_invalid" else str(loc[-1])
        ctx = error.get("ctx") or {}
        if error.get("type") == "value_error" and "error" in ctx:
            message = str(ctx["error"])
        else:
            message = error.get("msg", "Invalid value")
        errors[field] = message
    return errors


async def handle_service_error(request: Request, exc: ServiceError) -> JSONResponse:
    if exc.kind == ErrorKind.NOT_FOUND:
        logger.info(f"Not found: {exc.message}")
    else:
        logger.warning(f"Rejected request to {request.url.path}: {exc.message}")
    return error_response(exc.kind, exc.message, request)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = validation_errors(exc)
    logger.info(
        f"Validation failed for {request.method} {request.url.path}",
        extra={'extra_fields': {'errors': errors}}
    )
    return JSONResponse(status_code=STATUS_BY_KIND[ErrorKind.VALIDATION_FAILURE], content=errors)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return error_response(ErrorKind.UNHANDLED, str(exc) or exc.__class__.__name__, request)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, handle_service_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
