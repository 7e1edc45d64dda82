import logging
from datetime import datetime

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from userposts.api.schemas.schemas import ExceptionResponse
from userposts.core.exceptions import NotFound, ValidationFailed

logger = logging.getLogger(__name__)

VALIDATION_FAILED = "Validation failed"


def describe_request(request: Request) -> str:
    return f"uri={request.url.path}"


def error_response(status_code: int, message: str, details: str) -> JSONResponse:
    body = ExceptionResponse(time_stamp=datetime.now(), message=message, details=details)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body, by_alias=True))


def _format_request_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts)


async def not_found_handler(request: Request, exc: NotFound):
    logger.info("%s %s: not found (%s)", request.method, request.url.path, exc.message)
    return error_response(status.HTTP_404_NOT_FOUND, exc.message, describe_request(request))


async def validation_failed_handler(request: Request, exc: ValidationFailed):
    logger.info("%s %s: %s", request.method, request.url.path, exc.details)
    return error_response(status.HTTP_400_BAD_REQUEST, VALIDATION_FAILED, exc.details)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    details = _format_request_errors(exc)
    logger.info("%s %s: %s", request.method, request.url.path, details)
    return error_response(status.HTTP_400_BAD_REQUEST, VALIDATION_FAILED, details)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    response = error_response(exc.status_code, str(exc.detail), describe_request(request))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("%s %s failed", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc), describe_request(request))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotFound, not_found_handler)
    app.add_exception_handler(ValidationFailed, validation_failed_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
