"""Global exception handlers.

Response bodies are ``{"message": ...}`` for single errors and
``{"errors": [...]}`` for validation failures. Unexpected exceptions are
logged with a correlation id and the client only receives that id.
"""

import logging
import uuid

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog.validation import RequestValidationFailed

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = 'An unexpected error occurred'


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationFailed, request_validation_failed_handler)
    app.add_exception_handler(RequestValidationError, parameter_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)


async def request_validation_failed_handler(request: Request, exc: RequestValidationFailed) -> JSONResponse:
    logger.info('Validation failed on %s %s: %s', request.method, request.url.path, exc.errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={'errors': exc.errors})


async def parameter_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [f'Invalid value for "{error["loc"][-1]}": {error["msg"]}' for error in exc.errors()]
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={'errors': errors})


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={'message': exc.detail},
        headers=getattr(exc, 'headers', None),
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    correlation_id = uuid.uuid4().hex
    logger.error(
        'Unhandled exception on %s %s [correlation id %s]',
        request.method,
        request.url.path,
        correlation_id,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={'message': UNEXPECTED_ERROR_MESSAGE, 'correlationId': correlation_id},
    )
