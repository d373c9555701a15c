"""
Exception handlers: the single place where failures become HTTP responses
"""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from bookmore.core.errors import BookmoreError, ErrorCode
from bookmore.utils.responses import error_response, failure_response

logger = logging.getLogger(__name__)


def validation_message(exc: RequestValidationError) -> str:
    """Render validation errors as "[field] message" strings"""
    messages = []
    for error in exc.errors():
        loc = error.get("loc") or ("body",)
        messages.append(f"[{loc[-1]}] {error.get('msg')}")
    return ", ".join(messages)


def register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(BookmoreError)
    async def bookmore_error_handler(request: Request, exc: BookmoreError):
        logger.warning(f"{exc.error_code.name} {exc.message}")
        return error_response(exc.error_code, exc.message)

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        # Internal detail stays in the log
        logger.error(f"{ErrorCode.DATABASE_ERROR.name} {exc}", exc_info=exc)
        return error_response(ErrorCode.DATABASE_ERROR)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        message = validation_message(exc)
        logger.warning(f"Validation failed on {request.url.path}: {message}")
        return failure_response(message, status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.info(f"{exc.status_code} on {request.method} {request.url.path}: {exc.detail}")
        return failure_response(str(exc.detail), exc.status_code)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)
        return failure_response("Internal Server Error", status.HTTP_500_INTERNAL_SERVER_ERROR)
