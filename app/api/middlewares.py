import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, OperationalError

from app.exceptions import BaseAPIException, DatabaseException
from app.schemas.common import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)


async def api_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """
    Global handler for custom API exceptions.

    Returns structured error response with status code and error details.
    """
    assert isinstance(exc, BaseAPIException)
    logger.warning(
        f"API Exception: {exc.error_code} - {exc.message}",
        extra={
            "error_code": exc.error_code,
            "path": request.url.path,
            "method": request.method,
            "details": exc.details,
        },
    )

    error_response = ErrorResponse(
        error=ErrorDetail(
            code=exc.error_code,
            message=exc.message,
            details=exc.details if exc.details else None,
        ),
        meta={
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "path": request.url.path,
        },
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=error_response.model_dump(exclude_none=True),
    )


async def integrity_error_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """
    Handle database integrity constraint violations.

    Unique violations on restaurant names and payment types are converted to
    domain exceptions by the services; whatever reaches this handler is
    reported as a generic constraint violation.
    """
    assert isinstance(exc, IntegrityError)
    logger.warning(
        "Database integrity error",
        extra={
            "error": str(exc.orig),
            "path": request.url.path,
            "method": request.method,
        },
    )

    error_response = ErrorResponse(
        error=ErrorDetail(
            code="INTEGRITY_ERROR",
            message="Database constraint violation",
        ),
        meta={
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "path": request.url.path,
        },
    )

    return JSONResponse(
        status_code=409, content=error_response.model_dump(exclude_none=True)
    )


async def database_error_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """
    Handle lost connections, locked databases and similar driver failures.

    Logs the driver message and answers with DatabaseException, naming the
    SQL verb that failed but never the statement itself.
    """
    assert isinstance(exc, OperationalError)
    logger.error(
        "Database operation failed: %s",
        exc.orig,
        extra={
            "path": request.url.path,
            "method": request.method,
        },
    )

    operation = exc.statement.split(maxsplit=1)[0].upper() if exc.statement else None
    api_exception = DatabaseException(
        message="Database operation failed", operation=operation
    )
    return await api_exception_handler(request, api_exception)


async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """
    Catch-all handler for unexpected errors.

    Returns generic 500 error without exposing internal details.
    """
    logger.error(
        f"Unhandled exception: {type(exc).__name__}",
        exc_info=exc,
        extra={
            "path": request.url.path,
            "method": request.method,
        },
    )

    error_response = ErrorResponse(
        error=ErrorDetail(
            code="INTERNAL_ERROR",
            message="An unexpected error occurred",
        ),
        meta={
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "path": request.url.path,
        },
    )

    return JSONResponse(
        status_code=500, content=error_response.model_dump(exclude_none=True)
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all global exception handlers to the FastAPI application.

    Handlers are registered in order of specificity:
    1. Custom API exceptions (BaseAPIException)
    2. Database integrity errors (IntegrityError)
    3. Database operational errors (OperationalError)
    4. Unhandled exceptions (Exception)
    """
    app.add_exception_handler(
        BaseAPIException,
        api_exception_handler,
    )
    app.add_exception_handler(
        IntegrityError,
        integrity_error_handler,
    )
    app.add_exception_handler(
        OperationalError,
        database_error_handler,
    )
    app.add_exception_handler(Exception, unhandled_exception_handler)
