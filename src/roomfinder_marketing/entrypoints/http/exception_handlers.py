"""FastAPI exception handlers.

Every error leaves the service as a failure envelope (see envelope.py).
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from roomfinder_marketing.domain.errors import DomainError
from roomfinder_marketing.entrypoints.http.envelope import ApiResponse

logger = logging.getLogger(__name__)

STATUS_BY_ERROR_CODE: dict[str, int] = {
    "VALIDATION_ERROR": 422,  # HTTP_422_UNPROCESSABLE_CONTENT
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "STORE_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _failure(status_code: int, envelope: ApiResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=envelope.model_dump(mode="json"))


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Map a domain error to its HTTP status; unknown codes become 400."""
    status_code = STATUS_BY_ERROR_CODE.get(exc.error_code, status.HTTP_400_BAD_REQUEST)

    if status_code >= 500:
        logger.error(
            "Domain error occurred",
            extra={
                "error_code": exc.error_code,
                "error_message": exc.message,
                "context": exc.context,
                "path": request.url.path,
                "method": request.method,
            },
        )
    else:
        logger.info(
            "Client error",
            extra={
                "error_code": exc.error_code,
                "error_message": exc.message,
                "path": request.url.path,
                "method": request.method,
            },
        )

    error_dict = exc.to_dict()
    return _failure(
        status_code,
        ApiResponse.fail(
            message=error_dict.get("message", str(exc)),
            code=error_dict.get("code", exc.error_code),
            errors=error_dict.get("errors"),
        ),
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI/Pydantic parsing errors (bad types, patterns, missing fields)."""
    errors = []

    for error in exc.errors():
        # Drop the 'body'/'query'/'path' location prefix
        field_path = ".".join(
            str(loc) for loc in error["loc"] if loc not in ("body", "query", "path", "header")
        )
        errors.append(
            {
                "field": field_path,
                "message": error["msg"],
                "code": error["type"],
            }
        )

    logger.info(
        "Request validation error",
        extra={"errors": errors, "path": request.url.path, "method": request.method},
    )

    return _failure(
        422,
        ApiResponse.fail("Invalid request parameters", code="VALIDATION_ERROR", errors=errors),
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Framework errors (unknown route, wrong method) in the same envelope."""
    return _failure(exc.status_code, ApiResponse.fail(str(exc.detail), code="HTTP_ERROR"))


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    logger.info(
        "Value error",
        extra={"error_message": str(exc), "path": request.url.path, "method": request.method},
    )

    return _failure(422, ApiResponse.fail(str(exc), code="INVALID_VALUE"))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all: log with traceback, answer with a generic 500 envelope."""
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={
            "error_type": type(exc).__name__,
            "path": request.url.path,
            "method": request.method,
        },
    )

    return _failure(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ApiResponse.fail("An unexpected error occurred", code="INTERNAL_ERROR"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)  # type: ignore[arg-type]
    app.add_exception_handler(ValueError, handle_value_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)
