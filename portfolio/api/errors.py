"""Uniform JSON error responses and exception handlers"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from portfolio.services.project_store import (
    DuplicateProjectError,
    ProjectNotFoundError,
    ProjectStoreError,
    ProjectValidationError,
    StoreError,
)

logger = logging.getLogger(__name__)


def create_error_response(status_code: int, error: str) -> JSONResponse:
    """
    Create an error response shaped {"success": false, "error": ...}

    Args:
        status_code: HTTP status code
        error: Human-readable error message

    Returns:
        JSONResponse with the error body
    """
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error}
    )


def validation_error(detail: str = "Validation failed") -> JSONResponse:
    """Create a 400 Bad Request error response"""
    return create_error_response(status.HTTP_400_BAD_REQUEST, detail)


def internal_server_error(detail: str = "An internal server error occurred") -> JSONResponse:
    """Create a 500 Internal Server Error response"""
    return create_error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, detail)


def status_for_error(exc: ProjectStoreError) -> int:
    """Map a store exception to its HTTP status code"""
    if isinstance(exc, ProjectNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, (ProjectValidationError, DuplicateProjectError)):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def describe_validation_errors(exc: RequestValidationError) -> str:
    """Condense FastAPI validation errors into one message"""
    errors = exc.errors()
    if any(err.get("loc", ())[:1] == ("path",) for err in errors):
        return "Invalid project ID"

    messages = []
    for err in errors:
        field = ".".join(str(part) for part in err.get("loc", ())[1:])
        messages.append(f"{field}: {err.get('msg')}" if field else str(err.get("msg")))
    return "; ".join(messages) or "Validation failed"


async def project_store_error_handler(request: Request, exc: ProjectStoreError) -> JSONResponse:
    status_code = status_for_error(exc)
    if isinstance(exc, StoreError):
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
    return create_error_response(status_code, str(exc))


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    detail = describe_validation_errors(exc)
    logger.warning(f"{request.method} {request.url.path} invalid request: {detail}")
    return validation_error(detail)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return internal_server_error()


def register_error_handlers(app: FastAPI):
    """Install the exception handlers on an application"""
    app.add_exception_handler(ProjectStoreError, project_store_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
