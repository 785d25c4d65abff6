"""
Exception handlers for data entry errors.

Validation and lookup errors raised by data entries and repositories are
client errors. They are mapped to 400 and 404 responses instead of falling
through to the global 500 handler.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from recordkit.core.errors import DataEntryError, DataEntryNotFoundError, OutOfBoundsError
from recordkit.core.logging_config import get_logger

logger = get_logger(__name__)


def _error_response(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "error_type": type(exc).__name__},
    )


async def out_of_bounds_handler(request: Request, exc: OutOfBoundsError) -> JSONResponse:
    logger.info(f"Rejected {request.method} {request.url.path}: {exc}")
    return _error_response(status.HTTP_400_BAD_REQUEST, exc)


async def data_entry_error_handler(request: Request, exc: DataEntryError) -> JSONResponse:
    logger.warning(f"Data entry error in {request.method} {request.url.path}: {exc}")
    return _error_response(status.HTTP_400_BAD_REQUEST, exc)


async def not_found_handler(request: Request, exc: DataEntryNotFoundError) -> JSONResponse:
    logger.debug(f"Not found in {request.method} {request.url.path}: {exc}")
    return _error_response(status.HTTP_404_NOT_FOUND, exc)
