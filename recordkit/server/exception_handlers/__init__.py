"""
Exception handlers for the recordkit server.

This package contains custom exception handlers for different error types
and a setup function to register them with the FastAPI application.
"""

from fastapi import FastAPI

from recordkit.core.errors import DataEntryError, DataEntryNotFoundError, OutOfBoundsError
from recordkit.core.logging_config import get_logger

from .domain_handlers import data_entry_error_handler, not_found_handler, out_of_bounds_handler
from .global_handler import global_exception_handler

logger = get_logger(__name__)


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Starlette resolves handlers through the exception MRO, so the not found
    handler wins over the generic data entry handler.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(OutOfBoundsError, out_of_bounds_handler)
    app.add_exception_handler(DataEntryNotFoundError, not_found_handler)
    app.add_exception_handler(DataEntryError, data_entry_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")


__all__ = ["setup_exception_handlers"]
