"""
Error handling utilities for standardized error logging and handling.

The client itself only raises; these helpers are used at the command
layer to turn failures into readable log lines and exit codes.
"""

import logging
import sys
import traceback
from functools import wraps
from typing import Any, Callable, TypeVar

import httpx

from ..exceptions import (
    DepotError,
    DepotHTTPError,
    MetadataDecodeError,
    NoFilePartError,
    NoXFilenameError,
    RemotePackageNotFound,
    WriteSyncFailedError,
)

# Type variable for generic function decorators
F = TypeVar("F", bound=Callable[..., Any])


def handle_http_error(error: httpx.HTTPError, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle network errors raised by httpx with standardized logging.

    Args:
        error: The HTTP error to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    if isinstance(error, httpx.TimeoutException):
        logging.error("Timed out during %s: %s", operation, error)
    elif isinstance(error, httpx.ConnectError):
        logging.error("Depot is not available during %s: %s", operation, error)
    else:
        logging.error("HTTP error during %s: %s", operation, error)

    if log_traceback:
        logging.debug("Traceback: %s", traceback.format_exc())


def handle_depot_error(error: DepotError, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle depot-client errors with a message matching their kind.

    Args:
        error: The depot error to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    if isinstance(error, RemotePackageNotFound):
        logging.error("Package not found during %s: %s", operation, error.ident)
    elif isinstance(error, DepotHTTPError):
        if error.status_code == httpx.codes.NOT_FOUND:
            logging.error("Resource not found during %s: %s", operation, error)
        elif error.status_code >= 500:
            logging.error("Server error during %s: %s", operation, error)
        else:
            logging.error("HTTP error during %s: %s", operation, error)
    elif isinstance(error, (NoXFilenameError, MetadataDecodeError)):
        logging.error("Invalid response from depot during %s: %s", operation, error)
    elif isinstance(error, (WriteSyncFailedError, NoFilePartError)):
        logging.error("Local file error during %s: %s", operation, error)
    else:
        logging.error("Depot error during %s: %s", operation, error)

    if log_traceback:
        logging.debug("Traceback: %s", traceback.format_exc())


def handle_generic_error(error: Exception, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle any other error with standardized logging.

    Args:
        error: The exception to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    if isinstance(error, OSError):
        logging.error("File error during %s: %s", operation, error)
    else:
        logging.error("Unexpected error during %s: %s", operation, error)

    if log_traceback:
        logging.debug("Traceback: %s", traceback.format_exc())


def with_error_handling(
    operation: str, *, exit_on_error: bool = False, exit_code: int = 1, reraise: bool = True
) -> Callable[[F], F]:
    """
    Decorator to wrap functions with consistent error handling.

    Args:
        operation: Description of the operation for logging
        exit_on_error: If True, call sys.exit on error
        exit_code: Exit code to use if exit_on_error is True
        reraise: If True, reraise the exception after logging (unless exiting)

    Example:
        @with_error_handling("fetch package", exit_on_error=True)
        def fetch_package():
            ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except DepotError as e:
                handle_depot_error(e, operation)
                error = e
            except httpx.HTTPError as e:
                handle_http_error(e, operation)
                error = e
            except Exception as e:  # pylint: disable=broad-except
                handle_generic_error(e, operation)
                error = e

            if exit_on_error:
                sys.exit(exit_code)
            if reraise:
                raise error
            return None

        return wrapper  # type: ignore[return-value]

    return decorator


__all__ = [
    "handle_http_error",
    "handle_depot_error",
    "handle_generic_error",
    "with_error_handling",
]
