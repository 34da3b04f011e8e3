"""
Error handling decorator for API endpoints.

Faults raised while validating a request or mapping an entity are not handled
where they occur; they propagate up to the endpoint, where this decorator
turns them into HTTPException responses with consistent messages.

Every StructuredLogger line emitted while the endpoint runs carries an
"operation" field naming it.
"""

from functools import wraps
from typing import Callable
import inspect

from fastapi import HTTPException

from constants import HTTPStatus
from exceptions import ApplicationError, ConfigurationError, ValidationError
from utils.logging_utils import StructuredLogger, reset_logging_context, set_logging_context

logger = StructuredLogger(__name__)


def handle_api_errors(operation_name: str):
    """
    Decorator to handle common API errors consistently across endpoints.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Get session")

    Returns:
        Decorated function that handles errors uniformly

    Example:
        @router.get("/sessions/{session_id}")
        @handle_api_errors("Get session")
        def get_session(session_id: int, db: DBSession = Depends(get_db)):
            return map_session_response(load_session(db, session_id))
    """
    def _translate(e: Exception) -> HTTPException:
        if isinstance(e, ValidationError):
            logger.warning(f"{operation_name} - Validation error: {e.message}")
            return HTTPException(
                status_code=HTTPStatus.BAD_REQUEST,
                detail={"message": e.message, "invalid_fields": e.invalid_fields}
            )
        if isinstance(e, ConfigurationError):
            logger.warning(f"{operation_name} - Configuration error: {e.message}")
            return HTTPException(
                status_code=HTTPStatus.BAD_REQUEST,
                detail=e.message
            )
        if isinstance(e, ApplicationError):
            logger.error(f"{operation_name} - Application error: {e.message}", exc_info=True)
            return HTTPException(
                status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
                detail=f"{operation_name} failed: {e.message}"
            )
        logger.error(f"{operation_name} - Unexpected error: {e}", exc_info=True)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"{operation_name} failed. Please check server logs or contact support."
        )

    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            token = set_logging_context(operation=operation_name)
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                # Re-raise HTTPException as-is to preserve status code and detail
                raise
            except Exception as e:
                raise _translate(e) from e
            finally:
                reset_logging_context(token)

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            token = set_logging_context(operation=operation_name)
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                raise _translate(e) from e
            finally:
                reset_logging_context(token)

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
