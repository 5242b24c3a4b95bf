"""
Error handling for pagination failures in FastAPI applications.

Pagination errors are client errors: they are logged at WARNING and answered
with the status carried by the exception (400) and ``{"error": message}``.
"""

from functools import wraps
from typing import Any, Callable

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from pagination_engine.exceptions import PaginationException
from pagination_engine.logging import logger


async def pagination_exception_handler(
    request: Request, ex: PaginationException
) -> JSONResponse:
    """Convert a PaginationException raised anywhere in a request to JSON."""
    logger.warning(
        f"Rejected pagination request {request.url.path}: {ex.message}",
        extra={"exception_type": type(ex).__name__},
    )
    return JSONResponse(status_code=ex.http_status, content={"error": ex.message})


def register_exception_handlers(app: FastAPI) -> None:
    """
    Install the pagination exception handler on an application.

    Covers errors raised by dependencies such as OffsetPaginatorDep, which
    run before any endpoint decorator.
    """
    app.add_exception_handler(PaginationException, pagination_exception_handler)


def handle_http_errors(func: Callable) -> Callable:
    """
    Decorator for HTTP endpoints to convert PaginationException to HTTPException.

    Args:
        func: The async HTTP endpoint function to wrap.

    Returns:
        Wrapped function that handles exceptions.

    Example:
        ```python
        @router.get("/doctors")
        @handle_http_errors
        async def list_doctors(request: Request) -> PaginatedResult[Doctor]:
            paginator = CursorPaginator.from_request(request)
            ...
        ```
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except PaginationException as ex:
            logger.warning(
                f"PaginationException in {func.__name__}: {ex.message}",
                extra={"exception_type": type(ex).__name__},
            )
            raise HTTPException(
                status_code=ex.http_status,
                detail=ex.message,
            ) from ex

    return wrapper
