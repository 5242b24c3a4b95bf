"""
Dependency injection helpers for FastAPI.

Each request gets its own paginator, bound to that request's query
parameters. Binding errors propagate as PaginationException; register
pagination_engine.utils.error_handler.register_exception_handlers() to turn
them into 400 responses.

Example:
    ```python
    from fastapi import APIRouter

    from pagination_engine.dependencies import CursorPaginatorDep

    router = APIRouter()

    @router.get("/doctors")
    async def list_doctors(paginator: CursorPaginatorDep, session: SessionDep):
        query = paginator.paginate(select(Doctor), Doctor)
        rows = (await session.exec(query)).all()
        total = (await session.exec(select(func.count(Doctor.id)))).one()
        return paginator.create_pagination_result(rows, total)
    ```
"""

from typing import Annotated, Any

from fastapi import Depends, Request

from pagination_engine.logging import set_log_context
from pagination_engine.storage.pagination import (
    CursorPaginator,
    OffsetPaginator,
)


async def get_offset_paginator(request: Request) -> OffsetPaginator[Any]:
    """Bind an offset paginator to the current request."""
    set_log_context(pagination="offset", endpoint=request.url.path)
    return OffsetPaginator.from_request(request)


async def get_cursor_paginator(request: Request) -> CursorPaginator[Any]:
    """Bind a cursor paginator to the current request."""
    set_log_context(pagination="cursor", endpoint=request.url.path)
    return CursorPaginator.from_request(request)


OffsetPaginatorDep = Annotated[OffsetPaginator[Any], Depends(get_offset_paginator)]
CursorPaginatorDep = Annotated[CursorPaginator[Any], Depends(get_cursor_paginator)]
