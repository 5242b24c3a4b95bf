"""
Pagination strategies for database queries.

This package implements the Strategy pattern for pagination, separating the
offset-based and cursor-based algorithms into distinct, testable classes.
Both turn request parameters into a windowed SQLAlchemy Select and turn the
fetched rows into a PaginatedResult with previous/next links.

Example:
    ```python
    from sqlmodel import func, select

    from pagination_engine.storage.pagination import CursorPaginator

    paginator = CursorPaginator.from_request(request)
    query = paginator.paginate(select(Doctor), Doctor)
    rows = (await session.exec(query)).all()
    total = (await session.exec(select(func.count(Doctor.id)))).one()
    return paginator.create_pagination_result(rows, total)
    ```
"""

from pagination_engine.storage.pagination.cursor import CursorPaginator
from pagination_engine.storage.pagination.cursor_codec import (
    decode_cursor,
    encode_cursor,
)
from pagination_engine.storage.pagination.offset import OffsetPaginator
from pagination_engine.storage.pagination.params import (
    CursorParams,
    OffsetParams,
)
from pagination_engine.storage.pagination.protocol import Paginator
from pagination_engine.storage.pagination.validators import validate_base_url

__all__ = [
    "Paginator",
    "OffsetPaginator",
    "CursorPaginator",
    "OffsetParams",
    "CursorParams",
    "encode_cursor",
    "decode_cursor",
    "validate_base_url",
]
