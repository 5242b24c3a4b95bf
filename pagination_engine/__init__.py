"""
Generic offset and cursor (keyset) pagination for SQLAlchemy queries.

Quick reference:
    - OffsetPaginator / CursorPaginator: bind, window, build result
    - PaginatedResult: ``{items, total_count, previous, next}`` envelope
    - BindingError / ValidationError / DecodeError: request-scoped failures
"""

from pagination_engine.exceptions import (
    BindingError,
    DecodeError,
    PaginationException,
    ValidationError,
)
from pagination_engine.schemas.response import PaginatedResult
from pagination_engine.storage.pagination import (
    CursorPaginator,
    CursorParams,
    OffsetPaginator,
    OffsetParams,
    Paginator,
    decode_cursor,
    encode_cursor,
)

__all__ = [
    "BindingError",
    "CursorPaginator",
    "CursorParams",
    "DecodeError",
    "OffsetPaginator",
    "OffsetParams",
    "PaginatedResult",
    "PaginationException",
    "Paginator",
    "ValidationError",
    "decode_cursor",
    "encode_cursor",
]
