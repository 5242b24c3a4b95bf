"""
Offset-based pagination strategy (traditional page numbers).

Implements offset/limit pagination using page numbers. Best for user-facing
interfaces where users expect "Page 1, 2, 3..." navigation.
"""

import math
from collections.abc import Sequence
from typing import Any, Generic, Self, Type

from sqlalchemy import Select
from starlette.requests import Request

from pagination_engine.constants import LIMIT_PARAM, PAGE_PARAM
from pagination_engine.logging import logger
from pagination_engine.schemas.generic_typing import PageEntityType
from pagination_engine.schemas.response import PaginatedResult
from pagination_engine.storage.pagination.binding import build_link
from pagination_engine.storage.pagination.params import OffsetParams
from pagination_engine.storage.pagination.validators import validate_base_url


class OffsetPaginator(Generic[PageEntityType]):
    """
    Traditional offset-based pagination (page 1, 2, 3...).

    Pros:
    - User-friendly (page numbers)
    - Shows total pages
    - Allows jumping to any page

    Cons:
    - O(n) performance for large offsets (database must scan all rows)
    - Inconsistent results with concurrent inserts/deletes (duplicates/gaps)

    The total count is supplied by the caller, so the window is exactly
    ``limit`` rows with no over-fetch.

    Example:
        ```python
        from sqlmodel import select

        from pagination_engine.storage.pagination import OffsetPaginator

        paginator = OffsetPaginator.from_request(request)
        query = paginator.paginate(select(Doctor).order_by(Doctor.id))
        items = (await session.exec(query)).all()
        total = (await session.exec(select(func.count(Doctor.id)))).one()
        result = paginator.create_pagination_result(items, total)
        ```
    """

    def __init__(self, params: OffsetParams | None = None):
        """
        Initialize offset paginator.

        Args:
            params: Already bound parameters. When omitted, call
                bind_query_params() before building results.
        """
        self._params = params if params is not None else OffsetParams()

    @classmethod
    def from_request(cls, request: Request) -> Self:
        """Create a paginator bound to the request's query parameters."""
        paginator = cls()
        paginator.bind_query_params(request)
        return paginator

    @property
    def params(self) -> OffsetParams:
        return self._params

    def bind_query_params(self, request: Request) -> None:
        """
        Bind page, limit, base URL and client parameters from the request.

        Raises:
            BindingError: If page or limit is out of range or not numeric.
            ValidationError: If no usable base URL can be derived.
        """
        self._params = OffsetParams.from_request(request)

    def paginate(self, query: Select, model: Type[Any] | None = None) -> Select:
        """
        Apply LIMIT/OFFSET for the current page.

        Args:
            query: Select statement with filters and ordering already applied.
            model: Unused; accepted so both strategies share one signature.

        Returns:
            New Select statement limited to the page window.
        """
        offset = self._params.get_offset()
        logger.debug(
            f"Offset window: page={self._params.page} "
            f"limit={self._params.limit} offset={offset}"
        )
        return query.limit(self._params.limit).offset(offset)

    def create_pagination_result(
        self, items: Sequence[PageEntityType], total_count: int
    ) -> PaginatedResult[PageEntityType]:
        """
        Wrap the fetched page in a result envelope with navigation links.

        ``previous`` points at ``page - 1`` whenever ``page > 1``; ``next``
        points at ``page + 1`` while pages remain.

        Args:
            items: Rows of the current page.
            total_count: Number of rows matching the query without paging.

        Raises:
            ValidationError: If the paginator has no usable base URL.
        """
        validate_base_url(self._params.base_url)

        page = self._params.page
        total_pages = math.ceil(total_count / self._params.limit)

        previous = self._build_url(page - 1) if page > 1 else None
        next_url = self._build_url(page + 1) if page < total_pages else None

        return PaginatedResult(
            items=list(items),
            total_count=total_count,
            previous=previous,
            next=next_url,
        )

    def _build_url(self, page: int) -> str:
        return build_link(
            self._params.base_url,
            [(PAGE_PARAM, str(page)), (LIMIT_PARAM, str(self._params.limit))],
            self._params.client_params,
        )
