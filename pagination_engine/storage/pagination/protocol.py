"""
Protocol definition for pagination strategies.

Uses Python's structural subtyping (Protocol) to define the interface both
paginators implement without requiring explicit inheritance. Callers pick a
strategy per endpoint; nothing dispatches between them at runtime.
"""

from collections.abc import Sequence
from typing import Any, Protocol, Type

from sqlalchemy import Select
from starlette.requests import Request

from pagination_engine.schemas.generic_typing import PageEntityType
from pagination_engine.schemas.response import PaginatedResult


class Paginator(Protocol[PageEntityType]):
    """
    Protocol for pagination strategies.

    Type Parameters:
        PageEntityType: The item type being paginated.

    Example:
        ```python
        def list_page(
            paginator: Paginator[Doctor], rows: list[Doctor], total: int
        ) -> PaginatedResult[Doctor]:
            return paginator.create_pagination_result(rows, total)


        list_page(OffsetPaginator(params), rows, total)
        list_page(CursorPaginator(params), rows, total)
        ```
    """

    def bind_query_params(self, request: Request) -> None:
        """
        Bind and validate pagination parameters from the request.

        Raises:
            BindingError: If raw values are out of range or not numeric.
            ValidationError: If bound values are semantically invalid.
            DecodeError: If a cursor does not decode.
        """
        ...

    def paginate(self, query: Select, model: Type[Any]) -> Select:
        """
        Return the query restricted to the page window.

        The query is never executed here.
        """
        ...

    def create_pagination_result(
        self, items: Sequence[PageEntityType], total_count: int
    ) -> PaginatedResult[PageEntityType]:
        """Build the result envelope for fetched rows and a total count."""
        ...
