"""
Cursor-based pagination strategy (stable, bidirectional keyset pagination).

Implements keyset pagination using item IDs as cursors. Best for APIs,
infinite scroll, and real-time feeds where performance and stability
matter more than jumping to arbitrary pages.
"""

from collections.abc import Sequence
from typing import Any, Generic, Self, Type

from sqlalchemy import Select
from starlette.requests import Request

from pagination_engine.constants import (
    CURSOR_PARAM,
    LIMIT_PARAM,
    ORDERING_ASC,
    ORDERING_DESC,
    ORDERING_PARAM,
)
from pagination_engine.exceptions import ValidationError
from pagination_engine.logging import logger
from pagination_engine.schemas.generic_typing import (
    PageEntityType,
    get_entity_id,
)
from pagination_engine.schemas.response import PaginatedResult
from pagination_engine.storage.pagination.binding import build_link
from pagination_engine.storage.pagination.cursor_codec import encode_cursor
from pagination_engine.storage.pagination.params import CursorParams
from pagination_engine.storage.pagination.validators import validate_base_url


class CursorPaginator(Generic[PageEntityType]):
    """
    Keyset pagination over a unique, sortable identifier.

    Pros:
    - Constant cost per page, regardless of how deep the client goes
    - Stable results (no duplicates/skips with concurrent changes)
    - Navigation in both directions from any item

    Cons:
    - Cannot jump to arbitrary pages (only next/previous)
    - Requires unique, sortable ID field

    ``ordering`` is the traversal direction: ``asc`` walks towards higher
    identifiers, ``desc`` towards lower ones. Whatever the direction, the
    items handed back to the client ascend by identifier.

    Example:
        ```python
        from sqlmodel import select

        from pagination_engine.storage.pagination import CursorPaginator

        paginator = CursorPaginator.from_request(request)
        query = paginator.paginate(select(Doctor), Doctor)
        rows = (await session.exec(query)).all()
        total = (await session.exec(select(func.count(Doctor.id)))).one()
        result = paginator.create_pagination_result(rows, total)
        ```
    """

    def __init__(self, params: CursorParams | None = None, id_field: str = "id"):
        """
        Initialize cursor paginator.

        Args:
            params: Already validated parameters. When omitted, call
                bind_query_params() before use.
            id_field: Name of the identifier attribute on the model and on
                the returned items.
        """
        self._params = params if params is not None else CursorParams()
        self.id_field = id_field

    @classmethod
    def from_request(cls, request: Request, id_field: str = "id") -> Self:
        """Create a paginator bound to the request's query parameters."""
        paginator = cls(id_field=id_field)
        paginator.bind_query_params(request)
        return paginator

    @property
    def params(self) -> CursorParams:
        return self._params

    def bind_query_params(self, request: Request) -> None:
        """
        Bind cursor, ordering, limit, base URL and client parameters.

        Raises:
            BindingError: If limit is out of range or not numeric.
            ValidationError: On an unknown ordering or unusable base URL.
            DecodeError: If the cursor does not decode.
        """
        self._params = CursorParams.from_request(request)

    def paginate(self, query: Select, model: Type[Any]) -> Select:
        """
        Apply the keyset window to the query.

        Adds ``WHERE id > cursor`` (asc) or ``WHERE id < cursor`` (desc) when a
        cursor is set, orders by the identifier in the traversal direction and
        fetches ``limit + 1`` rows so create_pagination_result() can tell
        whether more rows exist.

        Args:
            query: Select statement with filters already applied.
            model: The model class owning the identifier column.

        Returns:
            New Select statement with the window applied.

        Raises:
            DecodeError: If the cursor does not decode.
            ValidationError: If the cursor does not fit the column type.
        """
        column = getattr(model, self.id_field)
        ascending = self._params.ordering == ORDERING_ASC

        last_id = self._params.decoded_cursor()
        if last_id is not None:
            value = _coerce_cursor_value(column, last_id)
            query = query.where(column > value if ascending else column < value)

        logger.debug(
            f"Cursor window: cursor={last_id!r} "
            f"ordering={self._params.ordering} limit={self._params.limit}"
        )

        order = column.asc() if ascending else column.desc()
        return query.order_by(order).limit(self._params.limit + 1)

    def create_pagination_result(
        self, items: Sequence[PageEntityType], total_count: int
    ) -> PaginatedResult[PageEntityType]:
        """
        Wrap the fetched rows in a result envelope with navigation links.

        Args:
            items: Rows returned by the windowed query (up to ``limit + 1``).
            total_count: Number of rows matching the query without paging.

        Returns:
            Envelope holding at most ``limit`` items in ascending identifier
            order. ``previous`` is set when the page was reached through a
            cursor or by walking backwards; ``next`` when rows remain beyond
            the page. An empty page has no links.

        Raises:
            ValidationError: If the paginator has no usable base URL.
        """
        validate_base_url(self._params.base_url)

        rows = list(items)
        has_more = len(rows) > self._params.limit
        if has_more:
            rows = rows[: self._params.limit]  # Remove extra item

        descending = self._params.ordering == ORDERING_DESC
        if descending:
            # DESC windows come back nearest-first; expose them ascending
            rows.reverse()

        previous = next_url = None
        if rows:
            if self._params.cursor or descending:
                previous = self._build_url(
                    get_entity_id(rows[0], self.id_field), ORDERING_DESC
                )
            if has_more:
                next_url = self._build_url(
                    get_entity_id(rows[-1], self.id_field), ORDERING_ASC
                )

        return PaginatedResult(
            items=rows,
            total_count=total_count,
            previous=previous,
            next=next_url,
        )

    def _build_url(self, identifier: str, ordering: str) -> str:
        return build_link(
            self._params.base_url,
            [
                (CURSOR_PARAM, encode_cursor(identifier)),
                (ORDERING_PARAM, ordering),
                (LIMIT_PARAM, str(self._params.limit)),
            ],
            self._params.client_params,
        )


def _coerce_cursor_value(column: Any, raw: str) -> Any:
    """
    Convert a decoded cursor to the identifier column's Python type.

    Columns without a declared Python type compare against the raw string.
    """
    try:
        python_type = column.expression.type.python_type
    except NotImplementedError:
        return raw

    if python_type is str:
        return raw

    try:
        return python_type(raw)
    except (TypeError, ValueError) as ex:
        logger.warning(f"Cursor value {raw!r} does not fit {python_type.__name__}")
        raise ValidationError("invalid cursor") from ex
