"""
Pagination parameter models.

Parameters are bound from a request in two steps. Pydantic first applies
defaults and range checks (page >= 1, limit in [1, 100]); any failure there
is a BindingError. validate_params() then runs the semantic checks (base
URL, ordering, cursor), which raise ValidationError or DecodeError.
"""

from typing import Self

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError
from starlette.requests import Request

from pagination_engine.constants import (
    CURSOR_PARAM_KEYS,
    MAX_LIMIT,
    MIN_LIMIT,
    MIN_PAGE,
    OFFSET_PARAM_KEYS,
)
from pagination_engine.exceptions import BindingError
from pagination_engine.settings import app_settings
from pagination_engine.storage.pagination.binding import (
    build_base_url,
    extract_client_params,
    pagination_values,
)
from pagination_engine.storage.pagination.cursor_codec import decode_cursor
from pagination_engine.storage.pagination.validators import (
    validate_base_url,
    validate_ordering,
)


def _default_limit() -> int:
    return app_settings.PAGINATION_DEFAULT_LIMIT


def _default_ordering() -> str:
    return app_settings.PAGINATION_DEFAULT_ORDERING


def _describe_errors(ex: PydanticValidationError) -> str:
    """Short summary of a pydantic error, e.g. ``limit: Input should be ...``."""
    return "; ".join(
        f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
        for error in ex.errors()
    )


class OffsetParams(BaseModel):
    """
    Page-number pagination parameters.

    Attributes:
        page: 1-indexed page number.
        limit: Items per page.
        base_url: ``scheme://host/path`` used to build navigation links.
        client_params: Non-pagination query parameters replayed on links.
    """

    page: int = Field(default=1, ge=MIN_PAGE)
    limit: int = Field(default_factory=_default_limit, ge=MIN_LIMIT, le=MAX_LIMIT)
    base_url: str = ""
    client_params: list[tuple[str, str]] = Field(default_factory=list)

    def validate_params(self) -> None:
        validate_base_url(self.base_url)

    def get_offset(self) -> int:
        """Number of rows to skip before the current page."""
        return self.limit * (self.page - 1)

    @classmethod
    def from_request(cls, request: Request) -> Self:
        """
        Bind and validate offset parameters from a request.

        Raises:
            BindingError: If page or limit is out of range or not a number.
            ValidationError: If the request URL yields an unusable base URL.
        """
        try:
            params = cls(
                **pagination_values(request.query_params, OFFSET_PARAM_KEYS)
            )
        except PydanticValidationError as ex:
            raise BindingError(
                f"invalid pagination parameters: {_describe_errors(ex)}"
            ) from ex

        params.base_url = build_base_url(request)
        params.client_params = extract_client_params(
            request.query_params, OFFSET_PARAM_KEYS
        )
        params.validate_params()
        return params


class CursorParams(BaseModel):
    """
    Keyset pagination parameters.

    Attributes:
        cursor: Opaque token of the row to continue from; empty means no bound.
        ordering: ``asc`` walks towards higher identifiers, ``desc`` towards
            lower ones. Accepted case-insensitively, stored lowercase.
        limit: Items per page.
        base_url: ``scheme://host/path`` used to build navigation links.
        client_params: Non-pagination query parameters replayed on links.
    """

    cursor: str = ""
    ordering: str = Field(default_factory=_default_ordering)
    limit: int = Field(default_factory=_default_limit, ge=MIN_LIMIT, le=MAX_LIMIT)
    base_url: str = ""
    client_params: list[tuple[str, str]] = Field(default_factory=list)

    def validate_params(self) -> None:
        """
        Normalize ordering and check the cursor and base URL.

        Raises:
            ValidationError: On an unknown ordering or a bad base URL.
            DecodeError: If a non-empty cursor does not decode.
        """
        self.ordering = validate_ordering(self.ordering)
        if self.cursor:
            decode_cursor(self.cursor)
        validate_base_url(self.base_url)

    def decoded_cursor(self) -> str | None:
        """Identifier the cursor points at, or None without a cursor."""
        if not self.cursor:
            return None
        return decode_cursor(self.cursor)

    @classmethod
    def from_request(cls, request: Request) -> Self:
        """
        Bind and validate cursor parameters from a request.

        Raises:
            BindingError: If limit is out of range or not a number.
            ValidationError: On an unknown ordering or unusable base URL.
            DecodeError: If the cursor does not decode.
        """
        try:
            params = cls(
                **pagination_values(request.query_params, CURSOR_PARAM_KEYS)
            )
        except PydanticValidationError as ex:
            raise BindingError(
                f"invalid cursor parameters: {_describe_errors(ex)}"
            ) from ex

        params.base_url = build_base_url(request)
        params.client_params = extract_client_params(
            request.query_params, CURSOR_PARAM_KEYS
        )
        params.validate_params()
        return params
