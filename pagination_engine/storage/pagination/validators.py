"""
Validation shared by the offset and cursor strategies.

Once validate_base_url() passes, building navigation links cannot fail.
"""

from starlette.datastructures import URL

from pagination_engine.constants import ORDERING_ASC, ORDERING_DESC
from pagination_engine.exceptions import ValidationError


def validate_base_url(base_url: str) -> None:
    """
    Check that a base URL can be used to build navigation links.

    Raises:
        ValidationError: If the URL is empty, cannot be parsed, or has no
            host.
    """
    if not base_url:
        raise ValidationError("base url is required")

    try:
        host = URL(base_url).hostname
    except ValueError as ex:
        raise ValidationError("invalid base url format") from ex

    if not host:
        raise ValidationError("base url must contain a valid host")


def validate_ordering(ordering: str) -> str:
    """
    Normalize a cursor ordering token.

    Returns:
        ``"asc"`` or ``"desc"``.

    Raises:
        ValidationError: If the token is neither, ignoring case.
    """
    normalized = ordering.lower()
    if normalized not in (ORDERING_ASC, ORDERING_DESC):
        raise ValidationError("ordering must be either 'asc' or 'desc'")
    return normalized
