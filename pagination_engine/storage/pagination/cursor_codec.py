"""
Opaque cursor tokens for keyset pagination.

A cursor is the string form of a row identifier, UTF-8 encoded and then
base64 encoded with the URL-safe alphabet and the ``=`` padding stripped, so
the token can travel in a query string or a path segment unescaped.
"""

import base64
import binascii
import re
from typing import Any

from pagination_engine.exceptions import DecodeError

_URLSAFE_ALPHABET = re.compile(r"^[A-Za-z0-9_-]*$")


def encode_cursor(identifier: Any) -> str:
    """
    Encode an identifier into a cursor token.

    Args:
        identifier: Row identifier; non-string values use their ``str()`` form.

    Returns:
        Unpadded URL-safe base64 token.

    Example:
        >>> encode_cursor(123)
        'MTIz'
    """
    raw = str(identifier).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def decode_cursor(token: str) -> str:
    """
    Decode a cursor token back into the identifier string.

    Args:
        token: Token produced by encode_cursor().

    Returns:
        The identifier string.

    Raises:
        DecodeError: If the token is not unpadded URL-safe base64 of a UTF-8
            string.
    """
    if not _URLSAFE_ALPHABET.match(token) or len(token) % 4 == 1:
        raise DecodeError("invalid cursor")

    padded = token + "=" * (-len(token) % 4)
    try:
        return base64.urlsafe_b64decode(padded).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as ex:
        raise DecodeError("invalid cursor") from ex
