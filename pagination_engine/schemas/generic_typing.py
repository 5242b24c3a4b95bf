from collections.abc import Mapping
from typing import Any, TypeVar

# Any item with a stable, order-consistent identifier (see get_entity_id)
PageEntityType = TypeVar("PageEntityType")


def get_entity_id(item: Any, id_field: str = "id") -> str:
    """
    Return the identifier of a page entity as a string.

    The string form is what cursor tokens carry, so it must sort the same way
    as the identifier column.

    Args:
        item: Model instance, result row or mapping exposing ``id_field``.
        id_field: Attribute (or key) holding the identifier.

    Raises:
        AttributeError: If an object item has no such attribute.
        KeyError: If a mapping item has no such key.
    """
    if isinstance(item, Mapping):
        return str(item[id_field])
    return str(getattr(item, id_field))
