from typing import Generic

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Annotated

from pagination_engine.schemas.generic_typing import PageEntityType


class PaginatedResult(BaseModel, Generic[PageEntityType]):  # type: ignore[misc]
    """
    Envelope returned by both pagination strategies.

    ``previous`` and ``next`` are fully built URLs (or None when there is
    nowhere to go). The envelope is immutable once constructed.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    items: list[PageEntityType]
    total_count: Annotated[int, Field(ge=0)]
    previous: str | None = None
    next: str | None = None
