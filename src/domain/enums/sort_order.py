from enum import Enum


class SortOrder(str, Enum):
    """Direction applied by a sort strategy."""

    ASCENDING = "ASCENDING"
    DESCENDING = "DESCENDING"

    @property
    def is_descending(self) -> bool:
        return self is SortOrder.DESCENDING
