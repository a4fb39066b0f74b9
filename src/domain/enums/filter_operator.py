from enum import Enum


class FilterOperator(str, Enum):
    """Logical combinator used by composite filters."""

    AND = "AND"
    OR = "OR"
