from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from src.domain.entities.listing import Listing
from src.domain.enums.sort_order import SortOrder


class ListingSortStrategy(ABC):
    """
    Pluggable ordering over listings.

    sort() never mutates its input and always returns a new list. Ordering is
    stable in both directions: listings with equal keys keep their original
    relative order.
    """

    label: str = ""

    def __init__(self, order: SortOrder = SortOrder.ASCENDING) -> None:
        self.order = order

    @abstractmethod
    def sort_key(self, listing: Listing) -> Any:
        ...

    def sort(self, listings: Sequence[Listing]) -> list[Listing]:
        # sorted() stays stable with reverse=True.
        return sorted(listings, key=self.sort_key, reverse=self.order.is_descending)

    @property
    def description(self) -> str:
        return f"Sort by {self.label} ({self.order.value})"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.order.value}>"


class PriceSortStrategy(ListingSortStrategy):
    """Numeric ordering on price."""

    label = "price"

    def sort_key(self, listing: Listing) -> Any:
        return listing.price


class AddressSortStrategy(ListingSortStrategy):
    """Ordinal (code point) ordering on the full address string."""

    label = "address"

    def sort_key(self, listing: Listing) -> Any:
        return listing.address
