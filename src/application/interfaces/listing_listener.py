from abc import ABC, abstractmethod
from decimal import Decimal

from src.domain.entities.listing import Listing


class ListingListener(ABC):
    """Port for observers notified of catalog mutations."""

    @abstractmethod
    def on_created(self, listing: Listing) -> None:
        ...

    @abstractmethod
    def on_removed(self, listing: Listing) -> None:
        ...

    @abstractmethod
    def on_price_changed(
        self, listing: Listing, old_price: Decimal, new_price: Decimal
    ) -> None:
        ...
