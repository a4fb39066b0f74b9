from abc import ABC, abstractmethod
from uuid import UUID

from src.domain.entities.listing import Listing


class ListingRepository(ABC):
    """Port for storing and querying Listing entities. Entries are matched by id."""

    @abstractmethod
    def add(self, listing: Listing) -> None:
        ...

    @abstractmethod
    def remove(self, listing: Listing) -> bool:
        """Return True if an entry was taken out of storage."""
        ...

    @abstractmethod
    def update(self, listing: Listing) -> bool:
        """Replace the stored entry with the same id. Return False if none exists."""
        ...

    @abstractmethod
    def get_by_id(self, listing_id: UUID) -> Listing | None:
        ...

    @abstractmethod
    def list_all(self) -> list[Listing]:
        """Return a copy of every stored listing, in insertion order."""
        ...

    @abstractmethod
    def count(self) -> int:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...

    def exists_by_id(self, listing_id: UUID) -> bool:
        return self.get_by_id(listing_id) is not None
