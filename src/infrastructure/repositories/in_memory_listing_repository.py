import threading
from collections.abc import Iterable
from uuid import UUID

from src.application.interfaces.listing_repository import ListingRepository
from src.domain.entities.listing import Listing


class InMemoryListingRepository(ListingRepository):
    """List-backed listing storage. Keeps insertion order; matches entries by id."""

    def __init__(self, listings: Iterable[Listing] | None = None) -> None:
        self._listings: list[Listing] = list(listings) if listings is not None else []
        self._lock = threading.Lock()

    def add(self, listing: Listing) -> None:
        if listing is None:
            return
        with self._lock:
            self._listings.append(listing)

    def remove(self, listing: Listing) -> bool:
        with self._lock:
            index = self._index_of(listing.id)
            if index is None:
                return False
            del self._listings[index]
            return True

    def update(self, listing: Listing) -> bool:
        if listing is None:
            return False
        with self._lock:
            index = self._index_of(listing.id)
            if index is None:
                return False
            self._listings[index] = listing
            return True

    def get_by_id(self, listing_id: UUID) -> Listing | None:
        with self._lock:
            index = self._index_of(listing_id)
            return self._listings[index] if index is not None else None

    def list_all(self) -> list[Listing]:
        with self._lock:
            return list(self._listings)

    def count(self) -> int:
        with self._lock:
            return len(self._listings)

    def clear(self) -> None:
        with self._lock:
            self._listings.clear()

    def _index_of(self, listing_id: UUID) -> int | None:
        for index, stored in enumerate(self._listings):
            if stored.id == listing_id:
                return index
        return None
