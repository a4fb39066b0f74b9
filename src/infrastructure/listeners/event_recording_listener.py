from decimal import Decimal

from src.application.interfaces.listing_listener import ListingListener
from src.domain.entities.listing import Listing
from src.domain.events.domain_events import (
    DomainEvent,
    ListingCreatedEvent,
    ListingPriceChangedEvent,
    ListingRemovedEvent,
)


class EventRecordingListener(ListingListener):
    """
    Turns catalog notifications into domain events and buffers them until
    collected.
    """

    def __init__(self) -> None:
        self._events: list[DomainEvent] = []

    def on_created(self, listing: Listing) -> None:
        self._events.append(
            ListingCreatedEvent(
                listing_id=listing.id,
                address=listing.address,
                price=listing.price,
            )
        )

    def on_removed(self, listing: Listing) -> None:
        self._events.append(
            ListingRemovedEvent(
                listing_id=listing.id,
                address=listing.address,
                price=listing.price,
            )
        )

    def on_price_changed(
        self, listing: Listing, old_price: Decimal, new_price: Decimal
    ) -> None:
        self._events.append(
            ListingPriceChangedEvent(
                listing_id=listing.id,
                old_price=old_price,
                new_price=new_price,
            )
        )

    @property
    def pending_count(self) -> int:
        return len(self._events)

    def collect_events(self) -> list[DomainEvent]:
        """Return pending events and clear the internal buffer."""
        events = list(self._events)
        self._events.clear()
        return events
