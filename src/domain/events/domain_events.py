from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class DomainEvent:
    """Base class for all domain events."""

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=_utcnow)


@dataclass(frozen=True)
class ListingCreatedEvent(DomainEvent):
    """Recorded when a listing is stored in the catalog."""

    listing_id: UUID = field(default_factory=uuid4)
    address: str = ""
    price: Decimal = Decimal("0")


@dataclass(frozen=True)
class ListingRemovedEvent(DomainEvent):
    """Recorded when a listing is taken out of the catalog."""

    listing_id: UUID = field(default_factory=uuid4)
    address: str = ""
    price: Decimal = Decimal("0")


@dataclass(frozen=True)
class ListingPriceChangedEvent(DomainEvent):
    """Recorded whenever a listing's price is updated."""

    listing_id: UUID = field(default_factory=uuid4)
    old_price: Decimal = Decimal("0")
    new_price: Decimal = Decimal("0")

    @property
    def difference(self) -> Decimal:
        return self.new_price - self.old_price
