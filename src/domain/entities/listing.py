from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from uuid import UUID, uuid4

MIN_PRICE = Decimal("8000.00")
MAX_PRICE = Decimal("11999.99")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ValidationError(ValueError):
    """Raised when a listing is constructed without its required fields."""

    def __init__(self, field_name: str, reason: str) -> None:
        self.field_name = field_name
        super().__init__(f"Invalid {field_name}: {reason}")


def to_price(value: Decimal | int | float | str | None) -> Decimal:
    """Normalise a numeric value into a Decimal price."""
    if value is None:
        raise ValidationError("price", "price is required")
    if isinstance(value, Decimal):
        price = value
    else:
        try:
            price = Decimal(str(value))
        except InvalidOperation as exc:
            raise ValidationError("price", f"{value!r} is not a number") from exc
    if not price.is_finite():
        raise ValidationError("price", f"{value!r} is not a finite number")
    return price


@dataclass
class Listing:
    """
    Core domain entity representing a single real-estate listing.

    The price range is not enforced here: out-of-range listings can exist,
    the catalog refuses to store them.
    """

    # Identity
    id: UUID = field(default_factory=uuid4)

    address: str = ""
    price: Decimal = Decimal("0")

    # Timestamps
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    # -------------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------------

    @classmethod
    def create(
        cls, address: str | None, price: Decimal | int | float | str | None
    ) -> "Listing":
        if not isinstance(address, str) or not address.strip():
            raise ValidationError("address", "address is required")
        now = _utcnow()
        return cls(address=address, price=to_price(price), created_at=now, updated_at=now)

    # -------------------------------------------------------------------------
    # Invariants
    # -------------------------------------------------------------------------

    def is_valid_price(self) -> bool:
        """Return True if the price lies within [MIN_PRICE, MAX_PRICE]."""
        return self.price.is_finite() and MIN_PRICE <= self.price <= MAX_PRICE

    def touch(self) -> None:
        """Refresh updated_at. Must follow every price mutation."""
        self.updated_at = max(_utcnow(), self.updated_at)

    def __str__(self) -> str:
        return f"{self.address} | R$ {self.price:.2f}"
