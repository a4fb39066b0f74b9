"""
Audit listener — writes one structured log record per catalog change.
"""
from decimal import Decimal

import structlog

from src.application.interfaces.listing_listener import ListingListener
from src.domain.entities.listing import Listing

logger = structlog.get_logger(__name__)


def _direction(difference: Decimal) -> str:
    if difference > 0:
        return "increase"
    if difference < 0:
        return "decrease"
    return "unchanged"


class AuditLogListener(ListingListener):
    """Records creations, removals and price changes in the audit log."""

    def on_created(self, listing: Listing) -> None:
        logger.info(
            "audit_listing_created",
            listing_id=str(listing.id),
            address=listing.address,
            price=f"{listing.price:.2f}",
        )

    def on_removed(self, listing: Listing) -> None:
        logger.info(
            "audit_listing_removed",
            listing_id=str(listing.id),
            address=listing.address,
            price=f"{listing.price:.2f}",
        )

    def on_price_changed(
        self, listing: Listing, old_price: Decimal, new_price: Decimal
    ) -> None:
        difference = new_price - old_price
        logger.info(
            "audit_listing_price_changed",
            listing_id=str(listing.id),
            address=listing.address,
            old_price=f"{old_price:.2f}",
            new_price=f"{new_price:.2f}",
            direction=_direction(difference),
            difference=f"{abs(difference):.2f}",
        )
