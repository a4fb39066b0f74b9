import threading
from decimal import Decimal
from uuid import UUID

import structlog

from src.application.interfaces.listing_listener import ListingListener
from src.application.interfaces.listing_repository import ListingRepository
from src.application.notifications.change_notifier import ListingChangeNotifier
from src.domain.entities.listing import Listing, ValidationError, to_price
from src.domain.filters.listing_filters import ListingFilter
from src.domain.sorting.sort_strategies import ListingSortStrategy

logger = structlog.get_logger(__name__)


class CatalogService:
    """
    Façade over the listing catalog: mutations, queries and change notifications.

    Each mutation stores the change and then notifies subscribers while holding
    one re-entrant lock, so notifications never run ahead of or behind the
    state they describe. Listeners may query the catalog from their callbacks.

    Invalid input (missing listing, out-of-range price, missing filter or
    strategy) is absorbed as a no-op: nothing is stored and nothing is
    notified.
    """

    def __init__(
        self,
        repository: ListingRepository,
        notifier: ListingChangeNotifier | None = None,
    ) -> None:
        self._repository = repository
        self._notifier = notifier if notifier is not None else ListingChangeNotifier()
        self._lock = threading.RLock()

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def add(self, listing: Listing | None) -> None:
        if listing is None:
            logger.debug("listing_add_ignored", reason="missing_listing")
            return
        with self._lock:
            if not listing.is_valid_price():
                logger.debug(
                    "listing_add_ignored",
                    reason="price_out_of_range",
                    listing_id=str(listing.id),
                    price=str(listing.price),
                )
                return
            self._repository.add(listing)
            logger.info(
                "listing_added",
                listing_id=str(listing.id),
                address=listing.address,
                price=str(listing.price),
            )
            self._notifier.notify_created(listing)

    def remove(self, listing: Listing | None) -> None:
        if listing is None:
            logger.debug("listing_remove_ignored", reason="missing_listing")
            return

        with self._lock:
            if not self._repository.remove(listing):
                logger.debug("listing_remove_ignored", reason="not_in_catalog", listing_id=str(listing.id))
                return
            logger.info("listing_removed", listing_id=str(listing.id))
            self._notifier.notify_removed(listing)

    def update_price(
        self,
        listing: Listing | None,
        new_price: Decimal | int | float | str | None,
    ) -> None:
        """
        Apply a new price, refresh updated_at, store the change, then notify.

        The change is applied to the listing object itself, so listeners are
        notified even when the listing is not held by this catalog.
        """
        if listing is None or new_price is None:
            logger.debug("listing_price_update_ignored", reason="missing_argument")
            return
        try:
            price = to_price(new_price)
        except ValidationError:
            logger.debug("listing_price_update_ignored", reason="invalid_price", new_price=str(new_price))
            return

        with self._lock:
            old_price = listing.price
            listing.price = price
            listing.touch()
            stored = self._repository.update(listing)
            logger.info(
                "listing_price_updated",
                listing_id=str(listing.id),
                old_price=str(old_price),
                new_price=str(price),
                in_catalog=stored,
            )
            self._notifier.notify_price_changed(listing, old_price, price)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def list_all(self) -> list[Listing]:
        with self._lock:
            return self._repository.list_all()

    def filter(self, listing_filter: ListingFilter | None) -> list[Listing]:
        snapshot = self.list_all()
        if listing_filter is None:
            return snapshot
        result = listing_filter.apply(snapshot)
        logger.debug("catalog_filtered", filter=listing_filter.description, matched=len(result))
        return result

    def sort(self, strategy: ListingSortStrategy | None) -> list[Listing]:
        snapshot = self.list_all()
        if strategy is None:
            return snapshot
        return strategy.sort(snapshot)

    def filter_then_sort(
        self,
        listing_filter: ListingFilter | None,
        strategy: ListingSortStrategy | None,
    ) -> list[Listing]:
        filtered = self.filter(listing_filter)
        if strategy is None:
            return filtered
        return strategy.sort(filtered)

    def find_by_id(self, listing_id: UUID) -> Listing | None:
        with self._lock:
            return self._repository.get_by_id(listing_id)

    def count(self) -> int:
        with self._lock:
            return self._repository.count()

    # -------------------------------------------------------------------------
    # Subscriptions
    # -------------------------------------------------------------------------

    def subscribe(self, listener: ListingListener | None) -> None:
        with self._lock:
            self._notifier.subscribe(listener)

    def unsubscribe(self, listener: ListingListener | None) -> None:
        with self._lock:
            self._notifier.unsubscribe(listener)

    def unsubscribe_all(self) -> None:
        with self._lock:
            self._notifier.unsubscribe_all()

    @property
    def listener_count(self) -> int:
        return self._notifier.listener_count
