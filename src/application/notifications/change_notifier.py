"""
Subscriber registry and synchronous fan-out for catalog change notifications.
"""
import threading
from collections.abc import Callable
from decimal import Decimal

import structlog

from src.application.interfaces.listing_listener import ListingListener
from src.domain.entities.listing import Listing

logger = structlog.get_logger(__name__)


class ListingChangeNotifier:
    """
    Keeps an ordered registry of listeners, unique by identity, and invokes
    them on the calling thread in subscription order.

    Callback errors propagate to the caller. Dispatch runs over a snapshot of
    the registry, so a failing callback leaves the registry untouched.
    """

    def __init__(self) -> None:
        self._listeners: list[ListingListener] = []
        self._lock = threading.Lock()

    # -------------------------------------------------------------------------
    # Registry
    # -------------------------------------------------------------------------

    def subscribe(self, listener: ListingListener | None) -> None:
        if listener is None:
            return
        with self._lock:
            if self._contains(listener):
                return
            self._listeners.append(listener)
        logger.debug("listener_subscribed", listener=type(listener).__name__)

    def unsubscribe(self, listener: ListingListener | None) -> None:
        with self._lock:
            self._listeners = [entry for entry in self._listeners if entry is not listener]

    def unsubscribe_all(self) -> None:
        with self._lock:
            self._listeners.clear()

    @property
    def listener_count(self) -> int:
        with self._lock:
            return len(self._listeners)

    def get_listeners(self) -> list[ListingListener]:
        """Return a copy of the registry."""
        with self._lock:
            return list(self._listeners)

    def is_subscribed(self, listener: ListingListener) -> bool:
        with self._lock:
            return self._contains(listener)

    def _contains(self, listener: ListingListener) -> bool:
        return any(entry is listener for entry in self._listeners)

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def notify_created(self, listing: Listing) -> None:
        self._dispatch("on_created", lambda entry: entry.on_created(listing))

    def notify_removed(self, listing: Listing) -> None:
        self._dispatch("on_removed", lambda entry: entry.on_removed(listing))

    def notify_price_changed(
        self, listing: Listing, old_price: Decimal, new_price: Decimal
    ) -> None:
        self._dispatch(
            "on_price_changed",
            lambda entry: entry.on_price_changed(listing, old_price, new_price),
        )

    def _dispatch(self, callback: str, invoke: Callable[[ListingListener], None]) -> None:
        for listener in self.get_listeners():
            try:
                invoke(listener)
            except Exception:
                logger.exception(
                    "listener_callback_failed",
                    callback=callback,
                    listener=type(listener).__name__,
                )
                raise
