"""
Composition root.

Each factory returns a fully-constructed object with its collaborators
injected.
"""
from src.application.interfaces.listing_repository import ListingRepository
from src.application.notifications.change_notifier import ListingChangeNotifier
from src.application.services.catalog_service import CatalogService
from src.config import Settings, settings as default_settings
from src.infrastructure.listeners.audit_log_listener import AuditLogListener
from src.infrastructure.repositories.in_memory_listing_repository import (
    InMemoryListingRepository,
)


def get_listing_repository() -> ListingRepository:
    return InMemoryListingRepository()


def get_change_notifier() -> ListingChangeNotifier:
    return ListingChangeNotifier()


def get_catalog_service(settings: Settings | None = None) -> CatalogService:
    settings = settings or default_settings
    service = CatalogService(get_listing_repository(), get_change_notifier())
    if settings.audit_log_enabled:
        service.subscribe(AuditLogListener())
    return service
