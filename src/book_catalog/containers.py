"""Dependency container wiring for the application."""

from dataclasses import dataclass

from book_catalog.adapters.memory_catalog_repository import InMemoryCatalogRepository
from book_catalog.adapters.memory_user_repository import InMemoryUserRepository
from book_catalog.config import Settings
from book_catalog.seed import load_seed
from book_catalog.services.cache import InMemoryCache
from book_catalog.services.catalog import CatalogService
from book_catalog.services.deferred import DeferredResolver
from book_catalog.services.lookup import BookLookupService
from book_catalog.services.reviews import ReviewService
from book_catalog.services.sessions import SessionService
from book_catalog.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    session_service: SessionService
    catalog_service: CatalogService
    lookup_service: BookLookupService
    review_service: ReviewService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    catalog_repository = InMemoryCatalogRepository.from_seed(
        load_seed(resolved_settings.seed_path)
    )
    user_repository = InMemoryUserRepository()
    resolver = DeferredResolver(resolved_settings.resolution_delay_seconds)
    user_service = UserService(user_repository)
    session_service = SessionService(
        user_service=user_service,
        cache=InMemoryCache(),
        ttl_seconds=resolved_settings.session_ttl_seconds,
    )
    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        session_service=session_service,
        catalog_service=CatalogService(catalog_repository, resolver),
        lookup_service=BookLookupService(catalog_repository, resolver),
        review_service=ReviewService(catalog_repository),
    )
