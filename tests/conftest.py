"""Shared test fixtures."""

import pytest

from book_catalog.adapters.memory_catalog_repository import InMemoryCatalogRepository
from book_catalog.adapters.memory_user_repository import InMemoryUserRepository
from book_catalog.config import Settings
from book_catalog.containers import AppContainer
from book_catalog.services.cache import InMemoryCache
from book_catalog.services.catalog import CatalogService
from book_catalog.services.deferred import DeferredResolver
from book_catalog.services.lookup import BookLookupService
from book_catalog.services.reviews import ReviewService
from book_catalog.services.sessions import SessionService
from book_catalog.services.users import UserService

SEED_BOOKS: dict[str, dict[str, object]] = {
    "001": {"title": "T1", "author": "A1"},
    "002": {"title": "Shared Title", "author": "A2", "description": "First"},
    "003": {"title": "Shared Title", "author": "A3"},
    "004": {"title": "T4", "author": "A2"},
}


@pytest.fixture
def settings() -> Settings:
    return Settings(resolution_delay_seconds=0, session_ttl_seconds=3600)


@pytest.fixture
def resolver() -> DeferredResolver:
    return DeferredResolver(delay_seconds=0)


@pytest.fixture
def catalog_repository() -> InMemoryCatalogRepository:
    return InMemoryCatalogRepository.from_seed(SEED_BOOKS)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def user_service(user_repository: InMemoryUserRepository) -> UserService:
    return UserService(user_repository)


@pytest.fixture
def session_service(user_service: UserService) -> SessionService:
    return SessionService(user_service=user_service, cache=InMemoryCache())


@pytest.fixture
def catalog_service(
    catalog_repository: InMemoryCatalogRepository, resolver: DeferredResolver
) -> CatalogService:
    return CatalogService(catalog_repository, resolver)


@pytest.fixture
def lookup_service(
    catalog_repository: InMemoryCatalogRepository, resolver: DeferredResolver
) -> BookLookupService:
    return BookLookupService(catalog_repository, resolver)


@pytest.fixture
def review_service(catalog_repository: InMemoryCatalogRepository) -> ReviewService:
    return ReviewService(catalog_repository)


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    user_service: UserService,
    session_service: SessionService,
    catalog_service: CatalogService,
    lookup_service: BookLookupService,
    review_service: ReviewService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        user_service=user_service,
        session_service=session_service,
        catalog_service=catalog_service,
        lookup_service=lookup_service,
        review_service=review_service,
    )
