"""Author and title lookups derived by scanning the catalog."""

from dataclasses import dataclass

from book_catalog.domain.errors import NoMatchesError
from book_catalog.domain.models import BookRecord
from book_catalog.services.catalog import CatalogRepository
from book_catalog.services.deferred import DeferredResolver


@dataclass
class BookLookupService:
    """Secondary-index reads over the catalog.

    Matching is exact string equality. Results keep catalog insertion order.
    An empty result raises ``NoMatchesError`` rather than returning an empty
    mapping, unlike ``CatalogService.get_all``.
    """

    repository: CatalogRepository
    resolver: DeferredResolver

    async def find_by_author(self, author: str) -> dict[str, BookRecord]:
        """Return every book written by the author."""
        return await self.resolver.resolve(lambda: self._match("author", author))

    async def find_by_title(self, title: str) -> dict[str, BookRecord]:
        """Return every book with the title."""
        return await self.resolver.resolve(lambda: self._match("title", title))

    def _match(self, field_name: str, value: str) -> dict[str, BookRecord]:
        matches = self.repository.find_books(field_name, value)
        if not matches:
            raise NoMatchesError(field_name, value)
        return matches
