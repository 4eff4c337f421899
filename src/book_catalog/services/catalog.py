"""Primary-key reads over the book catalog."""

from dataclasses import dataclass
from typing import Protocol

from book_catalog.domain.errors import BookNotFoundError
from book_catalog.domain.models import BookRecord
from book_catalog.services.deferred import DeferredResolver


class CatalogRepository(Protocol):
    """Storage interface for book records and their reviews."""

    def get_book(self, identifier: str) -> BookRecord | None:
        """Return a snapshot of a book by identifier, if present."""

    def list_books(self) -> dict[str, BookRecord]:
        """Return snapshots of every book in insertion order."""

    def find_books(self, field_name: str, value: str) -> dict[str, BookRecord]:
        """Return snapshots of books whose field equals the value."""

    def put_review(self, identifier: str, identity: str, text: str) -> None:
        """Set the review for an identity on an existing book."""

    def pop_review(self, identifier: str, identity: str) -> str | None:
        """Remove and return the identity's review, if present."""


@dataclass
class CatalogService:
    """Read access to the catalog by identifier."""

    repository: CatalogRepository
    resolver: DeferredResolver

    async def get_all(self) -> dict[str, BookRecord]:
        """Return every book; an empty catalog is an empty mapping."""
        return await self.resolver.resolve(self.repository.list_books)

    async def get_by_identifier(self, identifier: str) -> BookRecord:
        """Return the book with this identifier."""
        return await self.resolver.resolve(lambda: self._require(identifier))

    def _require(self, identifier: str) -> BookRecord:
        book = self.repository.get_book(identifier)
        if book is None:
            raise BookNotFoundError(identifier)
        return book
