"""In-memory book catalog store."""

import threading
from collections.abc import Mapping
from dataclasses import dataclass, field

from book_catalog.domain.models import BookRecord
from book_catalog.services.catalog import CatalogRepository

_SEARCHABLE_FIELDS = frozenset({"author", "title"})


@dataclass
class InMemoryCatalogRepository(CatalogRepository):
    """Dict-backed catalog guarded by a single lock.

    Reads copy records under the lock, so callers never observe a review map
    mid-mutation and never hold a reference into the store.
    """

    books: dict[str, BookRecord] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @classmethod
    def from_seed(
        cls, seed: Mapping[str, Mapping[str, object]]
    ) -> "InMemoryCatalogRepository":
        """Build a catalog from ``identifier -> {title, author, description}``."""
        repository = cls()
        for identifier, payload in seed.items():
            repository.add_book(_parse_book(identifier, payload))
        return repository

    def add_book(self, book: BookRecord) -> None:
        """Insert a book; identifiers are unique."""
        with self._lock:
            if book.identifier in self.books:
                raise ValueError(f"Duplicate book identifier: {book.identifier}")
            self.books[book.identifier] = book.snapshot()

    def get_book(self, identifier: str) -> BookRecord | None:
        """Return a snapshot of a book by identifier, if present."""
        with self._lock:
            book = self.books.get(identifier)
            return book.snapshot() if book else None

    def list_books(self) -> dict[str, BookRecord]:
        """Return snapshots of every book."""
        with self._lock:
            return {key: book.snapshot() for key, book in self.books.items()}

    def find_books(self, field_name: str, value: str) -> dict[str, BookRecord]:
        """Scan for books whose field equals the value exactly."""
        if field_name not in _SEARCHABLE_FIELDS:
            raise ValueError(f"Unsupported lookup field: {field_name}")
        with self._lock:
            return {
                key: book.snapshot()
                for key, book in self.books.items()
                if getattr(book, field_name) == value
            }

    def put_review(self, identifier: str, identity: str, text: str) -> None:
        """Set the identity's review on a book."""
        with self._lock:
            self.books[identifier].reviews[identity] = text

    def pop_review(self, identifier: str, identity: str) -> str | None:
        """Remove and return the identity's review on a book."""
        with self._lock:
            return self.books[identifier].reviews.pop(identity, None)


def _parse_book(identifier: str, payload: Mapping[str, object]) -> BookRecord:
    """Parse a seed entry into a domain model."""
    for required in ("title", "author"):
        if not payload.get(required):
            raise ValueError(f"Seed entry {identifier!r} is missing {required}")
    description = payload.get("description")
    reviews = payload.get("reviews") or {}
    return BookRecord(
        identifier=str(identifier),
        title=str(payload["title"]),
        author=str(payload["author"]),
        description=str(description) if description is not None else None,
        reviews={str(key): str(text) for key, text in dict(reviews).items()},
    )
