"""Review ledger: per-book reviews keyed by reviewer identity."""

import logging
from dataclasses import dataclass

from book_catalog.domain.errors import (
    BookNotFoundError,
    InvalidInputError,
    ReviewNotFoundError,
    UnauthorizedError,
)
from book_catalog.services.catalog import CatalogRepository

_logger = logging.getLogger(__name__)


@dataclass
class ReviewService:
    """Adds, replaces and removes reviews.

    Every mutation is keyed by the caller's own identity. No operation takes
    a target reviewer, so a caller can only ever touch their own entry.
    """

    repository: CatalogRepository

    def get_reviews(self, identifier: str) -> dict[str, str]:
        """Return the reviews on a book."""
        book = self.repository.get_book(identifier)
        if book is None:
            raise BookNotFoundError(identifier)
        return book.reviews

    def upsert_review(
        self, identifier: str, caller_identity: str | None, text: str | None
    ) -> None:
        """Add the caller's review, replacing any earlier one."""
        self._require_book(identifier)
        if not text:
            raise InvalidInputError("review")
        if not caller_identity:
            raise UnauthorizedError()
        self.repository.put_review(identifier, caller_identity, text)
        _logger.info(
            "Review saved: identifier=%s identity=%s", identifier, caller_identity
        )

    def delete_review(self, identifier: str, caller_identity: str | None) -> None:
        """Remove the caller's review from a book."""
        self._require_book(identifier)
        if not caller_identity:
            raise ReviewNotFoundError(identifier, caller_identity)
        if self.repository.pop_review(identifier, caller_identity) is None:
            raise ReviewNotFoundError(identifier, caller_identity)
        _logger.info(
            "Review deleted: identifier=%s identity=%s", identifier, caller_identity
        )

    def _require_book(self, identifier: str) -> None:
        if self.repository.get_book(identifier) is None:
            raise BookNotFoundError(identifier)
