"""HTTP client for the public catalog routes."""

from dataclasses import dataclass
from typing import Protocol
from urllib.parse import quote

import httpx


class CatalogClient(Protocol):
    """Interface for reading the catalog over HTTP."""

    async def list_books(self) -> dict[str, object]:
        """Return every book keyed by identifier."""

    async def get_book(self, isbn: str) -> dict[str, object]:
        """Return one book by identifier."""

    async def books_by_author(self, author: str) -> dict[str, object]:
        """Return books by an author keyed by identifier."""

    async def books_by_title(self, title: str) -> dict[str, object]:
        """Return books with a title keyed by identifier."""

    async def get_reviews(self, isbn: str) -> dict[str, str]:
        """Return the reviews on a book."""


@dataclass
class HttpxCatalogClient(CatalogClient):
    """HTTPX-backed catalog client."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpxCatalogClient":
        """Create a catalog client with a managed httpx session."""
        return cls(base_url=base_url.rstrip("/"), http_client=httpx.AsyncClient())

    async def list_books(self) -> dict[str, object]:
        """Fetch the full catalog."""
        return await self._get("/")

    async def get_book(self, isbn: str) -> dict[str, object]:
        """Fetch a book by identifier."""
        return await self._get(f"/isbn/{quote(isbn, safe='')}")

    async def books_by_author(self, author: str) -> dict[str, object]:
        """Fetch books by author."""
        return await self._get(f"/author/{quote(author, safe='')}")

    async def books_by_title(self, title: str) -> dict[str, object]:
        """Fetch books by title."""
        return await self._get(f"/title/{quote(title, safe='')}")

    async def get_reviews(self, isbn: str) -> dict[str, str]:
        """Fetch the reviews on a book."""
        return await self._get(f"/review/{quote(isbn, safe='')}")

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _get(self, path: str) -> dict:
        response = await self.http_client.get(f"{self.base_url}{path}", timeout=10)
        response.raise_for_status()
        return response.json()
