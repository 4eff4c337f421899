"""FastAPI application factory."""

import logging

from fastapi import Depends, FastAPI, Header, Request, status
from fastapi.responses import JSONResponse

from book_catalog.api.models import Credentials, LoginResponse, MessageResponse
from book_catalog.app_logging import configure_logging
from book_catalog.containers import AppContainer
from book_catalog.domain.errors import (
    CatalogError,
    ConflictError,
    InvalidCredentialsError,
    InvalidInputError,
    NotFoundError,
    ReviewNotFoundError,
    UnauthorizedError,
)
from book_catalog.domain.models import BookRecord

_ERROR_STATUS: tuple[tuple[type[CatalogError], int], ...] = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ReviewNotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED),
    (InvalidInputError, status.HTTP_400_BAD_REQUEST),
)


def _get_container(request: Request) -> AppContainer:
    return request.app.state.container


def _bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def require_caller(
    authorization: str | None = Header(default=None),
    container: AppContainer = Depends(_get_container),
) -> str:
    """Resolve the caller identity from the session token or reject."""
    identity = container.session_service.resolve_identity(
        _bearer_token(authorization)
    )
    if identity is None:
        raise UnauthorizedError()
    return identity


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(
        request: Request, exc: CatalogError
    ) -> JSONResponse:
        status_code = _status_for(exc)
        if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error("Unmapped catalog error: %s", exc)
        return JSONResponse(status_code=status_code, content={"message": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/register", status_code=status.HTTP_201_CREATED)
    async def register(
        body: Credentials | None = None,
        container: AppContainer = Depends(_get_container),
    ) -> MessageResponse:
        """Register a new user."""
        credentials = body or Credentials()
        container.user_service.register(credentials.username, credentials.password)
        return MessageResponse(message="User registered successfully")

    @app.get("/")
    async def list_books(
        container: AppContainer = Depends(_get_container),
    ) -> dict[str, object]:
        """Return every book keyed by identifier."""
        return _serialize_books(await container.catalog_service.get_all())

    @app.get("/isbn/{isbn}")
    async def get_book(
        isbn: str, container: AppContainer = Depends(_get_container)
    ) -> dict[str, object]:
        """Return a book by identifier."""
        return _serialize_book(await container.catalog_service.get_by_identifier(isbn))

    @app.get("/author/{author}")
    async def books_by_author(
        author: str, container: AppContainer = Depends(_get_container)
    ) -> dict[str, object]:
        """Return every book by the author."""
        return _serialize_books(await container.lookup_service.find_by_author(author))

    @app.get("/title/{title}")
    async def books_by_title(
        title: str, container: AppContainer = Depends(_get_container)
    ) -> dict[str, object]:
        """Return every book with the title."""
        return _serialize_books(await container.lookup_service.find_by_title(title))

    @app.get("/review/{isbn}")
    async def get_reviews(
        isbn: str, container: AppContainer = Depends(_get_container)
    ) -> dict[str, str]:
        """Return the reviews on a book."""
        return container.review_service.get_reviews(isbn)

    @app.post("/customer/login")
    async def login(
        body: Credentials | None = None,
        container: AppContainer = Depends(_get_container),
    ) -> LoginResponse:
        """Log in and receive a session token."""
        credentials = body or Credentials()
        session = container.session_service.login(
            credentials.username, credentials.password
        )
        return LoginResponse(
            message="User successfully logged in",
            access_token=session.token,
            expires_at=session.expires_at.isoformat(),
        )

    @app.post("/customer/logout")
    async def logout(
        authorization: str | None = Header(default=None),
        caller: str = Depends(require_caller),
        container: AppContainer = Depends(_get_container),
    ) -> MessageResponse:
        """Invalidate the current session token."""
        token = _bearer_token(authorization)
        if token:
            container.session_service.logout(token)
        return MessageResponse(message=f"User {caller} logged out")

    @app.put("/customer/auth/review/{isbn}")
    async def put_review(
        isbn: str,
        review: str | None = None,
        caller: str = Depends(require_caller),
        container: AppContainer = Depends(_get_container),
    ) -> MessageResponse:
        """Add or replace the caller's review on a book."""
        container.review_service.upsert_review(isbn, caller, review)
        return MessageResponse(message="Review added/modified successfully")

    @app.delete("/customer/auth/review/{isbn}")
    async def delete_review(
        isbn: str,
        caller: str = Depends(require_caller),
        container: AppContainer = Depends(_get_container),
    ) -> MessageResponse:
        """Delete the caller's review on a book."""
        container.review_service.delete_review(isbn, caller)
        return MessageResponse(message="Review deleted successfully")

    return app


def _status_for(exc: CatalogError) -> int:
    for error_type, status_code in _ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _serialize_book(book: BookRecord) -> dict[str, object]:
    return {
        "isbn": book.identifier,
        "title": book.title,
        "author": book.author,
        "description": book.description,
        "reviews": dict(book.reviews),
    }


def _serialize_books(books: dict[str, BookRecord]) -> dict[str, object]:
    return {key: _serialize_book(book) for key, book in books.items()}
