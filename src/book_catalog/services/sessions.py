"""Login sessions backed by a TTL cache."""

import logging
import secrets
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from book_catalog.domain.errors import InvalidCredentialsError, InvalidInputError
from book_catalog.domain.sessions import SessionRecord
from book_catalog.services.cache import Cache
from book_catalog.services.users import UserService

_logger = logging.getLogger(__name__)

_KEY_PREFIX = "session:"


@dataclass
class SessionService:
    """Issues and resolves time-bounded session tokens."""

    user_service: UserService
    cache: Cache
    ttl_seconds: int = 3600

    def login(self, identity: str | None, credential: str | None) -> SessionRecord:
        """Check credentials and issue a new session token."""
        if not identity:
            raise InvalidInputError("username")
        if not credential:
            raise InvalidInputError("password")
        if not self.user_service.authenticate(identity, credential):
            _logger.warning("Login failed: identity=%s", identity)
            raise InvalidCredentialsError()
        session = SessionRecord(
            token=secrets.token_urlsafe(32),
            identity=identity,
            expires_at=datetime.now(tz=UTC) + timedelta(seconds=self.ttl_seconds),
        )
        self.cache.set(_KEY_PREFIX + session.token, session, self.ttl_seconds)
        _logger.info("User logged in: identity=%s", identity)
        return session

    def resolve_identity(self, token: str | None) -> str | None:
        """Return the identity for a live token, or None."""
        if not token:
            return None
        cached = self.cache.get(_KEY_PREFIX + token)
        if isinstance(cached, SessionRecord):
            return cached.identity
        return None

    def logout(self, token: str) -> None:
        """Invalidate a session token."""
        self.cache.delete(_KEY_PREFIX + token)
