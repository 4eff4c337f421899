"""User registration and credential checks."""

import hmac
import logging
from dataclasses import dataclass, field
from typing import Protocol

from book_catalog.domain.errors import ConflictError, InvalidInputError
from book_catalog.domain.models import UserAccount

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user accounts."""

    def get_by_identity(self, identity: str) -> UserAccount | None:
        """Return the account for an identity, if present."""

    def add_user(self, account: UserAccount) -> bool:
        """Store the account unless the identity is taken; report success."""


class CredentialVerifier(Protocol):
    """Compares a presented credential with the stored one."""

    def verify(self, presented: str, stored: str) -> bool:
        """Return True when the presented credential matches."""


class PlainCredentialVerifier(CredentialVerifier):
    """Verbatim comparison of cleartext credentials."""

    def verify(self, presented: str, stored: str) -> bool:
        """Compare credentials exactly, in constant time."""
        return hmac.compare_digest(presented.encode(), stored.encode())


@dataclass
class UserService:
    """Application service for the user registry."""

    repository: UserRepository
    verifier: CredentialVerifier = field(default_factory=PlainCredentialVerifier)

    def register(self, identity: str | None, credential: str | None) -> UserAccount:
        """Register a new account, rejecting duplicate identities."""
        if not identity:
            raise InvalidInputError("username")
        if not credential:
            raise InvalidInputError("password")
        account = UserAccount(identity=identity, credential=credential)
        if not self.repository.add_user(account):
            raise ConflictError(identity)
        _logger.info("Registered user: identity=%s", identity)
        return account

    def exists(self, identity: str) -> bool:
        """Return whether the identity is registered."""
        return self.repository.get_by_identity(identity) is not None

    def authenticate(self, identity: str, credential: str) -> bool:
        """Return True only for an exact identity and credential match."""
        account = self.repository.get_by_identity(identity)
        if account is None:
            return False
        return self.verifier.verify(credential, account.credential)
