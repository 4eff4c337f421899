"""In-memory user registry store."""

import threading
from dataclasses import dataclass, field

from book_catalog.domain.models import UserAccount
from book_catalog.services.users import UserRepository


@dataclass
class InMemoryUserRepository(UserRepository):
    """Dict-backed user store guarded by a lock."""

    users: dict[str, UserAccount] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def get_by_identity(self, identity: str) -> UserAccount | None:
        """Return the account for an identity, if present."""
        with self._lock:
            return self.users.get(identity)

    def add_user(self, account: UserAccount) -> bool:
        """Store the account unless the identity is already taken."""
        with self._lock:
            if account.identity in self.users:
                return False
            self.users[account.identity] = account
            return True
