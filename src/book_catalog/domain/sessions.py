"""Domain models for login sessions."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SessionRecord:
    """Represents an issued session token."""

    token: str
    identity: str
    expires_at: datetime
