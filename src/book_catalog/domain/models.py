"""Domain models for the book catalog."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class UserAccount:
    """Represents a registered user."""

    identity: str
    credential: str


@dataclass
class BookRecord:
    """Represents a book and the reviews left on it."""

    identifier: str
    title: str
    author: str
    description: str | None = None
    reviews: dict[str, str] = field(default_factory=dict)

    def snapshot(self) -> "BookRecord":
        """Return a copy that shares no mutable state with this record."""
        return BookRecord(
            identifier=self.identifier,
            title=self.title,
            author=self.author,
            description=self.description,
            reviews=dict(self.reviews),
        )
