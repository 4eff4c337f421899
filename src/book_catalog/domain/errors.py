"""Domain exceptions for the book catalog."""


class CatalogError(Exception):
    """Base exception for all catalog errors."""


class NotFoundError(CatalogError):
    """No record matches a key-based lookup."""


class BookNotFoundError(NotFoundError):
    """The book identifier is not in the catalog."""

    def __init__(self, identifier: str) -> None:
        super().__init__("Book not found")
        self.identifier = identifier


class NoMatchesError(NotFoundError):
    """An author or title lookup matched no books."""

    def __init__(self, field_name: str, value: str) -> None:
        if field_name == "author":
            message = "No books found for this author"
        else:
            message = f"No books found with this {field_name}"
        super().__init__(message)
        self.field_name = field_name
        self.value = value


class ReviewNotFoundError(CatalogError):
    """The caller has no review on the book."""

    def __init__(self, identifier: str, identity: str | None) -> None:
        super().__init__("Review not found for this user")
        self.identifier = identifier
        self.identity = identity


class ConflictError(CatalogError):
    """The identity is already registered."""

    def __init__(self, identity: str) -> None:
        super().__init__("Username already exists")
        self.identity = identity


class UnauthorizedError(CatalogError):
    """A mutation was attempted without an authenticated caller."""

    def __init__(self, message: str = "User not logged in") -> None:
        super().__init__(message)


class InvalidCredentialsError(CatalogError):
    """Login failed because the identity and credential do not match."""

    def __init__(self) -> None:
        super().__init__("Invalid username or password")


class InvalidInputError(CatalogError):
    """A required value is missing or empty."""

    def __init__(self, field_name: str) -> None:
        super().__init__(f"{field_name.capitalize()} is required")
        self.field_name = field_name
