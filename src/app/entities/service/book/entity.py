"""Entity: Book."""

from typing import Any

from pydantic import Field

from src.app.entities.core._base import Entity

# Fields replaced wholesale by an update; id and timestamps belong to storage.
MUTABLE_FIELDS = ("title", "author", "isbn", "price")


class Book(Entity):
    """Book entity representing a catalog record.

    This is the domain model handed to and returned by the repository.
    The identifier is assigned by storage unless the client supplies one.
    """

    title: str = Field(description="Title")
    author: str = Field(description="Author")
    isbn: str | None = Field(default=None, description="ISBN")
    price: float | None = Field(default=None, description="Price")

    def __eq__(self, other: Any) -> bool:
        """Compare books by business attributes, ignoring timestamps."""
        if not isinstance(other, Book):
            return False

        return self.id == other.id and all(
            getattr(self, name) == getattr(other, name) for name in MUTABLE_FIELDS
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((self.id, *(getattr(self, name) for name in MUTABLE_FIELDS)))
