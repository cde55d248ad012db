"""Book database table model."""

from sqlmodel import Field

from src.app.entities.core._base import EntityTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books.

    Kept separate from the Book entity so rows never leak out of the
    repository.
    """

    __tablename__ = "books"

    title: str
    author: str = Field(index=True)
    isbn: str | None = None
    price: float | None = None
