"""Entity package: Book."""

from .entity import MUTABLE_FIELDS, Book
from .errors import BookAlreadyExistsError, BookNotFoundError
from .repository import BookRepository
from .table import BookTable

__all__ = [
    "MUTABLE_FIELDS",
    "Book",
    "BookAlreadyExistsError",
    "BookNotFoundError",
    "BookRepository",
    "BookTable",
]
