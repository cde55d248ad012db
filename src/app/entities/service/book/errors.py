"""Errors raised by the book repository."""


class BookNotFoundError(LookupError):
    """An identifier-targeted operation addressed a book that is not stored."""

    def __init__(self, book_id: int | None) -> None:
        super().__init__("Book not found")
        self.book_id = book_id


class BookAlreadyExistsError(ValueError):
    """A book was added with an identifier that is already taken."""

    def __init__(self, book_id: int | None) -> None:
        super().__init__(f"Book with id {book_id} already exists")
        self.book_id = book_id
