"""Book repository: the data access and mutation layer of the catalog."""

from collections.abc import Iterable

from loguru import logger
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, col, select

from .entity import MUTABLE_FIELDS, Book
from .errors import BookAlreadyExistsError, BookNotFoundError
from .table import BookTable


class BookRepository:
    """Data-access layer for books.

    Every read bypasses the session's identity map (``populate_existing``) so
    callers always see what is committed in storage, and every mutation
    commits exactly once before returning. Storage errors propagate unchanged.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @staticmethod
    def _to_entity(row: BookTable) -> Book:
        return Book.model_validate(row, from_attributes=True)

    def _get_row(self, book_id: int | None) -> BookTable:
        row = None
        if book_id is not None:
            row = self._session.get(BookTable, book_id, populate_existing=True)
        if row is None:
            logger.warning("Book {} not found", book_id)
            raise BookNotFoundError(book_id)
        return row

    def _id_taken(self, book_id: int) -> bool:
        row = self._session.get(BookTable, book_id, populate_existing=True)
        return row is not None

    def list_all(self) -> list[Book]:
        """Return every stored book in storage (primary key) order."""
        statement = (
            select(BookTable)
            .order_by(col(BookTable.id))
            .execution_options(populate_existing=True)
        )
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def get_by_id(self, book_id: int) -> Book:
        """Return the book with ``book_id`` or raise BookNotFoundError."""
        return self._to_entity(self._get_row(book_id))

    def search(self, term: str | None) -> list[Book]:
        """Return books whose title or author contains ``term``.

        Matching is a case-insensitive literal substring match; ``%`` and
        ``_`` in the term are escaped. A ``None`` or empty term matches all
        books.
        """
        if not term:
            return self.list_all()

        statement = (
            select(BookTable)
            .where(
                or_(
                    col(BookTable.title).icontains(term, autoescape=True),
                    col(BookTable.author).icontains(term, autoescape=True),
                )
            )
            .order_by(col(BookTable.id))
            .execution_options(populate_existing=True)
        )
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def add(self, book: Book) -> Book:
        """Persist a new book and return it as stored.

        The id is left to storage when ``book.id`` is None. A client-supplied
        id that is already taken raises BookAlreadyExistsError; nothing is
        overwritten. Any other integrity failure propagates unchanged.
        """
        row = BookTable(**book.model_dump(include={"id", *MUTABLE_FIELDS}))
        self._session.add(row)
        try:
            self._session.commit()
        except IntegrityError as e:
            self._session.rollback()
            if book.id is None or not self._id_taken(book.id):
                raise
            logger.warning("Rejected duplicate book id {}", book.id)
            raise BookAlreadyExistsError(book.id) from e

        self._session.refresh(row)
        logger.info("Book {} added", row.id)
        return self._to_entity(row)

    def update(self, book: Book) -> Book:
        """Overwrite every mutable field of the stored book with ``book``'s.

        Fields left as None on ``book`` are written as None. Returns the
        record re-read from storage after the commit.
        """
        row = self._get_row(book.id)
        for name in MUTABLE_FIELDS:
            setattr(row, name, getattr(book, name))

        self._session.add(row)
        self._session.commit()
        self._session.refresh(row)
        logger.info("Book {} updated", row.id)
        return self._to_entity(row)

    def delete(self, book_id: int) -> None:
        """Remove the book with ``book_id`` or raise BookNotFoundError."""
        row = self._get_row(book_id)
        self._session.delete(row)
        self._session.commit()
        logger.info("Book {} deleted", book_id)

    @staticmethod
    def distinct_authors(books: Iterable[Book]) -> set[str]:
        """Return each author of ``books`` exactly once. No storage access."""
        return {book.author for book in books}
