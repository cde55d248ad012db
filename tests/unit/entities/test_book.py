"""Unit tests for the book entity package.

The repository is driven by a mocked session so the number of storage
writes and commits can be asserted exactly.
"""

from unittest.mock import Mock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from src.app.entities.service.book import (
    Book,
    BookAlreadyExistsError,
    BookNotFoundError,
    BookRepository,
    BookTable,
)


class TestBookTable:
    """Test the BookTable database model."""

    def test_table_name(self):
        assert BookTable.__tablename__ == "books"

    def test_entity_from_table_model(self):
        table = BookTable(id=3, title="Emma", author="Austen", isbn="123", price=2.5)

        book = Book.model_validate(table, from_attributes=True)

        assert book == Book(id=3, title="Emma", author="Austen", isbn="123", price=2.5)


class TestBookRepository:
    """Test the BookRepository data access layer."""

    def setup_method(self):
        """Set up test fixtures."""
        self.mock_session = Mock()
        self.repo = BookRepository(self.mock_session)

    def test_repository_initialization(self):
        assert self.repo._session == self.mock_session

    def test_get_existing_book(self):
        self.mock_session.get.return_value = BookTable(
            id=1, title="Dune", author="Herbert"
        )

        book = self.repo.get_by_id(1)

        self.mock_session.get.assert_called_once_with(
            BookTable, 1, populate_existing=True
        )
        assert book == Book(id=1, title="Dune", author="Herbert")
        self.mock_session.commit.assert_not_called()

    def test_get_nonexistent_book(self):
        self.mock_session.get.return_value = None

        with pytest.raises(BookNotFoundError):
            self.repo.get_by_id(404)

    def test_add_commits_once(self):
        book = Book(id=5, title="New", author="Writer")

        result = self.repo.add(book)

        self.mock_session.add.assert_called_once()
        added_table = self.mock_session.add.call_args[0][0]
        assert isinstance(added_table, BookTable)
        assert added_table.id == 5
        assert added_table.title == "New"
        assert added_table.author == "Writer"
        self.mock_session.commit.assert_called_once()
        self.mock_session.refresh.assert_called_once_with(added_table)
        assert result == book

    def test_add_duplicate_id_rolls_back(self):
        self.mock_session.commit.side_effect = IntegrityError(
            "INSERT INTO books", {}, Exception("UNIQUE constraint failed: books.id")
        )

        with pytest.raises(BookAlreadyExistsError) as exc_info:
            self.repo.add(Book(id=1, title="Dune", author="Herbert"))

        assert isinstance(exc_info.value.__cause__, IntegrityError)
        self.mock_session.rollback.assert_called_once()
        self.mock_session.refresh.assert_not_called()
        self.mock_session.get.assert_called_once_with(
            BookTable, 1, populate_existing=True
        )

    def test_add_other_integrity_error_with_free_id_propagates(self):
        error = IntegrityError("INSERT INTO books", {}, Exception("CHECK constraint"))
        self.mock_session.commit.side_effect = error
        self.mock_session.get.return_value = None

        with pytest.raises(IntegrityError) as exc_info:
            self.repo.add(Book(id=5, title="Dune", author="Herbert"))

        assert exc_info.value is error
        self.mock_session.rollback.assert_called_once()
        self.mock_session.refresh.assert_not_called()

    def test_add_integrity_error_without_id_propagates(self):
        error = IntegrityError("INSERT INTO books", {}, Exception("NOT NULL"))
        self.mock_session.commit.side_effect = error

        with pytest.raises(IntegrityError) as exc_info:
            self.repo.add(Book(title="Dune", author="Herbert"))

        assert exc_info.value is error
        self.mock_session.rollback.assert_called_once()

    def test_update_existing_book_overwrites_and_commits_once(self):
        row = BookTable(id=1, title="Dune", author="Herbert", isbn="1", price=9.0)
        self.mock_session.get.return_value = row

        result = self.repo.update(Book(id=1, title="Dune Messiah", author="Herbert"))

        assert row.title == "Dune Messiah"
        assert row.isbn is None
        assert row.price is None
        self.mock_session.commit.assert_called_once()
        self.mock_session.refresh.assert_called_once_with(row)
        assert result == Book(id=1, title="Dune Messiah", author="Herbert")

    def test_update_nonexistent_book_writes_nothing(self):
        self.mock_session.get.return_value = None

        with pytest.raises(BookNotFoundError) as exc_info:
            self.repo.update(Book(id=9, title="Ghost", author="Nobody"))

        assert exc_info.value.book_id == 9
        self.mock_session.add.assert_not_called()
        self.mock_session.commit.assert_not_called()

    def test_delete_existing_book(self):
        row = BookTable(id=1, title="Dune", author="Herbert")
        self.mock_session.get.return_value = row

        assert self.repo.delete(1) is None

        self.mock_session.delete.assert_called_once_with(row)
        self.mock_session.commit.assert_called_once()

    def test_delete_nonexistent_book(self):
        self.mock_session.get.return_value = None

        with pytest.raises(BookNotFoundError, match="Book not found"):
            self.repo.delete(1)

        self.mock_session.delete.assert_not_called()
        self.mock_session.commit.assert_not_called()

    def test_storage_errors_propagate_unchanged(self):
        error = OperationalError("SELECT", {}, Exception("database is locked"))
        self.mock_session.exec.side_effect = error

        with pytest.raises(OperationalError) as exc_info:
            self.repo.list_all()

        assert exc_info.value is error

    def test_search_skips_storage_filter_for_empty_term(self):
        self.mock_session.exec.return_value.all.return_value = []

        assert self.repo.search("") == []
        self.mock_session.exec.assert_called_once()

    def test_distinct_authors_needs_no_session(self):
        books = [
            Book(title="a", author="A"),
            Book(title="b", author="B"),
            Book(title="c", author="A"),
        ]

        assert BookRepository.distinct_authors(books) == {"A", "B"}
        self.mock_session.assert_not_called()
