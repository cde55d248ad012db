"""Book API router with CRUD, search and author operations."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from src.app.api.http.deps import get_book_repository
from src.app.entities.service.book import (
    Book,
    BookAlreadyExistsError,
    BookNotFoundError,
    BookRepository,
)

router = APIRouter()


@router.get("", response_model=list[Book])
def list_books(repository: BookRepository = Depends(get_book_repository)) -> list[Book]:
    """List all books."""
    return repository.list_all()


@router.get("/search", response_model=list[Book])
def search_books(
    search_term: str | None = Query(default=None, alias="searchTerm"),
    repository: BookRepository = Depends(get_book_repository),
) -> list[Book]:
    """Search books by title or author."""
    return repository.search(search_term)


@router.get("/authors", response_model=list[str])
def list_authors(repository: BookRepository = Depends(get_book_repository)) -> list[str]:
    """List each author in the catalog once."""
    return sorted(repository.distinct_authors(repository.list_all()))


@router.get("/{book_id}", response_model=Book)
def get_book(
    book_id: int,
    repository: BookRepository = Depends(get_book_repository),
) -> Book:
    """Get a book by ID."""
    try:
        return repository.get_by_id(book_id)
    except BookNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@router.get("/{book_id}/title", response_model=str)
def get_book_title(
    book_id: int,
    repository: BookRepository = Depends(get_book_repository),
) -> str:
    """Get the title of a book."""
    try:
        return repository.get_by_id(book_id).title
    except BookNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
def create_book(
    book: Book,
    repository: BookRepository = Depends(get_book_repository),
) -> Book:
    """Create a new book."""
    try:
        return repository.add(book)
    except BookAlreadyExistsError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e


@router.put("/{book_id}", response_model=Book)
def update_book(
    book_id: int,
    book: Book,
    repository: BookRepository = Depends(get_book_repository),
) -> Book:
    """Replace a book's fields."""
    if book.id != book_id:
        raise HTTPException(status_code=400, detail="Invalid book ID")

    try:
        return repository.update(book)
    except BookNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(
    book_id: int,
    repository: BookRepository = Depends(get_book_repository),
) -> Response:
    """Delete a book."""
    try:
        repository.delete(book_id)
    except BookNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
