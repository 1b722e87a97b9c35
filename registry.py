"""
In-memory book registry.

The registry owns the ordered collection of books and is the only place ids
are handed out. One lock guards both the collection and the id counter.
"""
import logging
import threading
from decimal import Decimal
from typing import Iterable, List

from errors import BookNotFoundError
from schemas import Book, BookCreate, BookUpdate, parse_book
from settings import Settings

logger = logging.getLogger(__name__)

SEED_BOOKS = [
    {"id": 1, "title": "1984", "author": "George Orwell", "price": Decimal("29.99"), "published_year": 1949},
    {"id": 2, "title": "To Kill a Mockingbird", "author": "Harper Lee", "price": Decimal("24.99"), "published_year": 1960},
    {"id": 3, "title": "The Great Gatsby", "author": "F. Scott Fitzgerald", "price": Decimal("19.99"), "published_year": 1925},
]

_MUTABLE_FIELDS = ("title", "author", "price", "published_year")


class BookRegistry:
    """CRUD operations for books held in process memory."""

    def __init__(self, books: Iterable = ()):
        self._lock = threading.Lock()
        self._books: List[Book] = []
        self._next_id = 1
        for book in books:
            record = Book.model_validate(book)
            if any(b.id == record.id for b in self._books):
                raise ValueError(f"Duplicate book id in initial data: {record.id}")
            self._books.append(record)
            self._next_id = max(self._next_id, record.id + 1)

    def _index_of(self, book_id: int) -> int:
        for i, book in enumerate(self._books):
            if book.id == book_id:
                return i
        logger.debug("Book %s not found", book_id)
        raise BookNotFoundError(book_id)

    async def list_books(self) -> List[Book]:
        with self._lock:
            return [b.model_copy() for b in self._books]

    async def get_book(self, book_id: int) -> Book:
        with self._lock:
            return self._books[self._index_of(book_id)].model_copy()

    async def create_book(self, book_data: BookCreate) -> Book:
        data = parse_book(BookCreate, book_data)
        with self._lock:
            book = Book(id=self._next_id, **data.model_dump())
            self._next_id += 1
            self._books.append(book)
        logger.info("Created book %s (%s)", book.id, book.title)
        return book.model_copy()

    async def update_book(self, book_id: int, book_data: BookUpdate) -> Book:
        data = parse_book(BookUpdate, book_data)
        with self._lock:
            book = self._books[self._index_of(book_id)]
            for field in _MUTABLE_FIELDS:
                setattr(book, field, getattr(data, field))
            updated = book.model_copy()
        logger.info("Updated book %s", book_id)
        return updated

    async def delete_book(self, book_id: int) -> None:
        with self._lock:
            del self._books[self._index_of(book_id)]
        logger.info("Deleted book %s", book_id)


def build_registry(settings: Settings):
    """Pick the registry implementation named by the settings."""
    seed = SEED_BOOKS if settings.SEED else []
    if settings.STORAGE == "sql":
        from crud.book import SqlBookRegistry

        return SqlBookRegistry(settings.DATABASE_URL, seed=seed)
    return BookRegistry(seed)
