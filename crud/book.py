# crud/book.py
import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from database import init_db, make_engine, make_sessionmaker
from errors import BookNotFoundError
from models import Book as BookORM
from schemas import Book, BookCreate, BookUpdate, parse_book

logger = logging.getLogger(__name__)


async def get_books(db: AsyncSession) -> List[BookORM]:
    result = await db.execute(select(BookORM).order_by(BookORM.id))
    return result.scalars().all()


async def get_book(db: AsyncSession, book_id: int) -> BookORM:
    book = await db.get(BookORM, book_id)
    if book is None:
        logger.debug("Book %s not found", book_id)
        raise BookNotFoundError(book_id)
    return book


async def create_book(db: AsyncSession, book_data: BookCreate) -> BookORM:
    new_book = BookORM(**book_data.model_dump())
    db.add(new_book)
    await db.commit()
    await db.refresh(new_book)
    return new_book


async def update_book(db: AsyncSession, book_id: int, book_data: BookUpdate) -> BookORM:
    book = await get_book(db, book_id)
    for field, value in book_data.model_dump().items():
        setattr(book, field, value)
    await db.commit()
    await db.refresh(book)
    return book


async def delete_book(db: AsyncSession, book_id: int) -> None:
    book = await get_book(db, book_id)
    await db.delete(book)
    await db.commit()


class SqlBookRegistry:
    """Book registry backed by SQLAlchemy, one session per operation."""

    def __init__(self, database_url: str, seed: list[dict] | None = None):
        self.engine = make_engine(database_url)
        self.sessions = make_sessionmaker(self.engine)
        self.seed = seed or []

    async def init(self) -> None:
        await init_db(self.engine, self.seed)

    async def dispose(self) -> None:
        await self.engine.dispose()

    async def list_books(self) -> List[Book]:
        async with self.sessions() as db:
            return [Book.model_validate(b) for b in await get_books(db)]

    async def get_book(self, book_id: int) -> Book:
        async with self.sessions() as db:
            return Book.model_validate(await get_book(db, book_id))

    async def create_book(self, book_data: BookCreate) -> Book:
        data = parse_book(BookCreate, book_data)
        async with self.sessions() as db:
            book = Book.model_validate(await create_book(db, data))
        logger.info("Created book %s (%s)", book.id, book.title)
        return book

    async def update_book(self, book_id: int, book_data: BookUpdate) -> Book:
        data = parse_book(BookUpdate, book_data)
        async with self.sessions() as db:
            book = Book.model_validate(await update_book(db, book_id, data))
        logger.info("Updated book %s", book_id)
        return book

    async def delete_book(self, book_id: int) -> None:
        async with self.sessions() as db:
            await delete_book(db, book_id)
        logger.info("Deleted book %s", book_id)
