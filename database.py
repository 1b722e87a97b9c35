# database.py
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def make_engine(database_url: str) -> AsyncEngine:
    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    return create_async_engine(database_url, connect_args=connect_args)


def make_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def init_db(engine: AsyncEngine, seed: list[dict] | None = None) -> None:
    """Create tables and load the seed rows into an empty books table."""
    from models import Book  # noqa: F401  registers the table on Base

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        if seed:
            count = (await conn.execute(select(func.count()).select_from(Book.__table__))).scalar_one()
            if count == 0:
                await conn.execute(Book.__table__.insert(), seed)
