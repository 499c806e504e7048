"""Persistence of book records.

A :class:`BookStore` owns one engine and is handed to the app at startup.
Each operation runs as a single statement in its own session, so a failure
never leaves a partial write behind.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import delete, select, update
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from bookcatalog.database import Base, create_engine
from bookcatalog.errors import StorageError
from bookcatalog.models import Book

logger = logging.getLogger(__name__)


def _engine_message(exc: Exception) -> str:
    """Return the driver's own error text, without SQLAlchemy's decoration."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


class BookStore:
    def __init__(self, url: str, echo: bool = False) -> None:
        self.url = url
        self.engine = create_engine(url, echo=echo)
        self._sessions = async_sessionmaker(self.engine, class_=AsyncSession, expire_on_commit=False)

    @asynccontextmanager
    async def _session(self, action: str) -> AsyncIterator[AsyncSession]:
        async with self._sessions() as session:
            try:
                yield session
            except (SQLAlchemyError, OverflowError) as e:
                await session.rollback()
                logger.error("Storage %s failed: %s", action, e)
                raise StorageError(_engine_message(e)) from e

    async def initialize(self) -> None:
        """Create the books table if it does not exist yet. Safe to call on every startup."""
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except (SQLAlchemyError, OverflowError) as e:
            logger.error("Could not initialize store at %s: %s", self.url, e)
            raise StorageError(_engine_message(e)) from e
        logger.info("Books table ready (%s)", self.url)

    async def list_all(self) -> list[Book]:
        async with self._session("list") as session:
            result = await session.execute(select(Book).order_by(Book.id))
            return list(result.scalars().all())

    async def insert(
        self,
        title: str,
        author: str,
        year: int | None = None,
        genre: str | None = None,
    ) -> int:
        """Persist a new book and return the id storage assigned to it."""
        async with self._session("insert") as session:
            book = Book(title=title, author=author, year=year, genre=genre)
            session.add(book)
            await session.commit()
            logger.debug("Inserted book %d", book.id)
            return book.id

    async def update(
        self,
        book_id: int,
        title: str,
        author: str,
        year: int | None = None,
        genre: str | None = None,
    ) -> int:
        """Replace every field but the id. Returns the number of rows changed (0 or 1)."""
        async with self._session("update") as session:
            result = await session.execute(
                update(Book)
                .where(Book.id == book_id)
                .values(title=title, author=author, year=year, genre=genre)
                .execution_options(synchronize_session=False)
            )
            await session.commit()
            logger.debug("Updated book %d (%d row(s))", book_id, result.rowcount)
            return result.rowcount

    async def delete(self, book_id: int) -> int:
        """Remove a book. Returns the number of rows removed (0 or 1)."""
        async with self._session("delete") as session:
            result = await session.execute(
                delete(Book)
                .where(Book.id == book_id)
                .execution_options(synchronize_session=False)
            )
            await session.commit()
            logger.debug("Deleted book %d (%d row(s))", book_id, result.rowcount)
            return result.rowcount

    async def dispose(self) -> None:
        await self.engine.dispose()
