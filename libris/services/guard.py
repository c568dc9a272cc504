import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from libris.errors import AuthorHasBooksError
from libris.models import Book

logger = logging.getLogger(__name__)


async def count_author_books(session: AsyncSession, author_id: str) -> int:
    stmt = select(func.count(Book.id)).where(Book.author_id == author_id)
    return (await session.execute(stmt)).scalar_one()


async def ensure_author_deletable(session: AsyncSession, author_id: str) -> None:
    """Raise AuthorHasBooksError if any book still references the author.

    Run it in the same transaction as the delete it protects.
    """
    book_count = await count_author_books(session, author_id)
    if book_count > 0:
        logger.warning("Refusing to delete author %s: %d associated books", author_id, book_count)
        raise AuthorHasBooksError(author_id, book_count)
