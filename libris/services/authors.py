import logging

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from libris.errors import AuthorHasBooksError, NotFoundError
from libris.models import Author, Book
from libris.schemas.author import AuthorCreate, AuthorQuery, AuthorUpdate
from libris.schemas.page import PageParams
from libris.services.guard import count_author_books, ensure_author_deletable
from libris.services.query import Paginated, contains, paginate, same_day

logger = logging.getLogger(__name__)


async def find_author(session: AsyncSession, author_id: str) -> Author | None:
    result = await session.execute(select(Author).where(Author.id == author_id))
    return result.scalar_one_or_none()


async def get_author(session: AsyncSession, author_id: str) -> Author:
    author = await find_author(session, author_id)
    if author is None:
        raise NotFoundError("Author", author_id)
    return author


async def create_author(session: AsyncSession, data: AuthorCreate) -> Author:
    author = Author(**data.model_dump())
    session.add(author)
    await session.commit()
    await session.refresh(author)
    logger.info("Created author %s (%s %s)", author.id, author.first_name, author.last_name)
    return author


async def list_authors(
    session: AsyncSession, query: AuthorQuery, params: PageParams
) -> Paginated[Author]:
    stmt = select(Author)
    if query.first_name:
        stmt = stmt.where(contains(Author.first_name, query.first_name))
    if query.last_name:
        stmt = stmt.where(contains(Author.last_name, query.last_name))
    if query.name:
        stmt = stmt.where(or_(contains(Author.first_name, query.name), contains(Author.last_name, query.name)))
    if query.birth_date:
        stmt = stmt.where(same_day(Author.birth_date, query.birth_date))
    return await paginate(session, stmt, params, Author.created_at, Author.id)


async def update_author(session: AsyncSession, author_id: str, data: AuthorUpdate) -> Author:
    author = await get_author(session, author_id)
    for key, value in data.model_dump(exclude_unset=True).items():
        setattr(author, key, value)
    await session.commit()
    await session.refresh(author)
    return author


async def delete_author(session: AsyncSession, author_id: str) -> None:
    author = await get_author(session, author_id)
    await ensure_author_deletable(session, author_id)
    await session.delete(author)
    try:
        await session.commit()
    except IntegrityError:
        # A book committed after the guard ran; the foreign key caught it.
        await session.rollback()
        book_count = await count_author_books(session, author_id)
        if book_count > 0:
            logger.warning("Refusing to delete author %s: %d associated books", author_id, book_count)
            raise AuthorHasBooksError(author_id, book_count) from None
        raise
    logger.info("Deleted author %s", author_id)


async def list_author_books(
    session: AsyncSession, author_id: str, params: PageParams
) -> Paginated[Book]:
    await get_author(session, author_id)
    stmt = select(Book).where(Book.author_id == author_id)
    return await paginate(session, stmt, params, Book.created_at, Book.id)
