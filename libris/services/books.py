import logging
from typing import Any

from sqlalchemy import String, cast, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from libris.errors import DuplicateIsbnError, InvalidReferenceError, NotFoundError
from libris.isbn import generate_isbn
from libris.models import Book
from libris.schemas.book import BookCreate, BookQuery, BookUpdate
from libris.schemas.page import PageParams
from libris.services.authors import find_author
from libris.services.query import Paginated, contains, paginate, same_day

logger = logging.getLogger(__name__)


async def get_book(session: AsyncSession, book_id: str) -> Book:
    stmt = (
        select(Book)
        .where(Book.id == book_id)
        .options(selectinload(Book.author))
        .execution_options(populate_existing=True)
    )
    book = (await session.execute(stmt)).scalar_one_or_none()
    if book is None:
        raise NotFoundError("Book", book_id)
    return book


async def _require_author(session: AsyncSession, author_id: str) -> None:
    if await find_author(session, author_id) is None:
        raise InvalidReferenceError(author_id)


async def _commit_or_conflict(
    session: AsyncSession, isbn: str | None, author_id: str | None
) -> None:
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        if isbn is not None:
            taken = await session.execute(select(Book.id).where(Book.isbn == isbn))
            if taken.scalar_one_or_none() is not None:
                raise DuplicateIsbnError(isbn) from None
        # The author was deleted between the existence check and the write.
        if author_id is not None and await find_author(session, author_id) is None:
            raise InvalidReferenceError(author_id) from None
        raise


async def create_book(session: AsyncSession, data: BookCreate) -> Book:
    await _require_author(session, data.author_id)

    values: dict[str, Any] = data.model_dump()
    if not values["isbn"]:
        values["isbn"] = generate_isbn()
        logger.debug("Generated ISBN %s for %r", values["isbn"], data.title)

    book = Book(**values)
    session.add(book)
    await _commit_or_conflict(session, values["isbn"], values["author_id"])
    logger.info("Created book %s (%s) for author %s", book.id, book.isbn, book.author_id)
    return await get_book(session, book.id)


async def list_books(
    session: AsyncSession, query: BookQuery, params: PageParams
) -> Paginated[Book]:
    stmt = select(Book).options(selectinload(Book.author))
    if query.title:
        stmt = stmt.where(contains(Book.title, query.title))
    if query.isbn:
        stmt = stmt.where(contains(Book.isbn, query.isbn))
    if query.genre:
        stmt = stmt.where(contains(cast(Book.genre, String), query.genre))
    if query.author_id:
        stmt = stmt.where(Book.author_id == query.author_id)
    if query.published_date:
        stmt = stmt.where(same_day(Book.published_date, query.published_date))
    return await paginate(session, stmt, params, Book.created_at, Book.id)


async def update_book(session: AsyncSession, book_id: str, data: BookUpdate) -> Book:
    changes = data.model_dump(exclude_unset=True)
    if "author_id" in changes:
        await _require_author(session, changes["author_id"])

    book = await get_book(session, book_id)
    for key, value in changes.items():
        setattr(book, key, value)
    await _commit_or_conflict(session, changes.get("isbn"), changes.get("author_id"))
    return await get_book(session, book_id)


async def delete_book(session: AsyncSession, book_id: str) -> None:
    book = await get_book(session, book_id)
    await session.delete(book)
    await session.commit()
    logger.info("Deleted book %s", book_id)
