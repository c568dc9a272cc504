from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from libris.database import get_session
from libris.models import Genre
from libris.schemas.book import BookCreate, BookQuery, BookResponse, BookUpdate
from libris.schemas.page import Page, PageParams
from libris.routers.params import page_params
from libris.services import books as service

router = APIRouter(prefix="/api/books", tags=["books"])


@router.get("/genres", response_model=list[str])
async def list_genres():
    return [genre.value for genre in Genre]


@router.get("", response_model=Page[BookResponse])
async def list_books(
    title: str | None = Query(None, description="Case-insensitive partial match"),
    isbn: str | None = Query(None, description="Case-insensitive partial match"),
    genre: str | None = Query(None, description="Case-insensitive partial match"),
    author_id: str | None = None,
    published_date: date | None = Query(None, description="Published on this day (YYYY-MM-DD)"),
    params: PageParams = Depends(page_params),
    session: AsyncSession = Depends(get_session),
):
    query = BookQuery(
        title=title,
        isbn=isbn,
        genre=genre,
        author_id=author_id,
        published_date=published_date,
    )
    result = await service.list_books(session, query, params)
    return Page[BookResponse](data=result.items, total=result.total, page=result.page, limit=result.limit)


@router.get("/{book_id}", response_model=BookResponse)
async def get_book(book_id: str, session: AsyncSession = Depends(get_session)):
    return await service.get_book(session, book_id)


@router.post("", response_model=BookResponse, status_code=201)
async def create_book(data: BookCreate, session: AsyncSession = Depends(get_session)):
    return await service.create_book(session, data)


@router.patch("/{book_id}", response_model=BookResponse)
async def update_book(
    book_id: str, data: BookUpdate, session: AsyncSession = Depends(get_session)
):
    return await service.update_book(session, book_id, data)


@router.delete("/{book_id}", status_code=204)
async def delete_book(book_id: str, session: AsyncSession = Depends(get_session)):
    await service.delete_book(session, book_id)
