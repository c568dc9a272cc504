from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from libris.database import get_session
from libris.schemas.author import AuthorCreate, AuthorQuery, AuthorResponse, AuthorUpdate
from libris.schemas.book import BookResponse
from libris.schemas.page import Page, PageParams
from libris.routers.params import page_params
from libris.services import authors as service

router = APIRouter(prefix="/api/authors", tags=["authors"])


@router.post("", response_model=AuthorResponse, status_code=201)
async def create_author(data: AuthorCreate, session: AsyncSession = Depends(get_session)):
    return await service.create_author(session, data)


@router.get("", response_model=Page[AuthorResponse])
async def list_authors(
    first_name: str | None = Query(None, description="Case-insensitive partial match"),
    last_name: str | None = Query(None, description="Case-insensitive partial match"),
    name: str | None = Query(None, description="Partial match on first or last name"),
    birth_date: date | None = Query(None, description="Born on this day (YYYY-MM-DD)"),
    params: PageParams = Depends(page_params),
    session: AsyncSession = Depends(get_session),
):
    query = AuthorQuery(first_name=first_name, last_name=last_name, name=name, birth_date=birth_date)
    result = await service.list_authors(session, query, params)
    return Page[AuthorResponse](data=result.items, total=result.total, page=result.page, limit=result.limit)


@router.get("/{author_id}", response_model=AuthorResponse)
async def get_author(author_id: str, session: AsyncSession = Depends(get_session)):
    return await service.get_author(session, author_id)


@router.get("/{author_id}/books", response_model=Page[BookResponse])
async def list_author_books(
    author_id: str,
    params: PageParams = Depends(page_params),
    session: AsyncSession = Depends(get_session),
):
    result = await service.list_author_books(session, author_id, params)
    return Page[BookResponse](data=result.items, total=result.total, page=result.page, limit=result.limit)


@router.patch("/{author_id}", response_model=AuthorResponse)
async def update_author(
    author_id: str, data: AuthorUpdate, session: AsyncSession = Depends(get_session)
):
    return await service.update_author(session, author_id, data)


@router.delete("/{author_id}", status_code=204)
async def delete_author(author_id: str, session: AsyncSession = Depends(get_session)):
    await service.delete_author(session, author_id)
