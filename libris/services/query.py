"""Filter and pagination helpers shared by the author and book services."""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, Select, String, and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from libris.schemas.page import PageParams

T = TypeVar("T")


@dataclass
class Paginated(Generic[T]):
    items: list[T]
    total: int
    page: int
    limit: int


def contains(column: Any, value: str) -> ColumnElement[bool]:
    """Case-insensitive substring match; wildcards in ``value`` match literally.

    Relies on the ``casefold`` SQL function registered by ``install_sqlite_hooks``.
    """
    return func.casefold(column, type_=String).contains(value.casefold(), autoescape=True)


def same_day(column: Any, day: date) -> ColumnElement[bool]:
    return and_(column >= day, column < day + timedelta(days=1))


async def paginate(
    session: AsyncSession,
    stmt: Select,
    params: PageParams,
    *order_by: Any,
) -> Paginated:
    total = (await session.execute(
        select(func.count()).select_from(stmt.order_by(None).subquery())
    )).scalar_one()
    result = await session.execute(
        stmt.order_by(*order_by).offset(params.offset).limit(params.limit)
    )
    return Paginated(
        items=list(result.scalars().all()),
        total=total,
        page=params.page,
        limit=params.limit,
    )
