from collections.abc import AsyncIterator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from libris.config import DATABASE_URL


def _casefold(value: str | None) -> str | None:
    return value.casefold() if value is not None else None


def _configure_sqlite(dbapi_connection, connection_record) -> None:
    # SQLite leaves foreign keys off per connection, and its lower() only folds ASCII.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
    dbapi_connection.create_function("casefold", 1, _casefold)


def install_sqlite_hooks(target: AsyncEngine) -> None:
    if target.dialect.name == "sqlite":
        event.listen(target.sync_engine, "connect", _configure_sqlite)


engine = create_async_engine(DATABASE_URL, echo=False)
install_sqlite_hooks(engine)
async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


async def get_session() -> AsyncIterator[AsyncSession]:
    async with async_session() as session:
        yield session
