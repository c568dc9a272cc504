import enum
from datetime import UTC, date, datetime

from sqlalchemy import Date, DateTime, Enum, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from libris.database import Base
from libris.id import new_id
from libris.isbn import ISBN_MAX_LENGTH


class Genre(str, enum.Enum):
    FANTASY = "Fantasy"
    SCIENCE_FICTION = "Science Fiction"
    THRILLER = "Thriller"
    ROMANCE = "Romance"
    MYSTERY = "Mystery"
    HORROR = "Horror"
    BIOGRAPHY = "Biography"
    HISTORY = "History"
    CHILDREN = "Children"
    YOUNG_ADULT = "Young Adult"
    COMIC = "Comic"
    OTHER = "Other"


class Book(Base):
    __tablename__ = "books"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    isbn: Mapped[str] = mapped_column(String(ISBN_MAX_LENGTH), nullable=False, unique=True)
    published_date: Mapped[date | None] = mapped_column(Date)
    genre: Mapped[Genre | None] = mapped_column(
        Enum(Genre, native_enum=False, length=20, values_callable=lambda e: [m.value for m in e])
    )
    author_id: Mapped[str] = mapped_column(
        ForeignKey("authors.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, default=lambda: datetime.now(UTC))
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=lambda: datetime.now(UTC), onupdate=lambda: datetime.now(UTC))

    author: Mapped["Author"] = relationship(back_populates="books", lazy="selectin")
