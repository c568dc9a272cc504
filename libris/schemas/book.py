import datetime as dt
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator

from libris.isbn import ISBN_MAX_LENGTH, is_valid_isbn
from libris.models.book import Genre
from libris.schemas.author import AuthorResponse


def _check_isbn(value: str) -> str:
    if len(value) > ISBN_MAX_LENGTH:
        raise ValueError(f"isbn must be at most {ISBN_MAX_LENGTH} characters")
    if not is_valid_isbn(value):
        raise ValueError("isbn must be a valid ISBN-10 or ISBN-13")
    return value


Isbn = Annotated[str, AfterValidator(_check_isbn)]


class BookCreate(BaseModel):
    title: str = Field(..., min_length=1)
    isbn: Isbn | None = Field(None, description="Generated when omitted")
    published_date: dt.date | None = None
    genre: Genre | None = None
    author_id: str = Field(..., min_length=1)


class BookUpdate(BaseModel):
    title: str | None = Field(None, min_length=1)
    isbn: Isbn | None = None
    published_date: dt.date | None = None
    genre: Genre | None = None
    author_id: str | None = Field(None, min_length=1)

    @field_validator("title", "isbn", "author_id")
    @classmethod
    def not_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("may not be null")
        return value


class BookResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    isbn: str
    published_date: dt.date | None
    genre: Genre | None
    author_id: str
    author: AuthorResponse
    created_at: dt.datetime
    updated_at: dt.datetime


class BookQuery(BaseModel):
    title: str | None = None
    isbn: str | None = None
    genre: str | None = None
    author_id: str | None = None
    published_date: dt.date | None = None
