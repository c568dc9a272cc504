import datetime as dt

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AuthorCreate(BaseModel):
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    bio: str | None = None
    birth_date: dt.date | None = None


class AuthorUpdate(BaseModel):
    first_name: str | None = Field(None, min_length=1)
    last_name: str | None = Field(None, min_length=1)
    bio: str | None = None
    birth_date: dt.date | None = None

    @field_validator("first_name", "last_name")
    @classmethod
    def not_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("may not be null")
        return value


class AuthorResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    first_name: str
    last_name: str
    bio: str | None
    birth_date: dt.date | None
    created_at: dt.datetime
    updated_at: dt.datetime


class AuthorQuery(BaseModel):
    first_name: str | None = None
    last_name: str | None = None
    name: str | None = None
    birth_date: dt.date | None = None
