from fastapi import Query

from libris.config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from libris.schemas.page import PageParams


def page_params(
    page: int = Query(1, ge=1, description="1-based page number"),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Page size"),
) -> PageParams:
    return PageParams(page=page, limit=limit)
