import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from libris.errors import LibrisError
from libris.routers import authors, books, health

logger = logging.getLogger(__name__)


async def libris_error_handler(request: Request, exc: LibrisError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(status_code=409, content={"detail": "Duplicate key error"})


def create_app() -> FastAPI:
    app = FastAPI(title="Libris", version="0.1.0")
    app.include_router(authors.router)
    app.include_router(books.router)
    app.include_router(health.router)
    app.add_exception_handler(LibrisError, libris_error_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    return app


app = create_app()
