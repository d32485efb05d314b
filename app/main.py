"""FastAPI entrypoint for the home library service."""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.db.repository import get_repository, reset_repository
from app.db.sample_data import sample_books
from app.routers import books
from app.services.exceptions import (
    BookAlreadyLentError,
    BookNotFoundError,
    BookServiceError,
    InvalidBorrowerError,
    InvalidRatingError,
)
from app.utils.logger import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.seed_sample_data:
        repository = reset_repository(sample_books())
        logger.info("Seeded %d sample books", len(repository))
    yield


app = FastAPI(
    title="Home Library API",
    version="0.1.0",
    description="Track the books you own, what you have read, how you rated it and who borrowed it.",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ERROR_STATUS = {
    BookNotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidRatingError: status.HTTP_400_BAD_REQUEST,
    InvalidBorrowerError: status.HTTP_400_BAD_REQUEST,
    BookAlreadyLentError: status.HTTP_409_CONFLICT,
}


@app.exception_handler(BookServiceError)
async def book_service_error_handler(request: Request, exc: BookServiceError):
    status_code = ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


@app.get("/health", tags=["health"])
async def healthcheck():
    """Basic health check."""
    return {"status": "ok", "env": settings.app_env, "books": len(get_repository())}


app.include_router(books.router, prefix="/api/books", tags=["books"])
