"""
BookStore API entry point.

Run with: uvicorn main:app --reload

Missing books answer 404 with FastAPI's error shape, a JSON object
{"detail": "Kitap bulunamadı: <id>"}, rather than a bare string.
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Load environment variables from .env (optional) before reading settings
load_dotenv(Path(__file__).resolve().parent / ".env")

from errors import BookNotFoundError, InvalidBookError
from registry import build_registry
from schemas import Book, BookCreate, BookUpdate
from settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


def get_registry(request: Request):
    return request.app.state.registry


@router.get("", response_model=List[Book])
async def list_books(registry=Depends(get_registry)):
    return await registry.list_books()


@router.get("/{book_id}", response_model=Book)
async def get_book(book_id: int, registry=Depends(get_registry)):
    try:
        return await registry.get_book(book_id)
    except BookNotFoundError as e:
        raise HTTPException(404, str(e))


@router.post("", response_model=Book, status_code=201)
async def create_book(
    book: BookCreate,
    request: Request,
    response: Response,
    registry=Depends(get_registry),
):
    created = await registry.create_book(book)
    response.headers["Location"] = str(request.url_for("get_book", book_id=created.id))
    return created


@router.put("/{book_id}", status_code=204)
async def update_book(book_id: int, book: BookUpdate, registry=Depends(get_registry)):
    try:
        await registry.update_book(book_id, book)
    except BookNotFoundError as e:
        raise HTTPException(404, str(e))
    return Response(status_code=204)


@router.delete("/{book_id}", status_code=204)
async def delete_book(book_id: int, registry=Depends(get_registry)):
    try:
        await registry.delete_book(book_id)
    except BookNotFoundError as e:
        raise HTTPException(404, str(e))
    return Response(status_code=204)


async def invalid_book_handler(request: Request, exc: InvalidBookError):
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(exc.errors)})


def create_app(settings: Settings | None = None, registry=None) -> FastAPI:
    """Build the application around a registry.

    When no registry is passed one is built from the settings. SQL-backed
    registries are initialized on startup and disposed on shutdown.
    """
    settings = settings or Settings()
    logging.basicConfig(level=settings.LOG_LEVEL)
    registry = registry if registry is not None else build_registry(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if hasattr(registry, "init"):
            await registry.init()
        logger.info("BookStore API started with %s storage", settings.STORAGE)
        yield
        if hasattr(registry, "dispose"):
            await registry.dispose()

    app = FastAPI(
        title="BookStore API",
        description="CRUD API for a small book catalogue",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.registry = registry

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(InvalidBookError, invalid_book_handler)
    app.include_router(router, prefix="/books", tags=["books"])

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {"status": "ok", "service": "BookStore API"}

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
