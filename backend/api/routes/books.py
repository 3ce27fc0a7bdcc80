"""
Books API routes.

Routes:
- GET  /api/{owner_id}/books     : list the owner's books
- POST /api/{owner_id}/books     : add a book to the owner's shelf
- GET  /api/{owner_id}/allbooks  : list every owner's books
- GET  /api/{owner_id}/reset     : clear the owner's shelf
"""
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request

from api.schemas import BookListResponse, BookResponse, BookSchema, ResetResponse, ResetResult
from db import SessionLocal
from domain.errors import InvalidArgument
from services.record_store import RecordStore
from services.registry import StoreRegistry

router = APIRouter()
logger = logging.getLogger(__name__)

_registry = StoreRegistry(SessionLocal)


def get_registry() -> StoreRegistry:
    """Process-wide registry; tests override this dependency."""
    return _registry


def resolve_owner(owner_id: str) -> str:
    """Path parameters arrive URL-unescaped; only the shape is checked."""
    if not owner_id or "@" not in owner_id:
        raise InvalidArgument("Invalid or missing email in path.")
    return owner_id


def owner_store(
    owner_id: str = Depends(resolve_owner),
    registry: StoreRegistry = Depends(get_registry),
) -> RecordStore:
    return registry.record_store(owner_id)


async def _read_json(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        return None


@router.get("/{owner_id}/books", response_model=BookListResponse)
async def list_books(store: RecordStore = Depends(owner_store)):
    """List the owner's books in id order."""
    books = await store.list()
    return BookListResponse(result=[BookSchema.from_book(b) for b in books])


@router.post("/{owner_id}/books", response_model=BookResponse, status_code=201)
async def add_book(request: Request, store: RecordStore = Depends(owner_store)):
    """Add a book; the store assigns its id."""
    body = await _read_json(request)
    if not isinstance(body, dict):
        logger.debug("add_book: request body for %s is not a JSON object", store.owner_id)
        body = {}
    book = await store.add(body.get("name"), body.get("author"))
    return BookResponse(result=BookSchema.from_book(book))


@router.get("/{owner_id}/allbooks", response_model=BookListResponse)
async def list_all_books(
    owner_id: str = Depends(resolve_owner),
    registry: StoreRegistry = Depends(get_registry),
):
    """List books across all owners from the catalog index."""
    books = await registry.catalog_index().list()
    return BookListResponse(result=[BookSchema.from_book(b) for b in books])


@router.get("/{owner_id}/reset", response_model=ResetResponse)
async def reset_books(store: RecordStore = Depends(owner_store)):
    """Delete the owner's books and restart its id sequence."""
    result = await store.reset()
    return ResetResponse(result=ResetResult(**result))
