"""
Catalog index: the single global, read-optimized copy of every owner's books.

The index is never the system of record. Record stores push books here after
their own commit and ask for a purge when an owner resets, so the index can
lag behind (or miss entries) if one of those calls fails.
"""
import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from domain.errors import Internal, InvalidArgument
from domain.models import Book
from repositories import CatalogRepository

logger = logging.getLogger(__name__)


class CatalogIndex:
    def __init__(self, key: str, session_factory: sessionmaker):
        self.key = key
        self._session_factory = session_factory
        self._repo = CatalogRepository()

    async def add(self, book: Book) -> None:
        """Upsert ``book`` keyed by (owner_id, book_id)."""
        if not book or not book.owner_id or book.book_id is None:
            raise InvalidArgument("Invalid book payload")
        try:
            with self._session_factory() as session:
                self._repo.upsert(session, book)
        except SQLAlchemyError as e:
            logger.exception("catalog index: failed to store %s:%s", book.owner_id, book.book_id)
            raise Internal(str(e)) from e

    async def list(self) -> List[Book]:
        """All indexed books by book_id; equal ids keep insertion order."""
        try:
            with self._session_factory() as session:
                return self._repo.list_books(session)
        except SQLAlchemyError as e:
            logger.exception("catalog index: list failed")
            raise Internal(str(e)) from e

    async def purge_owner(self, owner_id: str) -> int:
        if not owner_id:
            raise InvalidArgument("Missing email")
        try:
            with self._session_factory() as session:
                removed = self._repo.purge_owner(session, owner_id)
        except SQLAlchemyError as e:
            logger.exception("catalog index: purge failed for %s", owner_id)
            raise Internal(str(e)) from e
        logger.info("catalog index: purged %d entries for %s", removed, owner_id)
        return removed
