"""
Record store: the durable home of one owner's books and the authority for
that owner's id sequence.

Each instance processes ``add`` and ``reset`` one at a time (its lock acts as
the actor mailbox). The lock stays held while the catalog index is updated so
a reset can never run between a local write and the matching index update.
"""
import asyncio
import logging
from typing import Any, Dict, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from domain.errors import Internal, InvalidArgument
from domain.models import Book
from repositories import RecordsRepository
from services.catalog_index import CatalogIndex

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Body must include 'name' and 'author'."


def _coerce_text(value: Any) -> str | None:
    """Return ``value`` as text, or None when it is absent or empty."""
    if not value:
        return None
    return str(value)


class RecordStore:
    def __init__(
        self,
        owner_id: str,
        key: str,
        session_factory: sessionmaker,
        index: CatalogIndex,
    ):
        self.owner_id = owner_id
        self.key = key
        self._session_factory = session_factory
        self._index = index
        self._repo = RecordsRepository()
        self._lock = asyncio.Lock()

    async def list(self) -> List[Book]:
        try:
            with self._session_factory() as session:
                return self._repo.list_books(session, self.owner_id)
        except SQLAlchemyError as e:
            logger.exception("record store %s: list failed", self.owner_id)
            raise Internal(str(e)) from e

    async def add(self, name: Any, author: Any) -> Book:
        name_text = _coerce_text(name)
        author_text = _coerce_text(author)
        if name_text is None or author_text is None:
            raise InvalidArgument(MISSING_FIELDS_MESSAGE)

        async with self._lock:
            try:
                with self._session_factory() as session:
                    book = self._repo.create_book(session, self.owner_id, name_text, author_text)
            except SQLAlchemyError as e:
                logger.exception("record store %s: add failed", self.owner_id)
                raise Internal(str(e)) from e

            logger.debug("record store %s: stored book %d", self.owner_id, book.book_id)
            try:
                await self._index.add(book)
            except Exception:
                # The local write stands; the index just misses this book.
                logger.exception(
                    "record store %s: catalog index update failed for book %d",
                    self.owner_id,
                    book.book_id,
                )
            return book

    async def reset(self) -> Dict[str, int]:
        async with self._lock:
            try:
                with self._session_factory() as session:
                    deleted = self._repo.delete_books(session, self.owner_id)
            except SQLAlchemyError as e:
                logger.exception("record store %s: reset failed", self.owner_id)
                raise Internal(str(e)) from e

            logger.info("record store %s: reset removed %d books", self.owner_id, deleted)
            try:
                await self._index.purge_owner(self.owner_id)
            except Exception:
                logger.exception("record store %s: catalog index purge failed", self.owner_id)
            return {"deleted": deleted}
