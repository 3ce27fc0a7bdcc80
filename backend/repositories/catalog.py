"""
Global catalog index repository backed by SQLAlchemy/SQLite.
"""
from datetime import datetime
from typing import List
from sqlalchemy.orm import Session

from domain.models import Book
from repositories.models import CatalogEntryORM


def _book_from_orm(orm: CatalogEntryORM) -> Book:
    return Book(
        book_id=orm.book_id,
        name=orm.name,
        author=orm.author,
        owner_id=orm.owner_id,
    )


class CatalogRepository:
    """Denormalized copy of every owner's books."""

    def upsert(self, session: Session, book: Book) -> Book:
        orm = (
            session.query(CatalogEntryORM)
            .filter(
                CatalogEntryORM.owner_id == book.owner_id,
                CatalogEntryORM.book_id == book.book_id,
            )
            .one_or_none()
        )
        if orm is None:
            orm = CatalogEntryORM(owner_id=book.owner_id, book_id=book.book_id)
            session.add(orm)
        # Overwrites keep the row (and so its insertion order).
        orm.name = book.name
        orm.author = book.author
        orm.indexed_at = datetime.utcnow()
        session.commit()
        return _book_from_orm(orm)

    def list_books(self, session: Session) -> List[Book]:
        rows = (
            session.query(CatalogEntryORM)
            .order_by(CatalogEntryORM.book_id.asc(), CatalogEntryORM.id.asc())
            .all()
        )
        return [_book_from_orm(r) for r in rows]

    def purge_owner(self, session: Session, owner_id: str) -> int:
        deleted = (
            session.query(CatalogEntryORM)
            .filter(CatalogEntryORM.owner_id == owner_id)
            .delete(synchronize_session=False)
        )
        session.commit()
        return deleted
