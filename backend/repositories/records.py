"""
Per-owner book repository backed by SQLAlchemy/SQLite.
"""
from datetime import datetime
from typing import List
from sqlalchemy.orm import Session

from domain.models import Book
from repositories.models import ShelfBookORM, ShelfSequenceORM


def _book_from_orm(orm: ShelfBookORM) -> Book:
    return Book(
        book_id=orm.book_id,
        name=orm.name,
        author=orm.author,
        owner_id=orm.owner_id,
    )


class RecordsRepository:
    """Books and the id sequence for a single owner."""

    def list_books(self, session: Session, owner_id: str) -> List[Book]:
        rows = (
            session.query(ShelfBookORM)
            .filter(ShelfBookORM.owner_id == owner_id)
            .order_by(ShelfBookORM.book_id.asc())
            .all()
        )
        return [_book_from_orm(r) for r in rows]

    def current_sequence(self, session: Session, owner_id: str) -> int:
        seq = session.get(ShelfSequenceORM, owner_id)
        return seq.value if seq else 0

    def _advance_sequence(self, session: Session, owner_id: str) -> int:
        seq = session.get(ShelfSequenceORM, owner_id)
        if seq is None:
            seq = ShelfSequenceORM(owner_id=owner_id, value=0)
            session.add(seq)
        seq.value = (seq.value or 0) + 1
        return seq.value

    def create_book(self, session: Session, owner_id: str, name: str, author: str) -> Book:
        """Assign the next id and store the book in one transaction."""
        book_id = self._advance_sequence(session, owner_id)
        orm = ShelfBookORM(
            owner_id=owner_id,
            book_id=book_id,
            name=name,
            author=author,
            created_at=datetime.utcnow(),
        )
        session.add(orm)
        session.commit()
        return _book_from_orm(orm)

    def delete_books(self, session: Session, owner_id: str) -> int:
        """Remove every book for the owner and rewind its sequence to 0."""
        deleted = (
            session.query(ShelfBookORM)
            .filter(ShelfBookORM.owner_id == owner_id)
            .delete(synchronize_session=False)
        )
        seq = session.get(ShelfSequenceORM, owner_id)
        if seq is None:
            session.add(ShelfSequenceORM(owner_id=owner_id, value=0))
        else:
            seq.value = 0
        session.commit()
        return deleted
