"""
SQLAlchemy ORM models for persistence.
"""
from datetime import datetime
from sqlalchemy import Column, DateTime, Integer, String, UniqueConstraint

from db import Base


class ShelfSequenceORM(Base):
    """Per-owner book id counter."""
    __tablename__ = "shelf_sequences"

    owner_id = Column(String, primary_key=True)
    value = Column(Integer, nullable=False, default=0)


class ShelfBookORM(Base):
    __tablename__ = "shelf_books"

    owner_id = Column(String, primary_key=True, index=True)
    book_id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    author = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)


class CatalogEntryORM(Base):
    __tablename__ = "catalog_entries"
    __table_args__ = (UniqueConstraint("owner_id", "book_id", name="uq_catalog_owner_book"),)

    # Surrogate key doubles as insertion order for tie-breaks on book_id.
    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(String, nullable=False, index=True)
    book_id = Column(Integer, nullable=False)
    name = Column(String, nullable=False)
    author = Column(String, nullable=False)
    indexed_at = Column(DateTime, default=datetime.utcnow, nullable=False)
