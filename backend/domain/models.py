"""
Core domain models for the bookshelf service.
These are framework-agnostic and can be used across all services.
"""
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Book:
    """
    A book on an owner's shelf.

    ``book_id`` is assigned by the owner's record store and is only unique
    within that owner. Books are never mutated after creation.
    """
    book_id: int
    name: str
    author: str
    owner_id: str  # email of the owning identity

    def to_dict(self) -> Dict[str, Any]:
        """Wire form, using the camelCase keys clients see."""
        return {
            "bookId": self.book_id,
            "name": self.name,
            "author": self.author,
            "ownerId": self.owner_id,
        }
