"""
Response envelopes for the books API.

Every body is ``{"success": bool, ...}``; successful calls carry ``result``
and failures carry ``error``.
"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from domain.models import Book


class BookSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    book_id: int = Field(alias="bookId")
    name: str
    author: str
    owner_id: str = Field(alias="ownerId")

    @classmethod
    def from_book(cls, book: Book) -> "BookSchema":
        return cls.model_validate(book.to_dict())


class ResetResult(BaseModel):
    deleted: int


class BookResponse(BaseModel):
    success: bool = True
    result: BookSchema


class BookListResponse(BaseModel):
    success: bool = True
    result: List[BookSchema]


class ResetResponse(BaseModel):
    success: bool = True
    result: ResetResult


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
