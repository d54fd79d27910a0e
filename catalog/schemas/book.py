"""
Pydantic schemas for Book.
"""

from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator

from catalog.schemas.common import AuthorSummary, GenreRef, GenreSummary, MAX_ID, require_text


class BookWrite(BaseModel):
    """Payload for creating or replacing a book.

    The genre list is the complete set of genres the book ends up with;
    a replace drops any genre not listed here.
    """

    id: Optional[int] = None
    title: str = Field(..., min_length=3, max_length=200)
    author_id: int = Field(..., gt=0, le=MAX_ID, validation_alias=AliasChoices("author_id", "authorId"))
    genres: List[GenreRef] = Field(..., min_length=1)

    @field_validator("title")
    @classmethod
    def check_title(cls, value: str) -> str:
        return require_text(value)


class BookRead(BaseModel):
    """Book hydrated with its author and genres.

    ``author`` is ``None`` only after the author has been deleted.
    """

    id: int
    title: str
    author_id: Optional[int]
    author: Optional[AuthorSummary]
    genres: List[GenreSummary]

    class Config:
        from_attributes = True
