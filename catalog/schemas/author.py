"""
Pydantic schemas for Author.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from catalog.schemas.common import BookSummary, require_text


class AuthorWrite(BaseModel):
    """Payload for creating or replacing an author."""

    id: Optional[int] = None
    name: str = Field(..., min_length=1)

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        return require_text(value)


class AuthorRead(BaseModel):
    """Author with the books that reference it."""

    id: int
    name: str
    books: List[BookSummary]

    class Config:
        from_attributes = True
