"""
Pydantic schemas for Genre.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from catalog.schemas.common import BookSummary, MovieSummary, require_text


class GenreWrite(BaseModel):
    """Payload for creating or replacing a genre."""

    id: Optional[int] = None
    name: str = Field(..., min_length=3, max_length=50)

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        return require_text(value)


class GenreRead(BaseModel):
    """Genre with both sides of its join relations."""

    id: int
    name: str
    books: List[BookSummary]
    movies: List[MovieSummary]

    class Config:
        from_attributes = True
