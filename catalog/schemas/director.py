"""
Pydantic schemas for Director.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from catalog.schemas.common import MovieSummary, require_text


class DirectorWrite(BaseModel):
    """Payload for creating or replacing a director."""

    id: Optional[int] = None
    name: str = Field(..., min_length=1)

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        return require_text(value)


class DirectorRead(BaseModel):
    """Director with the movies that reference it."""

    id: int
    name: str
    movies: List[MovieSummary]

    class Config:
        from_attributes = True
