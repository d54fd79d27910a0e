"""
Pydantic schemas for Movie.
"""

from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator

from catalog.schemas.common import DirectorSummary, GenreRef, GenreSummary, MAX_ID, require_text


class MovieWrite(BaseModel):
    """Payload for creating or replacing a movie."""

    id: Optional[int] = None
    title: str = Field(..., min_length=3, max_length=200)
    director_id: int = Field(..., gt=0, le=MAX_ID, validation_alias=AliasChoices("director_id", "directorId"))
    genres: List[GenreRef] = Field(..., min_length=1)

    @field_validator("title")
    @classmethod
    def check_title(cls, value: str) -> str:
        return require_text(value)


class MovieRead(BaseModel):
    """Movie hydrated with its director and genres."""

    id: int
    title: str
    director_id: Optional[int]
    director: Optional[DirectorSummary]
    genres: List[GenreSummary]

    class Config:
        from_attributes = True
