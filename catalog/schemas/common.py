"""
Shared pydantic schemas: relation references, summaries and field predicates.

Summaries are the shapes used for nested relation items inside a hydrated
entity, so the book/movie/genre graph serializes without cycles.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

# Largest id a SQLite INTEGER column can hold
MAX_ID = 2 ** 63 - 1


def require_text(value: str) -> str:
    """Reject strings made only of whitespace."""
    if not value.strip():
        raise ValueError("must not be blank")
    return value


class GenreRef(BaseModel):
    """Reference to an existing genre inside a book or movie payload.

    Accepts either ``{"id": 3}`` (extra keys such as ``name`` are ignored)
    or a bare integer id.
    """

    id: int = Field(..., gt=0, le=MAX_ID)

    @model_validator(mode="before")
    @classmethod
    def coerce_bare_id(cls, data: Any) -> Any:
        if isinstance(data, int) and not isinstance(data, bool):
            return {"id": data}
        return data


class AuthorSummary(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class DirectorSummary(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class GenreSummary(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class BookSummary(BaseModel):
    id: int
    title: str
    author_id: Optional[int]

    class Config:
        from_attributes = True


class MovieSummary(BaseModel):
    id: int
    title: str
    director_id: Optional[int]

    class Config:
        from_attributes = True
