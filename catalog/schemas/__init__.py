"""
Pydantic schemas for catalog payloads and hydrated entities.
"""

from catalog.schemas.common import (
    GenreRef,
    AuthorSummary,
    DirectorSummary,
    GenreSummary,
    BookSummary,
    MovieSummary,
)
from catalog.schemas.author import AuthorWrite, AuthorRead
from catalog.schemas.director import DirectorWrite, DirectorRead
from catalog.schemas.genre import GenreWrite, GenreRead
from catalog.schemas.book import BookWrite, BookRead
from catalog.schemas.movie import MovieWrite, MovieRead

__all__ = [
    "GenreRef",
    "AuthorSummary",
    "DirectorSummary",
    "GenreSummary",
    "BookSummary",
    "MovieSummary",
    "AuthorWrite",
    "AuthorRead",
    "DirectorWrite",
    "DirectorRead",
    "GenreWrite",
    "GenreRead",
    "BookWrite",
    "BookRead",
    "MovieWrite",
    "MovieRead",
]
