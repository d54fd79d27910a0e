"""
Entity kinds and the per-kind descriptors the store, query layer and API share.

Every operation in the catalog is parameterized by an ``EntityKind``. The
``KindSpec`` registered for a kind tells the generic code which ORM model and
schemas to use, which relations to eager-load, which text columns to search
and which foreign key the kind owns.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple, Type

from pydantic import BaseModel

from catalog.database.models import Author, Director, Genre, Book, Movie
from catalog.schemas import (
    AuthorWrite, AuthorRead,
    DirectorWrite, DirectorRead,
    GenreWrite, GenreRead,
    BookWrite, BookRead,
    MovieWrite, MovieRead,
)


class EntityKind(str, Enum):
    """The five entity collections; values double as URL segments."""

    BOOK = "books"
    MOVIE = "movies"
    AUTHOR = "authors"
    DIRECTOR = "directors"
    GENRE = "genres"


@dataclass(frozen=True)
class OwnerRef:
    """A required many-to-one reference, e.g. Book.author_id -> Author."""

    field: str
    relation: str
    model: Type[Any]


@dataclass(frozen=True)
class KindSpec:
    kind: EntityKind
    label: str
    model: Type[Any]
    write_schema: Type[BaseModel]
    read_schema: Type[BaseModel]
    # Relationship attributes hydrated on every read
    relations: Tuple[Any, ...]
    # Plain columns copied from the payload on create/replace
    scalar_fields: Tuple[str, ...]
    # Columns matched by search; may belong to the joined owner model
    search_columns: Tuple[Any, ...]
    owner: Optional[OwnerRef] = None
    search_join: Optional[Any] = None
    has_genres: bool = False
    # Foreign keys on other tables that point at this kind: (model, column)
    referenced_by: Tuple[Tuple[Type[Any], str], ...] = field(default_factory=tuple)


KIND_SPECS = {
    EntityKind.AUTHOR: KindSpec(
        kind=EntityKind.AUTHOR,
        label="Author",
        model=Author,
        write_schema=AuthorWrite,
        read_schema=AuthorRead,
        relations=(Author.books,),
        scalar_fields=("name",),
        search_columns=(Author.name,),
        referenced_by=((Book, "author_id"),),
    ),
    EntityKind.DIRECTOR: KindSpec(
        kind=EntityKind.DIRECTOR,
        label="Director",
        model=Director,
        write_schema=DirectorWrite,
        read_schema=DirectorRead,
        relations=(Director.movies,),
        scalar_fields=("name",),
        search_columns=(Director.name,),
        referenced_by=((Movie, "director_id"),),
    ),
    EntityKind.GENRE: KindSpec(
        kind=EntityKind.GENRE,
        label="Genre",
        model=Genre,
        write_schema=GenreWrite,
        read_schema=GenreRead,
        relations=(Genre.books, Genre.movies),
        scalar_fields=("name",),
        search_columns=(Genre.name,),
    ),
    EntityKind.BOOK: KindSpec(
        kind=EntityKind.BOOK,
        label="Book",
        model=Book,
        write_schema=BookWrite,
        read_schema=BookRead,
        relations=(Book.author, Book.genres),
        scalar_fields=("title", "author_id"),
        search_columns=(Book.title, Author.name),
        owner=OwnerRef(field="author_id", relation="author", model=Author),
        search_join=Book.author,
        has_genres=True,
    ),
    EntityKind.MOVIE: KindSpec(
        kind=EntityKind.MOVIE,
        label="Movie",
        model=Movie,
        write_schema=MovieWrite,
        read_schema=MovieRead,
        relations=(Movie.director, Movie.genres),
        scalar_fields=("title", "director_id"),
        search_columns=(Movie.title, Director.name),
        owner=OwnerRef(field="director_id", relation="director", model=Director),
        search_join=Movie.director,
        has_genres=True,
    ),
}


def get_kind_spec(kind) -> KindSpec:
    """Look up the descriptor for a kind (enum member or URL segment)."""
    return KIND_SPECS[EntityKind(kind)]
