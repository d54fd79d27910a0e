"""
SQLAlchemy ORM models for the book and movie catalog database.

This module defines the Author, Director, Genre, Book and Movie tables and the
two join tables linking books and movies to genres.
"""

from typing import List, Optional
from sqlalchemy import Column, Integer, String, ForeignKey, Table, Index
from sqlalchemy.orm import DeclarativeBase, relationship, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


# Join tables: composite key on the pair of foreign ids
book_genres = Table(
    'book_genres',
    Base.metadata,
    Column('book_id', Integer, ForeignKey('books.id', ondelete='CASCADE'), primary_key=True),
    Column('genre_id', Integer, ForeignKey('genres.id', ondelete='CASCADE'), primary_key=True),
)

movie_genres = Table(
    'movie_genres',
    Base.metadata,
    Column('movie_id', Integer, ForeignKey('movies.id', ondelete='CASCADE'), primary_key=True),
    Column('genre_id', Integer, ForeignKey('genres.id', ondelete='CASCADE'), primary_key=True),
)


class Author(Base):
    """
    Author table.

    Attributes:
        id: Primary key, auto-incremented
        name: Author's name (required)
        books: Books written by this author
    """
    __tablename__ = 'authors'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)

    # Books keep their row when the author goes away (author_id is nulled)
    books: Mapped[List["Book"]] = relationship(
        "Book",
        back_populates="author",
        passive_deletes=True,
        order_by="Book.id",
    )

    def __repr__(self) -> str:
        return f"<Author(id={self.id}, name='{self.name}')>"


class Director(Base):
    """
    Director table.

    Attributes:
        id: Primary key, auto-incremented
        name: Director's name (required)
        movies: Movies directed by this director
    """
    __tablename__ = 'directors'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)

    movies: Mapped[List["Movie"]] = relationship(
        "Movie",
        back_populates="director",
        passive_deletes=True,
        order_by="Movie.id",
    )

    def __repr__(self) -> str:
        return f"<Director(id={self.id}, name='{self.name}')>"


class Genre(Base):
    """
    Genre table shared by books and movies.

    Attributes:
        id: Primary key, auto-incremented
        name: Genre name, 3 to 50 characters
        books: Books tagged with this genre
        movies: Movies tagged with this genre
    """
    __tablename__ = 'genres'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)

    books: Mapped[List["Book"]] = relationship(
        "Book",
        secondary=book_genres,
        back_populates="genres",
        order_by="Book.id",
    )
    movies: Mapped[List["Movie"]] = relationship(
        "Movie",
        secondary=movie_genres,
        back_populates="genres",
        order_by="Movie.id",
    )

    def __repr__(self) -> str:
        return f"<Genre(id={self.id}, name='{self.name}')>"


class Book(Base):
    """
    Book table.

    Attributes:
        id: Primary key, auto-incremented
        title: Book title, 3 to 200 characters
        author_id: Foreign key to authors table (NULL once the author is deleted)
        author: The book's author
        genres: Genres the book belongs to
    """
    __tablename__ = 'books'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    author_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey('authors.id', ondelete='SET NULL'),
        nullable=True
    )

    # Relationships
    author: Mapped[Optional["Author"]] = relationship("Author", back_populates="books")
    genres: Mapped[List["Genre"]] = relationship(
        "Genre",
        secondary=book_genres,
        back_populates="books",
        order_by="Genre.id",
    )

    __table_args__ = (
        Index('idx_books_title', 'title'),
        Index('idx_books_author', 'author_id'),
    )

    def __repr__(self) -> str:
        return f"<Book(id={self.id}, title='{self.title}', author_id={self.author_id})>"


class Movie(Base):
    """
    Movie table.

    Attributes:
        id: Primary key, auto-incremented
        title: Movie title, 3 to 200 characters
        director_id: Foreign key to directors table (NULL once the director is deleted)
        director: The movie's director
        genres: Genres the movie belongs to
    """
    __tablename__ = 'movies'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    director_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey('directors.id', ondelete='SET NULL'),
        nullable=True
    )

    director: Mapped[Optional["Director"]] = relationship("Director", back_populates="movies")
    genres: Mapped[List["Genre"]] = relationship(
        "Genre",
        secondary=movie_genres,
        back_populates="movies",
        order_by="Genre.id",
    )

    __table_args__ = (
        Index('idx_movies_title', 'title'),
        Index('idx_movies_director', 'director_id'),
    )

    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, title='{self.title}', director_id={self.director_id})>"
