"""
Database initialization and schema creation.

This module provides functions to initialize the database schema and
populate it with a small sample catalog.
"""

import logging

from sqlalchemy import inspect

from catalog.database.connection import DatabaseManager, DEFAULT_DB_PATH
from catalog.database.kinds import EntityKind

logger = logging.getLogger(__name__)

EXPECTED_TABLES = {'authors', 'directors', 'genres', 'books', 'movies', 'book_genres', 'movie_genres'}


def init_database(db_path: str = DEFAULT_DB_PATH, reset: bool = False, echo: bool = False) -> DatabaseManager:
    """
    Initialize the database and create all tables.

    Args:
        db_path: Path to SQLite database file
        reset: If True, drop existing tables before creating new ones
        echo: If True, log all SQL statements

    Returns:
        DatabaseManager instance
    """
    db_manager = DatabaseManager(db_path=db_path, echo=echo)

    if reset:
        logger.info("Resetting database %s (dropping all tables)", db_path)
        db_manager.reset_database()
    else:
        db_manager.create_tables()
    logger.info("Database tables ready at %s", db_path)

    return db_manager


def verify_schema(db_manager: DatabaseManager) -> bool:
    """
    Verify that all tables exist in the database.

    Args:
        db_manager: DatabaseManager instance

    Returns:
        True if all tables exist, False otherwise
    """
    inspector = inspect(db_manager.engine)
    existing_tables = set(inspector.get_table_names())

    missing_tables = EXPECTED_TABLES - existing_tables

    if missing_tables:
        logger.error("Missing tables: %s", sorted(missing_tables))
        return False

    logger.info("All tables exist: %s", sorted(existing_tables))
    return True


def seed_sample_data(store) -> dict:
    """
    Populate an empty catalog with a few linked authors, directors, genres,
    books and movies.

    Args:
        store: CatalogStore to write through

    Returns:
        Dictionary with the number of rows created per kind
    """
    genres = {
        name: store.create(EntityKind.GENRE, {"name": name})
        for name in ("Science Fiction", "Drama", "Thriller", "Fantasy")
    }
    herbert = store.create(EntityKind.AUTHOR, {"name": "Frank Herbert"})
    le_guin = store.create(EntityKind.AUTHOR, {"name": "Ursula K. Le Guin"})
    villeneuve = store.create(EntityKind.DIRECTOR, {"name": "Denis Villeneuve"})
    nolan = store.create(EntityKind.DIRECTOR, {"name": "Christopher Nolan"})

    books = [
        {"title": "Dune", "author_id": herbert.id,
         "genres": [{"id": genres["Science Fiction"].id}]},
        {"title": "Children of Dune", "author_id": herbert.id,
         "genres": [{"id": genres["Science Fiction"].id}, {"id": genres["Drama"].id}]},
        {"title": "A Wizard of Earthsea", "author_id": le_guin.id,
         "genres": [{"id": genres["Fantasy"].id}]},
    ]
    movies = [
        {"title": "Dune: Part One", "director_id": villeneuve.id,
         "genres": [{"id": genres["Science Fiction"].id}]},
        {"title": "Prisoners", "director_id": villeneuve.id,
         "genres": [{"id": genres["Thriller"].id}, {"id": genres["Drama"].id}]},
        {"title": "Inception", "director_id": nolan.id,
         "genres": [{"id": genres["Science Fiction"].id}, {"id": genres["Thriller"].id}]},
    ]
    for book in books:
        store.create(EntityKind.BOOK, book)
    for movie in movies:
        store.create(EntityKind.MOVIE, movie)

    counts = {
        "genres": len(genres),
        "authors": 2,
        "directors": 2,
        "books": len(books),
        "movies": len(movies),
    }
    logger.info("Seeded sample catalog: %s", counts)
    return counts
