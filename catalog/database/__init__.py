"""
Database module for the book and movie catalog.

This module provides database models, connection management, the catalog
store and search queries for the SQLite database using SQLAlchemy ORM.
"""

from catalog.database.models import Base, Author, Director, Genre, Book, Movie
from catalog.database.connection import DatabaseManager
from catalog.database.errors import (
    CatalogError,
    ValidationError,
    ForeignKeyError,
    IdMismatchError,
    DataCorruptionError,
)
from catalog.database.kinds import EntityKind, get_kind_spec
from catalog.database.store import CatalogStore
from catalog.database.init_db import init_database, verify_schema, seed_sample_data
from catalog.database import queries

__all__ = [
    # Models
    'Base',
    'Author',
    'Director',
    'Genre',
    'Book',
    'Movie',
    # Connection
    'DatabaseManager',
    # Errors
    'CatalogError',
    'ValidationError',
    'ForeignKeyError',
    'IdMismatchError',
    'DataCorruptionError',
    # Store
    'EntityKind',
    'get_kind_spec',
    'CatalogStore',
    # Initialization
    'init_database',
    'verify_schema',
    'seed_sample_data',
    # Search module
    'queries',
]
