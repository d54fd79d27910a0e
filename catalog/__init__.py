"""
Book and Movie Catalog Service Package.

This package contains the relational store, search queries, service layer
and HTTP API for a catalog of books, movies, authors, directors and genres.
"""

__version__ = "1.0.0"
