"""
API route handlers.
"""

from catalog.api.routers import entities, system

__all__ = ["entities", "system"]
