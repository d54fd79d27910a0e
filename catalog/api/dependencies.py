"""
FastAPI dependency injection for the catalog service.
"""

from fastapi import Request

from catalog.service import CatalogService


def get_catalog_service(request: Request) -> CatalogService:
    """Return the CatalogService built by create_app() for this application."""
    return request.app.state.catalog_service
