"""
CRUD and search endpoints, one router per entity kind.

All five collections share the same handlers; build_router() binds them to
a kind's URL segment and response schema.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query, Response, status
from fastapi.responses import JSONResponse

from catalog.api.dependencies import get_catalog_service
from catalog.database.kinds import EntityKind, get_kind_spec
from catalog.service import CatalogService, ServiceResult, ServiceStatus

ERROR_STATUS_CODES = {
    ServiceStatus.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ServiceStatus.INVALID: status.HTTP_400_BAD_REQUEST,
    ServiceStatus.ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(result: ServiceResult) -> JSONResponse:
    """Render a failed ServiceResult as a JSON error body."""
    content = {"detail": result.detail}
    if result.field:
        content["field"] = result.field
    return JSONResponse(status_code=ERROR_STATUS_CODES[result.status], content=content)


def build_router(kind: EntityKind) -> APIRouter:
    """Create the /api/{kind} router for one entity kind."""
    spec = get_kind_spec(kind)
    read_schema = spec.read_schema
    router = APIRouter(prefix=f"/api/{kind.value}", tags=[kind.value])

    @router.get("", response_model=List[read_schema])
    def search_entities(
        search_term: Optional[str] = Query(None, alias="searchTerm"),
        service: CatalogService = Depends(get_catalog_service),
    ):
        """List all rows, or only those matching searchTerm."""
        result = service.search(kind, search_term)
        if not result.ok:
            return error_response(result)
        return result.value

    @router.get("/{entity_id}", response_model=read_schema)
    def get_entity(entity_id: int, service: CatalogService = Depends(get_catalog_service)):
        """Get one row with its relations."""
        result = service.get(kind, entity_id)
        if not result.ok:
            return error_response(result)
        return result.value

    @router.post("", response_model=read_schema, status_code=status.HTTP_201_CREATED)
    def create_entity(
        response: Response,
        payload: Dict[str, Any] = Body(...),
        service: CatalogService = Depends(get_catalog_service),
    ):
        """Create a row; the Location header points at the new resource."""
        result = service.create(kind, payload)
        if not result.ok:
            return error_response(result)
        response.headers["Location"] = f"/api/{kind.value}/{result.value.id}"
        return result.value

    @router.put("/{entity_id}", status_code=status.HTTP_204_NO_CONTENT)
    def replace_entity(
        entity_id: int,
        payload: Dict[str, Any] = Body(...),
        service: CatalogService = Depends(get_catalog_service),
    ):
        """Replace the whole row, relations included."""
        result = service.replace(kind, entity_id, payload)
        if not result.ok:
            return error_response(result)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.delete("/{entity_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_entity(entity_id: int, service: CatalogService = Depends(get_catalog_service)):
        """Delete a row."""
        result = service.delete(kind, entity_id)
        if not result.ok:
            return error_response(result)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


routers = [build_router(kind) for kind in EntityKind]
