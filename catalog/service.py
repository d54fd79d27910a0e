"""
Catalog service: the operation contract the HTTP layer calls into.

Each method maps onto one store or search operation and reports the outcome
as a ``ServiceResult`` instead of raising, so the boundary only has to map
statuses to its own vocabulary.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from catalog.database import queries
from catalog.database.errors import CatalogError, DataCorruptionError
from catalog.database.kinds import EntityKind, get_kind_spec
from catalog.database.store import CatalogStore, Payload

logger = logging.getLogger(__name__)


class ServiceStatus(str, Enum):
    OK = "ok"
    CREATED = "created"
    NO_CONTENT = "no_content"
    NOT_FOUND = "not_found"
    INVALID = "invalid"
    ERROR = "error"


@dataclass
class ServiceResult:
    """Outcome of one catalog operation."""

    status: ServiceStatus
    value: Any = None
    detail: Optional[str] = None
    field: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status in (ServiceStatus.OK, ServiceStatus.CREATED, ServiceStatus.NO_CONTENT)


class CatalogService:
    """list/get/search/create/replace/delete for every entity kind."""

    def __init__(self, store: CatalogStore):
        self.store = store

    def list(self, kind: EntityKind) -> ServiceResult:
        return self.search(kind, None)

    def search(self, kind: EntityKind, term: Optional[str] = None) -> ServiceResult:
        try:
            rows = queries.search(self.store, kind, term)
        except DataCorruptionError as e:
            return self._corrupted(kind, e)
        return ServiceResult(ServiceStatus.OK, value=rows)

    def get(self, kind: EntityKind, entity_id: int) -> ServiceResult:
        try:
            row = self.store.get_by_id(kind, entity_id)
        except DataCorruptionError as e:
            return self._corrupted(kind, e)
        if row is None:
            return self._not_found(kind, entity_id)
        return ServiceResult(ServiceStatus.OK, value=row)

    def create(self, kind: EntityKind, payload: Payload) -> ServiceResult:
        try:
            row = self.store.create(kind, payload)
        except DataCorruptionError as e:
            return self._corrupted(kind, e)
        except CatalogError as e:
            return self._rejected(kind, "create", e)
        return ServiceResult(ServiceStatus.CREATED, value=row)

    def replace(self, kind: EntityKind, entity_id: int, payload: Payload) -> ServiceResult:
        try:
            row = self.store.replace(kind, entity_id, payload)
        except DataCorruptionError as e:
            return self._corrupted(kind, e)
        except CatalogError as e:
            return self._rejected(kind, "replace", e)
        if row is None:
            return self._not_found(kind, entity_id)
        return ServiceResult(ServiceStatus.NO_CONTENT, value=row)

    def delete(self, kind: EntityKind, entity_id: int) -> ServiceResult:
        if not self.store.delete(kind, entity_id):
            return self._not_found(kind, entity_id)
        return ServiceResult(ServiceStatus.NO_CONTENT)

    def counts(self) -> dict:
        """Row count per kind, keyed by URL segment."""
        return {kind.value: self.store.count(kind) for kind in EntityKind}

    # ==================== OUTCOME HELPERS ====================

    def _not_found(self, kind: EntityKind, entity_id: int) -> ServiceResult:
        label = get_kind_spec(kind).label
        return ServiceResult(ServiceStatus.NOT_FOUND, detail=f"{label} not found")

    def _rejected(self, kind: EntityKind, action: str, error: CatalogError) -> ServiceResult:
        label = get_kind_spec(kind).label
        logger.warning("Rejected %s %s: %s", action, label, error.message)
        return ServiceResult(ServiceStatus.INVALID, detail=error.message, field=error.field)

    def _corrupted(self, kind: EntityKind, error: DataCorruptionError) -> ServiceResult:
        label = get_kind_spec(kind).label
        logger.error("Data integrity violation while reading %s: %s", label, error.message, exc_info=error)
        return ServiceResult(ServiceStatus.ERROR, detail="Internal data integrity error")
