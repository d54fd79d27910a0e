"""
Catalog store: persistence and invariant enforcement for all entity kinds.

Every operation takes an ``EntityKind`` and runs in its own session, so each
write commits as a whole or not at all. Reads always come back hydrated as the
kind's read schema.
"""

import logging
import threading
from contextlib import contextmanager, nullcontext
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import Select, func, select, update
from sqlalchemy.orm import Session, selectinload

from catalog.database.connection import DatabaseManager
from catalog.database.errors import (
    DataCorruptionError,
    ForeignKeyError,
    IdMismatchError,
    ValidationError,
)
from catalog.database.kinds import EntityKind, KindSpec, get_kind_spec
from catalog.database.models import Genre
from catalog.schemas.common import MAX_ID

logger = logging.getLogger(__name__)

Payload = Union[Mapping[str, Any], BaseModel]


def validate_payload(spec: KindSpec, payload: Payload) -> BaseModel:
    """
    Check a create/replace payload against the kind's field predicates.

    Args:
        spec: Descriptor of the entity kind
        payload: Mapping or pydantic model with the submitted fields

    Returns:
        Validated write schema instance

    Raises:
        ValidationError: Naming the first offending field
    """
    if isinstance(payload, BaseModel):
        payload = payload.model_dump()
    try:
        return spec.write_schema.model_validate(payload)
    except PydanticValidationError as exc:
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "body"
        raise ValidationError(field, error["msg"]) from exc


def select_hydrated(spec: KindSpec) -> Select:
    """Base SELECT for a kind with every direct relation eager-loaded."""
    return (
        select(spec.model)
        .options(*[selectinload(relation) for relation in spec.relations])
        .order_by(spec.model.id)
    )


def hydrate(spec: KindSpec, obj: Any) -> BaseModel:
    """
    Convert a loaded ORM row into its read schema.

    Raises:
        DataCorruptionError: If an owner foreign key is set but its row is missing
    """
    if spec.owner is not None:
        owner_id = getattr(obj, spec.owner.field)
        if owner_id is not None and getattr(obj, spec.owner.relation) is None:
            raise DataCorruptionError(
                f"{spec.label} {obj.id} references missing "
                f"{spec.owner.model.__name__} {owner_id}",
                field=spec.owner.field,
            )
    return spec.read_schema.model_validate(obj)


def _payload_id(payload: Payload) -> Any:
    if isinstance(payload, BaseModel):
        return getattr(payload, "id", None)
    if isinstance(payload, Mapping):
        return payload.get("id")
    return None


def _storable_id(entity_id: int) -> bool:
    # Ids outside SQLite's INTEGER range cannot be bound, so no row has them
    return 1 <= entity_id <= MAX_ID


def _same_id(payload_id: Any, entity_id: int) -> bool:
    return (
        isinstance(payload_id, int)
        and not isinstance(payload_id, bool)
        and payload_id == entity_id
    )


class CatalogStore:
    """
    Authoritative store for authors, directors, genres, books and movies.

    Writes are serialized through one lock, so concurrent replaces of the
    same row resolve as last-writer-wins. With an in-memory database all
    sessions share one connection, so reads take the lock as well.
    """

    def __init__(self, db_manager: DatabaseManager):
        self.db = db_manager
        self._lock = threading.RLock()

    @contextmanager
    def _read_guard(self):
        guard = self._lock if self.db.is_memory else nullcontext()
        with guard:
            yield

    # ==================== READ OPERATIONS ====================

    def run_query(self, kind: EntityKind, stmt: Select) -> List[BaseModel]:
        """
        Execute a SELECT over one kind and hydrate every row.

        Args:
            kind: Entity kind the statement selects
            stmt: Statement built from select_hydrated()

        Returns:
            List of read schema instances
        """
        spec = get_kind_spec(kind)
        with self._read_guard(), self.db.session_scope() as session:
            rows = session.scalars(stmt).unique().all()
            return [hydrate(spec, row) for row in rows]

    def list_all(self, kind: EntityKind) -> List[BaseModel]:
        """Get every row of a kind, hydrated, in insertion order."""
        return self.run_query(kind, select_hydrated(get_kind_spec(kind)))

    def get_by_id(self, kind: EntityKind, entity_id: int) -> Optional[BaseModel]:
        """
        Get one hydrated row by ID.

        Returns:
            Read schema instance or None if not found
        """
        spec = get_kind_spec(kind)
        if not _storable_id(entity_id):
            return None
        with self._read_guard(), self.db.session_scope() as session:
            return self._load(session, spec, entity_id)

    def count(self, kind: EntityKind) -> int:
        """Get total number of rows of a kind."""
        spec = get_kind_spec(kind)
        with self._read_guard(), self.db.session_scope() as session:
            return session.scalar(select(func.count()).select_from(spec.model))

    # ==================== WRITE OPERATIONS ====================

    def create(self, kind: EntityKind, payload: Payload) -> BaseModel:
        """
        Create a new row.

        Any id in the payload is ignored; the database assigns one.

        Args:
            kind: Entity kind to create
            payload: Submitted fields, including the genre list for books/movies

        Returns:
            The created row, hydrated

        Raises:
            ValidationError: If a field predicate fails
            ForeignKeyError: If a referenced author/director/genre is missing
        """
        spec = get_kind_spec(kind)
        data = validate_payload(spec, payload)

        with self._lock, self.db.session_scope() as session:
            obj = spec.model()
            self._apply(session, spec, obj, data)
            session.add(obj)
            session.flush()
            created = self._load(session, spec, obj.id)

        logger.info("Created %s %d", spec.label, created.id)
        return created

    def replace(self, kind: EntityKind, entity_id: int, payload: Payload) -> Optional[BaseModel]:
        """
        Overwrite a row with the submitted payload.

        This is a whole-object replace: relations missing from the payload
        are dropped. There is no upsert.

        Args:
            kind: Entity kind to replace
            entity_id: ID from the caller's path
            payload: Complete new state, whose id must equal entity_id

        Returns:
            The replaced row, hydrated, or None if not found

        Raises:
            IdMismatchError: If payload id differs from entity_id
            ValidationError: If a field predicate fails
            ForeignKeyError: If a referenced author/director/genre is missing
        """
        spec = get_kind_spec(kind)
        payload_id = _payload_id(payload)
        if not _same_id(payload_id, entity_id):
            raise IdMismatchError(entity_id, payload_id)
        data = validate_payload(spec, payload)
        if not _storable_id(entity_id):
            return None

        with self._lock, self.db.session_scope() as session:
            obj = session.get(spec.model, entity_id)
            if obj is None:
                return None
            self._apply(session, spec, obj, data)
            session.flush()
            replaced = self._load(session, spec, entity_id)

        logger.info("Replaced %s %d", spec.label, entity_id)
        return replaced

    def delete(self, kind: EntityKind, entity_id: int) -> bool:
        """
        Delete a row.

        Books/movies of a deleted author/director are kept with their
        foreign key cleared; join rows of a deleted genre, book or movie
        are removed.

        Returns:
            True if deleted, False if not found
        """
        spec = get_kind_spec(kind)
        if not _storable_id(entity_id):
            return False
        with self._lock, self.db.session_scope() as session:
            obj = session.get(spec.model, entity_id)
            if obj is None:
                return False
            for model, column in spec.referenced_by:
                session.execute(
                    update(model)
                    .where(getattr(model, column) == entity_id)
                    .values({column: None})
                )
            session.delete(obj)

        logger.info("Deleted %s %d", spec.label, entity_id)
        return True

    # ==================== HELPERS ====================

    def _load(self, session: Session, spec: KindSpec, entity_id: int) -> Optional[BaseModel]:
        stmt = (
            select_hydrated(spec)
            .where(spec.model.id == entity_id)
            .execution_options(populate_existing=True)
        )
        obj = session.scalars(stmt).first()
        if obj is None:
            return None
        return hydrate(spec, obj)

    def _apply(self, session: Session, spec: KindSpec, obj: Any, data: BaseModel) -> None:
        """Copy validated payload onto obj after checking every reference."""
        if spec.owner is not None:
            owner_id = getattr(data, spec.owner.field)
            if session.get(spec.owner.model, owner_id) is None:
                raise ForeignKeyError(spec.owner.field, [owner_id])

        genres = None
        if spec.has_genres:
            genres = self._resolve_genres(session, [ref.id for ref in data.genres])

        for name in spec.scalar_fields:
            setattr(obj, name, getattr(data, name))
        if genres is not None:
            obj.genres = genres

    def _resolve_genres(self, session: Session, genre_ids: List[int]) -> List[Genre]:
        # Duplicates collapse; submission order is kept
        ordered = list(dict.fromkeys(genre_ids))
        found: Dict[int, Genre] = {
            genre.id: genre
            for genre in session.scalars(select(Genre).where(Genre.id.in_(ordered)))
        }
        missing = set(ordered) - set(found)
        if missing:
            raise ForeignKeyError("genres", missing)
        return [found[genre_id] for genre_id in ordered]
