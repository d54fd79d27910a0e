"""
Error taxonomy for catalog store operations.

A missing id is not an error: store reads return ``None`` and deletes return
``False``. Everything here is a typed failure the service layer translates
for its caller.
"""

from typing import Optional


class CatalogError(Exception):
    """Base class for catalog store failures."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class ValidationError(CatalogError, ValueError):
    """A required field is missing or a length constraint is violated."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}", field=field)


class ForeignKeyError(CatalogError):
    """A referenced Author, Director or Genre does not exist."""

    def __init__(self, field: str, missing_ids):
        self.missing_ids = sorted(missing_ids)
        ids = ", ".join(str(i) for i in self.missing_ids)
        super().__init__(f"{field}: referenced id(s) not found: {ids}", field=field)


class IdMismatchError(CatalogError):
    """The id in the path and the id in the payload disagree."""

    def __init__(self, path_id: int, payload_id):
        self.path_id = path_id
        self.payload_id = payload_id
        super().__init__(
            f"id: path id {path_id} does not match payload id {payload_id}",
            field="id",
        )


class DataCorruptionError(CatalogError):
    """A stored foreign key points at a row that does not exist."""
