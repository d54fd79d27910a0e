"""
Tests for CatalogService outcome translation.
"""

import pytest

from catalog.database import CatalogStore, DatabaseManager, DataCorruptionError, EntityKind
from catalog.service import CatalogService, ServiceStatus


@pytest.fixture
def service():
    manager = DatabaseManager(db_path=":memory:")
    manager.create_tables()
    yield CatalogService(CatalogStore(manager))
    manager.close()


@pytest.fixture
def genre_id(service):
    return service.create(EntityKind.GENRE, {"name": "Drama"}).value.id


class TestCatalogService:

    def test_create_returns_created(self, service):
        result = service.create(EntityKind.AUTHOR, {"name": "A. Author"})
        assert result.status == ServiceStatus.CREATED
        assert result.ok
        assert result.value.name == "A. Author"

    def test_validation_failure_names_field(self, service):
        result = service.create(EntityKind.GENRE, {"name": "ab"})
        assert result.status == ServiceStatus.INVALID
        assert not result.ok
        assert result.field == "name"
        assert result.value is None

    def test_foreign_key_failure_is_invalid(self, service, genre_id):
        result = service.create(
            EntityKind.BOOK, {"title": "Orphan", "author_id": 9999, "genres": [{"id": genre_id}]}
        )
        assert result.status == ServiceStatus.INVALID
        assert result.field == "author_id"
        assert "9999" in result.detail

    def test_get_missing_is_not_found(self, service):
        result = service.get(EntityKind.BOOK, 1)
        assert result.status == ServiceStatus.NOT_FOUND
        assert result.detail == "Book not found"

    def test_get_existing(self, service, genre_id):
        result = service.get(EntityKind.GENRE, genre_id)
        assert result.status == ServiceStatus.OK
        assert result.value.name == "Drama"

    def test_replace_outcomes(self, service, genre_id):
        ok = service.replace(EntityKind.GENRE, genre_id, {"id": genre_id, "name": "Comedy"})
        assert ok.status == ServiceStatus.NO_CONTENT
        assert ok.value.name == "Comedy"

        mismatch = service.replace(EntityKind.GENRE, genre_id, {"id": genre_id + 1, "name": "Comedy"})
        assert mismatch.status == ServiceStatus.INVALID
        assert mismatch.field == "id"

        missing = service.replace(EntityKind.GENRE, 77, {"id": 77, "name": "Comedy"})
        assert missing.status == ServiceStatus.NOT_FOUND

    def test_delete_then_delete_again(self, service, genre_id):
        assert service.delete(EntityKind.GENRE, genre_id).status == ServiceStatus.NO_CONTENT
        assert service.delete(EntityKind.GENRE, genre_id).status == ServiceStatus.NOT_FOUND

    def test_list_equals_empty_search(self, service, genre_id):
        assert service.list(EntityKind.GENRE).value == service.search(EntityKind.GENRE, "").value
        assert [g.name for g in service.list(EntityKind.GENRE).value] == ["Drama"]

    def test_corruption_becomes_error(self, service, monkeypatch, caplog):
        def broken(kind, entity_id):
            raise DataCorruptionError("Book 1 references missing Author 5", field="author_id")

        monkeypatch.setattr(service.store, "get_by_id", broken)

        with caplog.at_level("ERROR"):
            result = service.get(EntityKind.BOOK, 1)

        assert result.status == ServiceStatus.ERROR
        assert result.detail == "Internal data integrity error"
        assert "references missing Author" in caplog.text

    def test_counts(self, service, genre_id):
        assert service.counts() == {
            "books": 0,
            "movies": 0,
            "authors": 0,
            "directors": 0,
            "genres": 1,
        }
