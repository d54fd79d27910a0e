"""
Tests for database initialization, schema verification and seeding.
"""

import runpy
from pathlib import Path

from catalog.database import (
    CatalogStore,
    DatabaseManager,
    EntityKind,
    init_database,
    queries,
    seed_sample_data,
    verify_schema,
)

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "init_catalog.py"


class TestInitDatabase:

    def test_init_creates_all_tables(self):
        manager = init_database(db_path=":memory:")
        try:
            assert verify_schema(manager) is True
        finally:
            manager.close()

    def test_verify_schema_without_tables(self):
        manager = DatabaseManager(db_path=":memory:")
        try:
            assert verify_schema(manager) is False
        finally:
            manager.close()

    def test_reset_drops_data(self, tmp_path):
        db_path = str(tmp_path / "catalog.db")
        manager = init_database(db_path=db_path)
        CatalogStore(manager).create(EntityKind.GENRE, {"name": "Drama"})
        manager.close()

        manager = init_database(db_path=db_path, reset=True)
        try:
            assert CatalogStore(manager).count(EntityKind.GENRE) == 0
        finally:
            manager.close()

    def test_file_database_persists(self, tmp_path):
        db_path = str(tmp_path / "nested" / "catalog.db")
        manager = init_database(db_path=db_path)
        CatalogStore(manager).create(EntityKind.AUTHOR, {"name": "Frank Herbert"})
        manager.close()

        manager = init_database(db_path=db_path)
        try:
            authors = CatalogStore(manager).list_all(EntityKind.AUTHOR)
            assert [a.name for a in authors] == ["Frank Herbert"]
        finally:
            manager.close()


class TestSeed:

    def test_seed_sample_data(self):
        manager = init_database(db_path=":memory:")
        store = CatalogStore(manager)
        try:
            counts = seed_sample_data(store)

            for kind in EntityKind:
                assert store.count(kind) == counts[kind.value]
            dune = queries.search(store, EntityKind.BOOK, "herbert")
            assert [b.title for b in dune] == ["Dune", "Children of Dune"]
            scifi = queries.search(store, EntityKind.GENRE, "science")[0]
            assert len(scifi.books) == 2
            assert len(scifi.movies) == 2
        finally:
            manager.close()

    def test_init_script(self, tmp_path, monkeypatch):
        monkeypatch.setattr("catalog.utils.logging_config.setup_logging", lambda **kwargs: None)
        db_path = tmp_path / "script.db"
        script = runpy.run_path(str(SCRIPT), run_name="init_catalog")

        assert script["main"](["--db-path", str(db_path), "--seed"]) == 0
        # Seeding again is skipped rather than duplicating rows
        assert script["main"](["--db-path", str(db_path), "--seed"]) == 0

        manager = DatabaseManager(db_path=str(db_path))
        try:
            assert CatalogStore(manager).count(EntityKind.BOOK) == 3
        finally:
            manager.close()
