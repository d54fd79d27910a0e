#!/usr/bin/env python
"""
Database initialization script for the book and movie catalog.

This script:
1. Creates the database schema (tables, join tables, indexes)
2. Optionally seeds a small sample catalog
3. Verifies that every table exists

Usage:
    # Create tables, keep existing data
    python scripts/init_catalog.py

    # Drop everything and load the sample catalog
    python scripts/init_catalog.py --reset --seed

    # Use a different database file
    python scripts/init_catalog.py --db-path data/other.db
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from catalog.api.config import get_database_path
from catalog.database import CatalogStore, EntityKind, init_database, seed_sample_data, verify_schema
from catalog.utils.logging_config import get_logger, setup_logging

logger = get_logger("init_catalog")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Initialize the catalog database")
    parser.add_argument('--db-path', default=None,
                        help='SQLite database file (default: DATABASE_URL or data/catalog.db)')
    parser.add_argument('--reset', action='store_true',
                        help='Drop and recreate all tables')
    parser.add_argument('--seed', action='store_true',
                        help='Load the sample catalog after creating tables')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable debug logging')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(level="DEBUG" if args.verbose else "INFO")

    db_path = args.db_path or get_database_path()
    db_manager = init_database(db_path=db_path, reset=args.reset)
    try:
        if args.seed:
            store = CatalogStore(db_manager)
            if store.count(EntityKind.GENRE) > 0:
                logger.warning("Catalog already has data; skipping seed (use --reset)")
            else:
                seed_sample_data(store)

        if not verify_schema(db_manager):
            logger.error("Database initialization failed")
            return 1
    finally:
        db_manager.close()

    logger.info("Database initialization successful: %s", db_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
