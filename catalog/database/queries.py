"""
Search queries over the catalog store.

Search is a case-insensitive substring match on each kind's text columns:
``name`` for authors, directors and genres; ``title`` or the owner's name
for books and movies.
"""

from typing import List, Optional

from pydantic import BaseModel
from sqlalchemy import Select, or_

from catalog.database.kinds import EntityKind, KindSpec, get_kind_spec
from catalog.database.store import CatalogStore, select_hydrated


def build_search_query(spec: KindSpec, term: Optional[str] = None) -> Select:
    """
    Build the SELECT for a search over one kind.

    Args:
        spec: Descriptor of the entity kind
        term: Substring to look for; None or "" selects every row

    Returns:
        Statement yielding rows with relations eager-loaded
    """
    stmt = select_hydrated(spec)
    if not term:
        return stmt

    if spec.search_join is not None:
        # Outer join so rows whose owner was deleted can still match on title
        stmt = stmt.outerjoin(spec.search_join)

    # autoescape: % and _ in the term match literally
    return stmt.where(
        or_(*[column.icontains(term, autoescape=True) for column in spec.search_columns])
    )


def search(store: CatalogStore, kind: EntityKind, term: Optional[str] = None) -> List[BaseModel]:
    """
    Search one kind by substring.

    Args:
        store: Catalog store to read from
        kind: Entity kind to search
        term: Search term; absent or empty behaves like list_all

    Returns:
        Matching rows, hydrated, in insertion order

    Raises:
        DataCorruptionError: If a matching row cannot be hydrated
    """
    spec = get_kind_spec(kind)
    return store.run_query(kind, build_search_query(spec, term))
