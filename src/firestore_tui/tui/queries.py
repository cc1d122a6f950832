"""Pane data fetching (store reads only).

Every store read needed by a navigation transition lives here. A failed
read never escapes: it is logged and the pane gets a single "<error>" row,
so the transition that asked for it still completes.

Usage in state.reduce:
    load_documents(source, "users")   # right pane at depth 1
    load_fields(source, "users", "alice")
"""

import logging
from typing import Callable

from firestore_tui.store.nodes import Node
from firestore_tui.store.source import DataSource


Rows = tuple[Node, ...]


def _absorb(what: str, query: Callable[[], list[Node]]) -> Rows:
    try:
        rows = tuple(query())
    except Exception:
        logging.exception("Query failed: %s", what)
        return (Node.error(),)
    logging.debug("Loaded %d rows: %s", len(rows), what)
    return rows


def load_collections(source: DataSource) -> Rows:
    return _absorb("collections", source.list_collections)


def load_documents(source: DataSource, collection: str) -> Rows:
    return _absorb(
        f"documents of {collection}",
        lambda: source.list_documents(collection),
    )


def load_fields(source: DataSource, collection: str, document: str) -> Rows:
    return _absorb(
        f"fields of {collection}/{document}",
        lambda: source.list_fields(collection, document),
    )
