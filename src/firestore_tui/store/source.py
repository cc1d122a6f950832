"""Query interface into the hierarchical store.

Implementations return fully materialized lists of Node. They raise on any
failure; turning failures into pane content is the caller's job
(see firestore_tui.tui.queries).
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Protocol

from firestore_tui.store.nodes import Node
from firestore_tui.store.values import classify


class DataSource(Protocol):
    def list_collections(self) -> list[Node]: ...

    def list_documents(self, collection: str) -> list[Node]: ...

    def list_fields(self, collection: str, document: str) -> list[Node]: ...


def key_nodes(keys: Iterable[str]) -> list[Node]:
    return [Node.for_key(key) for key in keys]


def field_nodes(data: Mapping[str, Any]) -> list[Node]:
    """Build field rows ordered by field key."""
    return [
        Node.for_field(str(key), classify(data[key])) for key in sorted(data, key=str)
    ]
