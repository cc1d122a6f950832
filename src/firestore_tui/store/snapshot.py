"""YAML snapshot data source.

A snapshot is a plain YAML mapping of collection -> document -> fields:

    users:
      alice:
        name: Alice
        address: {city: Oslo}
        manager: !ref users/bob

The `!ref` tag marks a document reference. Collections and documents keep
the order they have in the file.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

import yaml

from firestore_tui.store.errors import NotFoundError, StoreConnectionError
from firestore_tui.store.nodes import Node
from firestore_tui.store.source import field_nodes, key_nodes
from firestore_tui.store.values import Reference


class SnapshotLoader(yaml.SafeLoader):
    pass


def _construct_ref(loader: yaml.SafeLoader, node: yaml.Node) -> Reference:
    return Reference(path=loader.construct_scalar(node))


SnapshotLoader.add_constructor("!ref", _construct_ref)


def parse_snapshot(text: str) -> dict[str, dict[str, dict[str, Any]]]:
    data = yaml.load(text, Loader=SnapshotLoader)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("snapshot must be a mapping of collections")

    collections: dict[str, dict[str, dict[str, Any]]] = {}
    for name, docs in data.items():
        if docs is None:
            docs = {}
        if not isinstance(docs, dict):
            raise ValueError(f"collection {name!r} must be a mapping of documents")
        documents = {}
        for doc_id, fields in docs.items():
            if fields is not None and not isinstance(fields, dict):
                raise ValueError(f"document {name}/{doc_id} must be a mapping of fields")
            documents[str(doc_id)] = fields or {}
        collections[str(name)] = documents
    return collections


class SnapshotSource:
    def __init__(self, data: dict[str, dict[str, dict[str, Any]]]) -> None:
        self.data = data

    def _collection(self, collection: str) -> dict[str, dict[str, Any]]:
        try:
            return self.data[collection]
        except KeyError:
            raise NotFoundError(f"collection {collection} not found") from None

    def list_collections(self) -> list[Node]:
        return key_nodes(self.data)

    def list_documents(self, collection: str) -> list[Node]:
        return key_nodes(self._collection(collection))

    def list_fields(self, collection: str, document: str) -> list[Node]:
        docs = self._collection(collection)
        if document not in docs:
            raise NotFoundError(f"{collection}/{document} not found")
        return field_nodes(docs[document])


@contextmanager
def open_snapshot(path: Path) -> Iterator[SnapshotSource]:
    """Load a snapshot file; unreadable files fail like a connection would."""
    try:
        data = parse_snapshot(Path(path).read_text())
    except (OSError, yaml.YAMLError, ValueError) as e:
        raise StoreConnectionError(f"cannot load snapshot {path}: {e}") from e

    yield SnapshotSource(data)
