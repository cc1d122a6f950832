"""Firestore-backed data source.

Opening the client is the only fatal step: once the session is running,
every failure surfaces as an exception from a single query.

The client honours the library's own environment (credentials,
FIRESTORE_EMULATOR_HOST); nothing here reads the environment directly.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from google.cloud import firestore

from firestore_tui.config import DEFAULT_DATABASE
from firestore_tui.store.errors import NotFoundError, StoreConnectionError
from firestore_tui.store.nodes import Node
from firestore_tui.store.source import field_nodes, key_nodes
from firestore_tui.store.values import Reference


def _to_plain(value: Any) -> Any:
    if isinstance(value, firestore.DocumentReference):
        # Full resource name: projects/<p>/databases/<db>/documents/<path>
        return Reference(path=value._document_path)
    return value


class FirestoreSource:
    def __init__(self, client: firestore.Client) -> None:
        self.client = client

    def list_collections(self) -> list[Node]:
        return key_nodes(col.id for col in self.client.collections())

    def list_documents(self, collection: str) -> list[Node]:
        return key_nodes(snap.id for snap in self.client.collection(collection).stream())

    def list_fields(self, collection: str, document: str) -> list[Node]:
        snap = self.client.collection(collection).document(document).get()
        if not snap.exists:
            raise NotFoundError(f"{collection}/{document} not found")
        data = snap.to_dict() or {}
        return field_nodes({key: _to_plain(value) for key, value in data.items()})

    def close(self) -> None:
        self.client.close()


@contextmanager
def open_firestore(
    project_id: str, database: str = DEFAULT_DATABASE
) -> Iterator[FirestoreSource]:
    """Open a Firestore client for the session and always close it."""
    try:
        client = firestore.Client(project=project_id, database=database)
    except Exception as e:
        raise StoreConnectionError(str(e)) from e

    source = FirestoreSource(client)
    try:
        yield source
    finally:
        source.close()
