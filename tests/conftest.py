"""Shared fixtures: an in-memory store seeded from a YAML snapshot.

The same snapshot format the CLI accepts with --snapshot, so tests exercise
the real parsing and node building instead of hand-made rows.
"""

import pytest

from firestore_tui.store.snapshot import SnapshotSource, parse_snapshot


SNAPSHOT = """\
users:
  adam:
    name: Adam
    age: 41
  bob:
    name: Bob
    age: 35
  alice:
    name: Alice
    age: 42
    active: true
    address:
      city: Oslo
    tags: [admin, ops]
    manager: !ref users/bob
orders:
  o-1:
    total: 9.5
    customer: !ref users/alice
  o-2:
    total: 12
empty: {}
"""


class FailingSource(SnapshotSource):
    """Snapshot source whose named queries raise."""

    def __init__(self, data, failing=()):
        super().__init__(data)
        self.failing = set(failing)

    def _maybe_fail(self, name):
        if name in self.failing:
            raise ConnectionError(f"{name} unavailable")

    def list_collections(self):
        self._maybe_fail("collections")
        return super().list_collections()

    def list_documents(self, collection):
        self._maybe_fail("documents")
        return super().list_documents(collection)

    def list_fields(self, collection, document):
        self._maybe_fail("fields")
        return super().list_fields(collection, document)


@pytest.fixture
def snapshot_data():
    return parse_snapshot(SNAPSHOT)


@pytest.fixture
def source(snapshot_data):
    return SnapshotSource(snapshot_data)


@pytest.fixture
def failing_source(snapshot_data):
    """Factory: failing_source("fields") fails only field queries."""

    def make(*failing):
        return FailingSource(snapshot_data, failing)

    return make


@pytest.fixture
def snapshot_file(tmp_path):
    path = tmp_path / "store.yml"
    path.write_text(SNAPSHOT)
    return path
