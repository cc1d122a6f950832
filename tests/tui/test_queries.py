import logging

from firestore_tui.store.nodes import Node
from firestore_tui.tui import queries


def test_successful_queries(source):
    assert [n.key for n in queries.load_collections(source)] == ["users", "orders", "empty"]
    assert len(queries.load_documents(source, "orders")) == 2
    assert queries.load_fields(source, "orders", "o-2") == (
        Node(title="total: 12", key="total", value_string="12"),
    )


def test_failure_becomes_error_row(failing_source, caplog):
    src = failing_source("collections", "documents", "fields")

    with caplog.at_level(logging.ERROR):
        assert queries.load_collections(src) == (Node.error(),)
        assert queries.load_documents(src, "users") == (Node.error(),)
        assert queries.load_fields(src, "users", "alice") == (Node.error(),)

    messages = [r.getMessage() for r in caplog.records]
    assert "Query failed: collections" in messages
    assert "Query failed: fields of users/alice" in messages
    assert all(r.exc_info for r in caplog.records)


def test_not_found_becomes_error_row(source):
    assert queries.load_documents(source, "missing") == (Node.error(),)
    assert queries.load_fields(source, "users", "ghost") == (Node.error(),)
