"""Field value classification and node shapes."""

from datetime import datetime

from firestore_tui.store.nodes import ERROR_TITLE, Node
from firestore_tui.store.values import COLLAPSED, Reference, classify


def test_nested_map_is_collapsed_and_expandable():
    value = classify({"a": 1})
    assert value.kind == "nested"
    assert value.display == "<collapsed>"
    assert value.is_expandable


def test_list_is_collapsed_and_expandable():
    value = classify([1, 2, 3])
    assert value.display == COLLAPSED
    assert value.is_expandable


def test_scalar_uses_str():
    assert classify(42).display == "42"
    assert classify(9.5).display == "9.5"
    assert classify("hello").display == "hello"
    assert not classify(42).is_expandable


def test_timestamp_scalar():
    when = datetime(2024, 5, 1, 12, 30)
    assert classify(when).display == str(when)


def test_reference_renders_its_path():
    value = classify(Reference("users/bob"))
    assert value.kind == "reference"
    assert value.display == "users/bob"
    assert not value.is_expandable


def test_field_node_title_is_key_and_value():
    node = Node.for_field("age", classify(42))
    assert node.title == "age: 42"
    assert node.key == "age"
    assert node.value_string == "42"
    assert node.is_expandable is False
    assert node.raw_value == 42


def test_nested_field_node():
    node = Node.for_field("address", classify({"a": 1}))
    assert node.value_string == "<collapsed>"
    assert node.is_expandable is True
    assert node.raw_value == {"a": 1}


def test_key_node_title_equals_key():
    node = Node.for_key("users")
    assert node.title == node.key == "users"
    assert node.value_string == ""
    assert not node.is_expandable


def test_error_node():
    node = Node.error()
    assert node.title == ERROR_TITLE == "<error>"
    assert node.key == ""
    assert node.value_string == ""
    assert node.is_error
    assert not Node.for_key("users").is_error


def test_raw_value_not_part_of_equality():
    a = Node.for_field("x", classify({"a": 1}))
    b = Node.for_field("x", classify({"b": 2}))
    assert a == b
