"""
Field value classification.

Every raw field value is classified exactly once, at query time, into a
FieldValue carrying both its display string and whether it holds nested
structure:

- Reference  -> canonical document path as given by the store
- dict, list -> "<collapsed>", expandable
- anything   -> str(value)
"""

from dataclasses import dataclass
from typing import Any, Literal


COLLAPSED = "<collapsed>"

ValueKind = Literal["reference", "nested", "scalar"]


@dataclass(frozen=True)
class Reference:
    """A pointer to another document, stored as its slash-separated path."""
    path: str


@dataclass(frozen=True)
class FieldValue:
    kind: ValueKind
    display: str
    raw: Any = None

    @property
    def is_expandable(self) -> bool:
        return self.kind == "nested"


def classify(value: Any) -> FieldValue:
    """Classify a raw field value into its display variant."""
    if isinstance(value, Reference):
        return FieldValue(kind="reference", display=value.path, raw=value)
    if isinstance(value, (dict, list)):
        return FieldValue(kind="nested", display=COLLAPSED, raw=value)
    return FieldValue(kind="scalar", display=str(value), raw=value)
