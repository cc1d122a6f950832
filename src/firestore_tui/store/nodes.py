from dataclasses import dataclass, field
from typing import Any

from firestore_tui.store.values import FieldValue


ERROR_TITLE = "<error>"


@dataclass(frozen=True)
class Node:
    """One displayable row: a collection, a document, or a field."""
    title: str
    key: str = ""
    value_string: str = ""
    is_expandable: bool = False
    # Kept for expanding nested values later; not part of equality.
    raw_value: Any = field(default=None, compare=False, repr=False)

    @classmethod
    def for_key(cls, key: str) -> "Node":
        """Collection or document row."""
        return cls(title=key, key=key)

    @classmethod
    def for_field(cls, key: str, value: FieldValue) -> "Node":
        return cls(
            title=f"{key}: {value.display}",
            key=key,
            value_string=value.display,
            is_expandable=value.is_expandable,
            raw_value=value.raw,
        )

    @classmethod
    def error(cls) -> "Node":
        """Sentinel shown in place of a pane whose query failed."""
        return cls(title=ERROR_TITLE)

    @property
    def is_error(self) -> bool:
        return self.title == ERROR_TITLE and not self.key
