"""
TUI state management and actions.

This module holds the navigation state machine for the two-pane browser.

Architecture:
- NavState is an immutable value: (path, left pane, right pane)
- Actions are frozen dataclasses representing input events
- reduce(state, action, source) is a pure function of its inputs apart from
  the store reads it performs, and returns a new NavState
- NavigationController.dispatch(action) swaps in the reduced state
- Computed properties derive pane contexts from the path depth
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Iterable, Literal, Optional, Union

from firestore_tui.store.nodes import Node
from firestore_tui.store.source import DataSource
from firestore_tui.tui import queries


# =============================================================================
# Data Types
# =============================================================================

PaneContext = Literal["collections", "documents", "fields"]
PaneName = Literal["left", "right"]

# (left, right) context per path depth
CONTEXTS: dict[int, tuple[PaneContext, PaneContext]] = {
    0: ("collections", "documents"),
    1: ("collections", "documents"),
    2: ("documents", "fields"),
}

MAX_DEPTH = 2

# Rows reserved below/above the panes for the breadcrumb and the hint line.
RESERVED_ROWS = 2

COARSE_STEP = 3


def _clamp(index: int, count: int) -> int:
    if count <= 0:
        return 0
    return max(0, min(index, count - 1))


@dataclass(frozen=True)
class PaneModel:
    """Ordered rows plus a cursor that always points at a valid row."""
    items: tuple[Node, ...] = ()
    cursor: int = 0
    width: int = 0
    height: int = 0

    def set_items(self, items: Iterable[Node]) -> "PaneModel":
        """Replace the rows. The cursor is kept, clamped to the new bounds."""
        items = tuple(items)
        return replace(self, items=items, cursor=_clamp(self.cursor, len(items)))

    def select(self, index: int) -> "PaneModel":
        return replace(self, cursor=_clamp(index, len(self.items)))

    def cursor_down(self) -> "PaneModel":
        return self.select(self.cursor + 1)

    def cursor_up(self) -> "PaneModel":
        return self.select(self.cursor - 1)

    def cursor_down_by(self, n: int) -> "PaneModel":
        pane = self
        for _ in range(n):
            pane = pane.cursor_down()
        return pane

    def cursor_up_by(self, n: int) -> "PaneModel":
        pane = self
        for _ in range(n):
            pane = pane.cursor_up()
        return pane

    def selected_item(self) -> Optional[Node]:
        if not self.items:
            return None
        return self.items[self.cursor]

    def resize(self, width: int, height: int) -> "PaneModel":
        return replace(self, width=width, height=height)


# =============================================================================
# Navigation State
# =============================================================================

@dataclass(frozen=True)
class NavState:
    """Where the operator is: path into the store plus both panes."""
    path: tuple[str, ...] = ()
    left: PaneModel = field(default_factory=PaneModel)
    right: PaneModel = field(default_factory=PaneModel)

    @property
    def depth(self) -> int:
        return len(self.path)

    @property
    def left_context(self) -> PaneContext:
        return CONTEXTS[self.depth][0]

    @property
    def right_context(self) -> PaneContext:
        return CONTEXTS[self.depth][1]

    @property
    def active_pane(self) -> PaneName:
        """
        Pane that receives cursor movement.

        At the root the right pane is empty and the collections list is the
        one being browsed; below the root it is always the right pane.
        """
        return "left" if self.depth == 0 else "right"

    @property
    def current_collection(self) -> Optional[str]:
        return self.path[0] if self.path else None

    @property
    def current_document(self) -> Optional[str]:
        return self.path[1] if len(self.path) > 1 else None


# =============================================================================
# Actions
# =============================================================================

@dataclass(frozen=True)
class DrillDown:
    """Enter the selected collection or document."""
    pass


@dataclass(frozen=True)
class DrillUp:
    """Go back one level."""
    pass


@dataclass(frozen=True)
class CursorMove:
    """Move the active pane's cursor; negative moves up."""
    delta: int


@dataclass(frozen=True)
class Resize:
    """Terminal size in character cells."""
    width: int
    height: int


@dataclass(frozen=True)
class Quit:
    """End the session."""
    pass


Action = Union[DrillDown, DrillUp, CursorMove, Resize, Quit]


# =============================================================================
# Reducer
# =============================================================================

def _selectable(node: Optional[Node]) -> bool:
    return node is not None and not node.is_error and bool(node.key)


def _index_of(rows: tuple[Node, ...], key: str) -> int:
    for index, node in enumerate(rows):
        if node.key == key:
            return index
    return 0


def _drill_down(state: NavState, source: DataSource) -> NavState:
    if state.depth == 0:
        node = state.left.selected_item()
        if not _selectable(node):
            return state
        documents = queries.load_documents(source, node.key)
        return replace(
            state,
            path=(node.key,),
            right=state.right.set_items(documents).select(0),
        )

    if state.depth == 1:
        node = state.right.selected_item()
        if not _selectable(node):
            return state
        collection = state.path[0]
        fields = queries.load_fields(source, collection, node.key)
        return replace(
            state,
            path=(collection, node.key),
            left=state.left.set_items(state.right.items).select(state.right.cursor),
            right=state.right.set_items(fields).select(0),
        )

    # Nested field values are shown collapsed; there is no level below fields.
    return state


def _drill_up(state: NavState, source: DataSource) -> NavState:
    if state.depth == MAX_DEPTH:
        collection = state.path[0]
        collections = queries.load_collections(source)
        documents = queries.load_documents(source, collection)
        return replace(
            state,
            path=(collection,),
            left=state.left.set_items(collections).select(_index_of(collections, collection)),
            right=state.right.set_items(documents).select(0),
        )

    if state.depth == 1:
        return replace(
            state,
            path=(),
            left=state.left.set_items(queries.load_collections(source)),
            right=state.right.set_items(()),
        )

    return state


def _move_cursor(state: NavState, delta: int) -> NavState:
    pane = state.left if state.active_pane == "left" else state.right
    if delta >= 0:
        pane = pane.cursor_down_by(delta)
    else:
        pane = pane.cursor_up_by(-delta)
    if state.active_pane == "left":
        return replace(state, left=pane)
    return replace(state, right=pane)


def _resize(state: NavState, width: int, height: int) -> NavState:
    width = max(width, 0)
    left_width = width // 2
    pane_height = max(height - RESERVED_ROWS, 0)
    return replace(
        state,
        left=state.left.resize(left_width, pane_height),
        right=state.right.resize(width - left_width, pane_height),
    )


def reduce(state: NavState, action: Action, source: DataSource) -> NavState:
    """
    Apply an action and return the next state.

    Store reads happen here, synchronously; failed reads come back as an
    "<error>" row, so every transition completes.
    """
    match action:
        case DrillDown():
            new_state = _drill_down(state, source)

        case DrillUp():
            new_state = _drill_up(state, source)

        case CursorMove(delta=delta):
            return _move_cursor(state, delta)

        case Resize(width=width, height=height):
            return _resize(state, width, height)

        case Quit():
            return state

        case _:
            raise TypeError(f"unknown action: {action!r}")

    if new_state.path != state.path:
        logging.debug("Path %s -> %s", "/".join(state.path), "/".join(new_state.path))
    return new_state


def initial_state(source: DataSource) -> NavState:
    """Root state: collections on the left, nothing on the right."""
    return NavState(left=PaneModel().set_items(queries.load_collections(source)))


# =============================================================================
# Controller
# =============================================================================

class NavigationController:
    """
    Owns the current NavState and the data source.

    State changes happen via dispatch(action), which replaces the state with
    the reduced value; the previous value is never modified.
    """

    def __init__(self, source: DataSource, state: Optional[NavState] = None) -> None:
        self.source = source
        self.state = state if state is not None else initial_state(source)

    def dispatch(self, action: Action) -> NavState:
        self.state = reduce(self.state, action, self.source)
        return self.state

    @property
    def left(self) -> PaneModel:
        return self.state.left

    @property
    def right(self) -> PaneModel:
        return self.state.right

    @property
    def path(self) -> tuple[str, ...]:
        return self.state.path
