import textwrap

from rich.text import Text
from textual.containers import Horizontal, Vertical
from textual.widgets import Static

from firestore_tui.store.nodes import Node
from firestore_tui.tui.state import NavState, PaneContext, PaneModel
from firestore_tui.tui.views.base import View


HINT = "[j/k to move, l to enter, h to back, q to quit]"

HEADING_STYLE = "bold color(69)"
SELECTED_STYLE = "color(212)"

# Width of the key column in the fields pane
KEY_WIDTH = 30

# Narrowest column a field value is wrapped to
MIN_VALUE_WIDTH = 10


def visible_window(cursor: int, heights: list[int], rows: int) -> tuple[int, int]:
    """Range of item indexes to draw so that the cursor item stays visible.

    heights[i] is the number of screen lines item i takes. The cursor item is
    always included, even when it alone is taller than the pane.
    """
    if rows <= 0 or not heights:
        return 0, 0
    start = cursor
    used = heights[cursor]
    while start > 0 and used + heights[start - 1] <= rows:
        start -= 1
        used += heights[start]
    end = cursor + 1
    while end < len(heights) and used + heights[end] <= rows:
        used += heights[end]
        end += 1
    return start, end


def wrap_value(value: str, width: int) -> list[str]:
    """Split a field value into lines of at most `width` cells (min MIN_VALUE_WIDTH)."""
    width = max(width, MIN_VALUE_WIDTH)
    lines = []
    for line in value.splitlines() or [""]:
        lines.extend(textwrap.wrap(line, width) or [""])
    return lines


class PanesView(View):
    name = "panes"

    def __init__(self, project_id: str) -> None:
        self.project_id = project_id

    def _build_breadcrumb(self, state: NavState) -> str:
        """Breadcrumb like: project > users > alice"""
        return " > ".join([self.project_id, *state.path])

    def _heading(self, context: PaneContext, state: NavState) -> str:
        if context == "collections":
            return f"Collections ({self.project_id})"
        if context == "documents":
            if state.current_collection is None:
                return "Documents"
            return f"Documents ({state.current_collection})"
        return f"Fields ({state.current_collection}/{state.current_document})"

    def _row(self, node: Node, context: PaneContext, selected: bool, width: int) -> list[Text]:
        style = SELECTED_STYLE if selected else ""
        if context != "fields" or node.is_error:
            return [Text(node.title, style=style)]

        # Value column starts after the key column and one space.
        chunks = wrap_value(node.value_string, width - KEY_WIDTH - 2)
        first = Text()
        first.append(node.key.ljust(KEY_WIDTH), style=f"bold {style}".strip())
        first.append(" ")
        first.append(chunks[0], style=style)
        rest = [Text(" " * (KEY_WIDTH + 1) + chunk, style=style) for chunk in chunks[1:]]
        return [first, *rest]

    def render_pane(self, pane: PaneModel, context: PaneContext, state: NavState) -> Text:
        text = Text(no_wrap=True, overflow="ellipsis")
        text.append(self._heading(context, state), style=HEADING_STYLE)

        rows = [
            self._row(node, context, index == pane.cursor, pane.width)
            for index, node in enumerate(pane.items)
        ]
        # The heading takes the first line of the pane.
        start, end = visible_window(pane.cursor, [len(r) for r in rows], pane.height - 1)
        for lines in rows[start:end]:
            for line in lines:
                text.append("\n")
                text.append_text(line)
        return text

    def render(self, state: NavState):
        left = Static(self.render_pane(state.left, state.left_context, state), id="left")
        right = Static(self.render_pane(state.right, state.right_context, state), id="right")
        for widget, pane in ((left, state.left), (right, state.right)):
            widget.styles.width = pane.width
            widget.styles.height = pane.height

        return [
            Vertical(
                Static(self._build_breadcrumb(state), id="breadcrumb", markup=False),
                Horizontal(left, right, id="panes"),
                Static(HINT, id="hint-bar", markup=False),
            )
        ]
