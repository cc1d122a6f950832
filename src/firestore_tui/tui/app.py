"""Firestore TUI application with Elm-inspired architecture.

- Two panes driven by a single immutable NavState
- Key and resize events become actions on the NavigationController
- Views are pure functions of state (no store reads in render())
- Store reads live in queries.py, called from the reducer
"""

from __future__ import annotations

import logging
from pathlib import Path

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.css.query import NoMatches

from firestore_tui.store.source import DataSource
from firestore_tui.tui.decorators import require_controller
from firestore_tui.tui.state import (
    COARSE_STEP,
    CursorMove,
    DrillDown,
    DrillUp,
    NavigationController,
    Quit,
    Resize,
)
from firestore_tui.tui.views.panes import PanesView


class FirestoreApp(App):
    CSS_PATH = Path(__file__).with_name("tui.css")
    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("ctrl+c", "quit", "Quit", priority=True),
        Binding("l", "drill_down", "Enter"),
        Binding("enter", "drill_down", "Enter", show=False),
        Binding("h", "drill_up", "Back"),
        Binding("j", "cursor_down", "Down"),
        Binding("k", "cursor_up", "Up"),
        Binding("d", "page_down", "Down 3"),
        Binding("u", "page_up", "Up 3"),
    ]

    def __init__(self, source: DataSource, project_id: str, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.source = source
        self.project_id = project_id
        self.controller: NavigationController | None = None
        self.view = PanesView(project_id)

    def compose(self) -> ComposeResult:
        yield Vertical(id="main")

    def on_mount(self) -> None:
        self.title = f"firestore-tui ({self.project_id})"
        self.controller = NavigationController(self.source)
        self.controller.dispatch(Resize(self.size.width, self.size.height))
        logging.info("Session started for %s", self.project_id)
        self._render_view()

    @require_controller
    def on_resize(self, event: events.Resize) -> None:
        self.controller.dispatch(Resize(event.size.width, event.size.height))
        self._render_view()

    # =====================
    # Navigation
    # =====================

    @require_controller
    def action_drill_down(self) -> None:
        """Enter the selected collection or document."""
        self._apply(DrillDown())

    @require_controller
    def action_drill_up(self) -> None:
        self._apply(DrillUp())

    @require_controller
    def action_cursor_down(self) -> None:
        self._apply(CursorMove(1))

    @require_controller
    def action_cursor_up(self) -> None:
        self._apply(CursorMove(-1))

    @require_controller
    def action_page_down(self) -> None:
        self._apply(CursorMove(COARSE_STEP))

    @require_controller
    def action_page_up(self) -> None:
        self._apply(CursorMove(-COARSE_STEP))

    async def action_quit(self) -> None:
        if self.controller is not None:
            self.controller.dispatch(Quit())
        logging.info("Session ended")
        self.exit()

    # =====================
    # Internal helpers
    # =====================

    def _apply(self, action) -> None:
        before = self.controller.state
        if self.controller.dispatch(action) is not before:
            self._render_view()

    def _render_view(self) -> None:
        """Schedule a view re-render.

        Textual's `remove_children()` / `mount()` are async. If we call them
        synchronously, removals are deferred and we can briefly have duplicate ids
        in the DOM (crash on fast navigation).
        """

        if self.controller is None:
            return

        self.run_worker(
            self._render_view_async(),
            group="render",
            exclusive=True,
            exit_on_error=False,
        )

    async def _render_view_async(self) -> None:
        if self.controller is None:
            return

        try:
            container = self.screen.query_one("#main")
        except NoMatches:
            return

        await container.remove_children()
        await container.mount_all(self.view.render(self.controller.state))
