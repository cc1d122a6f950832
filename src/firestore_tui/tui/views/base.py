from abc import ABC, abstractmethod
from typing import Iterable
from textual.widget import Widget
from firestore_tui.tui.state import NavState


class View(ABC):
    name: str

    @abstractmethod
    def render(self, state: NavState) -> Iterable[Widget]: ...
