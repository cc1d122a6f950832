"""
TUI decorators for safe action handling.
"""

from functools import wraps
from typing import Any, Callable


def require_controller(action_func: Callable[..., Any]) -> Callable[..., Any]:
    """Skip the action until the navigation controller exists (before mount)."""

    @wraps(action_func)
    def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
        if getattr(self, "controller", None) is None:
            return None
        return action_func(self, *args, **kwargs)

    return wrapper
