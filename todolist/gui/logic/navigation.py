"""
Linear navigation history.

The navigator only records routes and announces changes; the stack panel
turns routes into pages.
"""

import logging
from typing import Any, List, Optional

from PySide6.QtCore import QObject, Signal

logger = logging.getLogger(__name__)


class Route:
    """A named screen plus the parameters it was opened with."""

    def __init__(self, name: str, params: Any = None):
        self.name = name
        self.params = params

    def __repr__(self) -> str:
        return f"Route(name={self.name!r}, params={self.params!r})"


class Navigator(QObject):
    """Stack of routes with the initial route at the bottom."""

    route_pushed = Signal(object)  # Route now on top
    route_popped = Signal(object)  # Route that was removed

    def __init__(self, initial_route: str, parent=None):
        super().__init__(parent)
        self._stack: List[Route] = [Route(initial_route)]

    @property
    def current_route(self) -> Route:
        return self._stack[-1]

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def can_go_back(self) -> bool:
        return len(self._stack) > 1

    def history(self) -> List[str]:
        return [route.name for route in self._stack]

    def push(self, name: str, params: Any = None) -> Route:
        route = Route(name, params)
        self._stack.append(route)
        logger.debug(f"Navigated to {name} (depth {self.depth})")
        self.route_pushed.emit(route)
        return route

    def pop(self) -> Optional[Route]:
        """Return to the previous route; does nothing on the initial route."""
        if not self.can_go_back:
            logger.debug("Ignoring back navigation on the initial route")
            return None
        route = self._stack.pop()
        logger.debug(f"Left {route.name}, now on {self.current_route.name}")
        self.route_popped.emit(route)
        return route
