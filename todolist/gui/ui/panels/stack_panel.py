import logging
from collections.abc import Callable

from PySide6.QtWidgets import QHBoxLayout, QStackedWidget, QWidget

from todolist.gui.logic.navigation import Navigator, Route
from todolist.gui.ui.pages.page import Page

logger = logging.getLogger(__name__)


class StackPanel(QWidget):
    """Keeps one page per route on the navigator's stack, top page visible."""

    def __init__(self, navigator: Navigator, page_factory: Callable[[Route], Page]):
        super().__init__()
        self.navigator = navigator
        self.page_factory = page_factory
        self.pages = []
        self.stack = None
        self.main_layout = None
        self.init_ui()
        self.init_logic()

    def init_ui(self):
        self.main_layout = QHBoxLayout()
        self.stack = QStackedWidget()
        self.main_layout.addWidget(self.stack)

        self.main_layout.setContentsMargins(4, 4, 4, 4)
        self.main_layout.setSpacing(0)

        self.setLayout(self.main_layout)

    def init_logic(self):
        self.navigator.route_pushed.connect(self.on_route_pushed)
        self.navigator.route_popped.connect(self.on_route_popped)

    def current_page(self):
        return self.pages[-1] if self.pages else None

    def show_root(self):
        """Create the page for the navigator's initial route."""
        if not self.pages:
            self.on_route_pushed(self.navigator.current_route)

    def on_route_pushed(self, route: Route):
        page = self.page_factory(route)
        self.pages.append(page)
        self.stack.addWidget(page)
        self.stack.setCurrentWidget(page)
        page.page_visible()
        logger.debug(f"Showing page {route.name}")

    def on_route_popped(self, route: Route):
        if not self.pages:
            return
        page = self.pages.pop()
        page.page_removed()
        self.stack.removeWidget(page)
        page.deleteLater()
        if self.pages:
            self.stack.setCurrentWidget(self.pages[-1])
            self.pages[-1].page_visible()

    def unmount_all(self):
        """Remove every page, top first."""
        while self.pages:
            page = self.pages.pop()
            page.page_removed()
            self.stack.removeWidget(page)
            page.deleteLater()
