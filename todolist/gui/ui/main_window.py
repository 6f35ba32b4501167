from collections.abc import Callable

from PySide6.QtWidgets import QMainWindow, QVBoxLayout, QWidget

from todolist.gui import config
from todolist.gui.logic.navigation import Navigator, Route
from todolist.gui.ui.pages.page import Page
from todolist.gui.ui.panels.header_bar import HeaderBar
from todolist.gui.ui.panels.stack_panel import StackPanel


class MainWindow(QMainWindow):

    def __init__(self, navigator: Navigator, page_factory: Callable[[Route], Page]):
        super(MainWindow, self).__init__()
        self.navigator = navigator
        self.page_factory = page_factory
        self.init_ui()
        self.init_logic()

    def init_ui(self):
        self.setWindowTitle(config.APP_NAME)
        self.setMinimumSize(config.WINDOW_MIN_WIDTH, config.WINDOW_MIN_HEIGHT)

        self.header_bar = HeaderBar(self)
        self.stack_panel = StackPanel(self.navigator, self.page_factory)

        self.application_layout = QVBoxLayout()
        self.application_layout.setContentsMargins(0, 0, 0, 0)
        self.application_layout.setSpacing(0)
        self.application_layout.addWidget(self.header_bar)
        self.application_layout.addWidget(self.stack_panel, 1)

        self.application_widget = QWidget()
        self.application_widget.setLayout(self.application_layout)
        self.setCentralWidget(self.application_widget)

    def init_logic(self):
        self.header_bar.back_requested.connect(self.navigator.pop)
        self.navigator.route_pushed.connect(self.update_header)
        self.navigator.route_popped.connect(self.update_header)
        self.stack_panel.show_root()
        self.update_header()

    def update_header(self, *args):
        self.header_bar.set_route(self.navigator.current_route.name, self.navigator.can_go_back)

    def closeEvent(self, event):
        self.stack_panel.unmount_all()
        event.accept()
