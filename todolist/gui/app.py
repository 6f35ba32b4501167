"""
Main GUI Application Entry Point.

Wires settings, the document store, controllers and the main window
together and owns their lifecycle.
"""

import logging
import sys
from typing import Optional

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QObject, Signal

from todolist.core.settings.settings import TodoSettings, get_settings
from todolist.gui import config
from todolist.gui.logic.navigation import Navigator, Route
from todolist.gui.logic.services.async_qt_helper import AsyncQtHelper
from todolist.gui.logic.services.service_factory import ServiceFactory
from todolist.gui.logic.task_manager.edit_task_controller import EditTaskController
from todolist.gui.logic.task_manager.task_list_controller import TaskListController
from todolist.gui.ui.main_window import MainWindow
from todolist.gui.ui.pages.edit_task.page import EditTaskPage
from todolist.gui.ui.pages.page import Page
from todolist.gui.ui.pages.task_list.page import TaskListPage
from todolist.gui.ui.styles import APP_STYLESHEET

logger = logging.getLogger(__name__)

SHUTDOWN_TIMEOUT_SECONDS = 5.0


class ApplicationController(QObject):
    """
    Main application controller that manages the overall application lifecycle
    and coordinates between the UI and business logic layers.
    """

    application_ready = Signal()

    def __init__(self, settings: Optional[TodoSettings] = None):
        super().__init__()
        self.settings = settings or get_settings()

        self.async_helper = None
        self.service_factory = None
        self.task_service = None
        self.navigator = None
        self.main_window = None

        self.is_initialized = False

    def initialize(self):
        """Initialize the application.

        Raises:
            ConfigurationError: If the configured store backend is unknown
        """
        logger.info(f"Initializing {config.APP_NAME} with '{self.settings.store_backend}' store")

        self.service_factory = ServiceFactory(self.settings)
        self.task_service = self.service_factory.get_task_service()

        self.async_helper = AsyncQtHelper()
        self.async_helper.run_async_with_callback(
            self.service_factory.initialize(),
            error_callback=lambda error: logger.error(f"Document store unavailable: {error}"),
        )

        self.navigator = Navigator(config.ROUTE_TASK_LIST)
        self.main_window = MainWindow(self.navigator, self.create_page)

        self.is_initialized = True
        logger.info("Application initialization completed successfully")

    def create_page(self, route: Route) -> Page:
        """Build the page and controller for a route."""
        if route.name == config.ROUTE_TASK_LIST:
            controller = TaskListController(self.task_service, self.async_helper)
            controller.edit_requested.connect(self.open_editor)
            return TaskListPage(controller)

        if route.name == config.ROUTE_EDIT_TASK:
            controller = EditTaskController(route.params, self.task_service, self.async_helper, self.navigator.pop)
            return EditTaskPage(controller)

        raise ValueError(f"Unknown route: {route.name}")

    def open_editor(self, params):
        self.navigator.push(config.ROUTE_EDIT_TASK, params)

    def show(self):
        """Show the main application window."""
        if not self.is_initialized:
            raise RuntimeError("Application must be initialized before showing")

        self.main_window.show()
        self.application_ready.emit()
        logger.info("Application window shown")

    def cleanup(self):
        """Clean up application resources."""
        logger.info("Cleaning up application resources")

        if self.main_window:
            self.main_window.stack_panel.unmount_all()

        if self.async_helper:
            try:
                self.async_helper.run_sync(self.service_factory.shutdown(), SHUTDOWN_TIMEOUT_SECONDS)
            except Exception as e:
                logger.error(f"Error shutting down services: {e}")
            self.async_helper.shutdown()

        logger.info("Application cleanup completed")


def run(argv=None, settings: Optional[TodoSettings] = None) -> int:
    """Create the QApplication, show the main window and run the event loop."""
    app = QApplication(argv if argv is not None else sys.argv)
    app.setApplicationName(config.APP_NAME)
    app.setApplicationVersion(config.APP_VERSION)
    app.setOrganizationName(config.DEV_NAME)
    app.setStyleSheet(APP_STYLESHEET)

    controller = ApplicationController(settings)
    controller.initialize()
    app.aboutToQuit.connect(controller.cleanup)
    controller.show()

    return app.exec()
