"""
Edit task controller.

Holds the title and description buffers for one task and writes them back
with a single update.
"""

import logging
from collections.abc import Callable

from PySide6.QtCore import Signal

from todolist.gui.logic.services.async_qt_helper import AsyncRunner
from todolist.gui.logic.services.base_controller import BaseController
from todolist.gui.logic.services.models import EditTaskParams
from todolist.gui.logic.services.task_service import TaskService

logger = logging.getLogger(__name__)


class EditTaskController(BaseController):
    """Business logic behind the edit task screen."""

    text_changed = Signal(str)
    description_changed = Signal(str)

    def __init__(self, params: EditTaskParams, task_service: TaskService, runner: AsyncRunner,
                 go_back: Callable[[], object], parent=None):
        super().__init__(runner, parent)
        self.params = params
        self.task_service = task_service
        self.go_back = go_back
        self.text = params.current_text
        self.description = params.current_description

    def initialize(self) -> None:
        self.state.initialized = True

    def shutdown(self) -> None:
        self.state.initialized = False

    def set_text(self, text: str) -> None:
        if text == self.text:
            return
        self.text = text
        self.text_changed.emit(text)

    def set_description(self, description: str) -> None:
        if description == self.description:
            return
        self.description = description
        self.description_changed.emit(description)

    def update_task(self) -> None:
        """Overwrite title and description, then return to the previous screen."""
        self.start_operation(
            "update_task",
            self.task_service.update_task(self.params.task_id, self.text, self.description),
            on_success=lambda _: self._on_updated(),
        )

    def _on_updated(self) -> None:
        if not self.state.initialized:
            logger.debug(f"Task {self.params.task_id} saved after its editor closed")
            return
        logger.debug(f"Task {self.params.task_id} saved, leaving editor")
        self.go_back()
