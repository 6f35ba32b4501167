"""
Task list controller.

Owns the live task collection, the new-task input buffer and the active
filter. The task list is replaced wholesale by every snapshot and never
changed locally.
"""

import logging
from typing import List, Optional

from PySide6.QtCore import Signal

from todolist.gui.logic.services.async_qt_helper import AsyncRunner
from todolist.gui.logic.services.base_controller import BaseController
from todolist.gui.logic.services.models import EditTaskParams, Task, TaskFilter
from todolist.gui.logic.services.task_service import TaskService
from todolist.providers.db.base import Subscription

logger = logging.getLogger(__name__)


class TaskListController(BaseController):
    """Business logic behind the task list screen."""

    tasks_changed = Signal(list)  # List[Task], full snapshot
    filter_changed = Signal(object)  # TaskFilter
    input_text_changed = Signal(str)
    edit_requested = Signal(object)  # EditTaskParams

    def __init__(self, task_service: TaskService, runner: AsyncRunner, parent=None):
        super().__init__(runner, parent)
        self.task_service = task_service
        self.tasks: List[Task] = []
        self.input_text = ""
        self.active_filter = TaskFilter.ALL
        self._subscription: Optional[Subscription] = None
        self._generation = 0

    @property
    def mounted(self) -> bool:
        return self.state.initialized

    def initialize(self) -> None:
        """Subscribe to the task collection once per mount."""
        if self.state.initialized:
            return
        self.state.initialized = True
        self._generation += 1
        generation = self._generation

        self.start_operation(
            "watch_tasks",
            self.task_service.watch_tasks(self.runner.main_thread_callback(
                lambda tasks: self._on_snapshot(generation, tasks))),
            on_success=lambda subscription: self._on_subscribed(generation, subscription),
        )

    def shutdown(self) -> None:
        """Release the subscription; a subscription still being set up is released on arrival."""
        if not self.state.initialized:
            return
        self.state.initialized = False
        self._generation += 1
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None
        logger.debug("Task list controller shut down")

    def _on_subscribed(self, generation: int, subscription: Subscription) -> None:
        if generation != self._generation:
            subscription.unsubscribe()
            return
        self._subscription = subscription

    def _on_snapshot(self, generation: int, tasks: List[Task]) -> None:
        if generation != self._generation:
            return
        self.tasks = list(tasks)
        self.tasks_changed.emit(self.tasks)

    def visible_tasks(self) -> List[Task]:
        """Tasks passing the active filter, in snapshot order."""
        return [task for task in self.tasks if self.active_filter.matches(task)]

    def set_input_text(self, text: str) -> None:
        if text == self.input_text:
            return
        self.input_text = text
        self.input_text_changed.emit(text)

    def set_filter(self, task_filter: TaskFilter) -> None:
        if task_filter is self.active_filter:
            return
        self.active_filter = task_filter
        self.filter_changed.emit(task_filter)

    def create_task(self) -> bool:
        """Create a task from the trimmed input; returns False when there is nothing to create."""
        text = self.input_text.strip()
        if not text:
            return False
        self.start_operation(
            "create_task",
            self.task_service.create_task(text),
            on_success=lambda task_id: self.set_input_text(""),
        )
        return True

    def toggle_done(self, task_id: str, done: bool) -> None:
        """Request the opposite of the completion state the caller saw."""
        self.start_operation("toggle_done", self.task_service.set_done(task_id, not done))

    def delete_task(self, task_id: str) -> None:
        self.start_operation("delete_task", self.task_service.delete_task(task_id))

    def open_task(self, task: Task) -> None:
        self.edit_requested.emit(EditTaskParams.from_task(task))
