from .edit_task_controller import EditTaskController
from .task_list_controller import TaskListController

__all__ = ["EditTaskController", "TaskListController"]
