from .async_qt_helper import AsyncQtHelper, AsyncRunner
from .base_controller import BaseController, ControllerState
from .models import EditTaskParams, Task, TaskFilter
from .service_factory import ServiceFactory
from .task_service import TaskService

__all__ = [
    "AsyncQtHelper",
    "AsyncRunner",
    "BaseController",
    "ControllerState",
    "EditTaskParams",
    "ServiceFactory",
    "Task",
    "TaskFilter",
    "TaskService",
]
