"""
Base controller class for business logic controllers.

Controllers own screen-local state, hand store work to the async runner
and announce state changes through Qt signals. Every operation completes
on the Qt thread.
"""

import logging
from abc import ABCMeta, abstractmethod
from typing import Any, Awaitable, Callable, Optional

from PySide6.QtCore import QObject, Signal

from todolist.core.models import MutableStrictBaseModel

from .async_qt_helper import AsyncRunner

logger = logging.getLogger(__name__)


class ControllerState(MutableStrictBaseModel):
    """Base controller state with strict validation but mutable for runtime updates."""

    initialized: bool = False
    current_operations: int = 0
    last_operation: Optional[str] = None


class QObjectMeta(type(QObject), ABCMeta):
    """Metaclass that combines QObject and ABC metaclasses."""
    pass


class BaseController(QObject, metaclass=QObjectMeta):
    """
    Base class for all business logic controllers.

    Failed operations are logged and announced through operation_failed;
    nothing is retried or rolled back.
    """

    # Common signals for view communication
    operation_started = Signal(str)  # operation_name
    operation_completed = Signal(str, object)  # operation_name, result
    operation_failed = Signal(str, str)  # operation_name, error_message

    def __init__(self, runner: AsyncRunner, parent=None):
        super().__init__(parent)
        self.runner = runner
        self.state = ControllerState()

        logger.debug(f"{self.__class__.__name__} controller created")

    @abstractmethod
    def initialize(self) -> None:
        """Start the controller's live work when its screen is mounted."""
        pass

    @abstractmethod
    def shutdown(self) -> None:
        """Release everything acquired in initialize()."""
        pass

    def start_operation(self, operation_name: str, coroutine: Awaitable[Any],
                        on_success: Optional[Callable[[Any], None]] = None,
                        on_error: Optional[Callable[[BaseException], None]] = None) -> None:
        """Hand a coroutine to the runner and track its completion."""
        self.operation_started.emit(operation_name)
        self.state.current_operations += 1
        self.state.last_operation = operation_name

        def on_finished(result):
            self._on_operation_finished(operation_name, True, result)
            if on_success:
                on_success(result)

        def on_failed(error):
            self._on_operation_finished(operation_name, False, error)
            if on_error:
                on_error(error)

        self.runner.run_async_with_callback(coroutine, on_finished, on_failed)
        logger.debug(f"Started operation: {operation_name}")

    def _on_operation_finished(self, operation_name: str, success: bool, result: Any) -> None:
        self.state.current_operations = max(0, self.state.current_operations - 1)

        if success:
            logger.debug(f"Operation completed successfully: {operation_name}")
            self.operation_completed.emit(operation_name, result)
        else:
            logger.error(f"Operation failed: {operation_name} - {result}")
            self.operation_failed.emit(operation_name, str(result))
