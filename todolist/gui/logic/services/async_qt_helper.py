"""
Async-Qt integration helper for proper event loop management.

Store operations run on one asyncio loop owned by a background thread.
Their results, and any callback wrapped with main_thread_callback(), are
delivered back on the Qt thread through a queued signal.
"""

import asyncio
import functools
import logging
import threading
from concurrent.futures import Future
from typing import Any, Awaitable, Callable, Optional, Protocol

from PySide6.QtCore import QObject, Qt, Signal

logger = logging.getLogger(__name__)


class AsyncRunner(Protocol):
    """What controllers need from the async bridge."""

    def run_async_with_callback(self, coroutine: Awaitable[Any],
                                success_callback: Optional[Callable] = None,
                                error_callback: Optional[Callable] = None) -> Any:
        ...

    def main_thread_callback(self, func: Callable) -> Callable:
        ...


class AsyncQtHelper(QObject):
    """Helper class for managing async operations in Qt GUI context."""

    # callback, args; always delivered on the thread owning the helper
    _dispatch_requested = Signal(object, object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(target=self._run_loop, name="async_qt", daemon=True)
        self._closed = False
        self._dispatch_requested.connect(self._dispatch, Qt.ConnectionType.QueuedConnection)
        self._thread.start()
        logger.debug("AsyncQtHelper loop thread started")

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop

    def _run_loop(self):
        asyncio.set_event_loop(self._loop)
        self._loop.run_forever()

    def _dispatch(self, callback: Callable, args: tuple):
        try:
            callback(*args)
        except Exception as e:
            logger.error(f"Callback {getattr(callback, '__qualname__', callback)} failed: {e}", exc_info=True)

    def call_in_main_thread(self, callback: Callable, *args):
        """Queue a call onto the Qt thread."""
        if self._closed:
            logger.debug(f"Dropping callback after shutdown: {getattr(callback, '__qualname__', callback)}")
            return
        self._dispatch_requested.emit(callback, args)

    def main_thread_callback(self, func: Callable) -> Callable:
        """Wrap func so that calling it from any thread runs it on the Qt thread."""

        @functools.wraps(func)
        def wrapper(*args):
            self.call_in_main_thread(func, *args)

        return wrapper

    def run_async_with_callback(self, coroutine: Awaitable[Any],
                                success_callback: Optional[Callable] = None,
                                error_callback: Optional[Callable] = None) -> Future:
        """
        Schedule a coroutine on the background loop.

        success_callback receives the result and error_callback the raised
        exception, both on the Qt thread.
        """
        future = asyncio.run_coroutine_threadsafe(coroutine, self._loop)

        def on_done(done: Future):
            if done.cancelled():
                logger.debug("Async operation cancelled")
                return
            error = done.exception()
            if error is not None:
                if error_callback:
                    self.call_in_main_thread(error_callback, error)
                else:
                    logger.error(f"Async operation failed: {error}")
            elif success_callback:
                self.call_in_main_thread(success_callback, done.result())

        future.add_done_callback(on_done)
        return future

    def run_sync(self, coroutine: Awaitable[Any], timeout: Optional[float] = None) -> Any:
        """Run a coroutine on the background loop and block until it finishes."""
        return asyncio.run_coroutine_threadsafe(coroutine, self._loop).result(timeout)

    async def _cancel_pending(self):
        current = asyncio.current_task()
        pending = [task for task in asyncio.all_tasks() if task is not current]
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)

    def shutdown(self, timeout: float = 5.0):
        """Cancel outstanding work, stop the loop and join its thread."""
        if self._closed:
            return
        logger.info("Shutting down AsyncQtHelper")
        self._closed = True

        try:
            self.run_sync(self._cancel_pending(), timeout)
        except Exception as e:
            logger.warning(f"Failed to cancel pending async operations: {e}")

        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout)
        if not self._thread.is_alive():
            self._loop.close()
        logger.info("AsyncQtHelper shutdown complete")
