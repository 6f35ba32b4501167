"""
Task service.

Thin layer translating task operations into document store calls on the
tasks collection. Errors raised by the store propagate unchanged.
"""

import logging
from collections.abc import Callable
from typing import List

from todolist.providers.db.base import DocumentStoreProvider, StoredDocument, Subscription

from .models import Task

logger = logging.getLogger(__name__)

TasksHandler = Callable[[List[Task]], None]


class TaskService:
    """Task operations on one document store collection."""

    def __init__(self, store: DocumentStoreProvider, collection_name: str = "tasks"):
        self.store = store
        self.collection_name = collection_name

    async def watch_tasks(self, handler: TasksHandler) -> Subscription:
        """Subscribe to the collection; handler receives the full task list on every change."""

        def on_snapshot(documents: List[StoredDocument]) -> None:
            handler([Task.from_document(document) for document in documents])

        subscription = await self.store.subscribe(self.collection_name, on_snapshot)
        logger.debug(f"Watching tasks in '{self.collection_name}'")
        return subscription

    async def create_task(self, text: str) -> str:
        task_id = await self.store.create_document(
            self.collection_name, {"text": text, "description": "", "done": False}
        )
        logger.info(f"Created task {task_id}")
        return task_id

    async def set_done(self, task_id: str, done: bool) -> None:
        await self.store.update_document(self.collection_name, task_id, {"done": done})
        logger.info(f"Marked task {task_id} done={done}")

    async def update_task(self, task_id: str, text: str, description: str) -> None:
        await self.store.update_document(
            self.collection_name, task_id, {"text": text, "description": description}
        )
        logger.info(f"Updated task {task_id}")

    async def delete_task(self, task_id: str) -> None:
        await self.store.delete_document(self.collection_name, task_id)
        logger.info(f"Deleted task {task_id}")
