"""
Service for the tasks collection.

Tasks reference a project and optionally a person by id.  Those ids
are stored as given: the task store never consults the project or
people stores.  Every new task starts with status ``"todo"``; the
status is the only field that can change afterwards and accepts any
string.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from team_tracker_api.app.schemas.task import DEFAULT_STATUS, Task, TaskCreate, TaskUpdate
from team_tracker_api.app.services.store import RecordStore

logger = logging.getLogger(__name__)


def _seed_tasks() -> List[Task]:
    return [
        Task(
            id=1,
            title="Diseñar UI",
            description="Pantalla principal",
            status=DEFAULT_STATUS,
            project_id=1,
            assigned_to=1,
        )
    ]


class TaskService(RecordStore[Task]):
    """In‑memory store of :class:`Task` records."""

    entity = "task"
    seed = staticmethod(_seed_tasks)

    def list_tasks(self) -> List[Task]:
        return self.all()

    def get_task(self, task_id: int) -> Optional[Task]:
        return self._find(task_id)

    def create_task(self, data: TaskCreate) -> Task:
        """Append a new task in ``todo`` state.

        A falsy ``assigned_to`` (``None`` or ``0``) is stored as ``None``.
        """
        return self._insert(
            lambda new_id: Task(
                id=new_id,
                title=data.title,
                description=data.description,
                status=DEFAULT_STATUS,
                project_id=data.project_id,
                assigned_to=data.assigned_to or None,
            )
        )

    def update_task(self, task_id: int, data: TaskUpdate) -> Optional[Task]:
        with self._lock:
            task = self._find(task_id)
            if task is None:
                return None
            if data.status:
                logger.info("Task %s status %s -> %s", task_id, task.status, data.status)
                task.status = data.status
            return task

    def delete_task(self, task_id: int) -> bool:
        return self._remove(task_id)
