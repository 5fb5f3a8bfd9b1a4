from __future__ import annotations

from typing import Protocol


class TaskRepository(Protocol):
    def set_assigned_to(self, *, task_id: str, employee_id: str) -> bool:
        """Write the canonical owner shown by the task screens."""

        raise NotImplementedError
