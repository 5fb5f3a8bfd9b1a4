from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ScheduleEntry


class ScheduleRepository(Protocol):
    def create(
        self,
        *,
        hour_start: int,
        hour_end: int,
        task_id: Optional[str],
        client_id: Optional[str],
        assigned_to: str,
        created_by: str,
        is_recurring: bool,
    ) -> ScheduleEntry:
        raise NotImplementedError

    def delete(self, *, schedule_id: str) -> bool:
        raise NotImplementedError

    def list_covering_hour(
        self,
        *,
        hour: int,
        assigned_to: Optional[str] = None,
        recurring_only: bool = False,
    ) -> Sequence[ScheduleEntry]:
        """Entries with hour_start <= hour <= hour_end, in schedule order."""

        raise NotImplementedError

    def list_all_joined(self) -> Sequence[dict]:
        """List all entries for the admin table (joined with task/client/assignee names)."""

        raise NotImplementedError
