from __future__ import annotations

from typing import Dict, Iterable, Optional, Protocol

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for employees.

    Note (DIP): services depend on this interface, not on a concrete DB.
    """

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def get_names(self, employee_ids: Iterable[str]) -> Dict[str, str]:
        """Map employee id -> full name; unknown ids are left out."""

        raise NotImplementedError
