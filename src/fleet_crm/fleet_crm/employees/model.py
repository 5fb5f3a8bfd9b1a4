from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee (or admin) account.

    Note: plain data object, no DB access code here.
    """

    employee_id: str
    user_code: str
    full_name: str
    role: Role
    is_active: bool = True
