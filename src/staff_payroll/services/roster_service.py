"""In-memory employee roster with search and filter queries."""

from __future__ import annotations

import logging
import threading
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Iterable

from staff_payroll.models.employee import Employee
from staff_payroll.models.roles import RoleType, Sex
from staff_payroll.models.validation import ValidationError

logger = logging.getLogger(__name__)


def _key(full_name: str) -> str:
    return full_name.strip().casefold()


class EmployeeNotFoundError(Exception):
    """Raised when no employee has the requested full name."""

    def __init__(self, full_name: str):
        self.full_name = full_name
        super().__init__(f"Employee '{full_name}' not found")


class RosterService:
    """Employees keyed by full name (case-insensitive), in insertion order.

    Writes are serialized with a re-entrant lock so concurrent requests never
    interleave mutations of the same record. Queries return new lists.
    """

    def __init__(self, employees: Iterable[Employee] | None = None):
        self._employees: dict[str, Employee] = {}
        self._lock = threading.RLock()
        if employees is not None:
            self.add_many(employees)

    # =============== CRUD ===============

    def add(self, employee: Employee) -> bool:
        """Add an employee; returns False if the full name is already taken."""
        if employee is None:
            return False
        key = _key(employee.full_name)
        with self._lock:
            if key in self._employees:
                logger.warning("Duplicate employee rejected: %s", employee.full_name)
                return False
            self._employees[key] = employee
        logger.info("Added %s %s", employee.role_tag, employee.full_name)
        return True

    def add_many(self, employees: Iterable[Employee]) -> int:
        """Add several employees; returns how many were added."""
        added = 0
        for employee in employees:
            if self.add(employee):
                added += 1
        return added

    def get(self, full_name: str) -> Employee | None:
        if not full_name or not full_name.strip():
            return None
        return self._employees.get(_key(full_name))

    def require(self, full_name: str) -> Employee:
        employee = self.get(full_name)
        if employee is None:
            raise EmployeeNotFoundError(full_name)
        return employee

    def exists(self, full_name: str) -> bool:
        return self.get(full_name) is not None

    def replace(self, employee: Employee) -> bool:
        """Replace the stored employee with the same full name."""
        if employee is None:
            return False
        key = _key(employee.full_name)
        with self._lock:
            if key not in self._employees:
                return False
            self._employees[key] = employee
        logger.info("Replaced %s", employee.full_name)
        return True

    def remove(self, full_name: str) -> bool:
        if not full_name or not full_name.strip():
            return False
        with self._lock:
            employee = self._employees.pop(_key(full_name), None)
        if employee is None:
            return False
        logger.info("Removed %s", employee.full_name)
        return True

    def mutate(self, full_name: str, change: Callable[[Employee], Any]) -> Employee:
        """Apply ``change`` to a copy of an employee under the write lock.

        The stored record is swapped for the copy only if ``change`` succeeds,
        so a failing change leaves the roster untouched. A change that renames
        the employee re-keys the record; renaming onto another employee's full
        name is rejected.
        """
        with self._lock:
            current = self.require(full_name)
            old_key = _key(current.full_name)
            draft = current.copy()
            change(draft)
            new_key = _key(draft.full_name)
            if new_key == old_key:
                self._employees[old_key] = draft
            elif new_key in self._employees:
                raise ValidationError("full_name", f"'{draft.full_name}' already exists")
            else:
                self._employees = {
                    (new_key if k == old_key else k): (draft if k == old_key else e)
                    for k, e in self._employees.items()
                }
        logger.info("Updated %s", draft.full_name)
        return draft

    def all(self) -> list[Employee]:
        return list(self._employees.values())

    def count(self) -> int:
        return len(self._employees)

    def clear(self) -> None:
        with self._lock:
            self._employees.clear()
        logger.info("Roster cleared")

    # =============== QUERIES ===============

    def filter(self, predicate: Callable[[Employee], bool]) -> list[Employee]:
        return [e for e in self.all() if predicate(e)]

    def search_by_name(self, fragment: str) -> list[Employee]:
        """Partial, case-insensitive match on the full name."""
        if not fragment or not fragment.strip():
            return []
        wanted = fragment.strip().casefold()
        return self.filter(lambda e: wanted in e.full_name.casefold())

    def search_by_first_surname(self, surname: str) -> list[Employee]:
        """Exact, case-insensitive match on the first surname."""
        if not surname or not surname.strip():
            return []
        wanted = surname.strip().casefold()
        return self.filter(lambda e: e.first_surname.casefold() == wanted)

    def filter_by_role(self, role: RoleType | str) -> list[Employee]:
        try:
            role_type = RoleType.parse(role, "role")
        except ValidationError:
            return []
        return self.of_role(role_type)

    def of_role(self, role_type: RoleType) -> list[Employee]:
        return self.filter(lambda e: e.role_type is role_type)

    def filter_by_net_range(self, minimum: Any, maximum: Any) -> list[Employee]:
        """Employees whose net pay lies in [minimum, maximum]."""
        try:
            low = Decimal(str(minimum))
            high = Decimal(str(maximum))
        except InvalidOperation:
            return []
        if not (low.is_finite() and high.is_finite()) or low < 0 or high < low:
            return []
        return self.filter(lambda e: low <= e.net_pay() <= high)

    def filter_by_sex(self, sex: Sex | str) -> list[Employee]:
        try:
            wanted = Sex.parse(sex, "sex")
        except ValidationError:
            return []
        return self.filter(lambda e: e.sex is wanted)

    def birthdays_in_month(self, month: int) -> list[Employee]:
        if not 1 <= month <= 12:
            return []
        return self.filter(lambda e: e.birth_date.month == month)
