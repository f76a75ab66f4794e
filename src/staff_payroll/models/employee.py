"""Employee record: personal data, base salary and one role payload."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any

from staff_payroll.calculators.bonus_calculator import (
    bonus_breakdown,
    goal_completion_pct,
    incident_resolution_pct,
)
from staff_payroll.calculators.types import BonusBreakdown, WithholdingSummary
from staff_payroll.calculators.withholding import WithholdingCalculator
from staff_payroll.models.roles import (
    BASE_SALARIES,
    ROLE_PAYLOADS,
    AreaChiefRole,
    ManagerRole,
    RolePayload,
    RoleType,
    Sex,
    SupervisorRole,
    TechnicianRole,
)
from staff_payroll.models.validation import (
    ValidationError,
    require_date,
    require_money,
    require_text,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PersonalData:
    """Identity and contact details."""

    given_names: str
    first_surname: str
    second_surname: str
    address: str
    birth_date: date
    sex: Sex
    phone: str
    email: str

    def __post_init__(self) -> None:
        for name in (
            "given_names",
            "first_surname",
            "second_surname",
            "address",
            "phone",
            "email",
        ):
            require_text(name, getattr(self, name))
        born = require_date("birth_date", self.birth_date)
        if born > date.today():
            raise ValidationError("birth_date", "must not be in the future")
        object.__setattr__(self, "birth_date", born)
        object.__setattr__(self, "sex", Sex.parse(self.sex, "sex"))

    @property
    def full_name(self) -> str:
        return f"{self.given_names} {self.first_surname} {self.second_surname}"


def _field_names(cls: type) -> set[str]:
    return {f.name for f in dataclasses.fields(cls)}


class Employee:
    """An employee of one of the four roles.

    The role payload is a closed union (manager, area chief, supervisor,
    technician). Pay is always derived from current values:

        gross = base_salary + bonuses
        net   = gross - ISSS - AFP - income withholding
    """

    def __init__(
        self,
        personal: PersonalData,
        role: RolePayload,
        base_salary: Any = None,
    ):
        if not isinstance(personal, PersonalData):
            raise ValidationError("personal", "is required")
        if type(role) not in ROLE_PAYLOADS.values():
            raise ValidationError("role", "must be a manager, area chief, supervisor or technician")
        self._personal = personal
        self._role = role
        if base_salary is None:
            base_salary = BASE_SALARIES[role.role_type]
        self._base_salary = require_money("base_salary", base_salary)

    def __repr__(self) -> str:
        return f"Employee({self.full_name!r}, {self.role_tag!r})"

    def copy(self) -> Employee:
        # Personal data and role payloads are immutable, so sharing them is safe
        return Employee(self._personal, self._role, self._base_salary)

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def personal(self) -> PersonalData:
        return self._personal

    @property
    def role(self) -> RolePayload:
        return self._role

    @property
    def role_type(self) -> RoleType:
        return self._role.role_type

    @property
    def role_tag(self) -> str:
        """Role label used as a grouping key ("GERENTE", "TÉCNICO", ...)."""
        return self._role.role_type.value

    @property
    def full_name(self) -> str:
        return self._personal.full_name

    @property
    def given_names(self) -> str:
        return self._personal.given_names

    @property
    def first_surname(self) -> str:
        return self._personal.first_surname

    @property
    def second_surname(self) -> str:
        return self._personal.second_surname

    @property
    def birth_date(self) -> date:
        return self._personal.birth_date

    @property
    def sex(self) -> Sex:
        return self._personal.sex

    def age(self, as_of: date | None = None) -> int:
        """Whole years between birth date and ``as_of`` (default today)."""
        today = as_of or date.today()
        born = self._personal.birth_date
        had_birthday = (today.month, today.day) >= (born.month, born.day)
        return today.year - born.year - (0 if had_birthday else 1)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    @property
    def base_salary(self) -> Decimal:
        return self._base_salary

    @base_salary.setter
    def base_salary(self, value: Any) -> None:
        self.set_base_salary(value)

    def set_base_salary(self, value: Any) -> None:
        """Replace the base salary; negative amounts are rejected."""
        self._base_salary = require_money("base_salary", value)

    def update_personal(self, **changes: Any) -> None:
        unknown = set(changes) - _field_names(PersonalData)
        if unknown:
            raise ValidationError(sorted(unknown)[0], "is not a personal data field")
        self._personal = dataclasses.replace(self._personal, **changes)

    def update_role(self, **changes: Any) -> None:
        """Replace role fields; all changes are validated together."""
        unknown = set(changes) - _field_names(type(self._role))
        if unknown:
            raise ValidationError(
                sorted(unknown)[0], f"is not a field of role {self.role_tag}"
            )
        self._role = dataclasses.replace(self._role, **changes)

    def _add_name(self, role_cls: type, field: str, name: Any) -> None:
        role = self._require_role(role_cls, field)
        name = require_text(field, name)
        current: tuple[str, ...] = getattr(role, field)
        if name not in current:
            self._role = dataclasses.replace(role, **{field: current + (name,)})

    def _remove_name(self, role_cls: type, field: str, name: str) -> None:
        role = self._require_role(role_cls, field)
        current: tuple[str, ...] = getattr(role, field)
        if name in current:
            remaining = tuple(n for n in current if n != name)
            self._role = dataclasses.replace(role, **{field: remaining})

    def _require_role(self, role_cls: type, field: str) -> Any:
        if not isinstance(self._role, role_cls):
            raise ValidationError(field, f"not available for role {self.role_tag}")
        return self._role

    def add_team(self, name: str) -> None:
        self._add_name(ManagerRole, "teams", name)

    def remove_team(self, name: str) -> None:
        self._remove_name(ManagerRole, "teams", name)

    def add_sub_area(self, name: str) -> None:
        self._add_name(AreaChiefRole, "sub_areas", name)

    def remove_sub_area(self, name: str) -> None:
        self._remove_name(AreaChiefRole, "sub_areas", name)

    def add_supervised_team(self, name: str) -> None:
        self._add_name(SupervisorRole, "supervised_teams", name)

    def remove_supervised_team(self, name: str) -> None:
        self._remove_name(SupervisorRole, "supervised_teams", name)

    def add_certification(self, name: str) -> None:
        self._add_name(TechnicianRole, "certifications", name)

    def remove_certification(self, name: str) -> None:
        self._remove_name(TechnicianRole, "certifications", name)

    # ------------------------------------------------------------------
    # Pay
    # ------------------------------------------------------------------

    def bonus_breakdown(self) -> BonusBreakdown:
        return bonus_breakdown(self._role, self._base_salary)

    def bonuses(self) -> Decimal:
        return self.bonus_breakdown().total

    def gross_with_bonus(self) -> Decimal:
        return self._base_salary + self.bonuses()

    def total_deductions(self) -> Decimal:
        return WithholdingCalculator.total_deductions(self.gross_with_bonus())

    def withholding(self) -> WithholdingSummary:
        return WithholdingCalculator.summarize(self.gross_with_bonus())

    def net_pay(self) -> Decimal:
        gross = self.gross_with_bonus()
        return gross - WithholdingCalculator.total_deductions(gross)

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def summary_line(self) -> str:
        """One-line role summary as printed on the per-role reports."""
        role = self._role
        if isinstance(role, ManagerRole):
            return (
                f"Gerente {self.full_name} - Depto: {role.department} - "
                f"Empleados a cargo: {role.headcount} - "
                f"Auto empresa: {'Sí' if role.has_company_car else 'No'}"
            )
        if isinstance(role, AreaChiefRole):
            return (
                f"Jefe de Área {self.full_name} - Área: {role.area} "
                f"({role.area_type.value}) - Subordinados: {role.subordinates} - "
                f"Metas: {goal_completion_pct(role):.1f}%"
            )
        if isinstance(role, SupervisorRole):
            return (
                f"Supervisor {self.full_name} - Depto: {role.department} - "
                f"Tipo: {role.supervision_type.value} - "
                f"Subordinados: {role.subordinates} - "
                f"Incidentes Resueltos: {incident_resolution_pct(role):.1f}%"
            )
        return (
            f"Técnico {self.full_name} - Especialidad: {role.specialty} - "
            f"Turno: {role.shift.value} - Horas extra: {role.overtime_hours}"
        )


def create_employee(
    role_type: RoleType | str,
    personal: PersonalData | dict[str, Any],
    **role_fields: Any,
) -> Employee:
    """Build an employee from a role tag, personal data and role fields."""
    role_type = RoleType.parse(role_type, "role")
    if isinstance(personal, dict):
        missing = _field_names(PersonalData) - set(personal)
        if missing:
            raise ValidationError(sorted(missing)[0], "is required")
        personal = PersonalData(**personal)
    payload_cls = ROLE_PAYLOADS[role_type]
    unknown = set(role_fields) - _field_names(payload_cls)
    if unknown:
        raise ValidationError(sorted(unknown)[0], f"is not a field of role {role_type.value}")
    for f in dataclasses.fields(payload_cls):
        required = f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
        if required and f.name not in role_fields:
            raise ValidationError(f.name, "is required")
    employee = Employee(personal, payload_cls(**role_fields))
    logger.debug("Created %s %s", employee.role_tag, employee.full_name)
    return employee
