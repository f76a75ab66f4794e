"""Role tags and role payloads for the employee hierarchy.

Each employee carries exactly one role payload. Payloads are frozen
snapshots: an update builds a new payload through ``dataclasses.replace``,
which re-runs validation, so a rejected update never leaves a half-applied
record behind.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar, Union

from staff_payroll.models.validation import (
    ValidationError,
    require_count,
    require_flag,
    require_money,
    require_text,
    unique_names,
)


def _normalize(text: str) -> str:
    """Casefold and strip accents so 'TÉCNICA' matches 'tecnica'."""
    decomposed = unicodedata.normalize("NFKD", text.strip().replace("_", " "))
    return "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()


class Tag(str, Enum):
    """Closed set of labels, parsed from either the member name or its label."""

    @classmethod
    def parse(cls, value: Any, field_name: str | None = None) -> Tag:
        if isinstance(value, cls):
            return value
        field_name = field_name or cls.__name__
        if not isinstance(value, str):
            raise ValidationError(field_name, f"must be one of {cls.choices()}")
        wanted = _normalize(value)
        for member in cls:
            if wanted in (_normalize(member.name), _normalize(member.value)):
                return member
        raise ValidationError(field_name, f"'{value}' is not one of {cls.choices()}")

    @classmethod
    def choices(cls) -> list[str]:
        return [member.value for member in cls]


class RoleType(Tag):
    """Employee role tags, as printed on reports."""

    MANAGER = "GERENTE"
    AREA_CHIEF = "JEFE DE ÁREA"
    SUPERVISOR = "SUPERVISOR"
    TECHNICIAN = "TÉCNICO"


class Sex(Tag):
    MALE = "M"
    FEMALE = "F"

    @property
    def label(self) -> str:
        return "Masculino" if self is Sex.MALE else "Femenino"


class AreaType(Tag):
    OPERATIONAL = "Operativa"
    ADMINISTRATIVE = "Administrativa"
    COMMERCIAL = "Comercial"
    TECHNICAL = "Técnica"


class SupervisionType(Tag):
    DIRECT = "Directa"
    INDIRECT = "Indirecta"
    MIXED = "Mixta"


class Shift(Tag):
    MORNING = "Mañana"
    AFTERNOON = "Tarde"
    NIGHT = "Noche"
    MIXED = "Mixto"


# Fixed monthly base salary per role
BASE_SALARIES: dict[RoleType, Decimal] = {
    RoleType.MANAGER: Decimal("5000.00"),
    RoleType.AREA_CHIEF: Decimal("1500.00"),
    RoleType.SUPERVISOR: Decimal("1000.00"),
    RoleType.TECHNICIAN: Decimal("800.00"),
}


def _set(obj: Any, name: str, value: Any) -> None:
    # Frozen dataclasses normalize their own fields in __post_init__
    object.__setattr__(obj, name, value)


@dataclass(frozen=True)
class ManagerRole:
    """Department manager."""

    role_type: ClassVar[RoleType] = RoleType.MANAGER

    department: str
    headcount: int = 0
    has_company_car: bool = False
    teams: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        require_text("department", self.department)
        require_count("headcount", self.headcount)
        require_flag("has_company_car", self.has_company_car)
        _set(self, "teams", unique_names("teams", self.teams))


@dataclass(frozen=True)
class AreaChiefRole:
    """Head of an organizational area."""

    role_type: ClassVar[RoleType] = RoleType.AREA_CHIEF

    area: str
    area_type: AreaType = AreaType.OPERATIONAL
    subordinates: int = 0
    manages_budget: bool = False
    annual_budget: Decimal = Decimal("0")
    goals_achieved: int = 0
    goals_total: int = 0
    sub_areas: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        require_text("area", self.area)
        _set(self, "area_type", AreaType.parse(self.area_type, "area_type"))
        require_count("subordinates", self.subordinates)
        require_flag("manages_budget", self.manages_budget)
        _set(self, "annual_budget", require_money("annual_budget", self.annual_budget))
        require_count("goals_achieved", self.goals_achieved)
        require_count("goals_total", self.goals_total)
        if self.goals_achieved > self.goals_total:
            raise ValidationError(
                "goals_achieved",
                f"{self.goals_achieved} exceeds goals_total {self.goals_total}",
            )
        _set(self, "sub_areas", unique_names("sub_areas", self.sub_areas))


@dataclass(frozen=True)
class SupervisorRole:
    """Supervisor of a department's staff."""

    role_type: ClassVar[RoleType] = RoleType.SUPERVISOR

    department: str
    supervision_type: SupervisionType = SupervisionType.DIRECT
    subordinates: int = 0
    leads_team: bool = False
    days_worked: int = 0
    incidents_resolved: int = 0
    incidents_total: int = 0
    supervised_teams: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        require_text("department", self.department)
        _set(
            self,
            "supervision_type",
            SupervisionType.parse(self.supervision_type, "supervision_type"),
        )
        require_count("subordinates", self.subordinates)
        require_flag("leads_team", self.leads_team)
        require_count("days_worked", self.days_worked)
        require_count("incidents_resolved", self.incidents_resolved)
        require_count("incidents_total", self.incidents_total)
        if self.incidents_resolved > self.incidents_total:
            raise ValidationError(
                "incidents_resolved",
                f"{self.incidents_resolved} exceeds incidents_total {self.incidents_total}",
            )
        _set(self, "supervised_teams", unique_names("supervised_teams", self.supervised_teams))


@dataclass(frozen=True)
class TechnicianRole:
    """Technical staff."""

    role_type: ClassVar[RoleType] = RoleType.TECHNICIAN

    specialty: str
    overtime_hours: int = 0
    shift: Shift = Shift.MORNING
    is_lead: bool = False
    certifications: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        require_text("specialty", self.specialty)
        require_count("overtime_hours", self.overtime_hours)
        _set(self, "shift", Shift.parse(self.shift, "shift"))
        require_flag("is_lead", self.is_lead)
        _set(self, "certifications", unique_names("certifications", self.certifications))


RolePayload = Union[ManagerRole, AreaChiefRole, SupervisorRole, TechnicianRole]

ROLE_PAYLOADS: dict[RoleType, type] = {
    RoleType.MANAGER: ManagerRole,
    RoleType.AREA_CHIEF: AreaChiefRole,
    RoleType.SUPERVISOR: SupervisorRole,
    RoleType.TECHNICIAN: TechnicianRole,
}
