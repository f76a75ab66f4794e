"""Payroll engine for a fixed employee hierarchy."""

from staff_payroll.models.employee import Employee, PersonalData, create_employee
from staff_payroll.models.roles import (
    AreaChiefRole,
    AreaType,
    ManagerRole,
    RoleType,
    Sex,
    Shift,
    SupervisionType,
    SupervisorRole,
    TechnicianRole,
)
from staff_payroll.models.validation import ValidationError
from staff_payroll.calculators import PayrollEngine, WithholdingCalculator

__version__ = "1.0.0"

__all__ = [
    "Employee",
    "PersonalData",
    "create_employee",
    "AreaChiefRole",
    "AreaType",
    "ManagerRole",
    "RoleType",
    "Sex",
    "Shift",
    "SupervisionType",
    "SupervisorRole",
    "TechnicianRole",
    "ValidationError",
    "PayrollEngine",
    "WithholdingCalculator",
]
