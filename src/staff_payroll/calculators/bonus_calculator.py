"""Role-specific bonus formulas.

Bonuses depend only on the role payload and the employee's base salary, so
every function here is pure. ``bonus_breakdown`` dispatches on the payload
type; an unknown payload is a programming error, not a validation failure.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Callable

from staff_payroll.calculators.types import BonusBreakdown
from staff_payroll.models.roles import (
    AreaChiefRole,
    AreaType,
    ManagerRole,
    RolePayload,
    SupervisorRole,
    TechnicianRole,
)

ZERO = Decimal("0")

COMPANY_CAR_BONUS = Decimal("200.00")
OVERTIME_HOURLY_RATE = Decimal("10.00")
BUDGET_BONUS_THRESHOLD = Decimal("50000")


def _money(amount: Decimal) -> Decimal:
    return amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def _percentage(part: int, whole: int) -> Decimal:
    if whole == 0:
        return ZERO
    return Decimal(part) / Decimal(whole) * 100


# ============================================================================
# Manager
# ============================================================================


def manager_bonuses(role: ManagerRole, base_salary: Decimal) -> BonusBreakdown:
    """5% of base per full group of 10 reports, plus the company car bonus."""
    management = ZERO
    if role.headcount >= 10:
        management = base_salary * Decimal("0.05") * (role.headcount // 10)
    car = COMPANY_CAR_BONUS if role.has_company_car else ZERO
    return BonusBreakdown({"management": _money(management), "company_car": _money(car)})


# ============================================================================
# Area chief
# ============================================================================


def goal_completion_pct(role: AreaChiefRole) -> Decimal:
    return _percentage(role.goals_achieved, role.goals_total)


def area_chief_bonuses(role: AreaChiefRole, base_salary: Decimal) -> BonusBreakdown:
    leadership = ZERO
    if role.subordinates >= 5:
        leadership = base_salary * Decimal("0.03") * (role.subordinates // 5)

    budget = ZERO
    if role.manages_budget and role.annual_budget >= BUDGET_BONUS_THRESHOLD:
        budget = base_salary * Decimal("0.04")

    goals_pct = goal_completion_pct(role)
    if goals_pct >= 80:
        goals = base_salary * Decimal("0.05")
    elif goals_pct >= 60:
        goals = base_salary * Decimal("0.03")
    else:
        goals = ZERO

    if role.area_type is AreaType.TECHNICAL:
        area_type = base_salary * Decimal("0.06")
    elif role.area_type is AreaType.COMMERCIAL:
        area_type = base_salary * Decimal("0.05")
    else:
        area_type = ZERO

    return BonusBreakdown(
        {
            "leadership": _money(leadership),
            "budget": _money(budget),
            "goals": _money(goals),
            "area_type": _money(area_type),
        }
    )


# ============================================================================
# Supervisor
# ============================================================================


def incident_resolution_pct(role: SupervisorRole) -> Decimal:
    return _percentage(role.incidents_resolved, role.incidents_total)


def supervisor_bonuses(role: SupervisorRole, base_salary: Decimal) -> BonusBreakdown:
    resolution_pct = incident_resolution_pct(role)
    if resolution_pct >= 90:
        incidents = base_salary * Decimal("0.05")
    elif resolution_pct >= 75:
        incidents = base_salary * Decimal("0.03")
    else:
        incidents = ZERO

    attendance = base_salary * Decimal("0.02") if role.days_worked >= 20 else ZERO
    leadership = base_salary * Decimal("0.03") if role.leads_team else ZERO

    return BonusBreakdown(
        {
            "incidents": _money(incidents),
            "attendance": _money(attendance),
            "leadership": _money(leadership),
        }
    )


# ============================================================================
# Technician
# ============================================================================


def technician_bonuses(role: TechnicianRole, base_salary: Decimal) -> BonusBreakdown:
    """2% of base per certification, $10 per overtime hour, 3% if lead."""
    certifications = len(role.certifications) * base_salary * Decimal("0.02")
    overtime = role.overtime_hours * OVERTIME_HOURLY_RATE
    leadership = base_salary * Decimal("0.03") if role.is_lead else ZERO
    return BonusBreakdown(
        {
            "certifications": _money(certifications),
            "overtime": _money(overtime),
            "leadership": _money(leadership),
        }
    )


BONUS_RULES: dict[type, Callable[..., BonusBreakdown]] = {
    ManagerRole: manager_bonuses,
    AreaChiefRole: area_chief_bonuses,
    SupervisorRole: supervisor_bonuses,
    TechnicianRole: technician_bonuses,
}


def bonus_breakdown(role: RolePayload, base_salary: Decimal) -> BonusBreakdown:
    """Bonus components for a role payload at the given base salary."""
    rule = BONUS_RULES.get(type(role))
    if rule is None:
        raise TypeError(f"No bonus rule for role payload {type(role).__name__}")
    return rule(role, base_salary)


def calculate_bonuses(role: RolePayload, base_salary: Decimal) -> Decimal:
    return bonus_breakdown(role, base_salary).total
