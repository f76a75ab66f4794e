"""Roster reports: ordering, per-role grouping and salary statistics."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from staff_payroll.calculators.engine import PayrollEngine, PayStatement
from staff_payroll.calculators.types import WithholdingSummary
from staff_payroll.models.employee import Employee
from staff_payroll.models.roles import RoleType
from staff_payroll.services.roster_service import RosterService


@dataclass(frozen=True)
class SalaryStatistics:
    """Net pay statistics over a roster."""

    count: int
    total: Decimal
    average: Decimal
    minimum: Decimal
    maximum: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "count": self.count,
            "total": str(self.total),
            "average": str(self.average),
            "minimum": str(self.minimum),
            "maximum": str(self.maximum),
        }

    def __str__(self) -> str:
        return (
            "=== ESTADÍSTICAS DE SALARIOS ===\n"
            f"Total de empleados: {self.count}\n"
            f"Suma total de salarios: ${self.total:.2f}\n"
            f"Promedio de salarios: ${self.average:.2f}\n"
            f"Salario mínimo: ${self.minimum:.2f}\n"
            f"Salario máximo: ${self.maximum:.2f}"
        )


class ReportService:
    """Read-only reports over a roster."""

    def __init__(self, roster: RosterService, engine: PayrollEngine | None = None):
        self.roster = roster
        self.engine = engine or PayrollEngine()

    # =============== ORDERING ===============

    def sort_by_first_surname(self, ascending: bool = True) -> list[Employee]:
        return sorted(
            self.roster.all(),
            key=lambda e: e.first_surname.casefold(),
            reverse=not ascending,
        )

    def sort_by_full_name(self) -> list[Employee]:
        return sorted(self.roster.all(), key=lambda e: e.full_name)

    def sort_by_net_pay(self, ascending: bool = True) -> list[Employee]:
        return sorted(self.roster.all(), key=lambda e: e.net_pay(), reverse=not ascending)

    # =============== GROUPING ===============

    def count_by_role(self) -> dict[str, int]:
        return dict(Counter(e.role_tag for e in self.roster.all()))

    def net_pay_by_role(self) -> dict[str, Decimal]:
        totals: dict[str, Decimal] = {}
        for employee in self.roster.all():
            totals[employee.role_tag] = totals.get(employee.role_tag, Decimal("0")) + employee.net_pay()
        return totals

    def role_summaries(self, role: RoleType | str) -> list[str]:
        return [e.summary_line() for e in self.roster.filter_by_role(role)]

    # =============== TOTALS ===============

    def salary_statistics(self) -> SalaryStatistics:
        net_pays = [e.net_pay() for e in self.roster.all()]
        if not net_pays:
            zero = Decimal("0")
            return SalaryStatistics(0, zero, zero, zero, zero)
        total = sum(net_pays, Decimal("0"))
        average = (total / len(net_pays)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        return SalaryStatistics(
            count=len(net_pays),
            total=total,
            average=average,
            minimum=min(net_pays),
            maximum=max(net_pays),
        )

    def total_net_payroll(self) -> Decimal:
        return sum((e.net_pay() for e in self.roster.all()), Decimal("0"))

    def total_deductions(self) -> Decimal:
        return sum((e.total_deductions() for e in self.roster.all()), Decimal("0"))

    def withholding_summaries(self) -> list[WithholdingSummary]:
        return [e.withholding() for e in self.roster.all()]

    def pay_statements(self) -> list[PayStatement]:
        return list(self.engine.calculate_roster(self.roster.all()).statements.values())
