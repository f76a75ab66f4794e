"""Pay statement engine - gross, bonuses, withholding and net per employee."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Iterable

from staff_payroll.calculators.types import BonusBreakdown, WithholdingSummary
from staff_payroll.calculators.withholding import WithholdingCalculator

if TYPE_CHECKING:
    from staff_payroll.models.employee import Employee

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PayStatement:
    """Result of calculating pay for one employee."""

    full_name: str
    role_tag: str
    base_salary: Decimal
    bonuses: BonusBreakdown
    withholding: WithholdingSummary

    @property
    def gross(self) -> Decimal:
        return self.withholding.gross

    @property
    def total_deductions(self) -> Decimal:
        return self.withholding.total_deductions

    @property
    def net(self) -> Decimal:
        return self.withholding.net

    def to_dict(self) -> dict[str, Any]:
        return {
            "full_name": self.full_name,
            "role": self.role_tag,
            "base_salary": str(self.base_salary),
            "bonuses": self.bonuses.to_dict(),
            "bonus_total": str(self.bonuses.total),
            "withholding": self.withholding.to_dict(),
            "net": str(self.net),
        }


@dataclass
class RosterCalculationResult:
    """Result of calculating pay for a whole roster."""

    statements: dict[str, PayStatement] = field(default_factory=dict)  # full_name -> statement
    total_gross: Decimal = Decimal("0")
    total_deductions: Decimal = Decimal("0")
    total_net: Decimal = Decimal("0")

    @property
    def employee_count(self) -> int:
        return len(self.statements)


class PayrollEngine:
    """Builds pay statements from employee records.

    Calculation order per employee:
    1) Role bonuses from the current role payload
    2) Gross = base salary + bonuses
    3) ISSS, AFP and income withholding on gross
    4) Net = gross - withholding
    """

    def __init__(self, calculator: type[WithholdingCalculator] = WithholdingCalculator):
        self.calculator = calculator

    def calculate(self, employee: Employee) -> PayStatement:
        """Calculate the pay statement for one employee."""
        bonuses = employee.bonus_breakdown()
        gross = employee.base_salary + bonuses.total
        withholding = self.calculator.summarize(gross)
        logger.debug(
            "Calculated %s (%s): gross=%s deductions=%s net=%s",
            employee.full_name,
            employee.role_tag,
            gross,
            withholding.total_deductions,
            withholding.net,
        )
        return PayStatement(
            full_name=employee.full_name,
            role_tag=employee.role_tag,
            base_salary=employee.base_salary,
            bonuses=bonuses,
            withholding=withholding,
        )

    def calculate_roster(self, employees: Iterable[Employee]) -> RosterCalculationResult:
        """Calculate statements and totals for every employee."""
        result = RosterCalculationResult()
        for employee in employees:
            statement = self.calculate(employee)
            result.statements[statement.full_name] = statement
            result.total_gross += statement.gross
            result.total_deductions += statement.total_deductions
            result.total_net += statement.net

        logger.info(
            "Calculated roster: %d employees, total net %s",
            result.employee_count,
            result.total_net,
        )
        return result
