"""Pay calculation: bonuses, statutory withholding and pay statements."""

from staff_payroll.calculators.bonus_calculator import bonus_breakdown, calculate_bonuses
from staff_payroll.calculators.engine import (
    PayrollEngine,
    PayStatement,
    RosterCalculationResult,
)
from staff_payroll.calculators.types import BonusBreakdown, IncomeBracket, WithholdingSummary
from staff_payroll.calculators.withholding import WithholdingCalculator

__all__ = [
    "PayrollEngine",
    "PayStatement",
    "RosterCalculationResult",
    "BonusBreakdown",
    "IncomeBracket",
    "WithholdingSummary",
    "WithholdingCalculator",
    "bonus_breakdown",
    "calculate_bonuses",
]
