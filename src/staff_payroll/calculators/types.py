"""Type definitions for the pay calculation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class IncomeBracket:
    """Bracket of the progressive income withholding table."""

    number: int
    lower_bound: Decimal  # Exclusive; gross must exceed it
    upper_bound: Decimal | None  # Inclusive; None = no upper limit
    rate: Decimal  # As decimal, e.g., 0.20 for 20%
    flat_amount: Decimal = Decimal("0")  # Fixed amount at bracket start

    def contains(self, gross: Decimal) -> bool:
        if self.upper_bound is None:
            return gross > self.lower_bound
        return gross <= self.upper_bound


@dataclass(frozen=True)
class WithholdingSummary:
    """All statutory deductions for one gross amount."""

    gross: Decimal
    isss: Decimal
    afp: Decimal
    income: Decimal
    total_deductions: Decimal
    net: Decimal
    income_bracket: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "gross": str(self.gross),
            "isss": str(self.isss),
            "afp": str(self.afp),
            "income": str(self.income),
            "total_deductions": str(self.total_deductions),
            "net": str(self.net),
            "income_bracket": self.income_bracket,
        }

    def __str__(self) -> str:
        return (
            f"Sueldo Bruto: ${self.gross:.2f}\n"
            f"ISSS (7.5%): ${self.isss:.2f}\n"
            f"AFP (7.75%): ${self.afp:.2f}\n"
            f"Renta: ${self.income:.2f}\n"
            f"Total Descuentos: ${self.total_deductions:.2f}\n"
            f"Salario Neto: ${self.net:.2f}"
        )


@dataclass
class BonusBreakdown:
    """Named bonus components for one employee, in calculation order."""

    components: dict[str, Decimal] = field(default_factory=dict)

    @property
    def total(self) -> Decimal:
        return sum(self.components.values(), Decimal("0"))

    def to_dict(self) -> dict[str, str]:
        return {name: str(amount) for name, amount in self.components.items()}
