"""Statutory withholding: ISSS, AFP and the progressive income table.

The schedule is fixed for a single jurisdiction:

    ISSS   7.50% of gross, contributable salary capped at $1,000.00
    AFP    7.75% of gross, contributable salary capped at $6,500.00
    Renta  up to $472.00             exempt
           $472.01 - $895.24         10% over $472.00
           $895.25 - $2,038.10       $42.32 + 20% over $895.24
           over $2,038.10            $270.90 + 30% over $2,038.10

Every deduction is rounded to cents. A gross of zero or less withholds
nothing.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from staff_payroll.calculators.types import IncomeBracket, WithholdingSummary

CENT = Decimal("0.01")
ZERO = Decimal("0")


def to_decimal(value: Any) -> Decimal:
    """Coerce an amount to Decimal without float artifacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_money(amount: Decimal) -> Decimal:
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


class WithholdingCalculator:
    """Calculates statutory deductions from a gross monthly amount.

    Each deduction is rounded to cents (ROUND_HALF_UP) on its own before
    totals are taken, so results can differ by a cent from the unrounded
    formula: AFP on $5,450.00 is 422.375, returned as 422.38.
    """

    ISSS_RATE = Decimal("0.075")
    ISSS_SALARY_CAP = Decimal("1000.00")
    AFP_RATE = Decimal("0.0775")
    AFP_SALARY_CAP = Decimal("6500.00")

    ISSS_MAX = ISSS_SALARY_CAP * ISSS_RATE  # 75.00
    AFP_MAX = AFP_SALARY_CAP * AFP_RATE  # 503.75

    INCOME_BRACKETS: tuple[IncomeBracket, ...] = (
        IncomeBracket(1, ZERO, Decimal("472.00"), ZERO),
        IncomeBracket(2, Decimal("472.00"), Decimal("895.24"), Decimal("0.10")),
        IncomeBracket(
            3, Decimal("895.24"), Decimal("2038.10"), Decimal("0.20"), Decimal("42.32")
        ),
        IncomeBracket(4, Decimal("2038.10"), None, Decimal("0.30"), Decimal("270.90")),
    )

    @classmethod
    def isss(cls, gross: Any) -> Decimal:
        """ISSS (social security) deduction, capped at $75.00."""
        gross = to_decimal(gross)
        if gross <= 0:
            return ZERO
        return round_money(min(gross * cls.ISSS_RATE, cls.ISSS_MAX))

    @classmethod
    def afp(cls, gross: Any) -> Decimal:
        """AFP (pension fund) deduction, capped at $503.75."""
        gross = to_decimal(gross)
        if gross <= 0:
            return ZERO
        return round_money(min(gross * cls.AFP_RATE, cls.AFP_MAX))

    @classmethod
    def income(cls, gross: Any) -> Decimal:
        """Income tax withholding from the four-bracket table."""
        gross = to_decimal(gross)
        if gross <= 0:
            return ZERO
        bracket = cls.bracket_for(gross)
        if bracket.rate == 0 and bracket.flat_amount == 0:
            return ZERO
        excess = gross - bracket.lower_bound
        return round_money(bracket.flat_amount + excess * bracket.rate)

    @classmethod
    def total_deductions(cls, gross: Any) -> Decimal:
        return cls.isss(gross) + cls.afp(gross) + cls.income(gross)

    @classmethod
    def net(cls, gross: Any) -> Decimal:
        gross = to_decimal(gross)
        return gross - cls.total_deductions(gross)

    @classmethod
    def is_income_exempt(cls, gross: Any) -> bool:
        return to_decimal(gross) <= cls.INCOME_BRACKETS[0].upper_bound

    @classmethod
    def bracket_for(cls, gross: Any) -> IncomeBracket:
        gross = to_decimal(gross)
        for bracket in cls.INCOME_BRACKETS:
            if bracket.contains(gross):
                return bracket
        return cls.INCOME_BRACKETS[-1]

    @classmethod
    def income_bracket_of(cls, gross: Any) -> int:
        """Bracket number (1-4); each upper bound belongs to its bracket."""
        return cls.bracket_for(gross).number

    @classmethod
    def summarize(cls, gross: Any) -> WithholdingSummary:
        """All deductions for a gross amount in one record."""
        gross = to_decimal(gross)
        isss = cls.isss(gross)
        afp = cls.afp(gross)
        income = cls.income(gross)
        total = isss + afp + income
        return WithholdingSummary(
            gross=gross,
            isss=isss,
            afp=afp,
            income=income,
            total_deductions=total,
            net=gross - total,
            income_bracket=cls.income_bracket_of(gross),
        )
