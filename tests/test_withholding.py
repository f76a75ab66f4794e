"""Unit tests for WithholdingCalculator.

Covers the ISSS and AFP caps, the four income brackets and their boundaries.
"""

import pytest
from decimal import Decimal

from staff_payroll.calculators.withholding import WithholdingCalculator


class TestKnownAmounts:
    """Worked examples of the full deduction schedule."""

    def test_gross_800(self):
        """Second bracket, no caps reached."""
        assert WithholdingCalculator.isss(Decimal("800")) == Decimal("60.00")
        assert WithholdingCalculator.afp(Decimal("800")) == Decimal("62.00")
        assert WithholdingCalculator.income(Decimal("800")) == Decimal("32.80")
        assert WithholdingCalculator.total_deductions(Decimal("800")) == Decimal("154.80")
        assert WithholdingCalculator.net(Decimal("800")) == Decimal("645.20")

    def test_gross_1500(self):
        """Third bracket, ISSS capped."""
        assert WithholdingCalculator.isss(Decimal("1500")) == Decimal("75.00")
        assert WithholdingCalculator.afp(Decimal("1500")) == Decimal("116.25")
        assert WithholdingCalculator.income(Decimal("1500")) == Decimal("163.27")
        assert WithholdingCalculator.total_deductions(Decimal("1500")) == Decimal("354.52")
        assert WithholdingCalculator.net(Decimal("1500")) == Decimal("1145.48")

    def test_fourth_bracket(self):
        """Above $2,038.10 the flat $270.90 plus 30% applies."""
        assert WithholdingCalculator.income(Decimal("3038.10")) == Decimal("570.90")

    def test_each_deduction_rounds_half_up(self):
        """AFP on 5450.00 is 422.375 before rounding to cents."""
        assert WithholdingCalculator.afp(Decimal("5450")) == Decimal("422.38")
        assert WithholdingCalculator.total_deductions(Decimal("5450")) == Decimal("1791.85")

    def test_accepts_plain_numbers(self):
        """Ints and strings are converted without float artifacts."""
        assert WithholdingCalculator.net(800) == Decimal("645.20")
        assert WithholdingCalculator.isss("800.00") == Decimal("60.00")


class TestCaps:
    """Test ISSS and AFP contribution caps."""

    @pytest.mark.parametrize("gross", ["1000", "1000.01", "5000", "100000"])
    def test_isss_never_exceeds_cap(self, gross):
        """ISSS tops out at 7.5% of $1,000."""
        assert WithholdingCalculator.isss(Decimal(gross)) == Decimal("75.00")

    def test_isss_below_cap(self):
        assert WithholdingCalculator.isss(Decimal("999.99")) == Decimal("75.00")
        assert WithholdingCalculator.isss(Decimal("500")) == Decimal("37.50")

    def test_afp_cap(self):
        """AFP tops out at 7.75% of $6,500."""
        assert WithholdingCalculator.afp(Decimal("6500")) == Decimal("503.75")
        assert WithholdingCalculator.afp(Decimal("20000")) == Decimal("503.75")
        assert WithholdingCalculator.afp(Decimal("6000")) == Decimal("465.00")

    @pytest.mark.parametrize("deduction", ["isss", "afp"])
    def test_contribution_is_monotonic(self, deduction):
        """ISSS and AFP never decrease as gross grows, through and past the caps."""
        calculate = getattr(WithholdingCalculator, deduction)
        amounts = [Decimal(n) / 4 for n in range(0, 30000, 53)]
        values = [calculate(a) for a in amounts]
        assert values == sorted(values)


class TestIncomeBrackets:
    """Test bracket selection and boundary ownership."""

    @pytest.mark.parametrize(
        "gross,bracket",
        [
            ("0", 1),
            ("472.00", 1),
            ("472.01", 2),
            ("895.24", 2),
            ("895.25", 3),
            ("2038.10", 3),
            ("2038.11", 4),
            ("10000", 4),
        ],
    )
    def test_upper_bound_is_inclusive(self, gross, bracket):
        assert WithholdingCalculator.income_bracket_of(Decimal(gross)) == bracket

    def test_exemption_threshold(self):
        assert WithholdingCalculator.is_income_exempt(Decimal("472.00"))
        assert not WithholdingCalculator.is_income_exempt(Decimal("472.01"))
        assert WithholdingCalculator.income(Decimal("472.00")) == Decimal("0")

    def test_income_is_continuous_across_boundaries(self):
        """One cent over a bracket edge never jumps the withholding."""
        for edge in ("472.00", "895.24", "2038.10"):
            below = WithholdingCalculator.income(Decimal(edge))
            above = WithholdingCalculator.income(Decimal(edge) + Decimal("0.01"))
            assert Decimal("0") <= above - below <= Decimal("0.01")

    def test_income_is_monotonic(self):
        amounts = [Decimal(n) for n in range(0, 5000, 37)]
        incomes = [WithholdingCalculator.income(a) for a in amounts]
        assert incomes == sorted(incomes)


class TestNonPositiveGross:
    """Zero or negative gross withholds nothing."""

    @pytest.mark.parametrize("gross", ["0", "-1", "-1500.50"])
    def test_all_deductions_zero(self, gross):
        gross = Decimal(gross)
        assert WithholdingCalculator.isss(gross) == Decimal("0")
        assert WithholdingCalculator.afp(gross) == Decimal("0")
        assert WithholdingCalculator.income(gross) == Decimal("0")
        assert WithholdingCalculator.net(gross) == gross


class TestSummary:
    """Test the combined withholding record."""

    def test_summary_fields_agree(self):
        summary = WithholdingCalculator.summarize(Decimal("1500"))
        assert summary.isss + summary.afp + summary.income == summary.total_deductions
        assert summary.gross - summary.total_deductions == summary.net
        assert summary.income_bracket == 3

    def test_summary_text(self):
        """Rendered summary lists each deduction with its rate."""
        text = str(WithholdingCalculator.summarize(Decimal("800")))
        assert "Sueldo Bruto: $800.00" in text
        assert "ISSS (7.5%): $60.00" in text
        assert "AFP (7.75%): $62.00" in text
        assert "Renta: $32.80" in text
        assert "Total Descuentos: $154.80" in text
        assert "Salario Neto: $645.20" in text

    def test_to_dict_uses_strings(self):
        data = WithholdingCalculator.summarize(Decimal("800")).to_dict()
        assert data["net"] == "645.20"
        assert data["income_bracket"] == 2
