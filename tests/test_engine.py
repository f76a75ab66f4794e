"""Unit tests for PayrollEngine."""

import pytest
from decimal import Decimal

from staff_payroll.calculators.engine import PayrollEngine, RosterCalculationResult


class TestCalculate:
    """Pay statement for a single employee."""

    def test_statement_matches_employee(self, technician):
        statement = PayrollEngine().calculate(technician)

        assert statement.full_name == "Juan Carlos Pineda Alvarado"
        assert statement.role_tag == "TÉCNICO"
        assert statement.base_salary == Decimal("800.00")
        assert statement.bonuses.total == Decimal("156.00")
        assert statement.gross == Decimal("956.00")
        assert statement.net == technician.net_pay()
        assert statement.total_deductions == technician.total_deductions()

    def test_statement_is_a_snapshot(self, technician):
        """Later changes to the employee do not alter an issued statement."""
        statement = PayrollEngine().calculate(technician)
        technician.set_base_salary(Decimal("2000"))
        assert statement.base_salary == Decimal("800.00")
        assert statement.gross == Decimal("956.00")

    def test_to_dict(self, manager):
        data = PayrollEngine().calculate(manager).to_dict()
        assert data["role"] == "GERENTE"
        assert data["bonuses"] == {"management": "250.00", "company_car": "200.00"}
        assert data["bonus_total"] == "450.00"
        assert data["withholding"]["gross"] == "5450.00"
        assert data["net"] == "3658.15"


class TestCalculateRoster:
    """Totals across many employees."""

    def test_totals(self, manager, technician):
        result = PayrollEngine().calculate_roster([manager, technician])

        assert result.employee_count == 2
        assert result.total_gross == Decimal("6406.00")
        assert result.total_net == manager.net_pay() + technician.net_pay()
        assert result.total_gross - result.total_deductions == result.total_net
        assert set(result.statements) == {manager.full_name, technician.full_name}

    def test_empty_roster(self):
        result = PayrollEngine().calculate_roster([])
        assert result == RosterCalculationResult()
        assert result.employee_count == 0
        assert result.total_net == Decimal("0")

    def test_seeded_roster(self, seeded_roster):
        result = PayrollEngine().calculate_roster(seeded_roster.all())
        assert result.employee_count == 25
        assert result.total_net > 0
