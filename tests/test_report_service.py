"""Unit tests for roster reports."""

import pytest
from decimal import Decimal

from staff_payroll.services.report_service import ReportService, SalaryStatistics


class TestOrdering:
    """Sorted views of the roster."""

    def test_sort_by_first_surname(self, seeded_roster):
        surnames = [e.first_surname for e in ReportService(seeded_roster).sort_by_first_surname()]
        assert surnames == sorted(surnames, key=str.casefold)
        assert surnames[0] == "Aguilar"

    def test_sort_by_first_surname_descending(self, seeded_roster):
        surnames = [
            e.first_surname
            for e in ReportService(seeded_roster).sort_by_first_surname(ascending=False)
        ]
        assert surnames[0] == "Vásquez"

    def test_sort_by_net_pay(self, seeded_roster):
        reports = ReportService(seeded_roster)
        ascending = [e.net_pay() for e in reports.sort_by_net_pay()]
        descending = [e.net_pay() for e in reports.sort_by_net_pay(ascending=False)]
        assert ascending == sorted(ascending)
        assert descending == sorted(ascending, reverse=True)

    def test_sorting_does_not_reorder_roster(self, seeded_roster):
        before = [e.full_name for e in seeded_roster.all()]
        ReportService(seeded_roster).sort_by_full_name()
        assert [e.full_name for e in seeded_roster.all()] == before


class TestGrouping:
    """Per-role counts and totals."""

    def test_count_by_role(self, seeded_roster):
        assert ReportService(seeded_roster).count_by_role() == {
            "GERENTE": 2,
            "JEFE DE ÁREA": 3,
            "SUPERVISOR": 5,
            "TÉCNICO": 15,
        }

    def test_net_pay_by_role_sums_to_total(self, seeded_roster):
        reports = ReportService(seeded_roster)
        by_role = reports.net_pay_by_role()
        assert sum(by_role.values(), Decimal("0")) == reports.total_net_payroll()

    def test_role_summaries(self, seeded_roster):
        lines = ReportService(seeded_roster).role_summaries("GERENTE")
        assert len(lines) == 2
        assert all(line.startswith("Gerente ") for line in lines)

    def test_role_summaries_unknown_role(self, seeded_roster):
        assert ReportService(seeded_roster).role_summaries("CONTADOR") == []


class TestTotals:
    """Statistics and payroll totals."""

    def test_statistics(self, roster, manager, technician):
        roster.add_many([manager, technician])
        stats = ReportService(roster).salary_statistics()

        assert stats.count == 2
        assert stats.total == Decimal("4413.89")
        assert stats.average == Decimal("2206.95")
        assert stats.minimum == Decimal("755.74")
        assert stats.maximum == Decimal("3658.15")

    def test_empty_roster_statistics(self, roster):
        stats = ReportService(roster).salary_statistics()
        assert stats == SalaryStatistics(0, Decimal("0"), Decimal("0"), Decimal("0"), Decimal("0"))
        assert ReportService(roster).total_net_payroll() == Decimal("0")
        assert ReportService(roster).total_deductions() == Decimal("0")

    def test_statistics_text(self, roster, technician):
        roster.add(technician)
        text = str(ReportService(roster).salary_statistics())
        assert "Total de empleados: 1" in text
        assert "Salario máximo: $755.74" in text

    def test_deductions_and_net_sum_to_gross(self, seeded_roster):
        reports = ReportService(seeded_roster)
        gross = sum((e.gross_with_bonus() for e in seeded_roster.all()), Decimal("0"))
        assert reports.total_net_payroll() + reports.total_deductions() == gross

    def test_withholding_summaries(self, seeded_roster):
        summaries = ReportService(seeded_roster).withholding_summaries()
        assert len(summaries) == 25
        assert all(s.net == s.gross - s.total_deductions for s in summaries)

    def test_pay_statements_follow_roster_order(self, seeded_roster):
        statements = ReportService(seeded_roster).pay_statements()
        assert [s.full_name for s in statements] == [e.full_name for e in seeded_roster.all()]
