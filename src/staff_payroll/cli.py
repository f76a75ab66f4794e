"""Payroll Command Line Interface.

Provides reports over the seeded roster:
- Withholding for an arbitrary gross amount
- Employee listings (filtered and sorted)
- Individual pay statements
- Salary statistics

Usage:
    python -m staff_payroll.cli withholding --gross 1500
    python -m staff_payroll.cli list --role supervisor --sort net-desc
    python -m staff_payroll.cli payslip "Ana Sofía Gómez Martínez"
    python -m staff_payroll.cli stats --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from decimal import Decimal, InvalidOperation
from typing import Any, Callable

from staff_payroll.calculators.engine import PayrollEngine
from staff_payroll.calculators.withholding import WithholdingCalculator
from staff_payroll.config import configure_logging
from staff_payroll.models.employee import Employee
from staff_payroll.models.validation import ValidationError
from staff_payroll.services.report_service import ReportService
from staff_payroll.services.roster_service import RosterService
from staff_payroll.services.seed_data import load_seed_data

logger = logging.getLogger(__name__)

SORT_CHOICES = ["surname", "name", "net-asc", "net-desc"]


def parse_amount(s: str) -> Decimal:
    """Parse a monetary amount."""
    try:
        amount = Decimal(s)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid amount: {s!r}")
    if not amount.is_finite():
        raise argparse.ArgumentTypeError(f"invalid amount: {s!r}")
    return amount


class PayrollCli:
    """Payroll Command Line Interface."""

    def __init__(self, roster: RosterService | None = None) -> None:
        self.parser = self._build_parser()
        self.roster = roster
        self.engine = PayrollEngine()

    def _build_parser(self) -> argparse.ArgumentParser:
        """Build argument parser."""
        parser = argparse.ArgumentParser(
            prog="staff-payroll",
            description="Payroll reports for the employee roster",
        )
        parser.add_argument(
            "--log-level",
            type=str,
            choices=["DEBUG", "INFO", "WARNING", "ERROR"],
            help="Override LOG_LEVEL",
        )
        subparsers = parser.add_subparsers(dest="command", help="Commands")

        # withholding command
        withholding = subparsers.add_parser(
            "withholding",
            help="Show ISSS, AFP and income withholding for a gross amount",
        )
        withholding.add_argument(
            "--gross",
            type=parse_amount,
            required=True,
            help="Gross monthly amount",
        )
        withholding.add_argument("--json", action="store_true", help="JSON output")

        # list command
        listing = subparsers.add_parser(
            "list",
            help="List employees with their net pay",
        )
        listing.add_argument(
            "--role",
            type=str,
            help="Role tag (GERENTE, JEFE DE ÁREA, SUPERVISOR, TÉCNICO or English name)",
        )
        listing.add_argument(
            "--sort",
            type=str,
            choices=SORT_CHOICES,
            default="surname",
            help="Ordering (default: surname)",
        )
        listing.add_argument("--json", action="store_true", help="JSON output")

        # payslip command
        payslip = subparsers.add_parser(
            "payslip",
            help="Show the pay statement of one employee",
        )
        payslip.add_argument("name", type=str, help="Full name of the employee")
        payslip.add_argument("--json", action="store_true", help="JSON output")

        # stats command
        stats = subparsers.add_parser(
            "stats",
            help="Salary statistics and per-role totals",
        )
        stats.add_argument("--json", action="store_true", help="JSON output")

        return parser

    def run(self, args: list[str] | None = None) -> int:
        """Run the CLI with given arguments."""
        parsed = self.parser.parse_args(args)
        configure_logging(parsed.log_level)

        if not parsed.command:
            self.parser.print_help()
            return 1

        if self.roster is None:
            self.roster = RosterService()
            load_seed_data(self.roster)

        # Dispatch to command handler
        handlers: dict[str, Callable[..., int]] = {
            "withholding": self._cmd_withholding,
            "list": self._cmd_list,
            "payslip": self._cmd_payslip,
            "stats": self._cmd_stats,
        }

        handler = handlers.get(parsed.command)
        if handler is None:
            print(f"Unknown command: {parsed.command}", file=sys.stderr)
            return 1

        try:
            return handler(parsed)
        except ValidationError as e:
            logger.warning("Rejected input: %s", e)
            print(f"ERROR: {e}", file=sys.stderr)
            return 2

    def _emit_json(self, payload: Any) -> None:
        print(json.dumps(payload, indent=2, ensure_ascii=False))

    def _cmd_withholding(self, args: argparse.Namespace) -> int:
        """Show withholding for a gross amount."""
        summary = WithholdingCalculator.summarize(args.gross)
        if args.json:
            self._emit_json(summary.to_dict())
            return 0
        print(summary)
        print(f"Tramo de renta: {summary.income_bracket}")
        return 0

    def _cmd_list(self, args: argparse.Namespace) -> int:
        """List employees."""
        reports = ReportService(self.roster, self.engine)
        ordered: dict[str, Callable[[], list[Employee]]] = {
            "surname": reports.sort_by_first_surname,
            "name": reports.sort_by_full_name,
            "net-asc": lambda: reports.sort_by_net_pay(ascending=True),
            "net-desc": lambda: reports.sort_by_net_pay(ascending=False),
        }
        employees = ordered[args.sort]()
        if args.role:
            wanted = {id(e) for e in self.roster.filter_by_role(args.role)}
            employees = [e for e in employees if id(e) in wanted]

        if args.json:
            self._emit_json(
                [
                    {"full_name": e.full_name, "role": e.role_tag, "net": str(e.net_pay())}
                    for e in employees
                ]
            )
            return 0

        for e in employees:
            print(f"{e.full_name:<40} {e.role_tag:<14} ${e.net_pay():>10.2f}")
        print(f"\n{len(employees)} employee(s)")
        return 0

    def _cmd_payslip(self, args: argparse.Namespace) -> int:
        """Show a pay statement."""
        employee = self.roster.get(args.name)
        if employee is None:
            print(f"Employee not found: {args.name}", file=sys.stderr)
            return 1

        statement = self.engine.calculate(employee)
        if args.json:
            self._emit_json(statement.to_dict())
            return 0

        print(f"=== {statement.role_tag} ===")
        print(f"Nombre: {statement.full_name}")
        print(f"Edad: {employee.age()} años")
        print(f"Sueldo Base: ${statement.base_salary:.2f}")
        for name, amount in statement.bonuses.components.items():
            print(f"  Bonificación {name}: ${amount:.2f}")
        print(f"Bonificaciones: ${statement.bonuses.total:.2f}")
        print(statement.withholding)
        print(employee.summary_line())
        return 0

    def _cmd_stats(self, args: argparse.Namespace) -> int:
        """Show salary statistics."""
        reports = ReportService(self.roster, self.engine)
        stats = reports.salary_statistics()
        counts = reports.count_by_role()
        net_by_role = reports.net_pay_by_role()

        if args.json:
            self._emit_json(
                {
                    "statistics": stats.to_dict(),
                    "count_by_role": counts,
                    "net_by_role": {role: str(total) for role, total in net_by_role.items()},
                    "total_deductions": str(reports.total_deductions()),
                }
            )
            return 0

        print(stats)
        print("\n=== POR TIPO DE EMPLEADO ===")
        for role, count in counts.items():
            print(f"{role:<14} {count:>3}  ${net_by_role[role]:>12.2f}")
        print(f"\nTotal descuentos: ${reports.total_deductions():.2f}")
        return 0


def main() -> int:
    """CLI entry point."""
    cli = PayrollCli()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
