"""Roster services: storage, reports and seed data."""

from staff_payroll.services.report_service import ReportService, SalaryStatistics
from staff_payroll.services.roster_service import EmployeeNotFoundError, RosterService
from staff_payroll.services.seed_data import load_seed_data, reload_seed_data

__all__ = [
    "ReportService",
    "SalaryStatistics",
    "EmployeeNotFoundError",
    "RosterService",
    "load_seed_data",
    "reload_seed_data",
]
