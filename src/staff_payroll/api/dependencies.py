"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, Request

from staff_payroll.calculators.engine import PayrollEngine
from staff_payroll.services.report_service import ReportService
from staff_payroll.services.roster_service import RosterService


def get_roster(request: Request) -> RosterService:
    """Get the roster shared by all requests."""
    return request.app.state.roster


def get_engine(request: Request) -> PayrollEngine:
    return request.app.state.engine


def get_reports(
    roster: Annotated[RosterService, Depends(get_roster)],
    engine: Annotated[PayrollEngine, Depends(get_engine)],
) -> ReportService:
    return ReportService(roster, engine)


# Type aliases for cleaner dependency injection
Roster = Annotated[RosterService, Depends(get_roster)]
Engine = Annotated[PayrollEngine, Depends(get_engine)]
Reports = Annotated[ReportService, Depends(get_reports)]
