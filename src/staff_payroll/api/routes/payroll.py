"""Withholding and payroll report endpoints."""

from fastapi import APIRouter

from staff_payroll.api.dependencies import Reports
from staff_payroll.api.schemas import (
    PayStatementResponse,
    RoleTotalsResponse,
    StatisticsResponse,
    WithholdingRequest,
    WithholdingResponse,
)
from staff_payroll.calculators.withholding import WithholdingCalculator

router = APIRouter(tags=["payroll"])


@router.post("/withholding", response_model=WithholdingResponse)
async def calculate_withholding(payload: WithholdingRequest) -> WithholdingResponse:
    """ISSS, AFP and income withholding for a gross monthly amount."""
    summary = WithholdingCalculator.summarize(payload.gross)
    return WithholdingResponse.model_validate(summary)


# ============================================================================
# Roster reports
# ============================================================================


@router.get("/payroll/statistics", response_model=StatisticsResponse)
async def salary_statistics(reports: Reports) -> StatisticsResponse:
    """Count, total, average, minimum and maximum net pay."""
    return StatisticsResponse.model_validate(reports.salary_statistics())


@router.get("/payroll/by-role", response_model=RoleTotalsResponse)
async def totals_by_role(reports: Reports) -> RoleTotalsResponse:
    return RoleTotalsResponse(
        count_by_role=reports.count_by_role(),
        net_by_role=reports.net_pay_by_role(),
        total_net=reports.total_net_payroll(),
        total_deductions=reports.total_deductions(),
    )


@router.get("/payroll/statements", response_model=list[PayStatementResponse])
async def pay_statements(reports: Reports) -> list[PayStatementResponse]:
    """Pay statement of every employee, in roster order."""
    return [PayStatementResponse.from_statement(s) for s in reports.pay_statements()]
