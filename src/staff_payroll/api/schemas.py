"""Pydantic schemas for API request/response models."""

from __future__ import annotations

import dataclasses
from datetime import date
from decimal import Decimal
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt

from staff_payroll.calculators.engine import PayStatement
from staff_payroll.models.employee import Employee


# ============================================================================
# Error schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Error body returned for rejected requests."""

    detail: str
    code: str
    field: str | None = None


# ============================================================================
# Withholding schemas
# ============================================================================


class WithholdingRequest(BaseModel):
    """Gross amount to run through the withholding table."""

    gross: Decimal = Field(allow_inf_nan=False)


class WithholdingResponse(BaseModel):
    """Statutory deductions for one gross amount."""

    model_config = ConfigDict(from_attributes=True)

    gross: Decimal
    isss: Decimal
    afp: Decimal
    income: Decimal
    total_deductions: Decimal
    net: Decimal
    income_bracket: int


# ============================================================================
# Employee input schemas
# ============================================================================


class PersonalDataIn(BaseModel):
    """Identity and contact details of a new employee."""

    given_names: str
    first_surname: str
    second_surname: str
    address: str
    birth_date: str = Field(description="YYYY-MM-DD")
    sex: str
    phone: str
    email: str


# Counts and flags accept JSON integers and booleans only


class ManagerIn(BaseModel):
    kind: Literal["manager"]
    department: str
    headcount: StrictInt = 0
    has_company_car: StrictBool = False
    teams: list[str] = Field(default_factory=list)


class AreaChiefIn(BaseModel):
    kind: Literal["area_chief"]
    area: str
    area_type: str = "Operativa"
    subordinates: StrictInt = 0
    manages_budget: StrictBool = False
    annual_budget: Decimal = Decimal("0")
    goals_achieved: StrictInt = 0
    goals_total: StrictInt = 0
    sub_areas: list[str] = Field(default_factory=list)


class SupervisorIn(BaseModel):
    kind: Literal["supervisor"]
    department: str
    supervision_type: str = "Directa"
    subordinates: StrictInt = 0
    leads_team: StrictBool = False
    days_worked: StrictInt = 0
    incidents_resolved: StrictInt = 0
    incidents_total: StrictInt = 0
    supervised_teams: list[str] = Field(default_factory=list)


class TechnicianIn(BaseModel):
    kind: Literal["technician"]
    specialty: str
    overtime_hours: StrictInt = 0
    shift: str = "Mañana"
    is_lead: StrictBool = False
    certifications: list[str] = Field(default_factory=list)


RoleIn = Annotated[
    Union[ManagerIn, AreaChiefIn, SupervisorIn, TechnicianIn],
    Field(discriminator="kind"),
]


class EmployeeCreate(BaseModel):
    """Schema for adding an employee to the roster."""

    personal: PersonalDataIn
    role: RoleIn

    def role_fields(self) -> dict[str, Any]:
        return self.role.model_dump(exclude={"kind"})


class BaseSalaryUpdate(BaseModel):
    """New base salary for an employee."""

    base_salary: Decimal = Field(allow_inf_nan=False)


class CollectionItem(BaseModel):
    """A team, sub-area or certification name."""

    value: str = Field(min_length=1)


# ============================================================================
# Employee output schemas
# ============================================================================


class EmployeeSummaryResponse(BaseModel):
    """Schema for an employee in a listing."""

    full_name: str
    role: str
    first_surname: str
    sex: str
    base_salary: Decimal
    gross: Decimal
    net_pay: Decimal

    @classmethod
    def from_employee(cls, employee: Employee) -> EmployeeSummaryResponse:
        return cls(
            full_name=employee.full_name,
            role=employee.role_tag,
            first_surname=employee.first_surname,
            sex=employee.sex.value,
            base_salary=employee.base_salary,
            gross=employee.gross_with_bonus(),
            net_pay=employee.net_pay(),
        )


class EmployeeListResponse(BaseModel):
    """Schema for listing employees."""

    items: list[EmployeeSummaryResponse]
    total: int


class PayStatementResponse(BaseModel):
    """Schema for one employee's pay statement."""

    full_name: str
    role: str
    base_salary: Decimal
    bonuses: dict[str, Decimal]
    bonus_total: Decimal
    withholding: WithholdingResponse
    net: Decimal

    @classmethod
    def from_statement(cls, statement: PayStatement) -> PayStatementResponse:
        return cls(
            full_name=statement.full_name,
            role=statement.role_tag,
            base_salary=statement.base_salary,
            bonuses=statement.bonuses.components,
            bonus_total=statement.bonuses.total,
            withholding=WithholdingResponse.model_validate(statement.withholding),
            net=statement.net,
        )


def _plain(value: Any) -> Any:
    if isinstance(value, tuple):
        return list(value)
    if isinstance(value, Decimal):
        return str(value)
    if hasattr(value, "value"):
        return value.value
    return value


class EmployeeDetailResponse(EmployeeSummaryResponse):
    """Schema for a single employee with role details and pay statement."""

    given_names: str
    second_surname: str
    address: str
    birth_date: date
    age: int
    phone: str
    email: str
    role_fields: dict[str, Any]
    summary: str
    statement: PayStatementResponse

    @classmethod
    def build(cls, employee: Employee, statement: PayStatement) -> EmployeeDetailResponse:
        personal = employee.personal
        summary = EmployeeSummaryResponse.from_employee(employee)
        return cls(
            **summary.model_dump(),
            given_names=personal.given_names,
            second_surname=personal.second_surname,
            address=personal.address,
            birth_date=personal.birth_date,
            age=employee.age(),
            phone=personal.phone,
            email=personal.email,
            role_fields={
                f.name: _plain(getattr(employee.role, f.name))
                for f in dataclasses.fields(employee.role)
            },
            summary=employee.summary_line(),
            statement=PayStatementResponse.from_statement(statement),
        )


# ============================================================================
# Payroll report schemas
# ============================================================================


class StatisticsResponse(BaseModel):
    """Net pay statistics over the roster."""

    model_config = ConfigDict(from_attributes=True)

    count: int
    total: Decimal
    average: Decimal
    minimum: Decimal
    maximum: Decimal


class RoleTotalsResponse(BaseModel):
    """Headcount and net payroll per role tag."""

    count_by_role: dict[str, int]
    net_by_role: dict[str, Decimal]
    total_net: Decimal
    total_deductions: Decimal
