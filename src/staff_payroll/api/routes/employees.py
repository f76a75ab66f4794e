"""Employee roster endpoints."""

from typing import Annotated, Any, Literal

from fastapi import APIRouter, Body, HTTPException, Query, status

from staff_payroll.api.dependencies import Engine, Reports, Roster
from staff_payroll.api.schemas import (
    BaseSalaryUpdate,
    CollectionItem,
    EmployeeCreate,
    EmployeeDetailResponse,
    EmployeeListResponse,
    EmployeeSummaryResponse,
    ErrorResponse,
)
from staff_payroll.calculators.engine import PayrollEngine
from staff_payroll.models.employee import Employee, create_employee
from staff_payroll.models.roles import RoleType

router = APIRouter(prefix="/employees", tags=["employees"])

SortKey = Literal["surname", "name", "net-asc", "net-desc"]

# Collection path segment -> (add method, remove method) on Employee
COLLECTIONS: dict[str, tuple[str, str]] = {
    "teams": ("add_team", "remove_team"),
    "sub-areas": ("add_sub_area", "remove_sub_area"),
    "supervised-teams": ("add_supervised_team", "remove_supervised_team"),
    "certifications": ("add_certification", "remove_certification"),
}


def _detail(employee: Employee, engine: PayrollEngine) -> EmployeeDetailResponse:
    return EmployeeDetailResponse.build(employee, engine.calculate(employee))


def _collection_methods(collection: str) -> tuple[str, str]:
    methods = COLLECTIONS.get(collection)
    if methods is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown collection '{collection}'",
        )
    return methods


# ============================================================================
# Employee CRUD
# ============================================================================


@router.get(
    "",
    response_model=EmployeeListResponse,
)
async def list_employees(
    roster: Roster,
    reports: Reports,
    role: Annotated[str | None, Query()] = None,
    sex: Annotated[str | None, Query()] = None,
    name: Annotated[str | None, Query()] = None,
    sort: Annotated[SortKey, Query()] = "surname",
) -> EmployeeListResponse:
    """List employees, optionally filtered by role, sex and partial name."""
    if sort == "surname":
        employees = reports.sort_by_first_surname()
    elif sort == "name":
        employees = reports.sort_by_full_name()
    else:
        employees = reports.sort_by_net_pay(ascending=sort == "net-asc")

    filters = []
    if role is not None:
        filters.append(roster.filter_by_role(role))
    if sex is not None:
        filters.append(roster.filter_by_sex(sex))
    if name is not None:
        filters.append(roster.search_by_name(name))
    for matches in filters:
        wanted = {id(e) for e in matches}
        employees = [e for e in employees if id(e) in wanted]

    return EmployeeListResponse(
        items=[EmployeeSummaryResponse.from_employee(e) for e in employees],
        total=len(employees),
    )


@router.post(
    "",
    response_model=EmployeeDetailResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def create_employee_endpoint(
    roster: Roster,
    engine: Engine,
    payload: EmployeeCreate,
) -> EmployeeDetailResponse:
    """Add an employee to the roster."""
    employee = create_employee(
        RoleType.parse(payload.role.kind, "role"),
        payload.personal.model_dump(),
        **payload.role_fields(),
    )
    if not roster.add(employee):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Employee '{employee.full_name}' already exists",
        )
    return _detail(employee, engine)


@router.get(
    "/{full_name}",
    response_model=EmployeeDetailResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_employee(
    roster: Roster,
    engine: Engine,
    full_name: str,
) -> EmployeeDetailResponse:
    """Get an employee with their current pay statement."""
    return _detail(roster.require(full_name), engine)


@router.delete(
    "/{full_name}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_employee(roster: Roster, full_name: str) -> None:
    """Remove an employee from the roster."""
    roster.require(full_name)
    roster.remove(full_name)


# ============================================================================
# Employee updates
# ============================================================================


@router.patch(
    "/{full_name}/base-salary",
    response_model=EmployeeDetailResponse,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def update_base_salary(
    roster: Roster,
    engine: Engine,
    full_name: str,
    payload: BaseSalaryUpdate,
) -> EmployeeDetailResponse:
    """Set a new base salary. Negative amounts are rejected."""
    employee = roster.mutate(
        full_name, lambda e: e.set_base_salary(payload.base_salary)
    )
    return _detail(employee, engine)


@router.patch(
    "/{full_name}/personal",
    response_model=EmployeeDetailResponse,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def update_personal_data(
    roster: Roster,
    engine: Engine,
    full_name: str,
    changes: Annotated[dict[str, Any], Body()],
) -> EmployeeDetailResponse:
    """Change identity or contact fields. A name change re-keys the employee."""
    employee = roster.mutate(full_name, lambda e: e.update_personal(**changes))
    return _detail(employee, engine)


@router.patch(
    "/{full_name}/role",
    response_model=EmployeeDetailResponse,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def update_role_data(
    roster: Roster,
    engine: Engine,
    full_name: str,
    changes: Annotated[dict[str, Any], Body()],
) -> EmployeeDetailResponse:
    """Change fields of the employee's role payload."""
    employee = roster.mutate(full_name, lambda e: e.update_role(**changes))
    return _detail(employee, engine)


@router.post(
    "/{full_name}/{collection}",
    response_model=EmployeeDetailResponse,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def add_collection_member(
    roster: Roster,
    engine: Engine,
    full_name: str,
    collection: str,
    payload: CollectionItem,
) -> EmployeeDetailResponse:
    """Add a team, sub-area, supervised team or certification."""
    add, _ = _collection_methods(collection)
    employee = roster.mutate(full_name, lambda e: getattr(e, add)(payload.value))
    return _detail(employee, engine)


@router.delete(
    "/{full_name}/{collection}/{value}",
    response_model=EmployeeDetailResponse,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def remove_collection_member(
    roster: Roster,
    engine: Engine,
    full_name: str,
    collection: str,
    value: str,
) -> EmployeeDetailResponse:
    """Remove a collection member; removing an absent value is a no-op."""
    _, remove = _collection_methods(collection)
    employee = roster.mutate(full_name, lambda e: getattr(e, remove)(value))
    return _detail(employee, engine)
