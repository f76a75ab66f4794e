"""Pytest fixtures for staff payroll tests."""

from __future__ import annotations

from datetime import date
from typing import Any, Callable

import pytest

from staff_payroll.models.employee import Employee, create_employee
from staff_payroll.models.roles import RoleType
from staff_payroll.services.roster_service import RosterService
from staff_payroll.services.seed_data import load_seed_data


@pytest.fixture
def make_personal() -> Callable[..., dict[str, Any]]:
    """Factory for personal data dicts; keyword arguments override fields."""

    def _make(**overrides: Any) -> dict[str, Any]:
        data = {
            "given_names": "Ana Sofía",
            "first_surname": "Gómez",
            "second_surname": "Martínez",
            "address": "Calle Principal 123, San Salvador",
            "birth_date": date(1975, 3, 15),
            "sex": "F",
            "phone": "1234-5678",
            "email": "ana.gomez@empresa.com",
        }
        data.update(overrides)
        return data

    return _make


@pytest.fixture
def manager(make_personal) -> Employee:
    """Manager with 12 reports and a company car."""
    return create_employee(
        RoleType.MANAGER,
        make_personal(),
        department="Dirección General",
        headcount=12,
        has_company_car=True,
    )


@pytest.fixture
def area_chief(make_personal) -> Employee:
    return create_employee(
        RoleType.AREA_CHIEF,
        make_personal(given_names="María Elena", first_surname="Cruz", second_surname="Sánchez"),
        area="Operaciones",
        area_type="Operativa",
        subordinates=10,
        manages_budget=True,
        annual_budget="500000.00",
        goals_achieved=8,
        goals_total=10,
    )


@pytest.fixture
def supervisor(make_personal) -> Employee:
    return create_employee(
        RoleType.SUPERVISOR,
        make_personal(
            given_names="Ricardo Andrés",
            first_surname="Ramírez",
            second_surname="García",
            sex="M",
        ),
        department="Producción",
        subordinates=5,
        leads_team=True,
        days_worked=20,
        incidents_resolved=18,
        incidents_total=20,
    )


@pytest.fixture
def technician(make_personal) -> Employee:
    """Lead technician with 10 overtime hours and two certifications."""
    return create_employee(
        RoleType.TECHNICIAN,
        make_personal(
            given_names="Juan Carlos",
            first_surname="Pineda",
            second_surname="Alvarado",
            birth_date=date(1990, 1, 14),
            sex="M",
        ),
        specialty="Mecánica",
        overtime_hours=10,
        is_lead=True,
        certifications=["ISO 9001", "OSHA"],
    )


@pytest.fixture
def roster() -> RosterService:
    return RosterService()


@pytest.fixture
def seeded_roster() -> RosterService:
    """Roster loaded with the 25 initial employees."""
    roster = RosterService()
    load_seed_data(roster)
    return roster
