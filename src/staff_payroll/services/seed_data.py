"""Initial roster: 2 managers, 3 area chiefs, 5 supervisors, 15 technicians."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from staff_payroll.models.employee import Employee, create_employee
from staff_payroll.models.roles import RoleType
from staff_payroll.services.roster_service import RosterService

logger = logging.getLogger(__name__)


def _person(
    given_names: str,
    first_surname: str,
    second_surname: str,
    address: str,
    birth_date: date,
    sex: str,
    phone: str,
    email: str,
) -> dict[str, Any]:
    return {
        "given_names": given_names,
        "first_surname": first_surname,
        "second_surname": second_surname,
        "address": address,
        "birth_date": birth_date,
        "sex": sex,
        "phone": phone,
        "email": email,
    }


MANAGERS: list[tuple[dict[str, Any], dict[str, Any]]] = [
    (
        _person("Ana Sofía", "Gómez", "Martínez", "Calle Principal 123, San Salvador",
                date(1975, 3, 15), "F", "1234-5678", "ana.gomez@empresa.com"),
        {"department": "Dirección General", "headcount": 2, "has_company_car": True,
         "teams": ("Operaciones", "Finanzas")},
    ),
    (
        _person("Carlos Eduardo", "López", "Reyes", "Avenida Norte 456, Santa Tecla",
                date(1970, 8, 22), "M", "8765-4321", "carlos.lopez@empresa.com"),
        {"department": "Dirección Comercial", "headcount": 3, "has_company_car": True,
         "teams": ("Ventas", "Marketing")},
    ),
]

AREA_CHIEFS: list[tuple[dict[str, Any], dict[str, Any]]] = [
    (
        _person("María Elena", "Cruz", "Sánchez", "Colonia Escalón, San Salvador",
                date(1980, 5, 10), "F", "2345-6789", "maria.cruz@empresa.com"),
        {"area": "Operaciones", "area_type": "Operativa", "subordinates": 10,
         "manages_budget": True, "annual_budget": "500000.00",
         "goals_achieved": 8, "goals_total": 10, "sub_areas": ("Producción", "Logística")},
    ),
    (
        _person("José Antonio", "Morales", "Vásquez", "San Benito, San Salvador",
                date(1978, 11, 30), "M", "3456-7890", "jose.morales@empresa.com"),
        {"area": "Finanzas", "area_type": "Administrativa", "subordinates": 8,
         "manages_budget": True, "annual_budget": "300000.00",
         "goals_achieved": 6, "goals_total": 8, "sub_areas": ("Contabilidad", "Presupuestos")},
    ),
    (
        _person("Laura Beatriz", "Hernández", "Pérez", "Colonia Flor Blanca, San Salvador",
                date(1982, 2, 18), "F", "4567-8901", "laura.hernandez@empresa.com"),
        {"area": "Ventas", "area_type": "Comercial", "subordinates": 12,
         "manages_budget": False, "annual_budget": "200000.00",
         "goals_achieved": 7, "goals_total": 10, "sub_areas": ("Retail", "Corporativo")},
    ),
]

SUPERVISORS: list[tuple[dict[str, Any], dict[str, Any]]] = [
    (
        _person("Ricardo Andrés", "Ramírez", "García", "Mejicanos, San Salvador",
                date(1985, 7, 12), "M", "5678-9012", "ricardo.ramirez@empresa.com"),
        {"department": "Producción", "supervision_type": "Directa", "subordinates": 5,
         "leads_team": True, "days_worked": 20, "incidents_resolved": 18, "incidents_total": 20},
    ),
    (
        _person("Carmen Julia", "Díaz", "Mendoza", "Soyapango, San Salvador",
                date(1983, 4, 25), "F", "6789-0123", "carmen.diaz@empresa.com"),
        {"department": "Logística", "supervision_type": "Indirecta", "subordinates": 4,
         "leads_team": False, "days_worked": 22, "incidents_resolved": 15, "incidents_total": 15},
    ),
    (
        _person("Miguel Ángel", "Torres", "Castro", "Apopa, San Salvador",
                date(1987, 9, 5), "M", "7890-1234", "miguel.torres@empresa.com"),
        {"department": "Contabilidad", "supervision_type": "Mixta", "subordinates": 3,
         "leads_team": True, "days_worked": 18, "incidents_resolved": 12, "incidents_total": 15},
    ),
    (
        _person("Sonia Patricia", "Flores", "Rivas", "Santa Tecla, La Libertad",
                date(1984, 12, 1), "F", "8901-2345", "sonia.flores@empresa.com"),
        {"department": "Ventas Retail", "supervision_type": "Directa", "subordinates": 6,
         "leads_team": False, "days_worked": 21, "incidents_resolved": 20, "incidents_total": 22},
    ),
    (
        _person("David Ernesto", "Vega", "Ortiz", "San Miguel, San Miguel",
                date(1986, 6, 20), "M", "9012-3456", "david.vega@empresa.com"),
        {"department": "Marketing", "supervision_type": "Indirecta", "subordinates": 4,
         "leads_team": True, "days_worked": 19, "incidents_resolved": 14, "incidents_total": 16},
    ),
]


def _technician(
    person: dict[str, Any], specialty: str, hours: int, shift: str, lead: bool, cert: str
) -> tuple[dict[str, Any], dict[str, Any]]:
    return person, {
        "specialty": specialty,
        "overtime_hours": hours,
        "shift": shift,
        "is_lead": lead,
        "certifications": (cert,),
    }


TECHNICIANS: list[tuple[dict[str, Any], dict[str, Any]]] = [
    _technician(
        _person("Juan Carlos", "Pineda", "Alvarado", "Cuscatancingo, San Salvador",
                date(1990, 1, 14), "M", "123456789", "juan.pineda@empresa.com"),
        "Mecánica", 10, "Mañana", True, "Certificación ISO 9001",
    ),
    _technician(
        _person("Gabriela Alejandra", "Molina", "Mendéz", "Ilopango, San Salvador",
                date(1992, 3, 12), "F", "234567890", "gabriela.molina@empresa.com"),
        "Electrónica", 15, "Noche", False, "Certificación Cisco",
    ),
    _technician(
        _person("Luis Fernando", "Rivas", "Guzmán", "San Marcos, San Salvador",
                date(1989, 10, 27), "M", "345678901", "luis.rivas@empresa.com"),
        "Informática", 12, "Mixto", True, "Certificación CompTIA",
    ),
    _technician(
        _person("Verónica Lissette", "Campos", "López", "Ayutuxtepeque, San Salvador",
                date(1991, 5, 19), "F", "456789012", "veronica.campos@empresa.com"),
        "Mantenimiento", 8, "Tarde", False, "Certificación OSHA",
    ),
    _technician(
        _person("Óscar Mauricio", "Santos", "Mejía", "Delgado, San Salvador",
                date(1993, 8, 3), "M", "567890123", "oscar.santos@empresa.com"),
        "Redes", 20, "Mañana", True, "Certificación CCNA",
    ),
    _technician(
        _person("Claudia Marcela", "Aguilar", "Romero", "Mejicanos, San Salvador",
                date(1990, 11, 11), "F", "678901234", "claudia.aguilar@empresa.com"),
        "Automatización", 5, "Noche", False, "Certificación PLC",
    ),
    _technician(
        _person("Roberto Daniel", "Cortez", "Flores", "Soyapango, San Salvador",
                date(1988, 4, 7), "M", "789012345", "roberto.cortez@empresa.com"),
        "Mecánica", 18, "Mixto", True, "Certificación ASME",
    ),
    _technician(
        _person("Isabel Cristina", "García", "Vides", "Apopa, San Salvador",
                date(1994, 6, 29), "F", "890123456", "isabel.garcia@empresa.com"),
        "Electrónica", 10, "Tarde", False, "Certificación IPC",
    ),
    _technician(
        _person("Héctor Manuel", "Martínez", "Serrano", "Santa Tecla, La Libertad",
                date(1987, 2, 13), "M", "901234567", "hector.martinez@empresa.com"),
        "Informática", 15, "Mañana", True, "Certificación Microsoft",
    ),
    _technician(
        _person("Mónica Alejandra", "Pérez", "Cáceres", "San Miguel, San Miguel",
                date(1991, 9, 17), "F", "123456780", "monica.perez@empresa.com"),
        "Mantenimiento", 12, "Noche", False, "Certificación NEBOSH",
    ),
    _technician(
        _person("Francisco Javier", "Gómez", "Ruiz", "San Salvador, San Salvador",
                date(1989, 12, 4), "M", "234567891", "francisco.gomez@empresa.com"),
        "Redes", 10, "Mixto", True, "Certificación Fortinet",
    ),
    _technician(
        _person("Patricia Lorena", "Vásquez", "Méndez", "Santa Ana, Santa Ana",
                date(1992, 7, 9), "F", "345678902", "patricia.vasquez@empresa.com"),
        "Automatización", 8, "Tarde", False, "Certificación Siemens",
    ),
    _technician(
        _person("Eduardo José", "Alvarado", "Cruz", "Sonsonate, Sonsonate",
                date(1990, 3, 23), "M", "456789013", "eduardo.alvarado@empresa.com"),
        "Mecánica", 14, "Mañana", True, "Certificación API",
    ),
    _technician(
        _person("Lorena Elizabeth", "Chávez", "Rivas", "Usulután, Usulután",
                date(1993, 1, 30), "F", "567890124", "lorena.chavez@empresa.com"),
        "Electrónica", 16, "Noche", False, "Certificación IEEE",
    ),
    _technician(
        _person("Jorge Alberto", "Mendoza", "Torres", "Ahuachapán, Ahuachapán",
                date(1988, 10, 15), "M", "678901245", "jorge.mendoza@empresa.com"),
        "Informática", 13, "Mixto", True, "Certificación AWS",
    ),
]

SEED_ROSTER: list[tuple[RoleType, list[tuple[dict[str, Any], dict[str, Any]]]]] = [
    (RoleType.MANAGER, MANAGERS),
    (RoleType.AREA_CHIEF, AREA_CHIEFS),
    (RoleType.SUPERVISOR, SUPERVISORS),
    (RoleType.TECHNICIAN, TECHNICIANS),
]


def build_seed_employees() -> list[Employee]:
    """Fresh employee records for the initial roster."""
    return [
        create_employee(role_type, dict(person), **dict(role_fields))
        for role_type, entries in SEED_ROSTER
        for person, role_fields in entries
    ]


def load_seed_data(roster: RosterService) -> int:
    """Add the initial roster; returns the number of employees added."""
    added = roster.add_many(build_seed_employees())
    logger.info("Loaded %d seed employees", added)
    return added


def reload_seed_data(roster: RosterService) -> int:
    roster.clear()
    return load_seed_data(roster)
