"""Tests for the initial roster."""

from decimal import Decimal

from staff_payroll.models.roles import AreaType, RoleType
from staff_payroll.services.roster_service import RosterService
from staff_payroll.services.seed_data import (
    build_seed_employees,
    load_seed_data,
    reload_seed_data,
)


class TestSeedData:
    """Test loading the 25 seed employees."""

    def test_load_counts(self):
        roster = RosterService()
        assert load_seed_data(roster) == 25
        assert len(roster.of_role(RoleType.MANAGER)) == 2
        assert len(roster.of_role(RoleType.AREA_CHIEF)) == 3
        assert len(roster.of_role(RoleType.SUPERVISOR)) == 5
        assert len(roster.of_role(RoleType.TECHNICIAN)) == 15

    def test_loading_twice_adds_nothing(self, seeded_roster):
        assert load_seed_data(seeded_roster) == 0
        assert seeded_roster.count() == 25

    def test_reload_restores_initial_state(self, seeded_roster):
        seeded_roster.remove("Ana Sofía Gómez Martínez")
        seeded_roster.mutate("Juan Carlos Pineda Alvarado", lambda e: e.set_base_salary(1))
        assert reload_seed_data(seeded_roster) == 25
        assert seeded_roster.get("Juan Carlos Pineda Alvarado").base_salary == Decimal("800.00")

    def test_builds_fresh_records(self):
        first = build_seed_employees()
        second = build_seed_employees()
        assert first[0] is not second[0]
        assert first[0].full_name == second[0].full_name

    def test_known_records(self, seeded_roster):
        chief = seeded_roster.require("Laura Beatriz Hernández Pérez")
        assert chief.role.area_type is AreaType.COMMERCIAL
        assert chief.role.sub_areas == ("Retail", "Corporativo")

        technician = seeded_roster.require("Juan Carlos Pineda Alvarado")
        assert technician.role.overtime_hours == 10
        assert technician.role.certifications == ("Certificación ISO 9001",)

    def test_manager_pay(self, seeded_roster):
        """Seed managers have fewer than ten reports; only the car bonus applies."""
        manager = seeded_roster.require("Ana Sofía Gómez Martínez")
        assert manager.bonuses() == Decimal("200.00")
        assert manager.gross_with_bonus() == Decimal("5200.00")
