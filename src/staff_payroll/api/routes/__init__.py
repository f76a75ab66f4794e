"""API routes."""

from staff_payroll.api.routes.employees import router as employees_router
from staff_payroll.api.routes.health import router as health_router
from staff_payroll.api.routes.payroll import router as payroll_router

__all__ = ["employees_router", "health_router", "payroll_router"]
