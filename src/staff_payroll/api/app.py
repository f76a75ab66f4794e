"""FastAPI application factory."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from staff_payroll.api.routes import employees_router, health_router, payroll_router
from staff_payroll.calculators.engine import PayrollEngine
from staff_payroll.config import get_settings
from staff_payroll.models.validation import ValidationError
from staff_payroll.services.roster_service import EmployeeNotFoundError, RosterService
from staff_payroll.services.seed_data import load_seed_data

logger = logging.getLogger(__name__)


def create_app(roster: RosterService | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    A roster passed in is served as-is; otherwise an empty roster is created
    at startup and seeded when SEED_ON_STARTUP is enabled.
    """
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler."""
        # Startup
        if roster is None:
            app.state.roster = RosterService()
            if settings.seed_on_startup:
                load_seed_data(app.state.roster)
        else:
            app.state.roster = roster
        app.state.engine = PayrollEngine()
        logger.info("Serving %d employees", app.state.roster.count())
        yield
        # Shutdown
        logger.info("Payroll API shutting down")

    app = FastAPI(
        title="Staff Payroll API",
        description="Employee roster with bonus and statutory withholding calculation",
        version=settings.engine_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        """Handle rejected employee data."""
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "detail": str(exc),
                "code": "VALIDATION_ERROR",
                "field": exc.field,
            },
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report malformed request bodies and parameters like rejected employee data."""
        error = exc.errors()[0]
        names = [part for part in error["loc"] if isinstance(part, str)]
        field = names[-1] if names else "request"
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, error["msg"])
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "detail": f"Invalid {field}: {error['msg']}",
                "code": "VALIDATION_ERROR",
                "field": field,
            },
        )

    @app.exception_handler(EmployeeNotFoundError)
    async def not_found_exception_handler(
        request: Request, exc: EmployeeNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": str(exc), "code": "EMPLOYEE_NOT_FOUND"},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )

    # Include routers
    app.include_router(health_router)
    app.include_router(employees_router, prefix="/api/v1")
    app.include_router(payroll_router, prefix="/api/v1")

    return app


# Default app instance for uvicorn
app = create_app()
