"""HTTP API for the payroll roster."""
