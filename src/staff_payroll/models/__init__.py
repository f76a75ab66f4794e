"""Employee records and their validation."""
