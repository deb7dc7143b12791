"""Database wiring shared by SQL-backed adapters."""
