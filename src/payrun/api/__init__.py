"""HTTP API for pay runs."""
