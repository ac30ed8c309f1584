"""FastAPI dependency wiring for the platforms bounded context."""
