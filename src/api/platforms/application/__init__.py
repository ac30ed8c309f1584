"""Application layer for the platforms bounded context."""
