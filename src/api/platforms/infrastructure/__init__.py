"""Infrastructure layer for the platforms bounded context."""
