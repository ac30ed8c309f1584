"""Database infrastructure - async engines, sessions and ORM base."""
