"""Domain layer for the platforms bounded context.

Pure business logic: platform aggregates, custom domain records and the
rules that map an inbound hostname to a platform lookup. No framework or
database imports.
"""
