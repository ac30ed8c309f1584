"""Shared middleware for cross-cutting concerns.

This module contains the request-scoped values shared across bounded
contexts. The resolved platform is the primary component: it carries the
tenant selected from the request hostname to every downstream handler.
"""
