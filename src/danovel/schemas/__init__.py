"""Pydantic schemas exchanged with callers of the core services."""
