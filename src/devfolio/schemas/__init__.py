"""Pydantic schemas validating every write to a table, and API responses."""
