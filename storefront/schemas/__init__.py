"""Esquemas Pydantic compartidos (Shared Pydantic schemas)."""
