"""Utilidades compartidas (Shared utilities: exceptions, validation, passwords)."""
