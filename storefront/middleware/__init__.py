"""Middleware HTTP (HTTP middleware package)."""
