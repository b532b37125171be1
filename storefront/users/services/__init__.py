"""Servicios del servicio de usuarios.

Users service package — Business logic layer for roles and users.
"""
