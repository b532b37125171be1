"""Repositorios del servicio de usuarios.

Users repository package — Database query layer for roles and users.
"""
