"""Servicio de usuarios: roles, registro, login y perfil.

Users service — roles, user registration, stateless login and profile
maintenance.
"""
