"""Repositorios del servicio de geografía.

Geography repository package — Database query layer for regions, comunas
and addresses.
"""
