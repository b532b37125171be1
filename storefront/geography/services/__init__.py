"""Servicios del servicio de geografía.

Geography service package — Business logic layer for regions, comunas and
addresses.
"""
