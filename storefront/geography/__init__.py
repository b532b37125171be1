"""Servicio de geografía: regiones, comunas y direcciones.

Geography service — regions, comunas and users' shipping addresses.
"""
