"""Servicios del servicio de productos.

Products service package — Business logic layer for categories, statuses
and products.
"""
