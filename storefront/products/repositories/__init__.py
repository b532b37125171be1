"""Repositorios del servicio de productos.

Products repository package — Database query layer for categories, statuses
and products.
"""
