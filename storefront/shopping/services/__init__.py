"""Servicios del servicio de compras.

Shopping service package — Business logic layer for buys and details.
"""
