"""Repositorios del servicio de compras.

Shopping repository package — Database query layer for buys and details.
"""
