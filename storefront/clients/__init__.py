"""Clientes HTTP hacia servicios hermanos.

Remote clients package — HTTP clients used to confirm that ids owned by a
sibling service exist.
"""
