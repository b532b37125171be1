"""Servicio de productos: categorías, estados y productos.

Products service — product catalogue, its categories and the shared status
catalogue used by products and purchases.
"""
