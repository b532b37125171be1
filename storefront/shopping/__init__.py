"""Servicio de compras: compras y sus detalles.

Shopping service — purchases (buys) and their line items (details). Users,
addresses, statuses and products live in sibling services and are
confirmed over HTTP before they are referenced.
"""
