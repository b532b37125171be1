"""Microservicios de comercio electrónico: geografía, productos, compras y usuarios.

Storefront — four FastAPI microservices (geography, products, shopping,
users) sharing one code base. Each service owns its database and checks
references to its siblings' data over HTTP.
"""
