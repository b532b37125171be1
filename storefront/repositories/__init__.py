"""Repositorios — capa de consultas a la base de datos.

Repository package — Database query layer.
Each service's repositories extend BaseRepository for generic CRUD and add
their own queries.
"""
