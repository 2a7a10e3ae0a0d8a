"""Service layer — business rules around repository calls.

Services may import from domain and infrastructure layers.
They must never import from commands or output.
"""
