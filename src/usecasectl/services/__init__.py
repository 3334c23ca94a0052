"""Service layer — use-case lifecycle operations.

Services may import from domain and infrastructure layers.
They must never import from commands or output.
"""
