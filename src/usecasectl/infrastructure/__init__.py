"""Infrastructure layer — JSON serialization and file-backed storage.

This layer depends on stdlib, jsonschema, and the domain layer.
It must never import from services, commands, or output.
"""
