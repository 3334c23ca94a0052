"""Domain layer — use-case value types and methodology rules.

This layer depends only on stdlib, pydantic, and :mod:`usecasectl.errors`.
It must never import from services, infrastructure, commands, or config.
"""
