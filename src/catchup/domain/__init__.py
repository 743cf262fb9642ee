"""Domain layer — participants, calendar arithmetic, derivation, formats.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
