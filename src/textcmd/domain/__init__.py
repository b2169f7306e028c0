"""Domain layer — line sequences, transforms, and command tables.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
