"""Domain layer — entities, validation rules, update commands, errors.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
