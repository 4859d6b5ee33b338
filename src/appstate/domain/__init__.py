"""Domain layer — identity primitives, outcomes, and contracts.

This layer depends only on stdlib and pydantic.
It must never import from store, infrastructure, commands, or config.
"""
