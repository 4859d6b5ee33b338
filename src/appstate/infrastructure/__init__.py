"""Infrastructure layer — durable storage for persisted state fields.

This layer depends on stdlib and third-party libs (SQLAlchemy).
It must never import from store, usecases, commands, or output.
"""
