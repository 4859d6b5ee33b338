"""SQLAlchemy Core table definitions for the appstate database."""

from __future__ import annotations

from sqlalchemy import Column, Index, MetaData, PrimaryKeyConstraint, Table, Text

metadata = MetaData()

# One row per (module, field). ``value`` is the JSON-encoded field value.
persisted_state = Table(
    "persisted_state",
    metadata,
    Column("module", Text, nullable=False),
    Column("field", Text, nullable=False),
    Column("value", Text, nullable=False),
    Column("updated", Text, nullable=False),
    PrimaryKeyConstraint("module", "field"),
)

Index("ix_persisted_state_module", persisted_state.c.module)
