"""Key-value storage substrates for persisted store fields.

Values are keyed by module name + field name. The persistence layer
hands over JSON-ready values; each substrate owns its encoding.
"""

from __future__ import annotations

import copy
import json
import logging
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, Protocol

from sqlalchemy import delete, select
from sqlalchemy.dialects.sqlite import insert

from appstate.infrastructure.database.schema import persisted_state

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


class StateStorage(Protocol):
    """Durable storage contract used by the persistence layer."""

    def load(self, module: str, fields: Iterable[str]) -> dict[str, Any]:
        """Return stored values for *fields* of *module* (missing fields omitted)."""
        ...

    def save(self, module: str, values: Mapping[str, Any]) -> None:
        """Write *values* for *module*, replacing any previous value per field."""
        ...

    def clear(self, module: str | None = None) -> None:
        """Forget stored values of *module*, or of every module."""
        ...

    def close(self) -> None:
        """Release underlying resources."""
        ...


class MemoryStorage:
    """In-process storage. Survives registry restarts within one process."""

    def __init__(self) -> None:
        self._data: dict[str, dict[str, Any]] = {}

    def load(self, module: str, fields: Iterable[str]) -> dict[str, Any]:
        stored = self._data.get(module, {})
        return {name: copy.deepcopy(stored[name]) for name in fields if name in stored}

    def save(self, module: str, values: Mapping[str, Any]) -> None:
        bucket = self._data.setdefault(module, {})
        for name, value in values.items():
            bucket[name] = copy.deepcopy(value)

    def clear(self, module: str | None = None) -> None:
        if module is None:
            self._data.clear()
        else:
            self._data.pop(module, None)

    def close(self) -> None:
        pass


class SqlStateStorage:
    """SQLite-backed storage using the ``persisted_state`` table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    @property
    def engine(self) -> Engine:
        return self._engine

    def load(self, module: str, fields: Iterable[str]) -> dict[str, Any]:
        wanted = list(fields)
        if not wanted:
            return {}
        with self._engine.connect() as conn:
            rows = conn.execute(
                select(persisted_state.c.field, persisted_state.c.value).where(
                    persisted_state.c.module == module,
                    persisted_state.c.field.in_(wanted),
                )
            ).fetchall()
        loaded: dict[str, Any] = {}
        for row in rows:
            try:
                loaded[row.field] = json.loads(row.value)
            except json.JSONDecodeError:
                logger.warning("Ignoring undecodable stored value for %s.%s", module, row.field)
        return loaded

    def save(self, module: str, values: Mapping[str, Any]) -> None:
        if not values:
            return
        updated = datetime.now(UTC).isoformat()
        with self._engine.begin() as conn:
            for name, value in values.items():
                stmt = insert(persisted_state).values(
                    module=module,
                    field=name,
                    value=json.dumps(value),
                    updated=updated,
                )
                conn.execute(
                    stmt.on_conflict_do_update(
                        index_elements=[persisted_state.c.module, persisted_state.c.field],
                        set_={"value": stmt.excluded.value, "updated": stmt.excluded.updated},
                    )
                )
        logger.debug("Persisted %s.%s", module, ",".join(values))

    def clear(self, module: str | None = None) -> None:
        stmt = delete(persisted_state)
        if module is not None:
            stmt = stmt.where(persisted_state.c.module == module)
        with self._engine.begin() as conn:
            conn.execute(stmt)

    def close(self) -> None:
        self._engine.dispose()
