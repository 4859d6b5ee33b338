"""PersistenceLayer — write-through and read-back of persisted store fields.

Writes are fire-and-forget relative to the action that triggered them.
In async mode they run on a single writer thread, so they are applied in
mutation order and the last write per field wins. Reads flush pending
writes first, so a module constructed after a mutation never sees a
stale value.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from concurrent.futures import Future, ThreadPoolExecutor
from typing import TYPE_CHECKING, Any

from appstate.domain.errors import StoreStateError

if TYPE_CHECKING:
    from appstate.infrastructure.storage import StateStorage

logger = logging.getLogger(__name__)


class PersistenceLayer:
    """Ordered write-through to a :class:`StateStorage`.

    Parameters:
        storage: Durable key-value substrate.
        sync: Apply writes inline instead of on the writer thread.
    """

    def __init__(self, storage: StateStorage, *, sync: bool = False) -> None:
        self._storage = storage
        self._sync = sync
        self._executor: ThreadPoolExecutor | None = (
            None
            if sync
            else ThreadPoolExecutor(max_workers=1, thread_name_prefix="appstate-persist")
        )
        self._futures: list[Future[None]] = []
        self._lock = threading.Lock()
        self._closed = False

    @property
    def storage(self) -> StateStorage:
        return self._storage

    @property
    def sync(self) -> bool:
        return self._sync

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def backlog(self) -> int:
        """Writes still pending, plus failed ones not yet reported by :meth:`flush`."""
        with self._lock:
            return len(self._futures)

    def write(self, module: str, values: Mapping[str, Any]) -> None:
        """Persist JSON-ready *values* for *module*."""
        if self._closed:
            msg = f"Cannot persist {module} fields: persistence layer is closed"
            raise StoreStateError(msg)
        payload = dict(values)
        if self._executor is None:
            self._storage.save(module, payload)
            return
        future = self._executor.submit(self._storage.save, module, payload)
        with self._lock:
            self._futures.append(future)
        future.add_done_callback(self._settle)

    def read(self, module: str, fields: Iterable[str]) -> dict[str, Any]:
        """Return stored values of *fields* for *module* after flushing writes."""
        self.flush()
        return self._storage.load(module, fields)

    def clear(self, module: str | None = None) -> None:
        """Drop stored values of *module*, or of every module."""
        self.flush()
        self._storage.clear(module)

    def flush(self) -> None:
        """Wait for pending writes. Re-raises the first failed write."""
        with self._lock:
            pending, self._futures = self._futures, []
        errors = [exc for exc in (f.exception() for f in pending) if exc is not None]
        if errors:
            logger.error("%d persisted write(s) failed", len(errors))
            raise errors[0]

    def close(self) -> None:
        """Flush, stop the writer thread, and release the storage."""
        if self._closed:
            return
        try:
            self.flush()
        finally:
            self._closed = True
            if self._executor is not None:
                self._executor.shutdown(wait=True)
                self._executor = None
            self._storage.close()

    def _settle(self, future: Future[None]) -> None:
        # Successful writes leave the backlog; failures wait for flush().
        if future.cancelled() or future.exception() is None:
            with self._lock:
                if future in self._futures:
                    self._futures.remove(future)
