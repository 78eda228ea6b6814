from __future__ import annotations

import threading
from typing import Iterable

from facility_directory.models.facility import FacilityRecord

LOADING = "loading"
READY = "ready"
FAILED = "failed"


class FacilityState:
    """Owned, single-writer holder of the loaded facility dataset.

    Readers take ``snapshot()`` and work on that tuple; writers replace
    the whole dataset in one assignment. Each load takes a generation
    token from ``begin_load()`` and only the newest generation is allowed
    to commit, so an older, slower load can never overwrite a newer one.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._generation = 0
        self.status = LOADING
        self.records: tuple[FacilityRecord, ...] = ()
        self.error: str | None = None

    def begin_load(self) -> int:
        with self._lock:
            self._generation += 1
            self.status = LOADING
            self.error = None
            return self._generation

    def commit(self, generation: int, records: Iterable[FacilityRecord]) -> bool:
        records = tuple(records)
        with self._lock:
            if generation != self._generation:
                return False
            self.records = records
            self.status = READY
            self.error = None
            return True

    def fail(self, generation: int, error: str) -> bool:
        with self._lock:
            if generation != self._generation:
                return False
            self.records = ()
            self.status = FAILED
            self.error = error
            return True

    def snapshot(self) -> tuple[str, tuple[FacilityRecord, ...]]:
        with self._lock:
            return self.status, self.records
