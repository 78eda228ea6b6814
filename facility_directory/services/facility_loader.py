"""Reads the facility collection from Firestore into a FacilityState.

The read happens once at startup. ``load_into_state`` never raises: a
failure marks the state as failed and the page shows the error message
for the rest of the session (no retry).
"""
from __future__ import annotations

import asyncio
import logging
from typing import Callable

from facility_directory.core.config import settings
from facility_directory.core.exceptions import LoadError
from facility_directory.models.facility import FacilityRecord
from facility_directory.services.facility_state import FacilityState
from facility_directory.services.logger import log_debug

log = logging.getLogger(__name__)


class FacilityLoader:
    def __init__(self, db_factory: Callable, collection: str | None = None):
        # db_factory is called lazily so Firebase init errors count as load errors
        self._db_factory = db_factory
        self.collection = collection or settings.FACILITIES_COLLECTION

    def load(self) -> list[FacilityRecord]:
        try:
            db = self._db_factory()
            docs = db.collection(self.collection).stream()
            return [FacilityRecord.from_document(doc.id, doc.to_dict()) for doc in docs]
        except Exception as exc:
            raise LoadError(f"Could not read collection '{self.collection}': {exc}") from exc


async def load_into_state(loader: FacilityLoader, state: FacilityState) -> None:
    generation = state.begin_load()
    try:
        records = await asyncio.to_thread(loader.load)
    except LoadError as exc:
        log.error("Erro ao carregar dados do Firebase Firestore: %s", exc)
        state.fail(generation, str(exc))
        return

    if state.commit(generation, records):
        log.info("Sucesso! %d unidades carregadas do Firebase.", len(records))
        log_debug("facilities_loaded", {"collection": loader.collection, "ids": [r.id for r in records]})
    else:
        log.warning("Discarding stale load of '%s' (newer load in progress).", loader.collection)
