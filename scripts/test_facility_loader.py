import asyncio
import unittest

from facility_directory.core.exceptions import LoadError
from facility_directory.models.facility import FacilityRecord
from facility_directory.services.facility_loader import FacilityLoader, load_into_state
from facility_directory.services.facility_renderer import LOAD_ERROR_MESSAGE, render_for_state
from facility_directory.services.facility_state import FAILED, LOADING, READY, FacilityState
from firestore_fakes import FakeCollection, FakeDb


class TestFacilityLoader(unittest.TestCase):
    def test_load_merges_document_id(self):
        db = FakeDb({"unidades_saude": FakeCollection({
            "abc": {"nome": "UBS Centro", "servicos": ["Vacina"]},
        })})
        records = FacilityLoader(lambda: db, "unidades_saude").load()
        self.assertEqual(len(records), 1)
        self.assertEqual(records[0].id, "abc")
        self.assertEqual(records[0].name, "UBS Centro")
        self.assertEqual(records[0].services, ("Vacina",))

    def test_query_error_becomes_load_error(self):
        db = FakeDb({"unidades_saude": FakeCollection(fail_with=ConnectionError("offline"))})
        with self.assertRaises(LoadError):
            FacilityLoader(lambda: db, "unidades_saude").load()

    def test_init_error_becomes_load_error(self):
        def broken():
            raise RuntimeError("Firebase credentials not found")

        with self.assertRaises(LoadError):
            FacilityLoader(broken, "unidades_saude").load()


class TestLoadIntoState(unittest.TestCase):
    def test_success_populates_state(self):
        db = FakeDb({"unidades_saude": FakeCollection({"1": {"nome": "A"}, "2": {"nome": "B"}})})
        state = FacilityState()
        asyncio.run(load_into_state(FacilityLoader(lambda: db, "unidades_saude"), state))
        status, records = state.snapshot()
        self.assertEqual(status, READY)
        self.assertEqual([r.name for r in records], ["A", "B"])

    def test_failure_leaves_cache_empty(self):
        db = FakeDb({"unidades_saude": FakeCollection(fail_with=PermissionError("denied"))})
        state = FacilityState()
        asyncio.run(load_into_state(FacilityLoader(lambda: db, "unidades_saude"), state))
        status, records = state.snapshot()
        self.assertEqual(status, FAILED)
        self.assertEqual(records, ())
        self.assertIn(LOAD_ERROR_MESSAGE, render_for_state(state, ""))


class TestFacilityState(unittest.TestCase):
    def test_starts_loading_and_empty(self):
        self.assertEqual(FacilityState().snapshot(), (LOADING, ()))

    def test_stale_load_cannot_overwrite_newer(self):
        state = FacilityState()
        old = state.begin_load()
        new = state.begin_load()
        newer = [FacilityRecord.from_document("n", {"nome": "UPA Norte"})]
        older = [FacilityRecord.from_document("o", {"nome": "UBS Antiga"})]
        self.assertTrue(state.commit(new, newer))
        self.assertFalse(state.commit(old, older))
        self.assertFalse(state.fail(old, "late failure"))
        status, records = state.snapshot()
        self.assertEqual(status, READY)
        self.assertEqual([r.id for r in records], ["n"])


if __name__ == '__main__':
    unittest.main()
