import unittest
from unittest import mock

from fastapi.testclient import TestClient

from facility_directory.api.deps import get_db
from facility_directory.core import firebase
from facility_directory.main import app
from facility_directory.models.facility import FacilityRecord
from facility_directory.services.facility_renderer import LOADING_MESSAGE, NO_RESULTS_MESSAGE
from facility_directory.services.facility_state import FacilityState
from firestore_fakes import FakeCollection, FakeDb


def _ready_state():
    state = FacilityState()
    state.commit(state.begin_load(), [
        FacilityRecord.from_document("1", {"nome": "UBS Centro", "bairro": "Centro", "servicos": ["Vacina"]}),
        FacilityRecord.from_document("2", {"nome": "UPA Norte", "bairro": "Zona Norte", "servicos": ["Raio-X", "Vacina"]}),
    ])
    return state


class TestFacilityRoutes(unittest.TestCase):
    def setUp(self):
        # No `with` block: the startup hook (and Firebase) never runs
        self.client = TestClient(app)
        app.state.facilities = _ready_state()

    def tearDown(self):
        app.state.facilities = None

    def test_json_listing_filters(self):
        resp = self.client.get("/unidades", params={"q": "vacina"})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["status"], "ready")
        self.assertEqual([i["id"] for i in data["items"]], ["1", "2"])
        self.assertEqual(self.client.get("/unidades", params={"q": "norte"}).json()["count"], 1)

    def test_fragment_no_results(self):
        resp = self.client.get("/unidades/cards", params={"q": "xyz"})
        self.assertEqual(resp.status_code, 200)
        self.assertIn(NO_RESULTS_MESSAGE, resp.text)

    def test_page_renders_full_listing(self):
        resp = self.client.get("/")
        self.assertEqual(resp.status_code, 200)
        self.assertIn("UBS Centro", resp.text)
        self.assertIn("UPA Norte", resp.text)
        self.assertIn('id="anonimoCheck"', resp.text)

    def test_page_while_loading(self):
        app.state.facilities = FacilityState()
        resp = self.client.get("/unidades/cards")
        self.assertIn(LOADING_MESSAGE, resp.text)
        self.assertEqual(self.client.get("/health").json()["dataset"], "loading")

    def test_page_exposes_dataset_status(self):
        resp = self.client.get("/")
        self.assertIn('data-dataset-status="ready"', resp.text)

        app.state.facilities = FacilityState()
        resp = self.client.get("/")
        self.assertIn('data-dataset-status="loading"', resp.text)
        self.assertIn(LOADING_MESSAGE, resp.text)

    def test_fragment_reports_status_until_load_finishes(self):
        state = FacilityState()
        generation = state.begin_load()
        app.state.facilities = state
        resp = self.client.get("/unidades/cards")
        self.assertEqual(resp.headers["X-Dataset-Status"], "loading")

        state.commit(generation, [FacilityRecord.from_document("1", {"nome": "UBS Centro"})])
        resp = self.client.get("/unidades/cards")
        self.assertEqual(resp.headers["X-Dataset-Status"], "ready")
        self.assertIn("UBS Centro", resp.text)
        self.assertNotIn(LOADING_MESSAGE, resp.text)

    def test_page_script_keeps_only_newest_response(self):
        html = self.client.get("/").text
        self.assertIn("if (atual !== seq)", html)
        self.assertIn("catch (err)", html)
        self.assertIn("aguardarCarga()", html)


class TestFeedbackRoute(unittest.TestCase):
    def setUp(self):
        self.db = FakeDb()
        app.dependency_overrides[get_db] = lambda: self.db
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_submit_anonymous(self):
        resp = self.client.post("/feedback", json={"anonymous": True, "first_name": "Ana", "message": "ok"})
        self.assertEqual(resp.status_code, 201)
        body = resp.json()
        self.assertTrue(body["anonymous"])
        self.assertNotIn("nome", self.db.collection("feedbacks").docs[body["id"]])

    def test_missing_message_is_rejected(self):
        resp = self.client.post("/feedback", json={"anonymous": False})
        self.assertEqual(resp.status_code, 422)

    def test_malformed_credentials_are_503(self):
        app.dependency_overrides.clear()
        with mock.patch.object(firebase, "get_db", side_effect=ValueError("bad key file")):
            resp = self.client.post("/feedback", json={"message": "ok"})
        self.assertEqual(resp.status_code, 503)

    def test_storage_failure_is_502(self):
        self.db.collections["feedbacks"] = FakeCollection(fail_with=ConnectionError("offline"))
        resp = self.client.post("/feedback", json={"message": "ok"})
        self.assertEqual(resp.status_code, 502)


if __name__ == '__main__':
    unittest.main()
