import unittest

from app.models.response import Response
from tests.base import ApiTestCase


class SaveAnswerTests(ApiTestCase):
    def test_save_answer_without_device_defaults_to_unknown(self):
        response = self.client.post("/api/save-answer", json={"answer": "yes"})
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertTrue(payload["success"])
        self.assertEqual(payload["message"], "Answer saved!")
        self.assertEqual(payload["data"]["answer"], "yes")
        self.assertEqual(payload["data"]["device"], "unknown")
        self.assertIsNotNone(payload["data"]["timestamp"])

        with self.Session() as db:
            stored = db.query(Response).one()
            self.assertEqual(stored.device, "unknown")

    def test_save_answer_keeps_device_and_any_answer(self):
        response = self.client.post(
            "/api/save-answer",
            json={"answer": "definitely maybe", "device": "iPhone"},
        )
        self.assertEqual(response.status_code, 200)
        data = response.json()["data"]
        self.assertEqual(data["answer"], "definitely maybe")
        self.assertEqual(data["device"], "iPhone")

    def test_ids_increase(self):
        first = self.client.post("/api/save-answer", json={"answer": "no"}).json()
        second = self.client.post("/api/save-answer", json={"answer": "yes"}).json()
        self.assertGreater(second["data"]["id"], first["data"]["id"])

    def test_missing_answer_is_rejected(self):
        response = self.client.post("/api/save-answer", json={"device": "x"})
        self.assertEqual(response.status_code, 422)


class ResponseStatusTests(ApiTestCase):
    def test_status_without_answers(self):
        response = self.client.get("/api/response-status")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {"hasAnswered": False, "answer": None, "timestamp": None, "photoCount": 0},
        )

    def test_status_reports_latest_answer_and_photo_count(self):
        self.client.post("/api/save-answer", json={"answer": "no"})
        self.client.post("/api/save-answer", json={"answer": "yes"})
        self.upload()
        self.upload()

        payload = self.client.get("/api/response-status").json()
        self.assertTrue(payload["hasAnswered"])
        self.assertEqual(payload["answer"], "yes")
        self.assertIsNotNone(payload["timestamp"])
        self.assertEqual(payload["photoCount"], 2)


if __name__ == "__main__":
    unittest.main()
