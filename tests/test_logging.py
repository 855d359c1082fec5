import os
import unittest

from sqlalchemy import text

from app.core.logger import logger, configure_logging
from app.core.logging_middleware import REQUEST_ID_HEADER
from tests.base import ApiTestCase


class RequestIdTests(ApiTestCase):
    def test_request_id_is_generated(self):
        response = self.client.get("/health")
        self.assertTrue(response.headers[REQUEST_ID_HEADER])

    def test_incoming_request_id_is_echoed(self):
        response = self.client.get("/health", headers={REQUEST_ID_HEADER: "abc123"})
        self.assertEqual(response.headers[REQUEST_ID_HEADER], "abc123")


class LogSinkTests(ApiTestCase):
    def read_log(self, name):
        # 싱크 제거 시 파일이 닫히며 flush 됨
        logger.remove()
        with open(os.path.join(self.settings.log_dir, name)) as f:
            content = f.read()
        configure_logging(self.settings)
        return content

    def test_storage_errors_reach_error_log_with_request_id(self):
        with self.Session() as db:
            db.execute(text("DROP TABLE responses"))
            db.commit()

        response = self.client.post(
            "/api/save-answer",
            json={"answer": "yes"},
            headers={REQUEST_ID_HEADER: "req-42"},
        )
        self.assertEqual(response.status_code, 500)

        error_log = self.read_log("error.log")
        self.assertIn("Error saving answer", error_log)
        self.assertIn("req-42", error_log)

    def test_info_goes_to_main_log_only(self):
        self.client.post("/api/save-answer", json={"answer": "yes"})
        self.assertIn("Answer saved: yes", self.read_log("sweetbyte.log"))
        self.assertNotIn("Answer saved", self.read_log("error.log"))


if __name__ == "__main__":
    unittest.main()
