import tempfile
import unittest
from pathlib import Path
from unittest import mock

from fastapi.testclient import TestClient

import app as app_module
from exceptions import ReadError

client = TestClient(app_module.app)


class TestExtractEndpoint(unittest.TestCase):

    def test_extract(self):
        response = client.post("/extract", json={"text": "aei o u aeiou uoiea bcd fgh"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"words": ["aei", "o", "u", "aeiou", "uoiea"], "count": 5})

    def test_extract_empty_text(self):
        response = client.post("/extract", json={"text": ""})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"words": [], "count": 0})

    def test_extract_requires_text(self):
        response = client.post("/extract", json={})
        self.assertEqual(response.status_code, 422)


class TestProcessEndpoint(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        self.data_dir = self.root / "data"
        self.data_dir.mkdir()
        patcher = mock.patch.object(app_module.config.reader, "data_dir", self.data_dir)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)

    def test_process_file(self):
        path = self.data_dir / "input.txt"
        path.write_text("AEI aei, xyz", encoding="utf-8")

        response = client.post("/process", json={"path": "input.txt"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {
            "path": str(path),
            "content": "AEI aei, xyz",
            "words": ["AEI", "aei"]
        })

    def test_absolute_path_inside_data_dir(self):
        path = self.data_dir / "input.txt"
        path.write_text("ou", encoding="utf-8")

        response = client.post("/process", json={"path": str(path)})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["words"], ["ou"])

    def test_missing_file(self):
        path = str(self.data_dir / "missing.txt")
        response = client.post("/process", json={"path": "missing.txt"})

        self.assertEqual(response.status_code, 404)
        detail = response.json()["detail"]
        self.assertEqual(detail["error_code"], "FILE_NOT_FOUND")
        self.assertEqual(detail["message"], f"File does not exist: {path}")

    def test_path_outside_data_dir_is_rejected(self):
        with mock.patch.object(app_module.runner_service, "process_file") as process:
            response = client.post("/process", json={"path": "/etc/passwd"})

        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json()["detail"]["error_code"], "ACCESS_DENIED")
        self.assertNotIn("content", response.json())
        process.assert_not_called()

    def test_parent_traversal_is_rejected(self):
        (self.root / "secret.txt").write_text("aei", encoding="utf-8")

        response = client.post("/process", json={"path": "../secret.txt"})

        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json()["detail"]["message"], "Access denied: ../secret.txt")

    def test_unreadable_file(self):
        with mock.patch.object(
            app_module.runner_service, "process_file", side_effect=ReadError("Permission denied", "x.txt")
        ):
            response = client.post("/process", json={"path": "x.txt"})

        self.assertEqual(response.status_code, 422)
        self.assertEqual(response.json()["detail"]["error_code"], "READ_ERROR")

    def test_unexpected_error(self):
        with mock.patch.object(app_module.runner_service, "process_file", side_effect=RuntimeError("boom")):
            response = client.post("/process", json={"path": "x.txt"})

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["detail"]["message"], "Unexpected error: boom")

    def test_empty_path(self):
        response = client.post("/process", json={"path": "  "})
        self.assertEqual(response.status_code, 400)


class TestHealthEndpoint(unittest.TestCase):

    def test_health(self):
        response = client.get("/health")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["status"], "healthy")
        self.assertIn("input_path", body["config"])


if __name__ == '__main__':
    unittest.main()
