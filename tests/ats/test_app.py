"""Tests for application wiring: health, error handlers, logging setup."""

import json
import logging

from fastapi.testclient import TestClient

from ats.logging_config import JSONFormatter, setup_logging
from ats.main import app


class TestHealth:
    """Tests for GET /health."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert "timestamp" in body
        assert body["uptime"] >= 0


class TestErrorHandlers:
    """Tests for the global error envelope."""

    def test_unknown_route(self, client):
        response = client.get("/api/no-such-thing")
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Not Found", "statusCode": 404}

    def test_method_not_allowed(self, client):
        response = client.put("/api/applicants/abc", json={})
        assert response.status_code == 405
        assert response.json()["success"] is False

    def test_malformed_json(self, client):
        response = client.post(
            "/api/applicants",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Validation failed"
        assert body["errors"]

    def test_unhandled_exception_is_hidden(self):
        @app.get("/_boom")
        def boom():
            raise RuntimeError("internal detail")

        try:
            with TestClient(app, raise_server_exceptions=False) as c:
                response = c.get("/_boom")
        finally:
            app.router.routes = [r for r in app.router.routes if getattr(r, "path", "") != "/_boom"]

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": "Internal Server Error",
            "statusCode": 500,
        }


class TestLogging:
    """Tests for logging setup."""

    def test_json_formatter_includes_extras(self):
        record = logging.LogRecord("ats.test", logging.INFO, __file__, 1, "hello %s", ("x",), None)
        record.model_name = "Job"
        payload = json.loads(JSONFormatter().format(record))
        assert payload["message"] == "hello x"
        assert payload["level"] == "INFO"
        assert payload["model_name"] == "Job"

    def test_setup_logging_does_not_duplicate_handlers(self):
        setup_logging("debug", "json")
        setup_logging("warning", "text")
        root = logging.getLogger()
        ours = [h for h in root.handlers if getattr(h, "_ats_handler", False)]
        assert len(ours) == 1
        assert root.level == logging.WARNING
