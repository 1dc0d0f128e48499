import os
import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")

from app.core.config import settings
from app.main import app
from app.repositories.registry import build_store, reset_store_for_tests
from app.services.rate_limit import InMemoryRateLimiter, set_rate_limiter


class HttpHardeningTests(unittest.TestCase):
    def setUp(self):
        reset_store_for_tests(build_store("memory"))
        set_rate_limiter(InMemoryRateLimiter())
        self.client = TestClient(app)

    def tearDown(self):
        self.client.close()
        reset_store_for_tests()
        set_rate_limiter(None)

    def test_health_has_security_headers_and_request_id(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "OK")

        self.assertEqual(response.headers.get("x-content-type-options"), "nosniff")
        self.assertEqual(response.headers.get("x-frame-options"), "DENY")
        self.assertEqual(response.headers.get("referrer-policy"), "no-referrer")
        self.assertEqual(response.headers.get("x-permitted-cross-domain-policies"), "none")
        self.assertEqual(response.headers.get("cross-origin-opener-policy"), "same-origin")
        self.assertEqual(response.headers.get("cache-control"), "no-store")

        request_id = response.headers.get("x-request-id")
        self.assertIsNotNone(request_id)
        self.assertRegex(str(request_id), r"^[A-Za-z0-9._-]{1,128}$")

    def test_valid_request_id_is_preserved(self):
        external_request_id = "release-check-2026_10_18"
        response = self.client.get("/health", headers={"X-Request-ID": external_request_id})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.headers.get("x-request-id"), external_request_id)

    def test_invalid_request_id_is_replaced(self):
        bad_request_id = "bad id with spaces"
        response = self.client.get("/health", headers={"X-Request-ID": bad_request_id})
        self.assertEqual(response.status_code, 200)

        response_request_id = response.headers.get("x-request-id")
        self.assertIsNotNone(response_request_id)
        self.assertNotEqual(response_request_id, bad_request_id)
        self.assertRegex(str(response_request_id), r"^[A-Za-z0-9._-]{1,128}$")

    def test_error_response_keeps_security_headers_and_request_id(self):
        # No bearer token => 401 from dependency, middleware headers must still be present.
        response = self.client.get("/orders")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.headers.get("x-content-type-options"), "nosniff")
        self.assertEqual(response.headers.get("x-frame-options"), "DENY")
        self.assertTrue(bool(response.headers.get("x-request-id")))

    def test_unknown_route_uses_json_error_shape(self):
        response = self.client.get("/no-such-endpoint")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"success": False, "message": "Not Found"})

    def test_cors_allows_configured_origin(self):
        origin = settings.cors_origins_list[0]
        response = self.client.get("/api", headers={"Origin": origin})
        self.assertEqual(response.headers.get("access-control-allow-origin"), origin)
        self.assertEqual(response.json()["service"], settings.APP_NAME)


class RateLimitMiddlewareTests(unittest.TestCase):
    def setUp(self):
        reset_store_for_tests(build_store("memory"))
        set_rate_limiter(InMemoryRateLimiter())
        self.client = TestClient(app)

    def tearDown(self):
        self.client.close()
        reset_store_for_tests()
        set_rate_limiter(None)

    def test_requests_over_the_limit_get_429(self):
        with patch.object(settings, "RATE_LIMIT_ENABLED", True), patch.object(settings, "RATE_LIMIT_MAX_REQUESTS", 2):
            first = self.client.get("/tags")
            self.assertEqual(first.status_code, 200)
            self.assertEqual(first.headers.get("ratelimit-limit"), "2")
            self.assertEqual(first.headers.get("ratelimit-remaining"), "1")
            self.assertEqual(self.client.get("/tags").status_code, 200)

            blocked = self.client.get("/tags")
            self.assertEqual(blocked.status_code, 429)
            self.assertFalse(blocked.json()["success"])
            self.assertGreater(int(blocked.headers["retry-after"]), 0)
            self.assertEqual(blocked.headers.get("ratelimit-remaining"), "0")
            self.assertTrue(bool(blocked.headers.get("x-request-id")))

            self.assertEqual(self.client.get("/health").status_code, 200)

    def test_disabled_limiter_adds_no_headers(self):
        with patch.object(settings, "RATE_LIMIT_ENABLED", False):
            response = self.client.get("/tags")
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.headers.get("ratelimit-limit"))


if __name__ == "__main__":
    unittest.main()
