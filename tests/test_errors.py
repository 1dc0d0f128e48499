import os
import unittest
from unittest.mock import patch

from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient
from jose import ExpiredSignatureError, JWTError
from sqlalchemy.exc import OperationalError

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")

from app.core.config import settings
from app.core.errors import error_body, install_error_handlers
from app.main import app
from app.repositories.registry import build_store, reset_store_for_tests
from app.repositories.store import RepositoryUnavailable
from app.services.list_query import InvalidQuery
from app.services.rate_limit import InMemoryRateLimiter, set_rate_limiter


def _error_app() -> FastAPI:
    error_app = FastAPI()
    install_error_handlers(error_app)

    @error_app.get("/invalid-query")
    def _invalid_query():
        raise InvalidQuery("per_page must be a positive integer", field_name="limit")

    @error_app.get("/conflict")
    def _conflict():
        raise HTTPException(status_code=409, detail="Already taken")

    @error_app.get("/expired")
    def _expired():
        raise ExpiredSignatureError("Signature has expired")

    @error_app.get("/bad-jwt")
    def _bad_jwt():
        raise JWTError("bad")

    @error_app.get("/store-down")
    def _store_down():
        raise RepositoryUnavailable("connection refused")

    @error_app.get("/boom")
    def _boom():
        raise RuntimeError("boom")

    @error_app.get("/typed")
    def _typed(count: int):
        return {"count": count}

    return error_app


class ErrorHandlerTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(_error_app(), raise_server_exceptions=False)

    @classmethod
    def tearDownClass(cls):
        cls.client.close()

    def test_error_body(self):
        self.assertEqual(error_body("Nope"), {"success": False, "message": "Nope"})
        self.assertEqual(error_body("Nope", field="x"), {"success": False, "message": "Nope", "field": "x"})

    def test_invalid_query_is_400(self):
        response = self.client.get("/invalid-query")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.json(),
            {"success": False, "message": "per_page must be a positive integer", "field": "limit"},
        )

    def test_http_exception_keeps_status(self):
        response = self.client.get("/conflict")
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json(), {"success": False, "message": "Already taken"})

    def test_jwt_errors_are_401(self):
        self.assertEqual(self.client.get("/expired").json()["message"], "Token expired")
        response = self.client.get("/bad-jwt")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["message"], "Invalid token")

    def test_store_unavailable_is_503(self):
        response = self.client.get("/store-down")
        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json()["message"], "Storage service unavailable")

    def test_query_validation_is_400(self):
        response = self.client.get("/typed", params={"count": "many"})
        self.assertEqual(response.status_code, 400)
        body = response.json()
        self.assertEqual(body["message"], "Validation failed")
        self.assertEqual(body["errors"][0]["field"], "query.count")

    def test_unhandled_error_is_500(self):
        with patch.object(settings, "APP_ENV", "local"):
            response = self.client.get("/boom")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"success": False, "message": "Internal server error", "error": "RuntimeError"})

    def test_unhandled_error_hides_type_in_production(self):
        with patch.object(settings, "APP_ENV", "production"):
            response = self.client.get("/boom")
        self.assertEqual(response.status_code, 500)
        self.assertNotIn("error", response.json())


def _broken_session():
    raise OperationalError("SELECT 1", {}, Exception("database is down"))


class StoreOutageTests(unittest.TestCase):
    def setUp(self):
        reset_store_for_tests(build_store("sql", session_factory=_broken_session))
        set_rate_limiter(InMemoryRateLimiter())
        self.client = TestClient(app)

    def tearDown(self):
        self.client.close()
        reset_store_for_tests()

    def test_listing_reports_503(self):
        response = self.client.get("/products")
        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json(), {"success": False, "message": "Storage service unavailable"})


if __name__ == "__main__":
    unittest.main()
