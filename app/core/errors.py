from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from jose import ExpiredSignatureError, JWTError
from starlette.exceptions import HTTPException

from app.core.config import settings
from app.repositories.store import RepositoryUnavailable
from app.services.list_query import InvalidQuery

_LOG = logging.getLogger("app.errors")


def error_body(message: str, **extra) -> dict:
    body = {"success": False, "message": message}
    body.update(extra)
    return body


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


async def _invalid_query_handler(request: Request, exc: InvalidQuery) -> JSONResponse:
    _LOG.info("invalid list query path=%s field=%s: %s", request.url.path, exc.field_name, exc.message)
    extra = {"field": exc.field_name} if exc.field_name else {}
    return JSONResponse(status_code=400, content=error_body(exc.message, **extra))


async def _validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"), "message": err.get("msg")}
        for err in exc.errors()
    ]
    return JSONResponse(status_code=400, content=jsonable_encoder(error_body("Validation failed", errors=errors)))


async def _http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return JSONResponse(status_code=exc.status_code, content=error_body(message), headers=exc.headers)


async def _jwt_error_handler(request: Request, exc: JWTError) -> JSONResponse:
    message = "Token expired" if isinstance(exc, ExpiredSignatureError) else "Invalid token"
    return JSONResponse(status_code=401, content=error_body(message))


async def _store_unavailable_handler(request: Request, exc: RepositoryUnavailable) -> JSONResponse:
    _LOG.error("store unavailable path=%s request_id=%s: %s", request.url.path, _request_id(request), exc)
    return JSONResponse(status_code=503, content=error_body("Storage service unavailable"))


async def _unhandled_handler(request: Request, exc: Exception) -> JSONResponse:
    _LOG.exception("unhandled error %s %s request_id=%s", request.method, request.url.path, _request_id(request))
    extra = {} if settings.is_production else {"error": type(exc).__name__}
    return JSONResponse(status_code=500, content=error_body("Internal server error", **extra))


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvalidQuery, _invalid_query_handler)
    app.add_exception_handler(RequestValidationError, _validation_handler)
    app.add_exception_handler(HTTPException, _http_exception_handler)
    app.add_exception_handler(JWTError, _jwt_error_handler)
    app.add_exception_handler(RepositoryUnavailable, _store_unavailable_handler)
    app.add_exception_handler(Exception, _unhandled_handler)
