import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.errors import install_error_handlers
from app.core.http_hardening import install_http_hardening
from app.api.storefront.router import router as storefront_router
from app.models.common import utcnow_iso

logging.basicConfig(
    level=getattr(logging, str(settings.LOG_LEVEL).upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Requested-With", "X-Request-ID"],
)
install_http_hardening(app)
install_error_handlers(app)

app.include_router(storefront_router)


@app.get("/health")
def health():
    return {"status": "OK", "timestamp": utcnow_iso(), "environment": settings.APP_ENV}


@app.get("/api")
def service_info():
    return {"service": settings.APP_NAME, "version": settings.APP_VERSION, "status": "ok"}
