from fastapi import APIRouter
from app.api.storefront import auth, notifications, orders, users
from app.api.storefront.catalog import build_catalog_router
from app.api.storefront.content import build_content_router

router = APIRouter()
router.include_router(auth.router, tags=["Auth"])
router.include_router(users.router, tags=["Users"])
router.include_router(orders.router, prefix="/orders", tags=["Orders"])
router.include_router(notifications.router, prefix="/notify-logs", tags=["Notifications"])
router.include_router(build_catalog_router())
router.include_router(build_content_router())
