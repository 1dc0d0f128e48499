from typing import Any

from fastapi import APIRouter, HTTPException

from app.api.storefront.resources import ResourceDefinition, build_resource_router
from app.core.deps import STAFF_ROLES, AuthenticatedPrincipal, ROLE_CUSTOMER
from app.schemas.storefront import (
    CategoryCreate,
    CategoryUpdate,
    CouponCreate,
    CouponUpdate,
    FaqCreate,
    FaqUpdate,
    ProductCreate,
    ProductUpdate,
    ReviewCreate,
    ReviewUpdate,
    ShippingCreate,
    ShippingUpdate,
    ShopCreate,
    ShopUpdate,
    TagCreate,
    TagUpdate,
    TaxCreate,
    TaxUpdate,
    TypeCreate,
    TypeUpdate,
    WithdrawCreate,
    WithdrawUpdate,
)
from app.services.envelope import EnvelopeStyle
from app.services.list_params import FilterParam, ListConfig
from app.services.list_query import SortDirection


def set_author(data: dict[str, Any], principal: AuthenticatedPrincipal) -> dict[str, Any]:
    data["user_id"] = principal.id
    return data


def moderated_author(data: dict[str, Any], principal: AuthenticatedPrincipal) -> dict[str, Any]:
    """Customer submissions wait for staff approval."""
    data = set_author(data, principal)
    data["is_approved"] = principal.role != ROLE_CUSTOMER
    return data


def owner_or_staff(row: dict[str, Any], principal: AuthenticatedPrincipal, action: str) -> None:
    if principal.role not in STAFF_ROLES and row.get("user_id") != principal.id:
        raise HTTPException(status_code=403, detail="Insufficient permissions")


def staff_approval_only(changes: dict[str, Any], current: dict[str, Any], principal: AuthenticatedPrincipal) -> dict[str, Any]:
    if principal.role not in STAFF_ROLES:
        changes.pop("is_approved", None)
    return changes


def _price_bounds(record: dict[str, Any]) -> dict[str, Any]:
    prices = [value for value in (record.get("price"), record.get("sale_price")) if value is not None]
    return {"min_price": min(prices), "max_price": max(prices)}


def _price_range(data: dict[str, Any], principal: AuthenticatedPrincipal) -> dict[str, Any]:
    data.update(_price_bounds(data))
    return data


def _price_range_update(changes: dict[str, Any], current: dict[str, Any], principal: AuthenticatedPrincipal) -> dict[str, Any]:
    if "price" in changes or "sale_price" in changes:
        changes.update(_price_bounds({**current, **changes}))
    return changes


RESOURCES: dict[str, ResourceDefinition] = {
    "products": ResourceDefinition(
        name="products",
        label="Product",
        lookup_field="slug",
        slug_source="name",
        create_model=ProductCreate,
        update_model=ProductUpdate,
        create_defaults={"featured": False, "in_stock": True, "product_type": "simple"},
        prepare_create=_price_range,
        prepare_update=_price_range_update,
        list_config=ListConfig(
            default_per_page=15,
            search_fields=("name", "description", "sku"),
            filters=(
                FilterParam("category", "categories.slug", "csv"),
                FilterParam("tags", "tags.slug", "csv"),
                FilterParam("min_price", "min_price", "min"),
                FilterParam("max_price", "max_price", "max"),
                FilterParam("shop_id", "shop.id", "int"),
                FilterParam("status", "status"),
                FilterParam("featured", "featured", "bool"),
                FilterParam("type", "type.slug"),
            ),
        ),
    ),
    "categories": ResourceDefinition(
        name="categories",
        label="Category",
        lookup_field="slug",
        slug_source="name",
        create_model=CategoryCreate,
        update_model=CategoryUpdate,
        create_defaults={"featured": False, "products_count": 0, "image": None},
        list_config=ListConfig(
            default_per_page=50,
            search_fields=("name", "description"),
            filters=(
                FilterParam("parent", "parent_id", "int"),
                FilterParam("is_active", "is_active", "bool"),
            ),
        ),
    ),
    "types": ResourceDefinition(
        name="types",
        label="Product type",
        lookup_field="slug",
        slug_source="name",
        create_model=TypeCreate,
        update_model=TypeUpdate,
        create_defaults={"products_count": 0},
        list_config=ListConfig(
            default_per_page=16,
            search_fields=("name",),
            filters=(FilterParam("is_active", "is_active", "bool"),),
        ),
    ),
    "tags": ResourceDefinition(
        name="tags",
        label="Tag",
        slug_source="name",
        create_model=TagCreate,
        update_model=TagUpdate,
        list_config=ListConfig(search_fields=("name",)),
    ),
    "shops": ResourceDefinition(
        name="shops",
        label="Shop",
        slug_source="name",
        create_model=ShopCreate,
        update_model=ShopUpdate,
        create_defaults={"orders_count": 0, "products_count": 0},
        list_config=ListConfig(
            default_per_page=10,
            search_fields=("name", "description"),
            filters=(FilterParam("is_active", "is_active", "bool"),),
        ),
    ),
    "coupons": ResourceDefinition(
        name="coupons",
        label="Coupon",
        unique_field="code",
        create_model=CouponCreate,
        update_model=CouponUpdate,
        list_config=ListConfig(
            search_fields=("code", "description"),
            filters=(
                FilterParam("type", "type"),
                FilterParam("is_active", "is_active", "bool"),
            ),
        ),
    ),
    "faqs": ResourceDefinition(
        name="faqs",
        label="FAQ",
        create_model=FaqCreate,
        update_model=FaqUpdate,
        list_config=ListConfig(
            search_fields=("faq_title", "faq_description"),
            filters=(FilterParam("faq_type", "faq_type"),),
        ),
    ),
    "taxes": ResourceDefinition(
        name="taxes",
        label="Tax",
        create_model=TaxCreate,
        update_model=TaxUpdate,
        list_config=ListConfig(
            default_order_by="priority",
            default_sorted_by=SortDirection.ASC,
            search_fields=("name", "country"),
            filters=(FilterParam("is_active", "is_active", "bool"),),
        ),
    ),
    "shippings": ResourceDefinition(
        name="shippings",
        label="Shipping",
        create_model=ShippingCreate,
        update_model=ShippingUpdate,
        list_config=ListConfig(
            default_order_by="amount",
            default_sorted_by=SortDirection.ASC,
            search_fields=("name",),
            filters=(
                FilterParam("type", "type"),
                FilterParam("is_global", "is_global", "bool"),
            ),
        ),
    ),
    "reviews": ResourceDefinition(
        name="reviews",
        label="Review",
        create_model=ReviewCreate,
        update_model=ReviewUpdate,
        write_roles=STAFF_ROLES + (ROLE_CUSTOMER,),
        prepare_create=moderated_author,
        prepare_update=staff_approval_only,
        authorize=owner_or_staff,
        list_config=ListConfig(
            search_fields=("comment",),
            filters=(
                FilterParam("product_id", "product_id", "int"),
                FilterParam("user_id", "user_id", "int"),
                FilterParam("rating", "rating", "int"),
                FilterParam("is_approved", "is_approved", "bool"),
            ),
        ),
    ),
    "withdraws": ResourceDefinition(
        name="withdraws",
        label="Withdraw",
        create_model=WithdrawCreate,
        update_model=WithdrawUpdate,
        create_defaults={"status": "pending"},
        list_config=ListConfig(
            default_per_page=10,
            search_fields=("payment_method",),
            filters=(
                FilterParam("status", "status"),
                FilterParam("shop_id", "shop_id", "int"),
            ),
            envelope=EnvelopeStyle.SIMPLE,
        ),
    ),
}


def build_catalog_router() -> APIRouter:
    router = APIRouter()
    for name, definition in RESOURCES.items():
        router.include_router(build_resource_router(definition), prefix=f"/{name}", tags=[definition.label])
    return router
