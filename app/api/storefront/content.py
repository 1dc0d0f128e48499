from typing import Any

from fastapi import APIRouter, HTTPException

from app.api.storefront.catalog import moderated_author, owner_or_staff, set_author, staff_approval_only
from app.api.storefront.resources import ResourceDefinition, build_resource_router
from app.core.deps import STAFF_ROLES, AuthenticatedPrincipal, ROLE_CUSTOMER
from app.schemas.storefront import (
    AuthorCreate,
    AuthorUpdate,
    DeliveryTimeCreate,
    DeliveryTimeUpdate,
    FeedbackCreate,
    FeedbackUpdate,
    FlashSaleCreate,
    FlashSaleUpdate,
    LanguageCreate,
    LanguageUpdate,
    ManufacturerCreate,
    ManufacturerUpdate,
    QuestionCreate,
    QuestionUpdate,
    RefundPolicyCreate,
    RefundPolicyUpdate,
    RefundReasonCreate,
    RefundReasonUpdate,
    StoreNoticeCreate,
    StoreNoticeUpdate,
    TermsCreate,
    TermsUpdate,
)
from app.services.list_params import FilterParam, ListConfig
from app.services.list_query import SortDirection

LANGUAGE_FILTER = FilterParam("language", "language")


def _check_durations(record: dict[str, Any]) -> None:
    if int(record["minimum_duration"]) > int(record["maximum_duration"]):
        raise HTTPException(status_code=400, detail="Minimum duration cannot be greater than maximum duration")


def _new_delivery_time(data: dict[str, Any], principal: AuthenticatedPrincipal) -> dict[str, Any]:
    _check_durations(data)
    return data


def _delivery_time_changes(changes: dict[str, Any], current: dict[str, Any], principal: AuthenticatedPrincipal) -> dict[str, Any]:
    _check_durations({**current, **changes})
    return changes


def _notice_creator(data: dict[str, Any], principal: AuthenticatedPrincipal) -> dict[str, Any]:
    data["creator_id"] = principal.id
    return data


CONTENT_RESOURCES: dict[str, ResourceDefinition] = {
    "attributes": ResourceDefinition(
        name="attributes",
        label="Attribute",
        lookup_field="slug",
        deletable=False,
        list_config=ListConfig(search_fields=("name", "values.value"), filters=(LANGUAGE_FILTER,)),
    ),
    "manufacturers": ResourceDefinition(
        name="manufacturers",
        label="Manufacturer",
        slug_source="name",
        create_model=ManufacturerCreate,
        update_model=ManufacturerUpdate,
        list_config=ListConfig(
            search_fields=("name", "description"),
            filters=(FilterParam("is_approved", "is_approved", "bool"), LANGUAGE_FILTER),
        ),
    ),
    "authors": ResourceDefinition(
        name="authors",
        label="Author",
        slug_source="name",
        create_model=AuthorCreate,
        update_model=AuthorUpdate,
        list_config=ListConfig(
            search_fields=("name", "bio"),
            filters=(FilterParam("is_approved", "is_approved", "bool"), LANGUAGE_FILTER),
        ),
    ),
    "questions": ResourceDefinition(
        name="questions",
        label="Question",
        create_model=QuestionCreate,
        update_model=QuestionUpdate,
        write_roles=STAFF_ROLES + (ROLE_CUSTOMER,),
        create_defaults={"answer": None, "language": "en"},
        prepare_create=moderated_author,
        prepare_update=staff_approval_only,
        authorize=owner_or_staff,
        list_config=ListConfig(
            search_fields=("question", "answer"),
            filters=(
                FilterParam("product_id", "product_id", "int"),
                FilterParam("user_id", "user_id", "int"),
                FilterParam("shop_id", "shop_id", "int"),
                FilterParam("is_approved", "is_approved", "bool"),
            ),
        ),
    ),
    "feedbacks": ResourceDefinition(
        name="feedbacks",
        label="Feedback",
        create_model=FeedbackCreate,
        update_model=FeedbackUpdate,
        write_roles=STAFF_ROLES + (ROLE_CUSTOMER,),
        prepare_create=set_author,
        authorize=owner_or_staff,
        list_config=ListConfig(
            filters=(
                FilterParam("model_type", "model_type"),
                FilterParam("model_id", "model_id", "int"),
                FilterParam("positive", "positive", "bool"),
                FilterParam("negative", "negative", "bool"),
                FilterParam("abusive", "abusive", "bool"),
            ),
        ),
    ),
    "refund-reasons": ResourceDefinition(
        name="refund-reasons",
        label="Refund reason",
        slug_source="name",
        create_model=RefundReasonCreate,
        update_model=RefundReasonUpdate,
        list_config=ListConfig(
            default_order_by="name",
            default_sorted_by=SortDirection.ASC,
            search_fields=("name",),
            filters=(LANGUAGE_FILTER,),
        ),
    ),
    "refund-policies": ResourceDefinition(
        name="refund-policies",
        label="Refund policy",
        slug_source="title",
        create_model=RefundPolicyCreate,
        update_model=RefundPolicyUpdate,
        create_defaults={"is_approved": False},
        list_config=ListConfig(
            search_fields=("title", "description"),
            filters=(
                FilterParam("target", "target"),
                FilterParam("status", "status"),
                FilterParam("is_approved", "is_approved", "bool"),
                LANGUAGE_FILTER,
            ),
        ),
    ),
    "store-notices": ResourceDefinition(
        name="store-notices",
        label="Store notice",
        create_model=StoreNoticeCreate,
        update_model=StoreNoticeUpdate,
        write_roles=STAFF_ROLES,
        prepare_create=_notice_creator,
        list_config=ListConfig(
            search_fields=("notice", "description"),
            filters=(
                FilterParam("shop_id", "shop_id", "int"),
                FilterParam("type", "type"),
                FilterParam("priority", "priority"),
                LANGUAGE_FILTER,
            ),
        ),
    ),
    "terms-and-conditions": ResourceDefinition(
        name="terms-and-conditions",
        label="Terms and conditions",
        slug_source="title",
        create_model=TermsCreate,
        update_model=TermsUpdate,
        list_config=ListConfig(
            search_fields=("title", "description"),
            filters=(FilterParam("is_approved", "is_approved", "bool"), LANGUAGE_FILTER),
        ),
    ),
    "delivery-times": ResourceDefinition(
        name="delivery-times",
        label="Delivery time",
        slug_source="title",
        create_model=DeliveryTimeCreate,
        update_model=DeliveryTimeUpdate,
        prepare_create=_new_delivery_time,
        prepare_update=_delivery_time_changes,
        list_config=ListConfig(
            default_order_by="minimum_duration",
            default_sorted_by=SortDirection.ASC,
            search_fields=("title", "description"),
            filters=(
                FilterParam("active", "active", "bool"),
                FilterParam("duration_unit", "duration_unit"),
            ),
        ),
    ),
    "languages": ResourceDefinition(
        name="languages",
        label="Language",
        slug_source="name",
        unique_field="code",
        create_model=LanguageCreate,
        update_model=LanguageUpdate,
        create_defaults={"is_default": False},
        list_config=ListConfig(
            default_order_by="name",
            default_sorted_by=SortDirection.ASC,
            search_fields=("name", "native_name", "code"),
            filters=(
                FilterParam("active", "active", "bool"),
                FilterParam("is_default", "is_default", "bool"),
                FilterParam("is_rtl", "is_rtl", "bool"),
            ),
        ),
    ),
    "flash-sale": ResourceDefinition(
        name="flash-sale",
        label="Flash sale",
        slug_source="title",
        create_model=FlashSaleCreate,
        update_model=FlashSaleUpdate,
        list_config=ListConfig(
            search_fields=("title", "description"),
            filters=(
                FilterParam("sale_status", "sale_status"),
                FilterParam("type", "type"),
                LANGUAGE_FILTER,
            ),
        ),
    ),
}


def build_content_router() -> APIRouter:
    router = APIRouter()
    for name, definition in CONTENT_RESOURCES.items():
        router.include_router(build_resource_router(definition), prefix=f"/{name}", tags=[definition.label])
    return router
