from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, List, Optional


class _NamedIn(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        text = str(value or "").strip()
        if not text:
            raise ValueError("Name is required")
        return text


class _NamedUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None


class ProductCreate(_NamedIn):
    price: float = Field(ge=0)
    sale_price: Optional[float] = Field(default=None, ge=0)
    sku: Optional[str] = None
    quantity: int = Field(default=0, ge=0)
    status: str = "publish"
    categories: List[Dict[str, Any]] = Field(default_factory=list)
    tags: List[Dict[str, Any]] = Field(default_factory=list)
    shop: Optional[Dict[str, Any]] = None
    type: Optional[Dict[str, Any]] = None


class ProductUpdate(_NamedUpdate):
    price: Optional[float] = Field(default=None, ge=0)
    sale_price: Optional[float] = Field(default=None, ge=0)
    sku: Optional[str] = None
    quantity: Optional[int] = Field(default=None, ge=0)
    status: Optional[str] = None
    featured: Optional[bool] = None


class CategoryCreate(_NamedIn):
    parent_id: Optional[int] = None
    is_active: bool = True


class CategoryUpdate(_NamedUpdate):
    parent_id: Optional[int] = None
    is_active: Optional[bool] = None


class TypeCreate(_NamedIn):
    icon: Optional[str] = None
    is_active: bool = True


class TypeUpdate(_NamedUpdate):
    icon: Optional[str] = None
    is_active: Optional[bool] = None


class TagCreate(BaseModel):
    name: str = Field(min_length=1)
    details: Optional[str] = None


class TagUpdate(BaseModel):
    name: Optional[str] = None
    details: Optional[str] = None


class ShopCreate(_NamedIn):
    owner_id: Optional[int] = None
    is_active: bool = True
    address: Optional[Dict[str, Any]] = None


class ShopUpdate(_NamedUpdate):
    is_active: Optional[bool] = None
    address: Optional[Dict[str, Any]] = None


class CouponCreate(BaseModel):
    code: str = Field(min_length=1)
    description: Optional[str] = None
    type: str = "fixed"
    amount: float = Field(ge=0)
    minimum_cart_amount: float = Field(default=0, ge=0)
    is_active: bool = True
    active_from: Optional[str] = None
    expire_at: Optional[str] = None

    @field_validator("type")
    @classmethod
    def validate_type(cls, value: str) -> str:
        normalized = str(value or "fixed").strip().lower()
        if normalized not in {"fixed", "percentage", "free_shipping"}:
            raise ValueError("type must be one of: fixed, percentage, free_shipping")
        return normalized


class CouponUpdate(BaseModel):
    description: Optional[str] = None
    amount: Optional[float] = Field(default=None, ge=0)
    minimum_cart_amount: Optional[float] = Field(default=None, ge=0)
    is_active: Optional[bool] = None
    active_from: Optional[str] = None
    expire_at: Optional[str] = None


class FaqCreate(BaseModel):
    faq_title: str = Field(min_length=1)
    faq_description: str = Field(min_length=1)
    faq_type: str = "global"
    shop_id: Optional[int] = None


class FaqUpdate(BaseModel):
    faq_title: Optional[str] = None
    faq_description: Optional[str] = None
    faq_type: Optional[str] = None


class TaxCreate(BaseModel):
    name: str = Field(min_length=1)
    rate: float = Field(ge=0)
    country: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    city: Optional[str] = None
    priority: int = 1
    on_shipping: bool = True
    is_active: bool = True


class TaxUpdate(BaseModel):
    name: Optional[str] = None
    rate: Optional[float] = Field(default=None, ge=0)
    priority: Optional[int] = None
    on_shipping: Optional[bool] = None
    is_active: Optional[bool] = None


class ShippingCreate(BaseModel):
    name: str = Field(min_length=1)
    amount: float = Field(ge=0)
    type: str = "fixed"
    is_global: bool = True


class ShippingUpdate(BaseModel):
    name: Optional[str] = None
    amount: Optional[float] = Field(default=None, ge=0)
    type: Optional[str] = None
    is_global: Optional[bool] = None


class ReviewCreate(BaseModel):
    product_id: int
    shop_id: Optional[int] = None
    rating: int = Field(ge=1, le=5)
    comment: str = Field(min_length=1)
    photos: List[Dict[str, Any]] = Field(default_factory=list)


class ReviewUpdate(BaseModel):
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    comment: Optional[str] = None
    is_approved: Optional[bool] = None


class WithdrawCreate(BaseModel):
    shop_id: int
    amount: float = Field(gt=0)
    payment_method: str
    details: Optional[str] = None
    note: Optional[str] = None


class WithdrawUpdate(BaseModel):
    status: Optional[str] = None
    note: Optional[str] = None


class OrderItemIn(BaseModel):
    product_id: int
    product_name: Optional[str] = None
    quantity: int = Field(ge=1)
    price: float = Field(ge=0)


class OrderCreate(BaseModel):
    customer_id: int
    items: List[OrderItemIn] = Field(min_length=1)
    shipping_address: Dict[str, Any]
    billing_address: Dict[str, Any]
    payment_method: Optional[str] = None
    notes: Optional[str] = None


class OrderUpdate(BaseModel):
    status: Optional[str] = None
    payment_status: Optional[str] = None
    payment_id: Optional[str] = None
    notes: Optional[str] = None


class OrderStatusIn(BaseModel):
    status: str = Field(min_length=1)


class NotificationsSeen(BaseModel):
    notification_ids: List[int]


class ManufacturerCreate(_NamedIn):
    website: Optional[str] = None
    socials: List[Dict[str, Any]] = Field(default_factory=list)
    image: Optional[Dict[str, Any]] = None
    is_approved: bool = True
    language: str = "en"


class ManufacturerUpdate(_NamedUpdate):
    website: Optional[str] = None
    socials: Optional[List[Dict[str, Any]]] = None
    image: Optional[Dict[str, Any]] = None
    is_approved: Optional[bool] = None


class AuthorCreate(BaseModel):
    name: str = Field(min_length=1)
    bio: Optional[str] = None
    socials: List[Dict[str, Any]] = Field(default_factory=list)
    image: Optional[Dict[str, Any]] = None
    is_approved: bool = True
    language: str = "en"


class AuthorUpdate(BaseModel):
    name: Optional[str] = None
    bio: Optional[str] = None
    socials: Optional[List[Dict[str, Any]]] = None
    image: Optional[Dict[str, Any]] = None
    is_approved: Optional[bool] = None


class QuestionCreate(BaseModel):
    product_id: int
    shop_id: Optional[int] = None
    question: str = Field(min_length=1)


class QuestionUpdate(BaseModel):
    question: Optional[str] = None
    answer: Optional[str] = None
    is_approved: Optional[bool] = None


class FeedbackCreate(BaseModel):
    model_type: str = Field(min_length=1)
    model_id: int
    positive: bool = False
    negative: bool = False
    abusive: bool = False


class FeedbackUpdate(BaseModel):
    positive: Optional[bool] = None
    negative: Optional[bool] = None
    abusive: Optional[bool] = None


class RefundReasonCreate(BaseModel):
    name: str = Field(min_length=1)
    language: str = "en"


class RefundReasonUpdate(BaseModel):
    name: Optional[str] = None
    language: Optional[str] = None


class RefundPolicyCreate(BaseModel):
    title: str = Field(min_length=1)
    target: str = "customer"
    status: str = "pending"
    description: Optional[str] = None
    body: Optional[str] = None
    language: str = "en"

    @field_validator("target")
    @classmethod
    def validate_target(cls, value: str) -> str:
        normalized = str(value or "").strip().lower()
        if normalized not in {"customer", "vendor"}:
            raise ValueError("target must be one of: customer, vendor")
        return normalized


class RefundPolicyUpdate(BaseModel):
    title: Optional[str] = None
    status: Optional[str] = None
    description: Optional[str] = None
    body: Optional[str] = None
    is_approved: Optional[bool] = None


class StoreNoticeCreate(BaseModel):
    notice: str = Field(min_length=1)
    description: Optional[str] = None
    type: str = "notice"
    priority: str = "medium"
    shop_id: Optional[int] = None
    effective_from: Optional[str] = None
    expired_at: Optional[str] = None
    language: str = "en"

    @field_validator("priority")
    @classmethod
    def validate_priority(cls, value: str) -> str:
        normalized = str(value or "").strip().lower()
        if normalized not in {"low", "medium", "high"}:
            raise ValueError("priority must be one of: low, medium, high")
        return normalized


class StoreNoticeUpdate(BaseModel):
    notice: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    priority: Optional[str] = None
    effective_from: Optional[str] = None
    expired_at: Optional[str] = None


class TermsCreate(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    body: Optional[str] = None
    is_approved: bool = False
    language: str = "en"


class TermsUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    body: Optional[str] = None
    is_approved: Optional[bool] = None


class DeliveryTimeCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    minimum_duration: int = Field(ge=1)
    maximum_duration: int = Field(ge=1)
    duration_unit: str
    active: bool = True

    @field_validator("duration_unit")
    @classmethod
    def validate_unit(cls, value: str) -> str:
        normalized = str(value or "").strip().lower()
        if normalized not in {"hour", "day", "week"}:
            raise ValueError("duration_unit must be one of: hour, day, week")
        return normalized


class DeliveryTimeUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    minimum_duration: Optional[int] = Field(default=None, ge=1)
    maximum_duration: Optional[int] = Field(default=None, ge=1)
    active: Optional[bool] = None


class LanguageCreate(BaseModel):
    name: str = Field(min_length=1)
    code: str = Field(min_length=2, max_length=10)
    native_name: Optional[str] = None
    is_rtl: bool = False
    flag: Optional[str] = None
    active: bool = True

    @field_validator("code")
    @classmethod
    def normalize_code(cls, value: str) -> str:
        return str(value).strip().lower()


class LanguageUpdate(BaseModel):
    name: Optional[str] = None
    native_name: Optional[str] = None
    is_rtl: Optional[bool] = None
    flag: Optional[str] = None
    active: Optional[bool] = None


class FlashSaleCreate(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    type: str = "percentage"
    rate: float = Field(gt=0)
    sale_status: str = "upcoming"
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    language: str = "en"

    @field_validator("type")
    @classmethod
    def validate_type(cls, value: str) -> str:
        normalized = str(value or "").strip().lower()
        if normalized not in {"percentage", "fixed"}:
            raise ValueError("type must be one of: percentage, fixed")
        return normalized


class FlashSaleUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    rate: Optional[float] = Field(default=None, gt=0)
    sale_status: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
