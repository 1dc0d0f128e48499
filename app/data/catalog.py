"""Sample storefront records served until a real catalogue is connected."""

from __future__ import annotations

from typing import Any

from app.core.security import hash_password
from app.data.content import content_seed

DEFAULT_PASSWORD = "password"


def _image(photo: str, size: int = 500) -> dict[str, str]:
    base = f"https://images.unsplash.com/{photo}"
    return {
        "original": f"{base}?w={size}&h={size}&fit=crop",
        "thumbnail": f"{base}?w={size // 2}&h={size // 2}&fit=crop",
    }


TYPES: list[dict[str, Any]] = [
    {
        "id": 1,
        "name": "Nike",
        "slug": "nike",
        "description": "Nike Inc. - Athletic footwear and apparel",
        "icon": "Shoes",
        "is_active": True,
        "products_count": 2,
        "created_at": "2024-01-03T09:00:00.000Z",
        "updated_at": "2024-01-03T09:00:00.000Z",
    },
    {
        "id": 2,
        "name": "Zara",
        "slug": "zara",
        "description": "Fast fashion clothing and accessories",
        "icon": "Dress",
        "is_active": True,
        "products_count": 1,
        "created_at": "2024-01-05T09:00:00.000Z",
        "updated_at": "2024-01-05T09:00:00.000Z",
    },
    {
        "id": 3,
        "name": "Gadgets",
        "slug": "gadgets",
        "description": "Consumer electronics",
        "icon": "Laptop",
        "is_active": False,
        "products_count": 1,
        "created_at": "2024-01-07T09:00:00.000Z",
        "updated_at": "2024-01-07T09:00:00.000Z",
    },
]

CATEGORIES: list[dict[str, Any]] = [
    {
        "id": 1,
        "name": "Clothing",
        "slug": "clothing",
        "description": "Fashionable clothing for all occasions",
        "parent_id": None,
        "image": _image("photo-1441986300917-64674bd600d8", 800),
        "is_active": True,
        "featured": True,
        "products_count": 25,
        "created_at": "2024-01-02T08:00:00.000Z",
        "updated_at": "2024-01-02T08:00:00.000Z",
    },
    {
        "id": 2,
        "name": "Women's Clothing",
        "slug": "womens-clothing",
        "description": "Elegant and stylish women's fashion",
        "parent_id": 1,
        "image": _image("photo-1594633312681-425c7b97ccd1", 800),
        "is_active": True,
        "featured": False,
        "products_count": 15,
        "created_at": "2024-01-04T08:00:00.000Z",
        "updated_at": "2024-01-04T08:00:00.000Z",
    },
    {
        "id": 3,
        "name": "Footwear",
        "slug": "footwear",
        "description": "Sneakers, boots and sandals",
        "parent_id": None,
        "image": _image("photo-1542291026-7eec264c27ff", 800),
        "is_active": True,
        "featured": True,
        "products_count": 12,
        "created_at": "2024-01-06T08:00:00.000Z",
        "updated_at": "2024-01-06T08:00:00.000Z",
    },
    {
        "id": 4,
        "name": "Electronics",
        "slug": "electronics",
        "description": "Phones, audio and accessories",
        "parent_id": None,
        "image": _image("photo-1498049794561-7780e7231661", 800),
        "is_active": False,
        "featured": False,
        "products_count": 4,
        "created_at": "2024-01-08T08:00:00.000Z",
        "updated_at": "2024-01-08T08:00:00.000Z",
    },
]

TAGS: list[dict[str, Any]] = [
    {"id": 1, "name": "Summer", "slug": "summer", "details": "Summer collection", "created_at": "2024-01-02T10:00:00.000Z", "updated_at": "2024-01-02T10:00:00.000Z"},
    {"id": 2, "name": "Sport", "slug": "sport", "details": "Sportswear", "created_at": "2024-01-03T10:00:00.000Z", "updated_at": "2024-01-03T10:00:00.000Z"},
    {"id": 3, "name": "Wireless", "slug": "wireless", "details": "Cable-free gadgets", "created_at": "2024-01-04T10:00:00.000Z", "updated_at": "2024-01-04T10:00:00.000Z"},
]

SHOPS: list[dict[str, Any]] = [
    {
        "id": 1,
        "owner_id": 2,
        "name": "Fashion Hub",
        "slug": "fashion-hub",
        "description": "Curated clothing from independent designers",
        "is_active": True,
        "orders_count": 120,
        "products_count": 3,
        "address": {"street_address": "12 Market Street", "city": "New York", "country": "USA", "zip": "10001"},
        "created_at": "2024-01-01T12:00:00.000Z",
        "updated_at": "2024-01-01T12:00:00.000Z",
    },
    {
        "id": 2,
        "owner_id": 2,
        "name": "Tech Store",
        "slug": "tech-store",
        "description": "Gadgets and electronics",
        "is_active": False,
        "orders_count": 14,
        "products_count": 1,
        "address": {"street_address": "99 Silicon Ave", "city": "San Jose", "country": "USA", "zip": "95110"},
        "created_at": "2024-02-01T12:00:00.000Z",
        "updated_at": "2024-02-01T12:00:00.000Z",
    },
]

PRODUCTS: list[dict[str, Any]] = [
    {
        "id": 1,
        "name": "Floral Summer Dress",
        "slug": "floral-summer-dress",
        "description": "Lightweight cotton dress with a floral print",
        "sku": "DRS-001",
        "price": 89.99,
        "sale_price": 69.99,
        "min_price": 69.99,
        "max_price": 89.99,
        "quantity": 40,
        "in_stock": True,
        "status": "publish",
        "featured": True,
        "product_type": "simple",
        "image": _image("photo-1572804013309-59a88b7e92f1"),
        "type": {"id": 2, "name": "Zara", "slug": "zara"},
        "shop": {"id": 1, "name": "Fashion Hub", "slug": "fashion-hub"},
        "categories": [{"id": 1, "name": "Clothing", "slug": "clothing"}, {"id": 2, "name": "Women's Clothing", "slug": "womens-clothing"}],
        "tags": [{"id": 1, "name": "Summer", "slug": "summer"}],
        "ratings": 4.5,
        "sales_count": 150,
        "created_at": "2024-03-01T10:00:00.000Z",
        "updated_at": "2024-03-01T10:00:00.000Z",
    },
    {
        "id": 2,
        "name": "Air Runner Sneakers",
        "slug": "air-runner-sneakers",
        "description": "Breathable running shoes with foam sole",
        "sku": "SNK-002",
        "price": 129.0,
        "sale_price": None,
        "min_price": 129.0,
        "max_price": 129.0,
        "quantity": 25,
        "in_stock": True,
        "status": "publish",
        "featured": True,
        "product_type": "simple",
        "image": _image("photo-1542291026-7eec264c27ff"),
        "type": {"id": 1, "name": "Nike", "slug": "nike"},
        "shop": {"id": 1, "name": "Fashion Hub", "slug": "fashion-hub"},
        "categories": [{"id": 3, "name": "Footwear", "slug": "footwear"}],
        "tags": [{"id": 2, "name": "Sport", "slug": "sport"}],
        "ratings": 4.8,
        "sales_count": 320,
        "created_at": "2024-03-05T10:00:00.000Z",
        "updated_at": "2024-03-05T10:00:00.000Z",
    },
    {
        "id": 3,
        "name": "Training Shorts",
        "slug": "training-shorts",
        "description": "Quick-dry shorts for the gym",
        "sku": "SHR-003",
        "price": 35.0,
        "sale_price": 29.0,
        "min_price": 29.0,
        "max_price": 35.0,
        "quantity": 0,
        "in_stock": False,
        "status": "draft",
        "featured": False,
        "product_type": "simple",
        "image": _image("photo-1591195853828-11db59a44f6b"),
        "type": {"id": 1, "name": "Nike", "slug": "nike"},
        "shop": {"id": 1, "name": "Fashion Hub", "slug": "fashion-hub"},
        "categories": [{"id": 1, "name": "Clothing", "slug": "clothing"}],
        "tags": [{"id": 1, "name": "Summer", "slug": "summer"}, {"id": 2, "name": "Sport", "slug": "sport"}],
        "ratings": 4.1,
        "sales_count": 75,
        "created_at": "2024-02-20T10:00:00.000Z",
        "updated_at": "2024-02-20T10:00:00.000Z",
    },
    {
        "id": 4,
        "name": "Wireless Headphones",
        "slug": "wireless-headphones",
        "description": "Over-ear headphones with noise cancellation",
        "sku": "WH-004",
        "price": 299.99,
        "sale_price": 249.99,
        "min_price": 249.99,
        "max_price": 299.99,
        "quantity": 12,
        "in_stock": True,
        "status": "publish",
        "featured": False,
        "product_type": "simple",
        "image": _image("photo-1505740420928-5e560c06d30e"),
        "type": {"id": 3, "name": "Gadgets", "slug": "gadgets"},
        "shop": {"id": 2, "name": "Tech Store", "slug": "tech-store"},
        "categories": [{"id": 4, "name": "Electronics", "slug": "electronics"}],
        "tags": [{"id": 3, "name": "Wireless", "slug": "wireless"}],
        "ratings": 4.6,
        "sales_count": 210,
        "created_at": "2024-03-10T10:00:00.000Z",
        "updated_at": "2024-03-10T10:00:00.000Z",
    },
]

COUPONS: list[dict[str, Any]] = [
    {"id": 1, "code": "SUMMER20", "description": "20% off summer collection", "type": "percentage", "amount": 20, "minimum_cart_amount": 50, "is_active": True, "active_from": "2024-06-01T00:00:00.000Z", "expire_at": "2024-08-31T23:59:59.000Z", "created_at": "2024-05-20T09:00:00.000Z", "updated_at": "2024-05-20T09:00:00.000Z"},
    {"id": 2, "code": "FREESHIP", "description": "Free shipping on any order", "type": "free_shipping", "amount": 0, "minimum_cart_amount": 0, "is_active": True, "active_from": "2024-01-01T00:00:00.000Z", "expire_at": "2024-12-31T23:59:59.000Z", "created_at": "2024-01-01T09:00:00.000Z", "updated_at": "2024-01-01T09:00:00.000Z"},
    {"id": 3, "code": "WELCOME10", "description": "$10 off the first order", "type": "fixed", "amount": 10, "minimum_cart_amount": 30, "is_active": False, "active_from": "2023-01-01T00:00:00.000Z", "expire_at": "2023-12-31T23:59:59.000Z", "created_at": "2023-01-01T09:00:00.000Z", "updated_at": "2023-06-01T09:00:00.000Z"},
]

FAQS: list[dict[str, Any]] = [
    {"id": 1, "faq_title": "How do I track my order?", "faq_description": "Use the tracking number in your confirmation email.", "faq_type": "global", "shop_id": None, "created_at": "2024-01-10T09:00:00.000Z", "updated_at": "2024-01-10T09:00:00.000Z"},
    {"id": 2, "faq_title": "What is the return window?", "faq_description": "Returns are accepted within 30 days of delivery.", "faq_type": "global", "shop_id": None, "created_at": "2024-01-11T09:00:00.000Z", "updated_at": "2024-01-11T09:00:00.000Z"},
    {"id": 3, "faq_title": "Do you ship dresses internationally?", "faq_description": "Fashion Hub ships to the EU and Canada.", "faq_type": "shop", "shop_id": 1, "created_at": "2024-01-12T09:00:00.000Z", "updated_at": "2024-01-12T09:00:00.000Z"},
]

TAXES: list[dict[str, Any]] = [
    {"id": 1, "name": "US Sales Tax", "rate": 8.5, "country": "USA", "state": "NY", "zip": None, "city": None, "priority": 1, "on_shipping": True, "is_active": True, "created_at": "2024-01-01T00:00:00.000Z", "updated_at": "2024-01-01T00:00:00.000Z"},
    {"id": 2, "name": "California Tax", "rate": 7.25, "country": "USA", "state": "CA", "zip": None, "city": None, "priority": 2, "on_shipping": False, "is_active": True, "created_at": "2024-01-02T00:00:00.000Z", "updated_at": "2024-01-02T00:00:00.000Z"},
    {"id": 3, "name": "EU VAT", "rate": 20.0, "country": "EU", "state": None, "zip": None, "city": None, "priority": 3, "on_shipping": True, "is_active": False, "created_at": "2024-01-03T00:00:00.000Z", "updated_at": "2024-01-03T00:00:00.000Z"},
]

SHIPPINGS: list[dict[str, Any]] = [
    {"id": 1, "name": "Standard", "amount": 5.99, "type": "fixed", "is_global": True, "created_at": "2024-01-01T00:00:00.000Z", "updated_at": "2024-01-01T00:00:00.000Z"},
    {"id": 2, "name": "Express", "amount": 14.99, "type": "fixed", "is_global": True, "created_at": "2024-01-01T00:00:00.000Z", "updated_at": "2024-01-01T00:00:00.000Z"},
    {"id": 3, "name": "Free", "amount": 0, "type": "free_shipping", "is_global": False, "created_at": "2024-01-01T00:00:00.000Z", "updated_at": "2024-01-01T00:00:00.000Z"},
]

REVIEWS: list[dict[str, Any]] = [
    {"id": 1, "product_id": 1, "user_id": 4, "shop_id": 1, "rating": 5, "comment": "Beautiful dress, fits perfectly.", "photos": [], "is_approved": True, "language": "en", "created_at": "2024-03-12T10:00:00.000Z", "updated_at": "2024-03-12T10:00:00.000Z"},
    {"id": 2, "product_id": 2, "user_id": 4, "shop_id": 1, "rating": 4, "comment": "Comfortable, runs slightly small.", "photos": [], "is_approved": True, "language": "en", "created_at": "2024-03-15T10:00:00.000Z", "updated_at": "2024-03-15T10:00:00.000Z"},
    {"id": 3, "product_id": 1, "user_id": 3, "shop_id": 1, "rating": 3, "comment": "Average product, nothing special.", "photos": [], "is_approved": False, "language": "en", "created_at": "2024-03-18T10:00:00.000Z", "updated_at": "2024-03-18T10:00:00.000Z"},
]


def _address(name: str, street: str, city: str, zip_code: str, phone: str) -> dict[str, str]:
    return {"name": name, "address": street, "city": city, "state": "NY", "zip": zip_code, "country": "United States", "phone": phone}


ORDERS: list[dict[str, Any]] = [
    {
        "id": 1,
        "order_number": "ORD-001",
        "status": "pending",
        "payment_status": "pending",
        "subtotal": 159.98,
        "tax": 16.0,
        "shipping": 0,
        "total": 175.98,
        "customer_id": 4,
        "customer": {"id": 4, "name": "Customer User", "email": "customer@example.com"},
        "shipping_address": _address("Customer User", "456 User Avenue", "User City", "12345", "+1234567891"),
        "billing_address": _address("Customer User", "456 User Avenue", "User City", "12345", "+1234567891"),
        "items": [{"id": 1, "product_id": 1, "product_name": "Floral Summer Dress", "quantity": 2, "price": 79.99, "total": 159.98}],
        "payment_method": "stripe",
        "payment_id": "pi_1234567890",
        "notes": "Please handle with care",
        "created_at": "2024-03-20T14:00:00.000Z",
        "updated_at": "2024-03-20T14:00:00.000Z",
    },
    {
        "id": 2,
        "order_number": "ORD-002",
        "status": "completed",
        "payment_status": "paid",
        "subtotal": 129.0,
        "tax": 12.9,
        "shipping": 0,
        "total": 141.9,
        "customer_id": 3,
        "customer": {"id": 3, "name": "Staff User", "email": "staff@example.com"},
        "shipping_address": _address("Staff User", "789 User Road", "User Town", "54321", "+1234567892"),
        "billing_address": _address("Staff User", "789 User Road", "User Town", "54321", "+1234567892"),
        "items": [{"id": 2, "product_id": 2, "product_name": "Air Runner Sneakers", "quantity": 1, "price": 129.0, "total": 129.0}],
        "payment_method": "paypal",
        "payment_id": "PAYID-1234567890",
        "notes": None,
        "created_at": "2024-03-18T09:30:00.000Z",
        "updated_at": "2024-03-19T11:00:00.000Z",
    },
]

WITHDRAWS: list[dict[str, Any]] = [
    {"id": 1, "shop_id": 1, "amount": 500.0, "payment_method": "bank_transfer", "status": "pending", "details": "Monthly payout", "note": None, "created_at": "2024-03-01T00:00:00.000Z", "updated_at": "2024-03-01T00:00:00.000Z"},
    {"id": 2, "shop_id": 1, "amount": 320.5, "payment_method": "paypal", "status": "approved", "details": "Mid-month payout", "note": "Processed", "created_at": "2024-02-15T00:00:00.000Z", "updated_at": "2024-02-16T00:00:00.000Z"},
    {"id": 3, "shop_id": 2, "amount": 75.0, "payment_method": "bank_transfer", "status": "rejected", "details": "Below minimum", "note": "Minimum payout is 100", "created_at": "2024-02-10T00:00:00.000Z", "updated_at": "2024-02-11T00:00:00.000Z"},
]

NOTIFICATIONS: list[dict[str, Any]] = [
    {"id": 1, "user_id": 4, "type": "order", "title": "Order Confirmed", "message": "Your order #ORD-001 has been confirmed and is being processed.", "data": {"order_id": 1}, "is_read": False, "read_at": None, "created_at": "2024-03-20T14:05:00.000Z", "updated_at": "2024-03-20T14:05:00.000Z"},
    {"id": 2, "user_id": 4, "type": "order", "title": "Order Shipped", "message": "Your order #ORD-001 has been shipped and is on its way.", "data": {"order_id": 1, "tracking_number": "TRK123456789"}, "is_read": True, "read_at": "2024-03-21T08:00:00.000Z", "created_at": "2024-03-21T07:00:00.000Z", "updated_at": "2024-03-21T08:00:00.000Z"},
    {"id": 3, "user_id": 3, "type": "promotion", "title": "Special Offer", "message": "Get 20% off on all electronics this week!", "data": {"coupon_code": "SUMMER20"}, "is_read": False, "read_at": None, "created_at": "2024-03-19T12:00:00.000Z", "updated_at": "2024-03-19T12:00:00.000Z"},
    {"id": 4, "user_id": 4, "type": "refund", "title": "Refund Approved", "message": "Your refund request has been approved and will be processed within 3-5 business days.", "data": {"refund_id": 1, "amount": 99.99}, "is_read": False, "read_at": None, "created_at": "2024-03-22T16:30:00.000Z", "updated_at": "2024-03-22T16:30:00.000Z"},
]

_USER_ROWS: list[dict[str, Any]] = [
    {"id": 1, "name": "Super Admin", "email": "admin@chawkbazar.com", "role": "super_admin", "permissions": ["super_admin", "store_owner", "staff"], "is_active": True, "created_at": "2024-01-01T00:00:00.000Z"},
    {"id": 2, "name": "Store Owner", "email": "owner@example.com", "role": "store_owner", "permissions": ["store_owner", "staff"], "is_active": True, "created_at": "2024-01-02T00:00:00.000Z"},
    {"id": 3, "name": "Staff User", "email": "staff@example.com", "role": "staff", "permissions": ["staff"], "is_active": True, "created_at": "2024-01-03T00:00:00.000Z"},
    {"id": 4, "name": "Customer User", "email": "customer@example.com", "role": "customer", "permissions": ["customer"], "is_active": True, "created_at": "2024-01-04T00:00:00.000Z"},
]


def seed_users() -> list[dict[str, Any]]:
    password_hash = hash_password(DEFAULT_PASSWORD)
    rows = []
    for row in _USER_ROWS:
        rows.append(
            {
                **row,
                "password_hash": password_hash,
                "email_verified_at": row["created_at"],
                "updated_at": row["created_at"],
            }
        )
    return rows


def seed_data() -> dict[str, list[dict[str, Any]]]:
    return {
        "products": PRODUCTS,
        "categories": CATEGORIES,
        "types": TYPES,
        "tags": TAGS,
        "shops": SHOPS,
        "coupons": COUPONS,
        "faqs": FAQS,
        "taxes": TAXES,
        "shippings": SHIPPINGS,
        "reviews": REVIEWS,
        "orders": ORDERS,
        "withdraws": WITHDRAWS,
        "notifications": NOTIFICATIONS,
        "users": seed_users(),
        **content_seed(),
    }
