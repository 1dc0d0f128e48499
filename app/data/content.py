"""Sample records for the storefront's supporting content: brands, policies, notices and lookups."""

from __future__ import annotations

from typing import Any

MANUFACTURERS: list[dict[str, Any]] = [
    {"id": 1, "name": "Apple Inc.", "slug": "apple-inc", "description": "Consumer electronics and software.", "website": "https://apple.com", "socials": [{"type": "twitter", "url": "https://twitter.com/apple"}], "image": None, "is_approved": True, "language": "en", "created_at": "2024-01-05T09:00:00.000Z", "updated_at": "2024-01-05T09:00:00.000Z"},
    {"id": 2, "name": "Samsung Electronics", "slug": "samsung-electronics", "description": "Electronics, semiconductors and digital media.", "website": "https://samsung.com", "socials": [{"type": "youtube", "url": "https://youtube.com/samsung"}], "image": None, "is_approved": True, "language": "en", "created_at": "2024-01-06T09:00:00.000Z", "updated_at": "2024-01-06T09:00:00.000Z"},
    {"id": 3, "name": "Sony Corporation", "slug": "sony-corporation", "description": "Audio, imaging and entertainment.", "website": "https://sony.com", "socials": [], "image": None, "is_approved": False, "language": "en", "created_at": "2024-01-07T09:00:00.000Z", "updated_at": "2024-01-07T09:00:00.000Z"},
]

AUTHORS: list[dict[str, Any]] = [
    {"id": 1, "name": "John Smith", "slug": "john-smith", "bio": "Writes about technology and business.", "socials": [{"type": "linkedin", "url": "https://linkedin.com/in/johnsmith"}], "image": None, "is_approved": True, "language": "en", "created_at": "2024-01-08T09:00:00.000Z", "updated_at": "2024-01-08T09:00:00.000Z"},
    {"id": 2, "name": "Sarah Johnson", "slug": "sarah-johnson", "bio": "Digital marketing and e-commerce strategies.", "socials": [], "image": None, "is_approved": True, "language": "en", "created_at": "2024-01-09T09:00:00.000Z", "updated_at": "2024-01-09T09:00:00.000Z"},
    {"id": 3, "name": "Michael Brown", "slug": "michael-brown", "bio": "Software development consultant.", "socials": [{"type": "github", "url": "https://github.com/michaelbrown"}], "image": None, "is_approved": False, "language": "en", "created_at": "2024-01-10T09:00:00.000Z", "updated_at": "2024-01-10T09:00:00.000Z"},
]

QUESTIONS: list[dict[str, Any]] = [
    {"id": 1, "product_id": 4, "user_id": 4, "shop_id": 2, "question": "Do these headphones fold flat?", "answer": "Yes, both ear cups rotate flat for travel.", "is_approved": True, "language": "en", "created_at": "2024-03-11T10:00:00.000Z", "updated_at": "2024-03-12T10:00:00.000Z"},
    {"id": 2, "product_id": 2, "user_id": 3, "shop_id": 1, "question": "Is there a wide fit?", "answer": None, "is_approved": True, "language": "en", "created_at": "2024-03-13T10:00:00.000Z", "updated_at": "2024-03-13T10:00:00.000Z"},
    {"id": 3, "product_id": 1, "user_id": 4, "shop_id": 1, "question": "Is the fabric see-through?", "answer": None, "is_approved": False, "language": "en", "created_at": "2024-03-16T10:00:00.000Z", "updated_at": "2024-03-16T10:00:00.000Z"},
]

FEEDBACKS: list[dict[str, Any]] = [
    {"id": 1, "user_id": 4, "model_type": "product", "model_id": 1, "positive": True, "negative": False, "abusive": False, "created_at": "2024-03-14T10:00:00.000Z", "updated_at": "2024-03-14T10:00:00.000Z"},
    {"id": 2, "user_id": 3, "model_type": "shop", "model_id": 1, "positive": False, "negative": True, "abusive": False, "created_at": "2024-03-15T10:00:00.000Z", "updated_at": "2024-03-15T10:00:00.000Z"},
    {"id": 3, "user_id": 4, "model_type": "review", "model_id": 3, "positive": False, "negative": False, "abusive": True, "created_at": "2024-03-19T10:00:00.000Z", "updated_at": "2024-03-19T10:00:00.000Z"},
]

REFUND_REASONS: list[dict[str, Any]] = [
    {"id": 1, "name": "Product Defective", "slug": "product-defective", "language": "en", "created_at": "2024-01-01T00:00:00.000Z", "updated_at": "2024-01-01T00:00:00.000Z"},
    {"id": 2, "name": "Wrong Size", "slug": "wrong-size", "language": "en", "created_at": "2024-01-01T00:00:00.000Z", "updated_at": "2024-01-01T00:00:00.000Z"},
    {"id": 3, "name": "Not as Described", "slug": "not-as-described", "language": "en", "created_at": "2024-01-01T00:00:00.000Z", "updated_at": "2024-01-01T00:00:00.000Z"},
    {"id": 4, "name": "Changed Mind", "slug": "changed-mind", "language": "en", "created_at": "2024-01-01T00:00:00.000Z", "updated_at": "2024-01-01T00:00:00.000Z"},
    {"id": 5, "name": "Talla Incorrecta", "slug": "talla-incorrecta", "language": "es", "created_at": "2024-01-01T00:00:00.000Z", "updated_at": "2024-01-01T00:00:00.000Z"},
]

REFUND_POLICIES: list[dict[str, Any]] = [
    {"id": 1, "title": "Standard Refund Policy", "slug": "standard-refund-policy", "target": "customer", "status": "approved", "description": "30-day returns on most items.", "body": "<p>Items can be returned within 30 days in original condition.</p>", "is_approved": True, "language": "en", "created_at": "2024-01-02T00:00:00.000Z", "updated_at": "2024-01-02T00:00:00.000Z"},
    {"id": 2, "title": "Electronics Return Policy", "slug": "electronics-return-policy", "target": "customer", "status": "approved", "description": "14-day returns for electronics.", "body": "<p>Electronics must be returned with all accessories.</p>", "is_approved": True, "language": "en", "created_at": "2024-01-03T00:00:00.000Z", "updated_at": "2024-01-03T00:00:00.000Z"},
    {"id": 3, "title": "Vendor Chargeback Policy", "slug": "vendor-chargeback-policy", "target": "vendor", "status": "pending", "description": "How refunds are charged back to shops.", "body": "<p>Approved refunds are deducted from the next payout.</p>", "is_approved": False, "language": "en", "created_at": "2024-01-04T00:00:00.000Z", "updated_at": "2024-01-04T00:00:00.000Z"},
]

STORE_NOTICES: list[dict[str, Any]] = [
    {"id": 1, "notice": "Welcome to our store!", "description": "Shown to every visitor.", "type": "notice", "priority": "high", "creator_id": 1, "shop_id": 1, "effective_from": None, "expired_at": None, "language": "en", "created_at": "2024-03-01T09:00:00.000Z", "updated_at": "2024-03-01T09:00:00.000Z"},
    {"id": 2, "notice": "Maintenance scheduled for tomorrow", "description": "Checkout is offline from 2 AM to 6 AM.", "type": "maintenance", "priority": "medium", "creator_id": 1, "shop_id": 1, "effective_from": None, "expired_at": None, "language": "en", "created_at": "2024-03-02T09:00:00.000Z", "updated_at": "2024-03-02T09:00:00.000Z"},
    {"id": 3, "notice": "New gadgets in stock", "description": "Fresh arrivals at Tech Store.", "type": "promotion", "priority": "low", "creator_id": 2, "shop_id": 2, "effective_from": None, "expired_at": None, "language": "en", "created_at": "2024-03-03T09:00:00.000Z", "updated_at": "2024-03-03T09:00:00.000Z"},
]

TERMS_AND_CONDITIONS: list[dict[str, Any]] = [
    {"id": 1, "title": "Terms of Service", "slug": "terms-of-service", "description": "Rules for using the platform.", "body": "<h2>Acceptance of Terms</h2><p>Using the platform means accepting these terms.</p>", "is_approved": True, "language": "en", "created_at": "2024-01-01T00:00:00.000Z", "updated_at": "2024-01-01T00:00:00.000Z"},
    {"id": 2, "title": "Privacy Policy", "slug": "privacy-policy", "description": "How personal information is collected and used.", "body": "<h2>Information We Collect</h2><p>Account, order and support details.</p>", "is_approved": True, "language": "en", "created_at": "2024-01-02T00:00:00.000Z", "updated_at": "2024-01-02T00:00:00.000Z"},
    {"id": 3, "title": "Seller Agreement", "slug": "seller-agreement", "description": "Obligations of shops selling on the platform.", "body": "<p>Draft.</p>", "is_approved": False, "language": "en", "created_at": "2024-01-03T00:00:00.000Z", "updated_at": "2024-01-03T00:00:00.000Z"},
]

DELIVERY_TIMES: list[dict[str, Any]] = [
    {"id": 1, "title": "Standard Delivery", "slug": "standard-delivery", "description": "Delivered within 3-5 business days.", "minimum_duration": 3, "maximum_duration": 5, "duration_unit": "day", "active": True, "created_at": "2024-01-01T00:00:00.000Z", "updated_at": "2024-01-01T00:00:00.000Z"},
    {"id": 2, "title": "Same Day Delivery", "slug": "same-day-delivery", "description": "Delivered on the day of purchase.", "minimum_duration": 1, "maximum_duration": 1, "duration_unit": "day", "active": True, "created_at": "2024-01-01T00:00:00.000Z", "updated_at": "2024-01-01T00:00:00.000Z"},
    {"id": 3, "title": "International Shipping", "slug": "international-shipping", "description": "Delivered within 7-14 business days.", "minimum_duration": 7, "maximum_duration": 14, "duration_unit": "day", "active": False, "created_at": "2024-01-01T00:00:00.000Z", "updated_at": "2024-01-01T00:00:00.000Z"},
    {"id": 4, "title": "Express Delivery", "slug": "express-delivery", "description": "Delivered within 2-3 business days.", "minimum_duration": 2, "maximum_duration": 3, "duration_unit": "day", "active": True, "created_at": "2024-01-01T00:00:00.000Z", "updated_at": "2024-01-01T00:00:00.000Z"},
]

LANGUAGES: list[dict[str, Any]] = [
    {"id": 1, "name": "English", "slug": "english", "code": "en", "native_name": "English", "is_default": True, "is_rtl": False, "flag": "us", "active": True, "created_at": "2024-01-01T00:00:00.000Z", "updated_at": "2024-01-01T00:00:00.000Z"},
    {"id": 2, "name": "Spanish", "slug": "spanish", "code": "es", "native_name": "Español", "is_default": False, "is_rtl": False, "flag": "es", "active": True, "created_at": "2024-01-01T00:00:00.000Z", "updated_at": "2024-01-01T00:00:00.000Z"},
    {"id": 3, "name": "Arabic", "slug": "arabic", "code": "ar", "native_name": "العربية", "is_default": False, "is_rtl": True, "flag": "sa", "active": True, "created_at": "2024-01-01T00:00:00.000Z", "updated_at": "2024-01-01T00:00:00.000Z"},
    {"id": 4, "name": "French", "slug": "french", "code": "fr", "native_name": "Français", "is_default": False, "is_rtl": False, "flag": "fr", "active": False, "created_at": "2024-01-01T00:00:00.000Z", "updated_at": "2024-01-01T00:00:00.000Z"},
]

FLASH_SALES: list[dict[str, Any]] = [
    {"id": 1, "title": "Black Friday Sale", "slug": "black-friday-sale", "description": "Discounts on electronics and gadgets.", "type": "percentage", "rate": 30, "sale_status": "active", "start_date": "2024-11-29T00:00:00.000Z", "end_date": "2024-12-02T23:59:59.000Z", "language": "en", "created_at": "2024-11-01T00:00:00.000Z", "updated_at": "2024-11-01T00:00:00.000Z"},
    {"id": 2, "title": "Summer Electronics Sale", "slug": "summer-electronics-sale", "description": "Summer special on accessories.", "type": "fixed", "rate": 50, "sale_status": "upcoming", "start_date": "2025-06-01T00:00:00.000Z", "end_date": "2025-06-15T23:59:59.000Z", "language": "en", "created_at": "2024-11-02T00:00:00.000Z", "updated_at": "2024-11-02T00:00:00.000Z"},
    {"id": 3, "title": "Holiday Special", "slug": "holiday-special", "description": "Selected items for the holidays.", "type": "percentage", "rate": 25, "sale_status": "finished", "start_date": "2023-12-20T00:00:00.000Z", "end_date": "2023-12-31T23:59:59.000Z", "language": "en", "created_at": "2023-12-01T00:00:00.000Z", "updated_at": "2023-12-01T00:00:00.000Z"},
]


def _values(start: int, *names: str) -> list[dict[str, Any]]:
    return [{"id": start + offset, "value": name, "slug": name.lower()} for offset, name in enumerate(names)]


ATTRIBUTES: list[dict[str, Any]] = [
    {"id": 1, "name": "Color", "slug": "color", "values": _values(1, "Red", "Blue", "Green", "Black", "White"), "language": "en", "created_at": "2024-01-01T00:00:00.000Z", "updated_at": "2024-01-01T00:00:00.000Z"},
    {"id": 2, "name": "Size", "slug": "size", "values": _values(6, "XS", "S", "M", "L", "XL"), "language": "en", "created_at": "2024-01-02T00:00:00.000Z", "updated_at": "2024-01-02T00:00:00.000Z"},
    {"id": 3, "name": "Material", "slug": "material", "values": _values(11, "Cotton", "Polyester", "Leather", "Denim"), "language": "en", "created_at": "2024-01-03T00:00:00.000Z", "updated_at": "2024-01-03T00:00:00.000Z"},
]


def content_seed() -> dict[str, list[dict[str, Any]]]:
    return {
        "attributes": ATTRIBUTES,
        "manufacturers": MANUFACTURERS,
        "authors": AUTHORS,
        "questions": QUESTIONS,
        "feedbacks": FEEDBACKS,
        "refund-reasons": REFUND_REASONS,
        "refund-policies": REFUND_POLICIES,
        "store-notices": STORE_NOTICES,
        "terms-and-conditions": TERMS_AND_CONDITIONS,
        "delivery-times": DELIVERY_TIMES,
        "languages": LANGUAGES,
        "flash-sale": FLASH_SALES,
    }
