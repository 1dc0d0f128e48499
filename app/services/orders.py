from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from app.schemas.storefront import OrderCreate

TAX_RATE = Decimal("0.10")
FREE_SHIPPING_OVER = Decimal("100")
FLAT_SHIPPING = Decimal("14.99")
_CENT = Decimal("0.01")


def _money(value: Decimal) -> float:
    return float(value.quantize(_CENT, rounding=ROUND_HALF_UP))


def order_number(sequence: int) -> str:
    return f"ORD-{int(sequence):03d}"


def order_totals(items: list[dict[str, Any]]) -> dict[str, float]:
    subtotal = sum((Decimal(str(item["price"])) * int(item["quantity"]) for item in items), Decimal("0"))
    tax = subtotal * TAX_RATE
    shipping = Decimal("0") if subtotal > FREE_SHIPPING_OVER else FLAT_SHIPPING
    return {
        "subtotal": _money(subtotal),
        "tax": _money(tax),
        "shipping": _money(shipping),
        "total": _money(subtotal + tax + shipping),
    }


def build_order(payload: OrderCreate, *, customer_email: str | None = None) -> dict[str, Any]:
    items = []
    for index, item in enumerate(payload.items, start=1):
        line = item.model_dump()
        line["id"] = index
        line["total"] = _money(Decimal(str(item.price)) * item.quantity)
        items.append(line)
    return {
        "status": "pending",
        "payment_status": "pending",
        **order_totals(items),
        "customer_id": payload.customer_id,
        "customer": {
            "id": payload.customer_id,
            "name": payload.shipping_address.get("name"),
            "email": customer_email,
        },
        "shipping_address": payload.shipping_address,
        "billing_address": payload.billing_address,
        "items": items,
        "payment_method": payload.payment_method,
        "payment_id": None,
        "notes": payload.notes,
    }
