from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from app.api.storefront.resources import list_records, parse_record_id, repository_for
from app.core.deps import STAFF_ROLES, AuthenticatedPrincipal, get_current_principal, require_role
from app.repositories.store import Record, Repository
from app.schemas.storefront import OrderCreate, OrderStatusIn, OrderUpdate
from app.services.envelope import EnvelopeStyle
from app.services.list_params import FilterParam, ListConfig
from app.services.orders import build_order, order_number

_LOG = logging.getLogger("app.orders")

router = APIRouter()
get_orders = repository_for("orders")

ORDER_LIST = ListConfig(
    default_per_page=10,
    search_fields=("order_number", "customer.name"),
    filters=(
        FilterParam("status", "status"),
        FilterParam("payment_status", "payment_status"),
        FilterParam("customer_id", "customer_id", "int"),
    ),
    envelope=EnvelopeStyle.SIMPLE,
)


def _visible_to(principal: AuthenticatedPrincipal, order: Record) -> bool:
    return principal.role in STAFF_ROLES or order.get("customer_id") == principal.id


def _order_or_404(repo: Repository, order_id: str, principal: AuthenticatedPrincipal) -> Record:
    row = repo.get(parse_record_id(order_id, "Order"))
    if row is None or not _visible_to(principal, row):
        raise HTTPException(status_code=404, detail="Order not found")
    return row


@router.get("")
def list_orders(
    request: Request,
    repo: Repository = Depends(get_orders),
    principal: AuthenticatedPrincipal = Depends(get_current_principal),
):
    rows = [row for row in repo.all() if _visible_to(principal, row)]
    return list_records(request, rows, ORDER_LIST)


@router.get("/{order_id}")
def get_order(
    order_id: str,
    repo: Repository = Depends(get_orders),
    principal: AuthenticatedPrincipal = Depends(get_current_principal),
):
    return _order_or_404(repo, order_id, principal)


@router.post("", status_code=201)
def create_order(
    payload: OrderCreate,
    repo: Repository = Depends(get_orders),
    principal: AuthenticatedPrincipal = Depends(get_current_principal),
):
    if principal.role not in STAFF_ROLES and payload.customer_id != principal.id:
        raise HTTPException(status_code=403, detail="Insufficient permissions")
    email = principal.email if principal.id == payload.customer_id else None
    row = repo.create(
        build_order(payload, customer_email=email),
        derive=lambda record_id: {"order_number": order_number(record_id)},
    )
    _LOG.info("order created id=%s number=%s total=%s", row["id"], row["order_number"], row["total"])
    return row


@router.put("/{order_id}")
def update_order(
    order_id: str,
    payload: OrderUpdate,
    repo: Repository = Depends(get_orders),
    principal: AuthenticatedPrincipal = Depends(require_role(*STAFF_ROLES)),
):
    current = _order_or_404(repo, order_id, principal)
    changes = payload.model_dump(exclude_unset=True)
    changes = {key: value for key, value in changes.items() if value is not None or key == "notes"}
    return repo.update(current["id"], changes)


@router.patch("/{order_id}/status")
def update_order_status(
    order_id: str,
    payload: OrderStatusIn,
    repo: Repository = Depends(get_orders),
    principal: AuthenticatedPrincipal = Depends(require_role(*STAFF_ROLES)),
):
    current = _order_or_404(repo, order_id, principal)
    _LOG.info("order status id=%s %s -> %s", current["id"], current.get("status"), payload.status)
    return repo.update(current["id"], {"status": payload.status})
