from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request

from app.api.storefront.resources import list_records, parse_record_id, repository_for
from app.core.deps import ROLE_SUPER_ADMIN, AuthenticatedPrincipal, get_current_principal, require_role
from app.models.common import utcnow_iso
from app.repositories.store import Repository
from app.schemas.storefront import NotificationsSeen
from app.services.list_params import FilterParam, ListConfig

router = APIRouter()
get_notifications = repository_for("notifications")

NOTIFICATION_LIST = ListConfig(
    default_per_page=50,
    search_fields=("title", "message"),
    filters=(
        FilterParam("type", "type"),
        FilterParam("is_read", "is_read", "bool"),
    ),
)


def _owned(repo: Repository, principal: AuthenticatedPrincipal) -> list[dict]:
    return [row for row in repo.all() if row.get("user_id") == principal.id]


@router.get("")
def list_notifications(
    request: Request,
    repo: Repository = Depends(get_notifications),
    principal: AuthenticatedPrincipal = Depends(get_current_principal),
):
    return list_records(request, _owned(repo, principal), NOTIFICATION_LIST)


@router.post("/notify-log-seen")
def mark_seen(
    payload: NotificationsSeen,
    repo: Repository = Depends(get_notifications),
    principal: AuthenticatedPrincipal = Depends(get_current_principal),
):
    wanted = set(payload.notification_ids)
    seen_at = utcnow_iso()
    updated = []
    for row in _owned(repo, principal):
        if row["id"] not in wanted or row.get("is_read"):
            continue
        repo.update(row["id"], {"is_read": True, "read_at": seen_at})
        updated.append(row["id"])
    return {"success": True, "message": "Notifications marked as seen", "updated": updated}


@router.post("/notify-log-read-all")
def mark_all_read(
    repo: Repository = Depends(get_notifications),
    principal: AuthenticatedPrincipal = Depends(get_current_principal),
):
    read_at = utcnow_iso()
    count = 0
    for row in _owned(repo, principal):
        if row.get("is_read"):
            continue
        repo.update(row["id"], {"is_read": True, "read_at": read_at})
        count += 1
    return {"success": True, "message": f"{count} notification(s) marked as read", "count": count}


@router.get("/{notification_id}")
def get_notification(
    notification_id: str,
    repo: Repository = Depends(get_notifications),
    principal: AuthenticatedPrincipal = Depends(get_current_principal),
):
    row = repo.get(parse_record_id(notification_id, "Notification"))
    if row is None or row.get("user_id") != principal.id:
        raise HTTPException(status_code=404, detail="Notification not found")
    return row


@router.delete("/{notification_id}")
def delete_notification(
    notification_id: str,
    repo: Repository = Depends(get_notifications),
    principal: AuthenticatedPrincipal = Depends(require_role(ROLE_SUPER_ADMIN)),
):
    row = repo.delete(parse_record_id(notification_id, "Notification"))
    if row is None:
        raise HTTPException(status_code=404, detail="Notification not found")
    return {"success": True, "message": "Notification deleted successfully", "data": row}
