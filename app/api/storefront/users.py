from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request

from app.api.storefront.auth import get_users, public_user
from app.api.storefront.resources import (
    ResourceDefinition,
    build_resource_router,
    list_records,
    parse_record_id,
)
from app.core.deps import (
    ROLE_CUSTOMER,
    ROLE_PERMISSIONS,
    ROLE_SUPER_ADMIN,
    STAFF_ROLES,
    USER_MANAGERS,
    AuthenticatedPrincipal,
    require_role,
)
from app.core.security import hash_password
from app.repositories.store import Record, Repository
from app.schemas.auth import UserCreate, UserIdIn, UserUpdate
from app.services.envelope import EnvelopeStyle
from app.services.list_params import FilterParam, ListConfig

_LOG = logging.getLogger("app.users")

router = APIRouter()

USER_LIST = ListConfig(
    default_per_page=10,
    search_fields=("name", "email"),
    filters=(
        FilterParam("role", "role"),
        FilterParam("is_active", "is_active", "bool"),
    ),
    envelope=EnvelopeStyle.SIMPLE,
)


def _guard_role_grant(role: str | None, principal: AuthenticatedPrincipal) -> None:
    if role == ROLE_SUPER_ADMIN and principal.role != ROLE_SUPER_ADMIN:
        raise HTTPException(status_code=403, detail="Insufficient permissions")


def _new_account(data: dict[str, Any], principal: AuthenticatedPrincipal) -> dict[str, Any]:
    _guard_role_grant(data["role"], principal)
    data["password_hash"] = hash_password(data.pop("password"))
    data["permissions"] = list(ROLE_PERMISSIONS[data["role"]])
    data["email_verified_at"] = None
    return data


def _account_changes(changes: dict[str, Any], current: Record, principal: AuthenticatedPrincipal) -> dict[str, Any]:
    if "password" in changes:
        changes["password_hash"] = hash_password(changes.pop("password"))
    if "role" in changes:
        _guard_role_grant(changes["role"], principal)
        changes["permissions"] = list(ROLE_PERMISSIONS[changes["role"]])
    return changes


def _protect_admins(row: Record, principal: AuthenticatedPrincipal, action: str) -> None:
    if action == "delete" and row.get("role") == ROLE_SUPER_ADMIN:
        raise HTTPException(status_code=400, detail="Cannot delete admin users")
    if row.get("role") == ROLE_SUPER_ADMIN and principal.role != ROLE_SUPER_ADMIN:
        raise HTTPException(status_code=403, detail="Insufficient permissions")


USERS = ResourceDefinition(
    name="users",
    label="User",
    list_config=USER_LIST,
    create_model=UserCreate,
    update_model=UserUpdate,
    unique_field="email",
    write_roles=USER_MANAGERS,
    read_roles=STAFF_ROLES,
    prepare_create=_new_account,
    prepare_update=_account_changes,
    authorize=_protect_admins,
    present=public_user,
)


def _directory(request: Request, rows: list[dict]) -> dict:
    return list_records(request, [public_user(row) for row in rows], USER_LIST)


def _user_or_404(repo: Repository, user_id: int) -> Record:
    row = repo.get(user_id)
    if row is None:
        raise HTTPException(status_code=404, detail="User not found")
    return row


def _set_user(repo: Repository, user_id: int, changes: dict[str, Any], message: str) -> dict[str, Any]:
    row = repo.update(user_id, changes)
    _LOG.info("user id=%s %s", user_id, message.lower())
    return {"success": True, "message": message, "data": public_user(row)}


@router.get("/admin/list")
def list_admins(
    request: Request,
    repo: Repository = Depends(get_users),
    principal: AuthenticatedPrincipal = Depends(require_role(*STAFF_ROLES)),
):
    return _directory(request, [row for row in repo.all() if row.get("role") in STAFF_ROLES])


@router.get("/customers/list")
def list_customers(
    request: Request,
    repo: Repository = Depends(get_users),
    principal: AuthenticatedPrincipal = Depends(require_role(*STAFF_ROLES)),
):
    return _directory(request, [row for row in repo.all() if row.get("role") == ROLE_CUSTOMER])


@router.patch("/users/{user_id}/activate")
def activate_user(
    user_id: str,
    repo: Repository = Depends(get_users),
    principal: AuthenticatedPrincipal = Depends(require_role(*USER_MANAGERS)),
):
    row = _user_or_404(repo, parse_record_id(user_id, "User"))
    return _set_user(repo, row["id"], {"is_active": True}, "User activated successfully")


@router.patch("/users/{user_id}/deactivate")
def deactivate_user(
    user_id: str,
    repo: Repository = Depends(get_users),
    principal: AuthenticatedPrincipal = Depends(require_role(*USER_MANAGERS)),
):
    row = _user_or_404(repo, parse_record_id(user_id, "User"))
    if row.get("role") == ROLE_SUPER_ADMIN:
        raise HTTPException(status_code=400, detail="Cannot deactivate admin users")
    return _set_user(repo, row["id"], {"is_active": False}, "User deactivated successfully")


@router.post("/users/block-user")
def block_user(
    payload: UserIdIn,
    repo: Repository = Depends(get_users),
    principal: AuthenticatedPrincipal = Depends(require_role(*USER_MANAGERS)),
):
    row = _user_or_404(repo, payload.user_id)
    if row.get("role") == ROLE_SUPER_ADMIN:
        raise HTTPException(status_code=400, detail="Cannot block admin users")
    return _set_user(repo, row["id"], {"is_active": False}, "User blocked successfully")


@router.post("/users/unblock-user")
def unblock_user(
    payload: UserIdIn,
    repo: Repository = Depends(get_users),
    principal: AuthenticatedPrincipal = Depends(require_role(*USER_MANAGERS)),
):
    row = _user_or_404(repo, payload.user_id)
    return _set_user(repo, row["id"], {"is_active": True}, "User unblocked successfully")


@router.post("/users/make-admin")
def make_admin(
    payload: UserIdIn,
    repo: Repository = Depends(get_users),
    principal: AuthenticatedPrincipal = Depends(require_role(ROLE_SUPER_ADMIN)),
):
    row = _user_or_404(repo, payload.user_id)
    changes = {"role": ROLE_SUPER_ADMIN, "permissions": list(ROLE_PERMISSIONS[ROLE_SUPER_ADMIN])}
    return _set_user(repo, row["id"], changes, "User promoted to admin successfully")


router.include_router(build_resource_router(USERS), prefix="/users")
