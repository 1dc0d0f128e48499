import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from jose import ExpiredSignatureError, JWTError

from app.api.storefront.resources import repository_for
from app.core.config import settings
from app.core.deps import ROLE_CUSTOMER, ROLE_PERMISSIONS, AuthenticatedPrincipal, get_current_principal
from app.core.security import (
    create_access_token,
    create_refresh_token,
    decode_refresh_token,
    hash_password,
    verify_password,
)
from app.repositories.store import Record, Repository
from app.schemas.auth import LoginIn, RefreshIn, RegisterIn, TokenOut, UserOut

_LOG = logging.getLogger("app.auth")

router = APIRouter()
get_users = repository_for("users")


def public_user(row: Record) -> dict[str, Any]:
    return UserOut.model_validate(row).model_dump()


def _claims(user: Record) -> dict[str, Any]:
    return {"sub": str(user["id"]), "email": user["email"], "role": user["role"]}


def _issue_tokens(user: Record, message: str) -> TokenOut:
    claims = _claims(user)
    return TokenOut(
        message=message,
        token=create_access_token(claims),
        refresh_token=create_refresh_token(claims),
        permissions=list(user.get("permissions") or [user["role"]]),
        role=user["role"],
        user=UserOut.model_validate(user),
    )


@router.post("/register", response_model=TokenOut, status_code=201)
def register(payload: RegisterIn, repo: Repository = Depends(get_users)):
    if repo.find_by("email", payload.email) is not None:
        raise HTTPException(status_code=400, detail="User with this email already exists")
    user = repo.create(
        {
            "name": payload.name.strip(),
            "email": payload.email,
            "password_hash": hash_password(payload.password),
            "role": ROLE_CUSTOMER,
            "permissions": list(ROLE_PERMISSIONS[ROLE_CUSTOMER]),
            "is_active": True,
            "email_verified_at": None,
        }
    )
    _LOG.info("user registered id=%s", user["id"])
    return _issue_tokens(user, "Registration successful")


@router.post("/token", response_model=TokenOut)
def login(payload: LoginIn, repo: Repository = Depends(get_users)):
    user = repo.find_by("email", payload.email)
    if not user or not verify_password(payload.password, user.get("password_hash") or ""):
        raise HTTPException(status_code=401, detail="Invalid credentials")
    if not user.get("is_active", True):
        raise HTTPException(status_code=403, detail="Account is disabled")
    return _issue_tokens(user, "Login successful")


@router.post("/refresh")
def refresh(payload: RefreshIn, repo: Repository = Depends(get_users)):
    try:
        claims = decode_refresh_token(payload.refresh_token)
    except ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Refresh token expired")
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid refresh token")
    try:
        user_id = int(str(claims.get("sub") or ""))
    except ValueError:
        raise HTTPException(status_code=401, detail="Invalid refresh token")
    user = repo.get(user_id)
    if user is None or not user.get("is_active", True):
        raise HTTPException(status_code=401, detail="Invalid refresh token")
    fresh = _claims(user)
    return {
        "success": True,
        "message": "Token refreshed successfully",
        "data": {
            "access_token": create_access_token(fresh),
            "token_type": "Bearer",
            "expires_in": settings.JWT_TTL_MINUTES * 60,
            "refresh_token": create_refresh_token(fresh),
        },
    }


@router.post("/logout")
def logout(principal: AuthenticatedPrincipal = Depends(get_current_principal)):
    # Tokens are stateless; the client discards them.
    _LOG.info("user logout id=%s", principal.id)
    return {"success": True, "message": "Logout successful"}


@router.get("/me")
def me(
    repo: Repository = Depends(get_users),
    principal: AuthenticatedPrincipal = Depends(get_current_principal),
):
    user = repo.get(principal.id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return {"success": True, "data": {"user": public_user(user)}}
