from dataclasses import dataclass

from fastapi import Depends, HTTPException
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import ExpiredSignatureError, JWTError

from app.core.config import settings
from app.core.security import decode_jwt

bearer = HTTPBearer(auto_error=False)

ROLE_SUPER_ADMIN = "super_admin"
ROLE_STORE_OWNER = "store_owner"
ROLE_STAFF = "staff"
ROLE_CUSTOMER = "customer"

CATALOG_MANAGERS = (ROLE_SUPER_ADMIN, ROLE_STORE_OWNER)
STAFF_ROLES = (ROLE_SUPER_ADMIN, ROLE_STORE_OWNER, ROLE_STAFF)
USER_MANAGERS = (ROLE_SUPER_ADMIN, ROLE_STORE_OWNER)

ROLE_PERMISSIONS = {
    ROLE_SUPER_ADMIN: [ROLE_SUPER_ADMIN, ROLE_STORE_OWNER, ROLE_STAFF],
    ROLE_STORE_OWNER: [ROLE_STORE_OWNER, ROLE_STAFF],
    ROLE_STAFF: [ROLE_STAFF],
    ROLE_CUSTOMER: [ROLE_CUSTOMER],
}


@dataclass(frozen=True)
class AuthenticatedPrincipal:
    id: int
    role: str
    email: str | None = None


def principal_from_claims(claims: dict) -> AuthenticatedPrincipal:
    try:
        principal_id = int(str(claims.get("sub") or "").strip())
    except ValueError:
        raise HTTPException(status_code=401, detail="Invalid token")
    role = str(claims.get("role") or "").strip()
    if not role:
        raise HTTPException(status_code=401, detail="Invalid token")
    return AuthenticatedPrincipal(id=principal_id, role=role, email=claims.get("email"))


def get_current_principal(creds: HTTPAuthorizationCredentials = Depends(bearer)) -> AuthenticatedPrincipal:
    if not creds:
        raise HTTPException(status_code=401, detail="Access token is required")
    try:
        claims = decode_jwt(creds.credentials, settings.JWT_SECRET)
    except ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid token")
    return principal_from_claims(claims)


def require_role(*roles: str):
    def _inner(principal: AuthenticatedPrincipal = Depends(get_current_principal)) -> AuthenticatedPrincipal:
        if principal.role not in roles:
            raise HTTPException(status_code=403, detail="Insufficient permissions")
        return principal
    return _inner
