from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

USER_ROLES = ("super_admin", "store_owner", "staff", "customer")


def _normalize_email(value: str) -> str:
    text = str(value or "").strip().lower()
    if "@" not in text or text.startswith("@") or text.endswith("@"):
        raise ValueError("Valid email is required")
    return text


def _normalize_role(value: str) -> str:
    text = str(value or "").strip().lower()
    if text not in USER_ROLES:
        raise ValueError("role must be one of: " + ", ".join(USER_ROLES))
    return text


class RegisterIn(BaseModel):
    name: str = Field(min_length=2)
    email: str
    password: str = Field(min_length=6)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return _normalize_email(value)


class LoginIn(BaseModel):
    email: str
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return _normalize_email(value)


class RefreshIn(BaseModel):
    refresh_token: str = Field(min_length=1)


class UserCreate(BaseModel):
    name: str = Field(min_length=2)
    email: str
    password: str = Field(min_length=6)
    role: str = "customer"
    is_active: bool = True

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return _normalize_email(value)

    @field_validator("role")
    @classmethod
    def validate_role(cls, value: str) -> str:
        return _normalize_role(value)


class UserUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=2)
    email: Optional[str] = None
    password: Optional[str] = Field(default=None, min_length=6)
    role: Optional[str] = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: Optional[str]) -> Optional[str]:
        return _normalize_email(value) if value is not None else None

    @field_validator("role")
    @classmethod
    def validate_role(cls, value: Optional[str]) -> Optional[str]:
        return _normalize_role(value) if value is not None else None


class UserIdIn(BaseModel):
    user_id: int


class UserOut(BaseModel):
    id: int
    name: str
    email: str
    role: str
    permissions: List[str] = []
    is_active: bool = True
    email_verified_at: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class TokenOut(BaseModel):
    success: bool = True
    message: str = "Login successful"
    token: str
    refresh_token: str
    token_type: str = "Bearer"
    permissions: List[str]
    role: str
    user: UserOut
