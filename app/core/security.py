from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from passlib.context import CryptContext

from app.core.config import settings

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

TOKEN_TYPE_REFRESH = "refresh"

def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(password: str, password_hash: str) -> bool:
    if not password_hash:
        return False
    return pwd_context.verify(password, password_hash)

def create_jwt(payload: dict, secret: str, expires_delta: timedelta) -> str:
    now = datetime.now(timezone.utc)
    data = payload.copy()
    data.update({"iat": int(now.timestamp()), "exp": int((now + expires_delta).timestamp())})
    return jwt.encode(data, secret, algorithm="HS256")

def decode_jwt(token: str, secret: str) -> dict:
    return jwt.decode(token, secret, algorithms=["HS256"])

def create_access_token(claims: dict) -> str:
    return create_jwt(claims, settings.JWT_SECRET, timedelta(minutes=settings.JWT_TTL_MINUTES))

def create_refresh_token(claims: dict) -> str:
    data = {**claims, "type": TOKEN_TYPE_REFRESH}
    return create_jwt(data, settings.JWT_REFRESH_SECRET, timedelta(days=settings.JWT_REFRESH_TTL_DAYS))

def decode_refresh_token(token: str) -> dict:
    claims = decode_jwt(token, settings.JWT_REFRESH_SECRET)
    if claims.get("type") != TOKEN_TYPE_REFRESH:
        raise JWTError("Not a refresh token")
    return claims
