"""Password hashing (bcrypt) and access tokens (JWT)"""

from datetime import datetime, timedelta, timezone
from typing import Optional
import bcrypt
from jose import JWTError, jwt
from finance_gateway.config import settings
from finance_gateway.domain.exceptions import AuthenticationError


def hash_password(password: str) -> str:
    """Bcrypt-hash a password. Plain text is never stored."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))


def create_access_token(subject: str, expires_minutes: Optional[int] = None) -> str:
    """
    Create a signed JWT.

    Payload: { sub: user id, iat: issued at, exp: expiry }
    """
    now = datetime.now(timezone.utc)
    minutes = settings.access_token_expire_minutes if expires_minutes is None else expires_minutes
    payload = {
        "sub": subject,
        "iat": now,
        "exp": now + timedelta(minutes=minutes),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> str:
    """
    Validate a JWT and return its subject.

    Raises:
        AuthenticationError: Bad signature, expired token, or missing subject
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise AuthenticationError("Invalid or expired token") from e

    subject = payload.get("sub")
    if not subject:
        raise AuthenticationError("Token has no subject")
    return subject
