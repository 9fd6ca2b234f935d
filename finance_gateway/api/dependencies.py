"""Dependency injection for FastAPI endpoints"""

import uuid
from typing import Optional
from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from finance_gateway.infrastructure.database.session import get_db
from finance_gateway.infrastructure.database.repositories import UserRepository
from finance_gateway.infrastructure.database.models import User
from finance_gateway.infrastructure.security import decode_access_token
from finance_gateway.infrastructure.observability.metrics import auth_failure_counter
from finance_gateway.domain.exceptions import AuthenticationError

bearer_scheme = HTTPBearer(auto_error=False)


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def _unauthorized(detail: str) -> HTTPException:
    auth_failure_counter.inc()
    return HTTPException(
        status_code=401,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the bearer token to a registered user, or reject with 401"""
    if credentials is None:
        raise _unauthorized("Not authenticated")

    try:
        subject = decode_access_token(credentials.credentials)
        user_id = uuid.UUID(subject)
    except (AuthenticationError, ValueError):
        raise _unauthorized("Invalid or expired token")

    user = UserRepository(db).get_by_id(user_id)
    if user is None:
        raise _unauthorized("User no longer exists")
    return user
