"""/auth - registration, login, and current user"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from finance_gateway.api.v1.schemas import LoginRequest, RegisterRequest, TokenResponse, UserResponse
from finance_gateway.api.dependencies import get_current_user, get_request_id
from finance_gateway.infrastructure.database.session import get_db
from finance_gateway.infrastructure.database.repositories import UserRepository
from finance_gateway.infrastructure.database.models import User
from finance_gateway.infrastructure.security import create_access_token, hash_password, verify_password
from finance_gateway.infrastructure.observability.metrics import auth_failure_counter
from finance_gateway.domain.exceptions import DuplicateUserError

router = APIRouter()


@router.post("/register", response_model=TokenResponse, status_code=201)
def register(request_body: RegisterRequest, request: Request, db: Session = Depends(get_db)):
    """
    Create an account and return an access token.

    Flow:
    1. Reject duplicate email (409)
    2. Hash password with bcrypt
    3. Persist user
    4. Return JWT
    """
    request_id = get_request_id(request)

    try:
        user = UserRepository(db).create_user(
            email=request_body.email,
            name=request_body.name,
            password_hash=hash_password(request_body.password),
        )
        db.commit()

    except (DuplicateUserError, IntegrityError) as e:  # IntegrityError: lost a concurrent registration
        db.rollback()
        logging.warning(f"Registration rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=409, detail="Email already registered")

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    logging.info("User registered", extra={"request_id": request_id, "user_id": str(user.id)})
    return TokenResponse(access_token=create_access_token(str(user.id)))


@router.post("/login", response_model=TokenResponse)
def login(request_body: LoginRequest, request: Request, db: Session = Depends(get_db)):
    """Exchange email and password for an access token"""
    user = UserRepository(db).get_by_email(request_body.email)

    if user is None or not verify_password(request_body.password, user.password_hash):
        auth_failure_counter.inc()
        logging.warning("Login failed", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=401, detail="Invalid email or password")

    return TokenResponse(access_token=create_access_token(str(user.id)))


@router.get("/me", response_model=UserResponse)
def me(user: User = Depends(get_current_user)):
    return UserResponse(id=str(user.id), email=user.email, name=user.name)
