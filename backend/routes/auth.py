from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError

from backend.auth import hash_password, issue_session_token, require_user, verify_password
from backend.schemas import AuthResponse, SignInPayload, SignUpPayload
from backend import repositories
from backend.settings import get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _auth_payload(user: dict) -> dict:
    public_user = {key: user.get(key) for key in repositories.USER_PUBLIC_COLUMNS}
    return {
        "user": public_user,
        "session": {
            "access_token": issue_session_token(public_user),
            "token_type": "bearer",
            "expires_in": get_settings().session_ttl_seconds,
        },
    }


@router.post("/v1/auth/signup", response_model=AuthResponse)
async def sign_up(payload: SignUpPayload):
    settings = get_settings()
    if settings.allowed_emails and payload.email not in settings.allowed_emails:
        raise HTTPException(status_code=403, detail="User not allowed")
    if await repositories.get_user_by_email(payload.email):
        raise HTTPException(status_code=409, detail="Email already registered")
    try:
        user = await repositories.create_user(payload.email, hash_password(payload.password), payload.full_name)
    except IntegrityError:
        raise HTTPException(status_code=409, detail="Email already registered")
    logger.info("Created user %s", user["id"])
    return _auth_payload(user)


@router.post("/v1/auth/signin", response_model=AuthResponse)
async def sign_in(payload: SignInPayload):
    user = await repositories.get_user_by_email(payload.email)
    if not user or not verify_password(user["password_hash"], payload.password):
        raise HTTPException(status_code=401, detail="Invalid email or password")
    return _auth_payload(user)


@router.get("/v1/auth/user")
async def current_user(user: dict = Depends(require_user)):
    return {"user": user}


@router.post("/v1/auth/signout")
async def sign_out(user: dict = Depends(require_user)):
    # Session tokens are stateless; the client discards its copy.
    logger.info("User %s signed out", user["id"])
    return {"ok": True}
