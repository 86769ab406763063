from __future__ import annotations

import base64
import hashlib
import json
import logging

from cryptography.fernet import Fernet, InvalidToken
from fastapi import Header, HTTPException
from werkzeug.security import check_password_hash, generate_password_hash

from backend import repositories
from backend.settings import get_settings

logger = logging.getLogger(__name__)


def _fernet() -> Fernet:
    secret = get_settings().session_secret
    if not secret:
        raise RuntimeError("Missing SESSION_SECRET")
    digest = hashlib.sha256(str(secret).encode("utf-8")).digest()
    return Fernet(base64.urlsafe_b64encode(digest))


def hash_password(password: str) -> str:
    return generate_password_hash(password)


def verify_password(password_hash: str, password: str) -> bool:
    return check_password_hash(password_hash, password)


def issue_session_token(user: dict) -> str:
    payload = json.dumps({"sub": user["id"], "email": user["email"]})
    return _fernet().encrypt(payload.encode("utf-8")).decode("utf-8")


def read_session_token(token: str) -> dict | None:
    """Return the token payload, or None when it is forged, malformed or expired."""
    ttl = get_settings().session_ttl_seconds
    try:
        raw = _fernet().decrypt(str(token).encode("utf-8"), ttl=ttl)
    except InvalidToken:
        return None
    try:
        payload = json.loads(raw.decode("utf-8"))
    except ValueError:
        return None
    if not isinstance(payload, dict) or not payload.get("sub"):
        return None
    return payload


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def require_user(
    authorization: str | None = Header(default=None, alias="Authorization"),
) -> dict:
    token = _bearer_token(authorization)
    if not token:
        raise HTTPException(status_code=401, detail="Missing session token")
    payload = read_session_token(token)
    if payload is None:
        raise HTTPException(status_code=401, detail="Invalid or expired session")
    user = await repositories.get_user(payload["sub"])
    if not user:
        logger.info("Session token for unknown user %s", payload["sub"])
        raise HTTPException(status_code=401, detail="Invalid or expired session")
    return user
