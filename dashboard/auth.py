from __future__ import annotations

import logging
import os
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import streamlit as st
from pydantic import BaseModel, ValidationError, field_validator, model_validator

from dashboard.context import DashboardContext
from dashboard.data import api_client

logger = logging.getLogger(__name__)

ENV_PATH = os.path.join(os.path.dirname(__file__), "..", ".env")

ENV_FALLBACK_KEYS = {
    ("app", "API_BASE_URL"): "API_BASE_URL",
    ("app", "APP_TIMEZONE"): "APP_TIMEZONE",
}

TOKEN_KEY = "auth.token"
USER_KEY = "auth.user"

SIGN_IN_FAILED = "Invalid email or password"
SIGN_UP_FAILED = (
    "Email already exists or signup failed. Please try a different email or sign in instead."
)
UNEXPECTED_ERROR = "An unexpected error occurred"


def load_local_env():
    if not os.path.exists(ENV_PATH):
        return
    with open(ENV_PATH, "r", encoding="utf-8") as env_file:
        for raw_line in env_file:
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


def get_secret(path, default=None):
    env_key = ENV_FALLBACK_KEYS.get(tuple(path))
    if env_key:
        env_value = os.getenv(env_key)
        if env_value:
            return env_value
    try:
        current = st.secrets
        for key in path:
            if key not in current:
                return default
            current = current[key]
    except (FileNotFoundError, KeyError, TypeError):
        return default
    return current


def get_timezone():
    name = str(get_secret(("app", "APP_TIMEZONE")) or "").strip()
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except ZoneInfoNotFoundError:
        logger.warning("Unknown APP_TIMEZONE %r, falling back to UTC", name)
        return None


class AuthForm(BaseModel):
    email: str
    password: str
    confirm_password: Optional[str] = None
    full_name: Optional[str] = None

    @field_validator("email")
    @classmethod
    def _valid_email(cls, value: str) -> str:
        email = str(value or "").strip().lower()
        local, _, domain = email.partition("@")
        if not local or "." not in domain or domain.startswith(".") or domain.endswith("."):
            raise ValueError("Enter a valid email")
        return email

    @field_validator("password")
    @classmethod
    def _long_enough(cls, value: str) -> str:
        if len(value or "") < 8:
            raise ValueError("Password must be at least 8 characters")
        return value

    @model_validator(mode="after")
    def _passwords_match(self):
        if self.confirm_password and self.confirm_password != self.password:
            raise ValueError("Passwords don't match")
        return self


def validate_auth_form(email, password, confirm_password=None, full_name=None):
    """Return (form, errors) where errors maps field name to its message."""
    try:
        form = AuthForm(
            email=email,
            password=password,
            confirm_password=confirm_password or None,
            full_name=(full_name or "").strip() or None,
        )
    except ValidationError as exc:
        errors = {}
        for item in exc.errors():
            field = item["loc"][0] if item.get("loc") else "confirm_password"
            message = str(item.get("msg", "")).removeprefix("Value error, ")
            errors.setdefault(field, message)
        return None, errors
    return form, {}


def _remember_session(payload):
    session = payload.get("session") or {}
    user = payload.get("user") or {}
    token = session.get("access_token")
    if not token or not user:
        return False
    st.session_state[TOKEN_KEY] = token
    st.session_state[USER_KEY] = user
    return True


def forget_session():
    st.session_state.pop(TOKEN_KEY, None)
    st.session_state.pop(USER_KEY, None)


def sign_up(email, password, full_name=None):
    """Return an error message, or None when the user is signed up and signed in."""
    try:
        payload = api_client.request(
            "POST",
            "/v1/auth/signup",
            json={"email": email, "password": password, "full_name": full_name},
        )
    except api_client.ApiError as exc:
        logger.info("Sign up rejected: %s", exc)
        return exc.detail if exc.status_code == 422 and isinstance(exc.detail, str) else SIGN_UP_FAILED
    except Exception:
        logger.exception("Sign up failed")
        return UNEXPECTED_ERROR
    if not _remember_session(payload or {}):
        return SIGN_UP_FAILED
    return None


def sign_in(email, password):
    try:
        payload = api_client.request("POST", "/v1/auth/signin", json={"email": email, "password": password})
    except api_client.ApiError as exc:
        logger.info("Sign in rejected: %s", exc)
        return SIGN_IN_FAILED
    except Exception:
        logger.exception("Sign in failed")
        return UNEXPECTED_ERROR
    if not _remember_session(payload or {}):
        return "Sign in failed. Please try again."
    return None


def get_current_user(token):
    """Ask the backend who owns ``token``. Every failure counts as signed out."""
    if not token:
        return None
    try:
        payload = api_client.request("GET", "/v1/auth/user", token=token)
    except Exception as exc:
        logger.info("Identity check failed: %s", exc)
        return None
    return (payload or {}).get("user") or None


def sign_out(ctx):
    if ctx.token:
        try:
            api_client.request("POST", "/v1/auth/signout", token=ctx.token)
        except Exception as exc:
            logger.info("Sign out call failed: %s", exc)
    forget_session()


def build_context():
    token = st.session_state.get(TOKEN_KEY)
    user = get_current_user(token)
    if token and not user:
        forget_session()
        token = None
    elif user:
        st.session_state[USER_KEY] = user
    return DashboardContext(token=token, user=user, timezone=get_timezone())
