from dataclasses import dataclass, field
from datetime import datetime, timezone as dt_timezone
from typing import Any, Dict, Optional


@dataclass
class DashboardContext:
    """Per-run state handed explicitly to every page: who is signed in and when "now" is."""

    token: Optional[str] = None
    user: Optional[Dict[str, Any]] = None
    timezone: Any = None
    payload: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_authenticated(self):
        return bool(self.token and self.user)

    @property
    def user_id(self):
        return (self.user or {}).get("id")

    @property
    def display_name(self):
        user = self.user or {}
        return user.get("full_name") or user.get("email") or "there"

    def now(self):
        return datetime.now(self.timezone or dt_timezone.utc)

    def today(self):
        return self.now().date()

    def get(self, key, default=None):
        return self.payload.get(key, default)
