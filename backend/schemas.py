from __future__ import annotations

from datetime import date
from typing import Optional, List, Dict, Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

# Both mood taxonomies stay writable; there is no migration between them.
MOOD_VALUES_V1 = ("excited", "happy", "neutral", "sad", "stressed")
MOOD_VALUES_V2 = ("amazing", "great", "good", "okay", "meh", "bad", "terrible")
MOOD_VALUES = frozenset(MOOD_VALUES_V1 + MOOD_VALUES_V2)

EXPENSE_CATEGORIES = frozenset(
    {"food", "transport", "shopping", "entertainment", "bills", "health", "education", "other"}
)
INCOME_CATEGORIES = frozenset({"salary", "freelance", "business", "investment", "gift", "other"})


def _required_text(value: str) -> str:
    clean = str(value or "").strip()
    if not clean:
        raise ValueError("must not be empty")
    return clean


class SignUpPayload(BaseModel):
    email: str
    password: str = Field(..., min_length=8)
    full_name: Optional[str] = None

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, value: str) -> str:
        email = str(value or "").strip().lower()
        if "@" not in email or email.startswith("@") or email.endswith("@"):
            raise ValueError("Enter a valid email")
        return email


class SignInPayload(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, value: str) -> str:
        return str(value or "").strip().lower()


class UserResponse(BaseModel):
    id: str
    email: str
    full_name: Optional[str] = None
    created_at: str


class SessionResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int


class AuthResponse(BaseModel):
    user: UserResponse
    session: SessionResponse


class MoodEntryCreate(BaseModel):
    mood: str
    productivity: int = Field(..., ge=1, le=10)
    task: str
    notes: Optional[str] = None

    @field_validator("mood")
    @classmethod
    def _known_mood(cls, value: str) -> str:
        if value not in MOOD_VALUES:
            raise ValueError(f"Unknown mood: {value}")
        return value

    @field_validator("task")
    @classmethod
    def _task_required(cls, value: str) -> str:
        return _required_text(value)


class MoodEntryPatch(BaseModel):
    mood: Optional[str] = None
    productivity: Optional[int] = Field(None, ge=1, le=10)
    task: Optional[str] = None
    notes: Optional[str] = None

    # Omitted fields keep their stored value; explicit nulls are rejected for NOT NULL columns.
    @field_validator("mood", "productivity", "task", mode="before")
    @classmethod
    def _not_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        return value

    @field_validator("mood")
    @classmethod
    def _known_mood(cls, value: str) -> str:
        if value not in MOOD_VALUES:
            raise ValueError(f"Unknown mood: {value}")
        return value

    @field_validator("task")
    @classmethod
    def _task_required(cls, value: str) -> str:
        return _required_text(value)


class MoodEntryResponse(BaseModel):
    id: str
    user_id: str
    mood: str
    productivity: int
    task: str
    notes: Optional[str] = None
    created_at: str


class FinancialEntryCreate(BaseModel):
    type: Literal["income", "expense"]
    amount: float = Field(..., gt=0)
    description: str
    category: str
    date: date

    @field_validator("description")
    @classmethod
    def _description_required(cls, value: str) -> str:
        return _required_text(value)

    @model_validator(mode="after")
    def _category_matches_type(self):
        allowed = INCOME_CATEGORIES if self.type == "income" else EXPENSE_CATEGORIES
        if self.category not in allowed:
            raise ValueError(f"Unknown {self.type} category: {self.category}")
        return self


class FinancialEntryResponse(BaseModel):
    id: str
    user_id: str
    type: str
    amount: float
    description: str
    category: str
    date: str
    created_at: str


class EntriesResponse(BaseModel):
    items: List[Dict[str, Any]]
