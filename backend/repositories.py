from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import text as sql_text

from backend.db import get_sessionmaker

USERS_TABLE = "users"
MOOD_ENTRIES_TABLE = "mood_entries"
FINANCIAL_ENTRIES_TABLE = "financial_entries"

USER_PUBLIC_COLUMNS = ["id", "email", "full_name", "created_at"]
MOOD_COLUMNS = ["id", "user_id", "mood", "productivity", "task", "notes", "created_at"]
FINANCIAL_COLUMNS = ["id", "user_id", "type", "amount", "description", "category", "date", "created_at"]

MOOD_PATCHABLE = {"mood", "productivity", "task", "notes"}

# Allowed ORDER BY columns per table, with the tie-breaker applied after them.
ORDERABLE_COLUMNS = {
    MOOD_ENTRIES_TABLE: ({"created_at", "productivity", "mood"}, "id"),
    FINANCIAL_ENTRIES_TABLE: ({"date", "created_at", "amount"}, "created_at"),
}


def _new_id() -> str:
    return uuid4().hex


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _order_clause(table: str, order: str, ascending: bool) -> str:
    allowed, tie_breaker = ORDERABLE_COLUMNS[table]
    if order not in allowed:
        raise ValueError(f"Cannot order {table} by {order}")
    direction = "ASC" if ascending else "DESC"
    if order == tie_breaker:
        return f"ORDER BY {order} {direction}"
    return f"ORDER BY {order} {direction}, {tie_breaker} {direction}"


def _normalize_row(row) -> dict:
    if not row:
        return {}
    payload = dict(row)
    for key in ("date", "created_at"):
        value = payload.get(key)
        if value is not None and hasattr(value, "isoformat"):
            payload[key] = value.isoformat()
    if "amount" in payload and payload["amount"] is not None:
        payload["amount"] = float(payload["amount"])
    return payload


async def create_user(email: str, password_hash: str, full_name: str | None = None) -> dict:
    record = {
        "id": _new_id(),
        "email": email,
        "password_hash": password_hash,
        "full_name": (full_name or "").strip() or None,
        "created_at": _now_iso(),
    }
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        await session.execute(
            sql_text(
                f"""
                INSERT INTO {USERS_TABLE} (id, email, password_hash, full_name, created_at)
                VALUES (:id, :email, :password_hash, :full_name, :created_at)
                """
            ),
            record,
        )
        await session.commit()
    return {key: record[key] for key in USER_PUBLIC_COLUMNS}


async def get_user_by_email(email: str) -> dict | None:
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        row = (await session.execute(
            sql_text(
                f"SELECT {', '.join(USER_PUBLIC_COLUMNS)}, password_hash FROM {USERS_TABLE} "
                "WHERE email = :email"
            ),
            {"email": email},
        )).mappings().fetchone()
    return dict(row) if row else None


async def get_user(user_id: str) -> dict | None:
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        row = (await session.execute(
            sql_text(f"SELECT {', '.join(USER_PUBLIC_COLUMNS)} FROM {USERS_TABLE} WHERE id = :id"),
            {"id": user_id},
        )).mappings().fetchone()
    return dict(row) if row else None


async def list_mood_entries(user_id: str, order: str = "created_at", ascending: bool = False) -> list[dict]:
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        rows = (await session.execute(
            sql_text(
                f"""
                SELECT {', '.join(MOOD_COLUMNS)}
                FROM {MOOD_ENTRIES_TABLE}
                WHERE user_id = :user_id
                {_order_clause(MOOD_ENTRIES_TABLE, order, ascending)}
                """
            ),
            {"user_id": user_id},
        )).mappings().all()
    return [_normalize_row(row) for row in rows]


async def get_mood_entry(user_id: str, entry_id: str) -> dict:
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        row = (await session.execute(
            sql_text(
                f"SELECT {', '.join(MOOD_COLUMNS)} FROM {MOOD_ENTRIES_TABLE} "
                "WHERE id = :id AND user_id = :user_id"
            ),
            {"id": entry_id, "user_id": user_id},
        )).mappings().fetchone()
    return _normalize_row(row)


async def create_mood_entry(user_id: str, payload: dict) -> dict:
    record = {
        "id": _new_id(),
        "user_id": user_id,
        "mood": payload["mood"],
        "productivity": int(payload["productivity"]),
        "task": payload["task"],
        "notes": payload.get("notes") or None,
        "created_at": _now_iso(),
    }
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        await session.execute(
            sql_text(
                f"""
                INSERT INTO {MOOD_ENTRIES_TABLE} ({', '.join(MOOD_COLUMNS)})
                VALUES ({', '.join(f':{col}' for col in MOOD_COLUMNS)})
                """
            ),
            record,
        )
        await session.commit()
    return record


async def update_mood_entry(user_id: str, entry_id: str, patch: dict) -> dict:
    clean = {key: value for key, value in (patch or {}).items() if key in MOOD_PATCHABLE}
    if "notes" in clean:
        clean["notes"] = clean["notes"] or None
    if clean:
        assignments = ", ".join(f"{key} = :{key}" for key in clean)
        session_factory = get_sessionmaker()
        async with session_factory() as session:
            result = await session.execute(
                sql_text(
                    f"UPDATE {MOOD_ENTRIES_TABLE} SET {assignments} "
                    "WHERE id = :id AND user_id = :user_id"
                ),
                {**clean, "id": entry_id, "user_id": user_id},
            )
            await session.commit()
        if result.rowcount == 0:
            return {}
    return await get_mood_entry(user_id, entry_id)


async def list_financial_entries(user_id: str, order: str = "date", ascending: bool = False) -> list[dict]:
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        rows = (await session.execute(
            sql_text(
                f"""
                SELECT {', '.join(FINANCIAL_COLUMNS)}
                FROM {FINANCIAL_ENTRIES_TABLE}
                WHERE user_id = :user_id
                {_order_clause(FINANCIAL_ENTRIES_TABLE, order, ascending)}
                """
            ),
            {"user_id": user_id},
        )).mappings().all()
    return [_normalize_row(row) for row in rows]


async def create_financial_entry(user_id: str, payload: dict) -> dict:
    entry_date = payload["date"]
    record = {
        "id": _new_id(),
        "user_id": user_id,
        "type": payload["type"],
        "amount": float(payload["amount"]),
        "description": payload["description"],
        "category": payload["category"],
        "date": entry_date.isoformat() if hasattr(entry_date, "isoformat") else str(entry_date),
        "created_at": _now_iso(),
    }
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        await session.execute(
            sql_text(
                f"""
                INSERT INTO {FINANCIAL_ENTRIES_TABLE} ({', '.join(FINANCIAL_COLUMNS)})
                VALUES ({', '.join(f':{col}' for col in FINANCIAL_COLUMNS)})
                """
            ),
            record,
        )
        await session.commit()
    return record
