from __future__ import annotations

from sqlalchemy import text as sql_text

from backend.db import get_engine


USERS_TABLE = "users"
MOOD_ENTRIES_TABLE = "mood_entries"
FINANCIAL_ENTRIES_TABLE = "financial_entries"


async def init_db():
    engine = get_engine()
    async with engine.begin() as conn:
        await conn.execute(
            sql_text(
                f"""
                CREATE TABLE IF NOT EXISTS {USERS_TABLE} (
                    id TEXT PRIMARY KEY,
                    email TEXT NOT NULL UNIQUE,
                    password_hash TEXT NOT NULL,
                    full_name TEXT,
                    created_at TEXT NOT NULL
                )
                """
            )
        )
        await conn.execute(
            sql_text(
                f"""
                CREATE TABLE IF NOT EXISTS {MOOD_ENTRIES_TABLE} (
                    id TEXT PRIMARY KEY,
                    user_id TEXT NOT NULL,
                    mood TEXT NOT NULL,
                    productivity INTEGER NOT NULL,
                    task TEXT NOT NULL,
                    notes TEXT,
                    created_at TEXT NOT NULL
                )
                """
            )
        )
        await conn.execute(
            sql_text(
                f"""
                CREATE TABLE IF NOT EXISTS {FINANCIAL_ENTRIES_TABLE} (
                    id TEXT PRIMARY KEY,
                    user_id TEXT NOT NULL,
                    type TEXT NOT NULL,
                    amount REAL NOT NULL,
                    description TEXT NOT NULL,
                    category TEXT NOT NULL,
                    date TEXT NOT NULL,
                    created_at TEXT NOT NULL
                )
                """
            )
        )

    async def ensure_index(index_sql: str) -> None:
        async with engine.begin() as conn:
            await conn.execute(sql_text(index_sql))

    await ensure_index(
        f"CREATE INDEX IF NOT EXISTS idx_{MOOD_ENTRIES_TABLE}_user_created "
        f"ON {MOOD_ENTRIES_TABLE} (user_id, created_at)"
    )
    await ensure_index(
        f"CREATE INDEX IF NOT EXISTS idx_{FINANCIAL_ENTRIES_TABLE}_user_date "
        f"ON {FINANCIAL_ENTRIES_TABLE} (user_id, date, created_at)"
    )
