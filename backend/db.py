from __future__ import annotations

import logging
from urllib.parse import urlparse, urlunparse, parse_qsl, urlencode

from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncEngine

from backend.settings import get_settings

logger = logging.getLogger(__name__)

# Sync driver prefixes rewritten to their async counterparts.
ASYNC_DRIVER_PREFIXES = (
    ("sqlite:///", "sqlite+aiosqlite:///"),
    ("postgres://", "postgresql+asyncpg://"),
    ("postgresql://", "postgresql+asyncpg://"),
    ("postgresql+psycopg2://", "postgresql+asyncpg://"),
)
# libpq-only query options asyncpg rejects.
DROPPED_QUERY_KEYS = {"sslmode", "channel_binding", "ssl"}
LOCAL_HOSTS = {"localhost", "127.0.0.1"}


def _asyncpg_query(query: str) -> str:
    items = parse_qsl(query, keep_blank_values=True)
    clean = [(key, value) for key, value in items if key not in DROPPED_QUERY_KEYS]
    if any(key == "sslmode" for key, _ in items):
        clean.append(("ssl", "true"))
    return urlencode(clean)


def _normalize_database_url(database_url: str) -> str:
    url = str(database_url or "").strip()
    for prefix, replacement in ASYNC_DRIVER_PREFIXES:
        if url.startswith(prefix):
            url = replacement + url[len(prefix):]
            break
    if not url.startswith("postgresql+asyncpg://"):
        return url
    try:
        parsed = urlparse(url)
    except ValueError:
        return url
    return urlunparse(parsed._replace(query=_asyncpg_query(parsed.query)))


def using_sqlite(database_url: str) -> bool:
    return str(database_url or "").strip().lower().startswith("sqlite")


def _engine_kwargs(db_url: str) -> dict:
    if using_sqlite(db_url):
        return {"future": True}
    kwargs = {"pool_pre_ping": True, "future": True, "pool_size": 20, "max_overflow": 10}
    try:
        host = urlparse(db_url).hostname or ""
    except ValueError:
        logger.debug("Failed to parse database URL for SSL hint.")
        host = ""
    if host and host not in LOCAL_HOSTS:
        kwargs["connect_args"] = {"ssl": True}
    return kwargs


_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker | None = None


def get_engine() -> AsyncEngine:
    global _engine
    if _engine is None:
        db_url = _normalize_database_url(get_settings().database_url)
        _engine = create_async_engine(db_url, **_engine_kwargs(db_url))
    return _engine


def get_sessionmaker() -> async_sessionmaker:
    global _session_factory
    if _session_factory is None:
        _session_factory = async_sessionmaker(get_engine(), expire_on_commit=False)
    return _session_factory


async def dispose_engine() -> None:
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None
