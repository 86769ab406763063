import logging

from dashboard.calendar_grid import index_entries_by_day
from dashboard.constants import ENTRY_KINDS
from dashboard.data import api_client

logger = logging.getLogger(__name__)

MOOD_FIELDS = ("mood", "productivity", "task", "notes")


class EntryWriteError(RuntimeError):
    pass


def _kind(kind):
    try:
        return ENTRY_KINDS[kind]
    except KeyError:
        raise ValueError(f"Unknown entry kind: {kind}")


def load_entries(ctx, kind):
    """Owner-scoped rows, newest first. Any failure degrades to an empty list."""
    meta = _kind(kind)
    if not ctx.is_authenticated:
        return []
    try:
        payload = api_client.request(
            "GET",
            f"/v1/{meta['table']}",
            token=ctx.token,
            params={"order": meta["order"], "ascending": "false"},
        )
    except Exception:
        logger.exception("Failed to load %s entries for %s", kind, ctx.user_id)
        return []
    items = (payload or {}).get("items") or []
    return [item for item in items if isinstance(item, dict)]


def create_entry(ctx, kind, record):
    meta = _kind(kind)
    try:
        return api_client.request("POST", f"/v1/{meta['table']}", token=ctx.token, json=record)
    except Exception as exc:
        logger.warning("Failed to create %s entry: %s", kind, exc)
        raise EntryWriteError(f"Could not save {kind} entry") from exc


def update_entry(ctx, kind, entry_id, fields):
    meta = _kind(kind)
    try:
        return api_client.request("PATCH", f"/v1/{meta['table']}/{entry_id}", token=ctx.token, json=fields)
    except Exception as exc:
        logger.warning("Failed to update %s entry %s: %s", kind, entry_id, exc)
        raise EntryWriteError(f"Could not update {kind} entry") from exc


def find_entry_for_day(entries, day, tz=None):
    return index_entries_by_day(entries, field="created_at", tz=tz).get(day)


def save_mood_checkin(ctx, entries, payload, today=None):
    """Create today's check-in, or overwrite it when one already exists.

    The lookup runs against the caller's in-memory list, so two submits racing
    for the same day can both insert.
    """
    today = today or ctx.today()
    fields = {key: payload.get(key) for key in MOOD_FIELDS}
    fields["notes"] = (fields.get("notes") or "").strip() or None
    existing = find_entry_for_day(entries, today, tz=ctx.timezone)
    if existing:
        return update_entry(ctx, "mood", existing["id"], fields), False
    return create_entry(ctx, "mood", fields), True


def save_financial_entry(ctx, payload):
    entry_date = payload.get("date")
    record = {
        "type": payload.get("type"),
        "amount": float(payload.get("amount")),
        "description": (payload.get("description") or "").strip(),
        "category": payload.get("category"),
        "date": entry_date.isoformat() if hasattr(entry_date, "isoformat") else str(entry_date),
    }
    return create_entry(ctx, "financial", record)
