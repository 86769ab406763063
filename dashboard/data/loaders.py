from __future__ import annotations

import pandas as pd

from dashboard.calendar_grid import entry_day
from dashboard.constants import category_meta, mood_meta

MOOD_FRAME_COLUMNS = ["date", "mood", "productivity", "task", "notes"]
FINANCIAL_FRAME_COLUMNS = ["date", "type", "category", "description", "amount"]


def mood_frame(entries, tz=None):
    rows = []
    for entry in entries or []:
        meta = mood_meta(entry.get("mood"))
        rows.append(
            {
                "date": entry_day(entry, field="created_at", tz=tz),
                "mood": f"{meta['emoji']} {meta['label']}",
                "productivity": entry.get("productivity"),
                "task": entry.get("task") or "",
                "notes": entry.get("notes") or "",
            }
        )
    return pd.DataFrame(rows, columns=MOOD_FRAME_COLUMNS)


def financial_frame(entries):
    rows = []
    for entry in entries or []:
        entry_type = entry.get("type")
        amount = float(entry.get("amount") or 0)
        rows.append(
            {
                "date": entry_day(entry, field="date"),
                "type": str(entry_type or "").title(),
                "category": category_meta(entry_type, entry.get("category"))["label"],
                "description": entry.get("description") or "",
                "amount": amount if entry_type == "income" else -amount,
            }
        )
    return pd.DataFrame(rows, columns=FINANCIAL_FRAME_COLUMNS)


def productivity_by_day(entries, tz=None):
    """One productivity value per day, oldest first; the newest entry of a day wins."""
    frame = mood_frame(entries, tz=tz)
    if frame.empty:
        return frame
    frame = frame.dropna(subset=["date"]).drop_duplicates(subset=["date"], keep="first")
    frame = frame.sort_values("date").copy()
    frame["date_str"] = frame["date"].apply(lambda d: d.strftime("%b %d"))
    return frame
