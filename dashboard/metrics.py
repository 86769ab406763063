from __future__ import annotations

from datetime import timedelta, timezone

from dashboard.calendar_grid import entry_day, parse_timestamp
from dashboard.constants import EMPTY_CELL_COLOR, category_meta, mood_meta

STREAK_WINDOW_DAYS = 30


def _amount(entry):
    try:
        return float(entry.get("amount") or 0)
    except (TypeError, ValueError):
        return 0.0


def entries_of_type(entries, entry_type):
    return [entry for entry in entries or [] if entry.get("type") == entry_type]


def total_by_type(entries, entry_type):
    return sum(_amount(entry) for entry in entries_of_type(entries, entry_type))


def total_income(entries):
    return total_by_type(entries, "income")


def total_expenses(entries):
    return total_by_type(entries, "expense")


def net_balance(entries):
    return total_income(entries) - total_expenses(entries)


def average_amount(entries, entry_type):
    matching = entries_of_type(entries, entry_type)
    if not matching:
        return 0.0
    return sum(_amount(entry) for entry in matching) / len(matching)


def average_productivity(entries):
    values = []
    for entry in entries or []:
        try:
            values.append(int(entry.get("productivity")))
        except (TypeError, ValueError):
            continue
    if not values:
        return 0.0
    return round(sum(values) / len(values), 1)


def category_breakdown(entries, entry_type="expense"):
    totals = {}
    counts = {}
    for entry in entries_of_type(entries, entry_type):
        key = entry.get("category") or "other"
        totals[key] = totals.get(key, 0.0) + _amount(entry)
        counts[key] = counts.get(key, 0) + 1
    grand_total = sum(totals.values())
    rows = []
    for key, total in totals.items():
        if total <= 0:
            continue
        meta = category_meta(entry_type, key)
        rows.append(
            {
                "value": key,
                "label": meta["label"],
                "color": meta["color"],
                "total": total,
                "count": counts[key],
                "percentage": (total / grand_total) * 100 if grand_total > 0 else 0,
            }
        )
    rows.sort(key=lambda row: row["total"], reverse=True)
    return rows


def count_this_month(entries, today, field="date", tz=None):
    count = 0
    for entry in entries or []:
        day = entry_day(entry, field=field, tz=tz)
        if day is not None and day.month == today.month and day.year == today.year:
            count += 1
    return count


def count_since(entries, now, days=7, field="created_at"):
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    cutoff = now - timedelta(days=days)
    count = 0
    for entry in entries or []:
        stamp = parse_timestamp(entry.get(field))
        if stamp is not None and stamp >= cutoff:
            count += 1
    return count


def current_streak(entries, today, tz=None, window=STREAK_WINDOW_DAYS):
    days_with_entries = set()
    for entry in entries or []:
        day = entry_day(entry, field="created_at", tz=tz)
        if day is not None:
            days_with_entries.add(day)
    streak = 0
    for offset in range(window):
        if today - timedelta(days=offset) not in days_with_entries:
            break
        streak += 1
    return streak


def recent_mood_trend(entries, size=7):
    trend = [mood_meta(entry.get("mood"))["color"] for entry in (entries or [])[:size]]
    trend.extend([EMPTY_CELL_COLOR] * max(0, size - len(trend)))
    return trend


def income_expense_shares(entries):
    income = total_income(entries)
    expenses = total_expenses(entries)
    denominator = max(income + expenses, 1)
    income_share = (income / denominator) * 100 if income > 0 else 0
    expense_share = (expenses / denominator) * 100 if expenses > 0 else 0
    return income_share, expense_share


def summarize_financial(entries, today):
    income = total_income(entries)
    expenses = total_expenses(entries)
    return {
        "total_income": income,
        "total_expenses": expenses,
        "net_balance": income - expenses,
        "this_month": count_this_month(entries, today),
        "avg_expense": average_amount(entries, "expense"),
        "avg_income": average_amount(entries, "income"),
    }


def summarize_mood(entries, now, tz=None):
    today = now.astimezone(tz).date() if (tz is not None and now.tzinfo is not None) else now.date()
    return {
        "total_entries": len(entries or []),
        "avg_productivity": average_productivity(entries),
        "this_week": count_since(entries, now, days=7),
        "current_streak": current_streak(entries, today, tz=tz),
    }
