"""Date bucketing for the mood calendars.

Entries are matched to calendar cells by a timezone-normalised date key
rather than by comparing formatted strings, so an entry stored at 23:30
UTC lands on the user's local day.
"""
from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

HEATMAP_WEEKS = 12
ROLLING_DAYS = 30


def parse_timestamp(value):
    """Parse an ISO-8601 timestamp into an aware datetime (naive values are UTC)."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, datetime.min.time())
    else:
        raw = str(value).strip()
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_day(value):
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        return None


def entry_day(entry, field="created_at", tz=None):
    """Return the calendar day an entry belongs to, in ``tz`` (UTC when omitted)."""
    raw = entry.get(field)
    if field == "date":
        return parse_day(raw)
    stamp = parse_timestamp(raw)
    if stamp is None:
        return None
    return stamp.astimezone(tz or timezone.utc).date()


def index_entries_by_day(entries, field="created_at", tz=None):
    """Map each day to its first entry in list order."""
    index = {}
    for entry in entries or []:
        day = entry_day(entry, field=field, tz=tz)
        if day is None or day in index:
            continue
        index[day] = entry
    return index


def sunday_on_or_before(day):
    return day - timedelta(days=(day.weekday() + 1) % 7)


def week_dates(today):
    start = sunday_on_or_before(today)
    return [start + timedelta(days=offset) for offset in range(7)]


def month_dates(today):
    start = sunday_on_or_before(today.replace(day=1))
    return [start + timedelta(days=offset) for offset in range(42)]


def rolling_dates(today, days=ROLLING_DAYS):
    return [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]


def period_dates(period, today):
    if period == "week":
        return week_dates(today)
    if period == "month":
        return month_dates(today)
    if period == "all":
        return rolling_dates(today)
    raise ValueError(f"Unknown calendar period: {period}")


def heatmap_weeks(today, weeks=HEATMAP_WEEKS):
    """Return ``weeks`` columns of 7 consecutive dates, the last column ending today."""
    days = rolling_dates(today, days=weeks * 7)
    return [days[col * 7:(col + 1) * 7] for col in range(weeks)]


def build_calendar_cells(dates, entries, today, tz=None):
    index = index_entries_by_day(entries, field="created_at", tz=tz)
    cells = []
    for day in dates:
        cells.append(
            {
                "date": day,
                "entry": index.get(day),
                "is_today": day == today,
                "in_month": day.month == today.month and day.year == today.year,
                "is_future": day > today,
            }
        )
    return cells


def build_period_calendar(period, entries, today, tz=None):
    return build_calendar_cells(period_dates(period, today), entries, today, tz=tz)


def build_heatmap(entries, today, tz=None, weeks=HEATMAP_WEEKS):
    return [build_calendar_cells(column, entries, today, tz=tz) for column in heatmap_weeks(today, weeks)]
