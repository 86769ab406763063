from enum import Enum

APP_NAME = "Salud"

# Calendar grids start on Sunday.
DAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

MOOD_ENTRIES_TABLE = "mood_entries"
FINANCIAL_ENTRIES_TABLE = "financial_entries"

ENTRY_KINDS = {
    "mood": {"table": MOOD_ENTRIES_TABLE, "order": "created_at"},
    "financial": {"table": FINANCIAL_ENTRIES_TABLE, "order": "date"},
}


class Mood(str, Enum):
    # v1
    EXCITED = "excited"
    HAPPY = "happy"
    NEUTRAL = "neutral"
    SAD = "sad"
    STRESSED = "stressed"
    # v2
    AMAZING = "amazing"
    GREAT = "great"
    GOOD = "good"
    OKAY = "okay"
    MEH = "meh"
    BAD = "bad"
    TERRIBLE = "terrible"


# The store holds rows from both taxonomies; neither is migrated to the other.
MOOD_TAXONOMIES = {
    1: [Mood.EXCITED, Mood.HAPPY, Mood.NEUTRAL, Mood.SAD, Mood.STRESSED],
    2: [Mood.AMAZING, Mood.GREAT, Mood.GOOD, Mood.OKAY, Mood.MEH, Mood.BAD, Mood.TERRIBLE],
}
ACTIVE_MOOD_VERSION = 2

MOOD_META = {
    Mood.EXCITED: {"label": "Excited", "emoji": "🤩", "color": "#22C55E", "version": 1},
    Mood.HAPPY: {"label": "Happy", "emoji": "😊", "color": "#FACC15", "version": 1},
    Mood.NEUTRAL: {"label": "Neutral", "emoji": "😐", "color": "#9CA3AF", "version": 1},
    Mood.SAD: {"label": "Sad", "emoji": "😢", "color": "#3B82F6", "version": 1},
    Mood.STRESSED: {"label": "Stressed", "emoji": "😰", "color": "#EF4444", "version": 1},
    Mood.AMAZING: {"label": "Amazing", "emoji": "🤩", "color": "#16A34A", "version": 2},
    Mood.GREAT: {"label": "Great", "emoji": "😄", "color": "#4ADE80", "version": 2},
    Mood.GOOD: {"label": "Good", "emoji": "🙂", "color": "#A3E635", "version": 2},
    Mood.OKAY: {"label": "Okay", "emoji": "😐", "color": "#FACC15", "version": 2},
    Mood.MEH: {"label": "Meh", "emoji": "😕", "color": "#FB923C", "version": 2},
    Mood.BAD: {"label": "Bad", "emoji": "😞", "color": "#F87171", "version": 2},
    Mood.TERRIBLE: {"label": "Terrible", "emoji": "😫", "color": "#DC2626", "version": 2},
}
UNKNOWN_MOOD_META = {"label": "Unknown", "emoji": "❓", "color": "#E5E7EB", "version": None}
EMPTY_CELL_COLOR = "#F3F4F6"

MOODS = [mood.value for mood in Mood]
MOOD_TO_INT = {mood: idx for idx, mood in enumerate(MOODS)}


def mood_meta(value):
    try:
        return MOOD_META[Mood(value)]
    except ValueError:
        return UNKNOWN_MOOD_META


def mood_choices(version=ACTIVE_MOOD_VERSION):
    return [mood.value for mood in MOOD_TAXONOMIES[version]]


EXPENSE_CATEGORIES = [
    {"value": "food", "label": "Food & Dining", "color": "#F97316"},
    {"value": "transport", "label": "Transportation", "color": "#3B82F6"},
    {"value": "shopping", "label": "Shopping", "color": "#EC4899"},
    {"value": "entertainment", "label": "Entertainment", "color": "#A855F7"},
    {"value": "bills", "label": "Bills & Utilities", "color": "#EF4444"},
    {"value": "health", "label": "Healthcare", "color": "#22C55E"},
    {"value": "education", "label": "Education", "color": "#6366F1"},
    {"value": "other", "label": "Other", "color": "#6B7280"},
]

INCOME_CATEGORIES = [
    {"value": "salary", "label": "Salary", "color": "#16A34A"},
    {"value": "freelance", "label": "Freelance", "color": "#2563EB"},
    {"value": "business", "label": "Business", "color": "#9333EA"},
    {"value": "investment", "label": "Investment", "color": "#4F46E5"},
    {"value": "gift", "label": "Gift", "color": "#DB2777"},
    {"value": "other", "label": "Other", "color": "#4B5563"},
]

CATEGORIES_BY_TYPE = {
    "expense": EXPENSE_CATEGORIES,
    "income": INCOME_CATEGORIES,
}
ENTRY_TYPES = ["expense", "income"]


def category_meta(entry_type, value):
    for item in CATEGORIES_BY_TYPE.get(entry_type, []):
        if item["value"] == value:
            return item
    label = str(value or "other").replace("_", " ").title()
    return {"value": value, "label": label, "color": "#6B7280"}
