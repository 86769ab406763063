import streamlit as st

THEME_PRESETS = {
    "light": {
        "bg_main": "#EEF0FB",
        "bg_glow": "#E4DAF7",
        "bg_card": "#FFFFFF",
        "border": "#E5E7EB",
        "text_main": "#111827",
        "text_soft": "#4B5563",
        "accent": "#9333EA",
        "positive": "#16A34A",
        "negative": "#DC2626",
        "plot_grid": "#E5E7EB",
        "plot_marker_line": "#FFFFFF",
        "today_border": "#9333EA",
    },
    "dark": {
        "bg_main": "#121017",
        "bg_glow": "#1F1A2A",
        "bg_card": "#1E1A27",
        "border": "#5B4F70",
        "text_main": "#F3EDF9",
        "text_soft": "#C8BBD8",
        "accent": "#8E79AF",
        "positive": "#4ADE80",
        "negative": "#F87171",
        "plot_grid": "#3D3550",
        "plot_marker_line": "#DDD1EA",
        "today_border": "#D9C979",
    },
}


def ensure_theme_state():
    if "ui_theme" not in st.session_state:
        st.session_state["ui_theme"] = "light"
    if st.session_state["ui_theme"] not in THEME_PRESETS:
        st.session_state["ui_theme"] = "light"
    return st.session_state["ui_theme"]


def get_active_theme():
    name = ensure_theme_state()
    return name, THEME_PRESETS[name]


def inject_theme_css() -> dict:
    _, active_theme = get_active_theme()

    theme_vars_css = f"""
:root {{
    --bg-main: {active_theme['bg_main']};
    --bg-glow: {active_theme['bg_glow']};
    --bg-card: {active_theme['bg_card']};
    --border: {active_theme['border']};
    --text-main: {active_theme['text_main']};
    --text-soft: {active_theme['text_soft']};
    --accent: {active_theme['accent']};
    --positive: {active_theme['positive']};
    --negative: {active_theme['negative']};
    --today-border: {active_theme['today_border']};
}}
"""

    st.markdown(
        """
<style>
@import url('https://fonts.googleapis.com/css2?family=Crimson+Text:wght@400;600&family=IBM+Plex+Sans:wght@300;400;500&display=swap');
"""
        + theme_vars_css
        + """

html, body, [class*="css"] {
    font-family: 'IBM Plex Sans', sans-serif;
    color: var(--text-main);
}

.stApp {
    background: radial-gradient(1400px 900px at 20% 0%, var(--bg-glow) 0%, var(--bg-main) 58%);
}

.section-title {
    font-size: 18px;
    font-weight: 600;
    margin: 0 0 8px 0;
}

.small-label {
    color: var(--text-soft);
    font-size: 12px;
    letter-spacing: 0.2px;
}

.stMetric {
    background: var(--bg-card);
    padding: 10px 12px;
    border-radius: 12px;
    border: 1px solid var(--border);
}

.amount-positive { color: var(--positive); font-weight: 600; }
.amount-negative { color: var(--negative); font-weight: 600; }

.calendar-table {
    width: 100%;
    border-collapse: separate;
    border-spacing: 4px;
    table-layout: fixed;
}

.calendar-table th {
    color: var(--text-soft);
    font-size: 11px;
    font-weight: 500;
    text-align: center;
}

.calendar-cell {
    background: var(--bg-card);
    border: 1px solid var(--border);
    border-radius: 8px;
    padding: 4px;
    text-align: center;
    vertical-align: top;
}

.calendar-cell.today { border: 2px solid var(--today-border); }
.calendar-cell.outside, .calendar-cell.future { opacity: 0.45; }

.calendar-day {
    font-size: 11px;
    color: var(--text-soft);
}

.calendar-mood {
    height: 26px;
    border-radius: 6px;
    line-height: 26px;
    font-size: 16px;
}

.trend-row, .share-row {
    display: flex;
    align-items: center;
    gap: 4px;
}

.trend-cell {
    width: 16px;
    height: 16px;
    border-radius: 3px;
    border: 1px solid var(--border);
}

.share-dot { width: 8px; height: 8px; border-radius: 50%; }
.share-track { flex: 1; height: 8px; border-radius: 8px; background: var(--border); }
.share-fill { height: 8px; border-radius: 8px; }
.share-label { font-size: 11px; color: var(--text-soft); }
</style>
""",
        unsafe_allow_html=True,
    )
    return active_theme
