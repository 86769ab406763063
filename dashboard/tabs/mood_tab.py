import logging

import streamlit as st

from dashboard import calendar_grid
from dashboard.constants import mood_choices, mood_meta
from dashboard.data import repositories
from dashboard.data.loaders import mood_frame, productivity_by_day
from dashboard.state import session_slices
from dashboard.visualizations import (
    build_mood_calendar_html,
    dot_chart,
    heatmap_matrix,
    mood_heatmap,
)

logger = logging.getLogger(__name__)

SLICE = "mood"
PERIOD_LABELS = {"week": "This week", "month": "This month", "all": "Last 30 days"}


def _load_day_state(ctx, today_entry):
    loaded_key = f"{ctx.user_id}:{ctx.today().isoformat()}:{(today_entry or {}).get('id', 'new')}"
    if st.session_state.get("mood.loaded_key") == loaded_key:
        return
    choices = mood_choices()
    entry = today_entry or {}
    mood = entry.get("mood")
    st.session_state["mood.value"] = mood if mood in choices else choices[len(choices) // 2]
    st.session_state["mood.productivity"] = int(entry.get("productivity") or 5)
    st.session_state["mood.task"] = entry.get("task") or ""
    st.session_state["mood.notes"] = entry.get("notes") or ""
    st.session_state["mood.loaded_key"] = loaded_key


def _format_mood(value):
    meta = mood_meta(value)
    return f"{meta['emoji']} {meta['label']}"


def _render_checkin_form(ctx, entries):
    today_entry = repositories.find_entry_for_day(entries, ctx.today(), tz=ctx.timezone)
    _load_day_state(ctx, today_entry)
    session_slices.render_flash(SLICE)

    st.markdown("<div class='section-title'>Daily Check-in</div>", unsafe_allow_html=True)
    if today_entry:
        st.caption("You already checked in today. Saving again updates today's entry.")

    with st.form("mood.checkin", clear_on_submit=False):
        st.radio("How are you feeling?", mood_choices(), key="mood.value", format_func=_format_mood, horizontal=True)
        st.slider("Productivity", min_value=1, max_value=10, key="mood.productivity")
        st.text_input("What did you work on today?", key="mood.task")
        st.text_area("Notes (optional)", key="mood.notes", height=100)
        submitted = st.form_submit_button(
            "Update Check-in" if today_entry else "Save Check-in",
            disabled=session_slices.is_busy(SLICE),
            type="primary",
        )

    if not submitted:
        return
    task = str(st.session_state.get("mood.task") or "").strip()
    if not task:
        st.error("Tell us what you worked on today.")
        return

    payload = {
        "mood": st.session_state.get("mood.value"),
        "productivity": int(st.session_state.get("mood.productivity") or 5),
        "task": task,
        "notes": st.session_state.get("mood.notes"),
    }
    session_slices.set_busy(SLICE, True)
    try:
        with st.spinner("Saving..."):
            _, created = repositories.save_mood_checkin(ctx, entries, payload)
    except repositories.EntryWriteError:
        st.error("Could not save your check-in. Please try again.")
        return
    finally:
        session_slices.set_busy(SLICE, False)

    session_slices.flash(SLICE, "success", "Check-in saved!" if created else "Check-in updated!")
    st.session_state.pop("mood.loaded_key", None)
    st.rerun()


def _render_calendar(ctx, entries):
    st.markdown("<div class='section-title'>Mood Calendar</div>", unsafe_allow_html=True)
    period = st.segmented_control(
        "Period",
        list(PERIOD_LABELS),
        format_func=PERIOD_LABELS.get,
        key="mood.calendar.period",
        default="week",
    ) or "week"
    cells = calendar_grid.build_period_calendar(period, entries, ctx.today(), tz=ctx.timezone)
    st.markdown(build_mood_calendar_html(cells, period), unsafe_allow_html=True)

    columns = calendar_grid.build_heatmap(entries, ctx.today(), tz=ctx.timezone)
    z, hover_text, x_labels, y_labels = heatmap_matrix(columns)
    st.plotly_chart(
        mood_heatmap(z, hover_text, x_labels=x_labels, y_labels=y_labels, title="Last 12 weeks"),
        use_container_width=True,
    )


def _render_history(ctx, entries):
    st.markdown("<div class='section-title'>Productivity</div>", unsafe_allow_html=True)
    daily = productivity_by_day(entries, tz=ctx.timezone).tail(30)
    if daily.empty:
        st.caption("No mood entries yet.")
        return
    st.plotly_chart(
        dot_chart(daily["productivity"], daily["date_str"], "Productivity (1-10)", "#9333EA"),
        use_container_width=True,
    )
    st.dataframe(mood_frame(entries, tz=ctx.timezone), hide_index=True, use_container_width=True)


def render_mood_tab(ctx):
    entries = ctx.get("mood_entries", [])
    left, right = st.columns([2, 3])
    with left:
        _render_checkin_form(ctx, entries)
    with right:
        _render_calendar(ctx, entries)
    _render_history(ctx, entries)
