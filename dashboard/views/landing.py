import streamlit as st

from dashboard import navigation
from dashboard.constants import APP_NAME

FEATURES = [
    ("😊", "Mood check-ins", "Capture how you're really feeling with a quick daily mood pick."),
    ("📈", "Productivity score", "Rate your day from 1 to 10 and note what you worked on."),
    ("📅", "Calendar view", "See your mood journey across weeks and months at a glance."),
    ("📝", "Notes", "Keep a short journal of tasks and thoughts next to each check-in."),
    ("💰", "Finances", "Log income and expenses and see where your money goes."),
]


def render_landing(ctx):
    st.markdown(f"<div class='section-title'>{APP_NAME}</div>", unsafe_allow_html=True)
    st.title("Track your mood & productivity")
    st.markdown(
        "Build better habits and understand your patterns with a simple mood, productivity "
        "and money tracker. Visualize your journey with an intuitive calendar view."
    )
    if st.button("Start Tracking Today", key="landing.get_started", type="primary"):
        navigation.navigate(navigation.LOGIN)

    st.markdown("<div class='small-label' style='margin-top:16px;'>Everything you need</div>", unsafe_allow_html=True)
    cols = st.columns(len(FEATURES))
    for col, (emoji, title, blurb) in zip(cols, FEATURES):
        with col:
            st.markdown(f"### {emoji}")
            st.markdown(f"**{title}**")
            st.caption(blurb)
