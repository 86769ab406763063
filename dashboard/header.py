import html

import streamlit as st

from dashboard import auth, navigation
from dashboard.constants import APP_NAME


def render_global_header(ctx, title, back_route=None):
    left, right = st.columns([3, 2])
    with left:
        if back_route and st.button("← Back to Dashboard", key="header.back"):
            navigation.navigate(back_route)
        st.markdown(f"<div class='section-title'>{html.escape(APP_NAME)} - {html.escape(title)}</div>", unsafe_allow_html=True)
    with right:
        st.markdown(
            f"<div class='small-label' style='text-align:right;'>Welcome, {html.escape(ctx.display_name)}</div>",
            unsafe_allow_html=True,
        )
        if st.button("Sign Out", key="header.sign_out"):
            auth.sign_out(ctx)
            navigation.navigate(navigation.LANDING)
