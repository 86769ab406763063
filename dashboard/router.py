import streamlit as st

from dashboard import navigation
from dashboard.data import repositories
from dashboard.header import render_global_header
from dashboard.tabs.financial_tab import render_financial_tab
from dashboard.tabs.mood_tab import render_mood_tab
from dashboard.tabs.overview_tab import render_overview_tab
from dashboard.views.landing import render_landing
from dashboard.views.login import render_login


TAB_OPTIONS = [
    "Overview",
    "Mood & Productivity",
]


def render_router(ctx):
    requested = navigation.current_route()
    route = navigation.resolve_route(requested, ctx.is_authenticated)
    if route != requested:
        navigation.navigate(route)

    if route == navigation.LANDING:
        return render_landing(ctx)
    if route == navigation.LOGIN:
        return render_login(ctx)
    if route == navigation.FINANCIAL:
        return _render_financial(ctx)
    return _render_dashboard(ctx)


def _render_dashboard(ctx):
    with st.spinner("Loading Salud Dashboard..."):
        ctx.payload["mood_entries"] = repositories.load_entries(ctx, "mood")
        ctx.payload["financial_entries"] = repositories.load_entries(ctx, "financial")
    render_global_header(ctx, "Dashboard")

    active = st.segmented_control(
        "Workspace",
        TAB_OPTIONS,
        key="ui.active_tab",
        default=TAB_OPTIONS[0],
    ) or TAB_OPTIONS[0]
    if active == "Mood & Productivity":
        return render_mood_tab(ctx)
    return render_overview_tab(ctx)


def _render_financial(ctx):
    with st.spinner("Loading transactions..."):
        ctx.payload["financial_entries"] = repositories.load_entries(ctx, "financial")
    render_global_header(ctx, "Financial Tracker", back_route=navigation.DASHBOARD)
    return render_financial_tab(ctx)
