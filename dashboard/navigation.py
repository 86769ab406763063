import streamlit as st

LANDING = "/"
LOGIN = "/login"
DASHBOARD = "/dashboard"
FINANCIAL = "/dashboard/financial"

ROUTES = (LANDING, LOGIN, DASHBOARD, FINANCIAL)
PROTECTED_ROUTES = {DASHBOARD, FINANCIAL}


def resolve_route(requested, authenticated):
    """Session guard: where a visitor actually lands for a requested route."""
    route = requested if requested in ROUTES else LANDING
    if route in PROTECTED_ROUTES and not authenticated:
        return LOGIN
    if route == LANDING and authenticated:
        return DASHBOARD
    return route


def current_route():
    return st.query_params.get("page", LANDING)


def navigate(route):
    st.query_params["page"] = route
    st.rerun()
