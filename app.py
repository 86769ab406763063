import streamlit as st

from dashboard import auth
from dashboard.data import api_client
from dashboard.logging_config import configure_logging
from dashboard.router import render_router
from dashboard.theme import inject_theme_css


st.set_page_config(page_title="Salud", page_icon="🌿", layout="wide")

auth.load_local_env()
configure_logging(auth.get_secret(("app", "DASHBOARD_LOG_LEVEL")))
api_client.configure(auth.get_secret)
inject_theme_css()

if not api_client.is_enabled():
    st.error("API_BASE_URL is not configured.")
    st.code(
        "[app]\n"
        "API_BASE_URL = \"http://localhost:8000\"\n"
        "APP_TIMEZONE = \"America/Sao_Paulo\"",
        language="toml",
    )
    st.stop()

# --- SESSION GUARD + ROUTER ---
context = auth.build_context()
render_router(context)
