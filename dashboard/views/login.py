import streamlit as st

from dashboard import auth, navigation
from dashboard.state import session_slices

SLICE = "login"
FORM_KEYS = ["login.email", "login.password", "login.confirm_password", "login.full_name"]


def _toggle_mode():
    session_slices.set_value(SLICE, "is_sign_up", not session_slices.get_value(SLICE, "is_sign_up", False))
    session_slices.pop_value(SLICE, "errors")
    session_slices.request_widget_reset(SLICE)


def _show_error(errors, field):
    message = errors.get(field)
    if message:
        st.caption(f":red[{message}]")


def render_login(ctx):
    session_slices.reset_widgets_if_requested(SLICE, FORM_KEYS)
    is_sign_up = bool(session_slices.get_value(SLICE, "is_sign_up", False))
    errors = session_slices.get_value(SLICE, "errors", {}) or {}
    busy = session_slices.is_busy(SLICE)

    st.markdown("<div class='section-title'>Salud</div>", unsafe_allow_html=True)
    st.subheader("Create your account" if is_sign_up else "Welcome back")

    with st.form("login.form", clear_on_submit=False):
        if is_sign_up:
            st.text_input("Full name", key="login.full_name")
        st.text_input("Email", key="login.email")
        _show_error(errors, "email")
        st.text_input("Password", type="password", key="login.password")
        _show_error(errors, "password")
        if is_sign_up:
            st.text_input("Confirm password", type="password", key="login.confirm_password")
            _show_error(errors, "confirm_password")
        submitted = st.form_submit_button(
            "Sign Up" if is_sign_up else "Sign In",
            disabled=busy,
            type="primary",
        )

    st.button(
        "Already have an account? Sign in" if is_sign_up else "Don't have an account? Sign up",
        key="login.toggle",
        on_click=_toggle_mode,
    )

    if not submitted:
        return

    form, errors = auth.validate_auth_form(
        st.session_state.get("login.email", ""),
        st.session_state.get("login.password", ""),
        st.session_state.get("login.confirm_password") if is_sign_up else None,
        st.session_state.get("login.full_name") if is_sign_up else None,
    )
    if errors:
        session_slices.set_value(SLICE, "errors", errors)
        st.rerun()

    session_slices.set_busy(SLICE, True)
    try:
        with st.spinner("Signing you in..."):
            if is_sign_up:
                failure = auth.sign_up(form.email, form.password, form.full_name)
            else:
                failure = auth.sign_in(form.email, form.password)
    finally:
        session_slices.set_busy(SLICE, False)

    if failure:
        session_slices.set_value(SLICE, "errors", {"email": failure})
        st.rerun()

    session_slices.clear_slice(SLICE)
    navigation.navigate(navigation.DASHBOARD)
