import streamlit as st


PREFIX = "slice"


def get_slice(slice_name):
    key = f"{PREFIX}.{slice_name}"
    if key not in st.session_state:
        st.session_state[key] = {}
    return st.session_state[key]


def get_value(slice_name, name, default=None):
    return get_slice(slice_name).get(name, default)


def set_value(slice_name, name, value):
    get_slice(slice_name)[name] = value


def pop_value(slice_name, name, default=None):
    return get_slice(slice_name).pop(name, default)


def clear_slice(slice_name):
    key = f"{PREFIX}.{slice_name}"
    if key in st.session_state:
        del st.session_state[key]


def is_busy(slice_name):
    return bool(get_value(slice_name, "submitting", False))


def set_busy(slice_name, busy):
    set_value(slice_name, "submitting", bool(busy))


def flash(slice_name, kind, message):
    """Queue a message shown once on the next run (``kind`` is success/error)."""
    set_value(slice_name, "flash", (kind, message))


def render_flash(slice_name):
    item = pop_value(slice_name, "flash")
    if not item:
        return
    kind, message = item
    if kind == "error":
        st.error(message)
    else:
        st.success(message)


def reset_widgets_if_requested(slice_name, widget_keys):
    """Drop widget values before the widgets are created, so defaults apply again."""
    if not pop_value(slice_name, "reset_pending", False):
        return
    for key in widget_keys:
        st.session_state.pop(key, None)


def request_widget_reset(slice_name):
    set_value(slice_name, "reset_pending", True)
