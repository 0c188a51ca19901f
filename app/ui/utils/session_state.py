"""
Session state helpers for Streamlit.
"""

import streamlit as st

from app.ui.utils.browse_state import BrowseState


def get_browse_state() -> BrowseState:
    """Get the browse state for this session, creating it on first use."""
    if "browse_state" not in st.session_state:
        st.session_state["browse_state"] = BrowseState()
    return st.session_state["browse_state"]


def reset_filters() -> None:
    """Drop filters and results; the next run starts from page 1."""
    for key in ("browse_state", "year_select"):
        if key in st.session_state:
            del st.session_state[key]


def init_session_state() -> None:
    """Initialize session state keys if not present."""
    get_browse_state()
