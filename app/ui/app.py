"""
Streamlit browse page for the movie catalog.

Run: streamlit run app/ui/app.py --server.port 8501
"""

import sys
from pathlib import Path

import streamlit as st

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from app.ui.components.movie_card import render_movie_card
from app.ui.utils.api_client import fetch_movies, health_check
from app.ui.utils.browse_state import GENRE_OPTIONS, year_options
from app.ui.utils.session_state import get_browse_state, init_session_state, reset_filters
from app.utils.logging_config import configure_ui_logging

GRID_COLUMNS = 6

st.set_page_config(
    page_title="Movie Browser",
    page_icon="🎬",
    layout="wide",
)

configure_ui_logging()
init_session_state()
state = get_browse_state()


# Check API health
with st.sidebar:
    try:
        health = health_check()
        if health.get("api_key_configured"):
            st.success("API connected")
        else:
            st.warning("API is up but MOVIE_API_KEY is not set")
    except Exception as e:
        st.error(f"API not available: {e}")
        st.info("Start the API with: uvicorn app.api.main:app --host 0.0.0.0 --port 8000")


def _on_year_change() -> None:
    state.set_year(st.session_state["year_select"])


# Filters
col_title, col_year, col_reset = st.columns([4, 1, 1])
with col_title:
    st.caption("Online streaming")
with col_year:
    options = [None] + year_options()
    st.selectbox(
        "Year",
        options=options,
        index=options.index(state.year) if state.year in options else 0,
        format_func=lambda y: "Select Year" if y is None else str(y),
        key="year_select",
        on_change=_on_year_change,
    )
with col_reset:
    if st.button("Reset filters", use_container_width=True):
        reset_filters()
        st.rerun()

genre_cols = st.columns(len(GENRE_OPTIONS))
for col, genre in zip(genre_cols, GENRE_OPTIONS):
    with col:
        st.button(
            genre,
            key=f"genre_{genre}",
            on_click=state.set_genre,
            args=(genre,),
            type="primary" if genre == state.genre else "secondary",
            use_container_width=True,
        )

if state.needs_fetch():
    with st.spinner("Loading movies..."):
        state.refresh(fetch_movies)

st.title(state.heading())

if state.message:
    st.error(state.message)

cards = state.cards()
if cards:
    for start in range(0, len(cards), GRID_COLUMNS):
        row = st.columns(GRID_COLUMNS)
        for col, card in zip(row, cards[start:start + GRID_COLUMNS]):
            with col:
                render_movie_card(**card)
elif not state.loading:
    st.info(
        "No movies found. This could be due to:\n"
        "- API rate limits (try again in a few minutes)\n"
        "- Invalid API key configuration\n"
        "- Network connectivity issues\n"
        "- No results for current filters"
    )

st.divider()
_, col_prev, col_page, col_next = st.columns([4, 1, 1, 1])
with col_prev:
    st.button("Previous", on_click=state.previous_page, use_container_width=True)
with col_page:
    st.caption(f"Page {state.page}")
with col_next:
    st.button("Next", on_click=state.next_page, use_container_width=True)
