"""
Movie display card component.
"""

import streamlit as st

from app.ui.utils.browse_state import PLACEHOLDER_POSTER_URL


def render_movie_card(title: str, poster_image: str, release_year: str) -> None:
    """
    Render a poster card with title and year.

    Args:
        title: Movie title
        poster_image: Poster URL (placeholder when empty)
        release_year: Release year as display text
    """
    with st.container():
        st.image(poster_image or PLACEHOLDER_POSTER_URL, use_container_width=True)
        col1, col2 = st.columns([3, 1])
        with col1:
            st.markdown(f"**{title}**")
        with col2:
            st.caption(release_year)
