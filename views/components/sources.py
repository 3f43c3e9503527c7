"""
Grounding source list for recipe search results.
"""

import streamlit as st

from models.entities import RecipeSource


def render_sources(sources: list[RecipeSource]):
    """Render the web pages a search answer was grounded on."""
    if not sources:
        return
    st.markdown("### Sources")
    for source in sources:
        st.markdown(f"- [{source.title}]({source.url})")
