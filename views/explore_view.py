"""
Explore View - grounded recipe search.
"""

import streamlit as st

from controllers.explore_controller import ExploreController
from views.components.sources import render_sources


class ExploreView:
    """View for the recipe explorer."""

    def __init__(self):
        self.controller = ExploreController()

    def render(self):
        st.title("Global Recipe Explorer")
        st.markdown("Discover authentic flavors from every corner of the world.")

        if not self.controller.is_configured():
            st.warning("Set GEMINI_API_KEY to enable recipe search.")

        with st.form("recipe_search"):
            query = st.text_input(
                "Search",
                value=self.controller.get_query(),
                placeholder="Search for any dish, ingredient, or cuisine...",
                label_visibility="collapsed",
            )
            submitted = st.form_submit_button("Search", type="primary")

        if submitted:
            self._search(query)

        self._render_suggestions()
        self._render_results()

    def _search(self, query: str):
        with st.spinner("Searching recipes..."):
            success, error = self.controller.search(query)
        if not success:
            st.warning(error)

    def _render_suggestions(self):
        st.markdown("**Try a classic:**")
        suggestions = self.controller.get_suggestions()
        columns = st.columns(4)
        for i, suggestion in enumerate(suggestions):
            with columns[i % 4]:
                label = f"{suggestion.flag} {suggestion.name}"
                if st.button(label, use_container_width=True, key=f"suggest_{i}"):
                    self._search(suggestion.name)

    def _render_results(self):
        result = self.controller.get_result()
        if not result:
            return
        st.markdown("---")
        st.markdown(result.text or "_No recipes found._")
        render_sources(result.sources)
