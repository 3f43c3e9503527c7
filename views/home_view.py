"""
Home View - Landing page for ChefGemini.

Displays navigation options and feature descriptions.
"""

import streamlit as st


class HomeView:
    """View for the home/landing page."""

    def render(self) -> None:
        """Render the home page."""
        st.title("ChefGemini")
        st.markdown("Your AI-powered kitchen companion")

        st.markdown("---")

        col1, col2 = st.columns(2)

        with col1:
            self._render_card(
                "Explore Recipes",
                """
                Discover authentic flavors from every corner of the world.

                - Search any dish, ingredient or cuisine
                - Answers grounded in real recipe sites
                """,
                "Explore →",
                "pages/1_🔎_Explore.py",
            )
            self._render_card(
                "Visual Chef",
                """
                Upload a photo of ingredients or a finished dish.

                - Identify the dish
                - Likely ingredients and calories
                - A quick cooking tip
                """,
                "Analyze a Photo →",
                "pages/3_📷_Analyzer.py",
            )

        with col2:
            self._render_card(
                "Kitchen Assistant",
                """
                Talk to ChefGemini while you cook.

                - Hands-free voice conversation
                - Optional camera so it can see your pan
                - English, Hindi and Tamil
                """,
                "Start Cooking →",
                "pages/2_🎙️_Kitchen.py",
            )
            self._render_card(
                "AI Image Lab",
                """
                Remix and style your food photography with text prompts.
                """,
                "Open the Lab →",
                "pages/4_🪄_AI_Lab.py",
            )

        st.markdown("---")
        st.markdown("*Use the sidebar to navigate between pages.*")

    def _render_card(self, title: str, body: str, button: str, page: str) -> None:
        """Render one feature card with a navigation button."""
        st.markdown(f"### {title}")
        st.markdown(body)
        if st.button(button, type="primary", use_container_width=True, key=f"home_{page}"):
            st.switch_page(page)
