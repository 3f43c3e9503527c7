"""
Analyzer View - "Visual Chef" food photo analysis.
"""

import streamlit as st

from controllers.analyzer_controller import AnalyzerController


class AnalyzerView:
    """View for the image analyzer."""

    def __init__(self):
        self.controller = AnalyzerController()

    def render(self):
        st.title("Visual Chef")
        st.markdown("Upload a photo of ingredients or a finished dish for AI analysis.")

        image_col, result_col = st.columns(2)

        with image_col:
            upload = st.file_uploader(
                "Food photo",
                type=["jpg", "jpeg", "png", "webp"],
                key="analyzer_upload",
            )
            if upload is not None and st.button("Analyze", type="primary", use_container_width=True):
                with st.spinner("Analyzing..."):
                    success, error = self.controller.analyze(upload.getvalue(), upload.type or "image/jpeg")
                if not success:
                    st.warning(error)

            image = self.controller.get_image()
            if image:
                st.image(image, use_container_width=True)

        with result_col:
            self._render_result()

    def _render_result(self):
        result = self.controller.get_result()
        if not result:
            st.info("Your analysis will appear here.")
            return

        st.markdown(f"## {result.dish_name}")
        st.metric("Estimated calories", result.calories)
        st.markdown("**Possible ingredients**")
        for ingredient in result.ingredients:
            st.markdown(f"- {ingredient}")
        st.success(f"**Chef's tip:** {result.suggested_action}")
