"""
Image Lab View - prompt-driven photo editing.
"""

import streamlit as st

from controllers.lab_controller import ImageLabController


class ImageLabView:
    """View for the AI image lab."""

    def __init__(self):
        self.controller = ImageLabController()

    def render(self):
        st.title("AI Image Lab")
        st.markdown("Use text prompts to remix and style your food photography.")

        upload = st.file_uploader(
            "Source photo",
            type=["jpg", "jpeg", "png", "webp"],
            key="lab_upload",
        )
        # Only replace the source when a new file arrives
        if upload is not None and st.session_state.get("lab_upload_id") != upload.file_id:
            st.session_state.lab_upload_id = upload.file_id
            self.controller.upload(upload.getvalue(), upload.type or "image/jpeg")

        source_col, edited_col = st.columns(2)
        with source_col:
            st.markdown("**Original**")
            source = self.controller.get_source_image()
            if source:
                st.image(source, use_container_width=True)
            else:
                st.caption("Upload a photo to start.")
        with edited_col:
            st.markdown("**Edited**")
            edited = self.controller.get_edited_image()
            if edited:
                st.image(edited, use_container_width=True)
            else:
                st.caption("Waiting for prompt")

        self._render_prompt()

    def _render_prompt(self):
        st.markdown("---")
        st.markdown("**Generation Prompt**")

        presets = self.controller.get_presets()
        columns = st.columns(3)
        for i, preset in enumerate(presets):
            with columns[i % 3]:
                if st.button(preset, use_container_width=True, key=f"preset_{i}"):
                    self.controller.apply_preset(preset)
                    st.session_state.lab_prompt = preset

        prompt = st.text_area(
            "Prompt",
            key="lab_prompt",
            placeholder="Describe how to change the photo...",
            label_visibility="collapsed",
        )
        self.controller.set_prompt(prompt)

        if st.button("Generate", type="primary", disabled=not self.controller.can_edit()):
            with st.spinner("Editing image..."):
                success, error = self.controller.edit()
            if success:
                st.rerun()
            st.warning(error)
