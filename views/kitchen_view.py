"""
Kitchen View - UI for the live cooking assistant.

The status and transcript are rendered inside a fragment that reruns
every second while a session is active; the session itself runs in the
background and is never blocked by the page.
"""

import streamlit as st

from controllers.kitchen_controller import KitchenController
from models.entities import AssistantStatus
from models.presets import get_voice_display_name
from views.components.chat import render_transcript
from views.components.status import render_status

REFRESH_SECONDS = 1


class KitchenView:
    """View for the kitchen assistant."""

    def __init__(self):
        self.controller = KitchenController()

    def render(self):
        st.title("Kitchen Assistant")

        if not self.controller.is_configured():
            st.warning("Set GEMINI_API_KEY to talk to ChefGemini.")

        controls_col, transcript_col = st.columns([2, 3])

        with controls_col:
            self._render_controls()

        with transcript_col:
            self._render_live_panel()
            self._render_suggestions()

    def _render_controls(self):
        status = self.controller.get_status()

        vision = st.toggle(
            "Vision",
            value=self.controller.is_vision_enabled(),
            help="Stream one camera frame per second so ChefGemini can see your kitchen.",
        )
        if vision != self.controller.is_vision_enabled():
            self.controller.toggle_vision()
        if not vision:
            st.caption("Vision Mode is off. ChefGemini can't see your kitchen.")

        voice_ids = list(self.controller.get_available_voices())
        current = self.controller.get_voice_name()
        selected = st.selectbox(
            "Voice",
            options=voice_ids,
            index=voice_ids.index(current) if current in voice_ids else 0,
            format_func=get_voice_display_name,
            disabled=status.is_active,
        )
        if selected != current:
            self.controller.set_voice_name(selected)

        label = "End Cooking" if status.is_active else "Start Session"
        if st.button(
            label,
            type="primary",
            use_container_width=True,
            disabled=status is AssistantStatus.CONNECTING,
        ):
            self.controller.toggle_session()
            st.rerun()

    @st.fragment(run_every=REFRESH_SECONDS)
    def _render_live_panel(self):
        snapshot = self.controller.snapshot()
        render_status(snapshot.status, snapshot.vision_enabled)

        empty_text = (
            "Session inactive"
            if snapshot.status is AssistantStatus.DISCONNECTED
            else 'Try: "Hey, look at my ingredients"'
        )
        render_transcript(snapshot.chat_log, empty_text)

    def _render_suggestions(self):
        st.markdown("**Ask about what I see**")
        for command in self.controller.get_suggested_commands():
            st.markdown(f'"{command.en}"  \n*Hi:* "{command.hi}" · *Ta:* "{command.ta}"')
