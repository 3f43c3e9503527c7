"""
Kitchen assistant status display.
"""

import streamlit as st

from models.entities import AssistantStatus

STATUS_ICONS = {
    AssistantStatus.DISCONNECTED: "🔇",
    AssistantStatus.CONNECTING: "⏳",
    AssistantStatus.LISTENING: "🎤",
    AssistantStatus.THINKING: "🤔",
    AssistantStatus.SPEAKING: "🔊",
}


def get_status_label(status: AssistantStatus) -> str:
    """Headline shown above the session controls."""
    return {
        AssistantStatus.DISCONNECTED: "ChefGemini Assistant",
        AssistantStatus.CONNECTING: "Linking...",
        AssistantStatus.THINKING: "Analyzing Scene...",
        AssistantStatus.SPEAKING: "ChefGemini explaining...",
    }.get(status, "Listening...")


def render_status(status: AssistantStatus, vision_enabled: bool):
    """Render the status headline and badges."""
    st.markdown(f"## {STATUS_ICONS[status]} {get_status_label(status)}")
    badges = [f"**Status:** `{status.value}`"]
    if vision_enabled:
        badges.append("🔴 Vision Active")
    st.caption(" · ".join(badges))
