"""
Chat UI components.
"""

import streamlit as st

from models.entities import ChatMessage

# Transcript roles map onto Streamlit chat avatars
ROLE_MAP = {"user": "user", "ai": "assistant"}


def render_transcript(messages: list[ChatMessage], empty_text: str, height: int = 450):
    """
    Render the live session transcript in a scrollable container.

    Args:
        messages: Transcript lines, oldest first
        empty_text: Placeholder shown when there is nothing yet
        height: Container height in pixels
    """
    chat_container = st.container(height=height)
    with chat_container:
        if not messages:
            st.caption(f"*{empty_text}*")
            return
        for msg in messages:
            with st.chat_message(ROLE_MAP[msg.type]):
                st.write(msg.text)
