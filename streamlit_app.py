"""
ChefGemini - Home Page

A food and cooking assistant powered by Gemini: recipe search,
a live voice/vision kitchen assistant, photo analysis and photo editing.
"""

import streamlit as st

# Page configuration (must be first Streamlit command)
st.set_page_config(
    page_title="ChefGemini",
    page_icon="🍳",
    layout="wide"
)

from config import get_settings, setup_logging
from views.home_view import HomeView

setup_logging(get_settings().log_level)

HomeView().render()
