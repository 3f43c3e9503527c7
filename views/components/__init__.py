"""
Reusable UI components.
"""

from views.components.chat import render_transcript
from views.components.status import render_status, get_status_label
from views.components.sources import render_sources

__all__ = [
    "render_transcript",
    "render_status",
    "get_status_label",
    "render_sources",
]
