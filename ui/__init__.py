"""
UI Package

Presentation layer components for Streamlit pages.
Contains widgets bound to flag and step machines plus display formatters.

This package separates UI-specific concerns from the machines themselves,
keeping page files focused on layout and user interaction.
"""

from ui.flag_toggle import render_flag_toggle, render_flag_group
from ui.formatters import flag_group_frame, format_step_position
from ui.step_navigator import render_step_navigator

__all__ = [
    # Flag widgets
    "render_flag_toggle",
    "render_flag_group",
    # Step widgets
    "render_step_navigator",
    # Formatters
    "flag_group_frame",
    "format_step_position",
]
