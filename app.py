"""
Machines Demo Page

Shows each session machine wired to its widget:
- a standalone flag and a disabled flag
- a flag group with bulk on/off/toggle buttons
- a bounded and a looping step cursor

Run with: streamlit run app.py
"""

import streamlit as st

from logging_config import setup_logging
from settings_service import SettingsService
from state import get_flag, get_flag_group, get_steps, reset_machine
from ui import render_flag_toggle, render_flag_group, render_step_navigator, flag_group_frame

logger = setup_logging(__name__, log_file="app.log", level=SettingsService().log_level)

WIZARD_PAGES = ["Details", "Review", "Confirm"]
CAROUSEL = ["Spring", "Summer", "Autumn", "Winter"]
FEATURES = {"search": True, "export": False, "notifications": True}
FEATURE_LABELS = {"search": "Search", "export": "CSV export", "notifications": "Notifications"}

_DEMO_KEYS = ("show_details", "locked", "features", "wizard", "carousel")


def render_flags():
    st.subheader("Flags")
    show_details = get_flag("show_details")
    render_flag_toggle(show_details, "Show details", key="show_details_toggle")
    if show_details:
        st.info("Details are visible.")

    locked = get_flag("locked", init=True, disabled=True)
    render_flag_toggle(locked, "Locked (disabled flag)", key="locked_toggle")


def render_features():
    st.subheader("Flag group")
    features = get_flag_group("features", FEATURES)
    render_flag_group(features, key="features", labels=FEATURE_LABELS)
    st.dataframe(flag_group_frame(features, FEATURE_LABELS), hide_index=True)


def render_steps():
    st.subheader("Steps")
    wizard = get_steps("wizard", WIZARD_PAGES)
    page = render_step_navigator(wizard, key="wizard")
    st.write(f"Current page: **{page}**")

    carousel = get_steps("carousel", CAROUSEL, loop=True)
    render_step_navigator(carousel, key="carousel")


def main():
    st.title("Machines Demo")
    with st.sidebar:
        if st.button("Reset demo", use_container_width=True):
            reset_machine(*_DEMO_KEYS)
            logger.info("Demo machines reset")
            st.rerun()

    render_flags()
    st.divider()
    render_features()
    st.divider()
    render_steps()


if __name__ == "__main__":
    main()
