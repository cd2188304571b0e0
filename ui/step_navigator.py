"""
Step Navigator UI Component

First / previous / next / last buttons bound to a Step cursor, with a
position caption. Used for wizards and paged views.
"""

from typing import Any, Callable

import streamlit as st

from domain import Step
from ui.formatters import format_step_position


def render_step_navigator(step: Step, key: str, format_func: Callable[[Any], str] = str) -> Any:
    """Render navigation buttons for a step cursor and return its current item.

    Buttons use ``on_click`` callbacks so the cursor has already moved when
    the page reruns. Without loop mode, buttons that would not move the
    cursor are disabled at the ends of the sequence.

    Args:
        step: Cursor to control
        key: Prefix for widget keys
        format_func: Turns the current item into the caption text
    """
    at_first = step.is_first
    at_last = step.is_last

    first_col, prev_col, next_col, last_col = st.columns(4)
    first_col.button("First", key=f"{key}_first", on_click=step.start,
                     disabled=at_first, use_container_width=True)
    prev_col.button("Previous", key=f"{key}_prev", on_click=step.prev,
                    disabled=at_first and not step.loop, use_container_width=True)
    next_col.button("Next", key=f"{key}_next", on_click=step.next,
                    disabled=at_last and not step.loop, use_container_width=True)
    last_col.button("Last", key=f"{key}_last", on_click=step.end,
                    disabled=at_last, use_container_width=True)

    st.caption(f"{format_step_position(step)} · {format_func(step.current)}")
    return step.current
