"""
Flag Toggle UI Components

Streamlit toggles bound to Flag and FlagGroup machines. The machine is the
source of truth: widget state is re-seeded from it on every run and widget
changes are pushed back through the flag's own mutators.
"""

import streamlit as st

from domain import Flag, FlagGroup, FlagOp
from logging_config import setup_logging

logger = setup_logging(__name__, log_file="flag_toggle.log")


def _sync_flag_from_widget(item: Flag, widget_key: str) -> None:
    """on_change callback: push the toggle's new value into the flag."""
    if st.session_state[widget_key]:
        item.on()
    else:
        item.off()


def render_flag_toggle(item: Flag, label: str, key: str) -> bool:
    """Render an ``st.toggle`` bound to a flag.

    Disabled flags render as a disabled toggle.

    Args:
        item: Flag to display and control
        label: Toggle label
        key: Widget key, must be unique on the page

    Returns:
        The flag's current value
    """
    # seed before the widget is created so changes made elsewhere show up
    st.session_state[key] = item.current
    st.toggle(
        label,
        key=key,
        on_change=_sync_flag_from_widget,
        args=(item, key),
        disabled=item.disabled,
    )
    return item.current


def render_flag_group(group: FlagGroup, key: str, labels: dict[str, str] | None = None) -> dict[str, bool]:
    """Render one toggle per flag followed by bulk-operation buttons.

    Args:
        group: FlagGroup to display and control
        key: Prefix for widget keys
        labels: Optional display labels keyed by flag name

    Returns:
        Snapshot of the group's values
    """
    labels = labels or {}
    for name, item in group.items():
        render_flag_toggle(item, labels.get(name, name), key=f"{key}_{name}")

    ops = FlagOp.display_order()
    for col, op in zip(st.columns(len(ops)), ops):
        col.button(
            op.display_name,
            key=f"{key}_all_{op.value}",
            on_click=group.all,
            args=(op,),
            use_container_width=True,
        )
    return group.snapshot()
