"""
Machine Registry

Per-session singleton storage for flags, flag groups and step cursors.
Streamlit reruns the page script on every interaction, so machines built
inline would be recreated each time. Storing them here keeps one instance
per key for the lifetime of the browser session.
"""

import streamlit as st
from typing import TypeVar, Callable

T = TypeVar('T')

MACHINE_KEY_PREFIX = "machine_"


def _session_key(name: str) -> str:
    return f"{MACHINE_KEY_PREFIX}{name}"


def get_machine(name: str, factory: Callable[[], T]) -> T:
    """Get or create a machine instance in session state.

    Args:
        name: Unique key for the machine within the session
        factory: Zero-argument callable that creates the machine

    Returns:
        The machine instance (either cached or newly created)

    Example:
        nav = get_machine('wizard', lambda: steps(WIZARD_PAGES))
    """
    key = _session_key(name)
    if key not in st.session_state:
        st.session_state[key] = factory()
    return st.session_state[key]


def register_machine(name: str, instance: T) -> T:
    """Explicitly register a machine instance, replacing any existing one.

    Args:
        name: Unique key for the machine within the session
        instance: The machine to store

    Returns:
        The registered instance
    """
    st.session_state[_session_key(name)] = instance
    return instance


def clear_machines(*names: str) -> None:
    """Remove machines from session state so they are rebuilt on next access.

    Args:
        *names: Machine keys to clear.
                If no names provided, does nothing.
    """
    for name in names:
        key = _session_key(name)
        if key in st.session_state:
            del st.session_state[key]


def has_machine(name: str) -> bool:
    """Check if a machine is registered in session state."""
    return _session_key(name) in st.session_state
