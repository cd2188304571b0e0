"""
UI Formatting Utilities

Helper functions for consistent display of machine state across pages.

Design Principles:
- Pure functions with no side effects
- Read machines, never mutate them
- Return simple types (str, DataFrame) for flexibility
"""

import pandas as pd

from domain import FlagGroup, Step


def flag_group_frame(group: FlagGroup, labels: dict[str, str] | None = None) -> pd.DataFrame:
    """
    Build a summary table of a flag group.

    Args:
        group: FlagGroup to summarize
        labels: Optional display names keyed by flag name

    Returns:
        DataFrame with one row per flag and columns ``name``, ``enabled``
    """
    labels = labels or {}
    rows = [
        {"name": labels.get(name, name), "enabled": item.current}
        for name, item in group.items()
    ]
    return pd.DataFrame(rows, columns=["name", "enabled"])


def format_step_position(step: Step) -> str:
    """
    Format a cursor position as a 1-based label.

    Returns:
        e.g. "Step 2 of 3"
    """
    return f"Step {step.index + 1} of {len(step)}"
