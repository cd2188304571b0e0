"""
Domain Models Package

This package contains the state machines used by UI components.
They are plain Python objects with no Streamlit dependency, so they
can be stored in session state and tested in isolation.

Key Components:
- Enums: FlagOp for bulk flag operations
- Options: FlagOptions, StepOptions construction-time configuration
- Machines: Flag, FlagGroup, Step and their factories
"""

from domain.enums import FlagOp
from domain.flag import Flag, FlagGroup, RESERVED_GROUP_KEYS, flag, flag_group
from domain.observable import Observable
from domain.options import FlagOptions, StepOptions
from domain.steps import Step, steps

__all__ = [
    # Enums
    "FlagOp",
    # Options
    "FlagOptions",
    "StepOptions",
    # Machines
    "Observable",
    "Flag",
    "FlagGroup",
    "RESERVED_GROUP_KEYS",
    "Step",
    # Factories
    "flag",
    "flag_group",
    "steps",
]
