"""
State Management Module

Session-scoped storage for the UI state machines.
This module belongs in the presentation layer and provides:
- Machine registry for per-session singletons (get_machine, register_machine, clear_machines, has_machine)
- Typed accessors (get_flag, get_flag_group, get_steps, reset_machine)

Usage:
    from state import get_flag, get_steps
    advanced = get_flag("show_advanced")
    wizard = get_steps("wizard", ["Details", "Review", "Submit"])
"""

from state.machine_registry import get_machine, register_machine, clear_machines, has_machine
from state.machine_state import get_flag, get_flag_group, get_steps, reset_machine

__all__ = [
    # Machine registry
    'get_machine',
    'register_machine',
    'clear_machines',
    'has_machine',
    # Typed accessors
    'get_flag',
    'get_flag_group',
    'get_steps',
    'reset_machine',
]
