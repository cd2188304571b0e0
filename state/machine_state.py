"""
Session Machine State

Helpers that return the session's Flag, FlagGroup or Step for a key,
building it on first access. Defaults left as None are read from the
[machines] section of settings.toml.

When a page passes a different flag set or sequence for an existing key
(e.g. the item list was filtered), the stored machine is rebuilt and the
previous state is carried over where it still applies. Listeners attached
to the old instance are not carried over.
"""

from collections.abc import Mapping
from typing import Sequence, TypeVar

from domain import Flag, FlagGroup, Step, flag, flag_group, steps
from logging_config import setup_logging
from settings_service import SettingsService
from state.machine_registry import get_machine, register_machine, clear_machines, has_machine

logger = setup_logging(__name__, log_file="machine_state.log")

T = TypeVar('T')


def get_flag(key: str, init: bool | None = None, disabled: bool = False) -> Flag:
    """Return the session Flag stored under ``key``.

    Args:
        key: Machine key
        init: Starting value, settings default when None
        disabled: Freeze the flag at its starting value
    """
    if init is None:
        init = SettingsService().flag_init
    return get_machine(key, lambda: flag(init=init, disabled=disabled))


def get_flag_group(key: str, flags: Mapping[str, bool]) -> FlagGroup:
    """Return the session FlagGroup stored under ``key``.

    If the stored group has a different key set than ``flags``, it is
    rebuilt; flags present in both keep their current value.

    Raises:
        ValueError: If a flag name is reserved by FlagGroup
    """
    if has_machine(key):
        group = get_machine(key, lambda: flag_group(flags))
        if set(group.keys()) == set(flags.keys()):
            return group
        carried = {name: group[name].current if name in group else value
                   for name, value in flags.items()}
        logger.info(f"Rebuilding flag group '{key}' for new keys {sorted(flags)}")
        return register_machine(key, flag_group(carried))
    return get_machine(key, lambda: flag_group(flags))


def get_steps(key: str, items: Sequence[T], init_index: int = 0, loop: bool | None = None) -> Step[T]:
    """Return the session Step stored under ``key``.

    If the stored cursor's sequence no longer matches ``items``, it is
    rebuilt over ``items`` at its previous index (clamped into range).

    Args:
        key: Machine key
        items: Non-empty sequence to navigate
        init_index: Starting position for a new cursor
        loop: Wrap around at the ends, settings default when None

    Raises:
        ValueError: If items is empty
    """
    if loop is None:
        loop = SettingsService().step_loop

    if has_machine(key):
        step = get_machine(key, lambda: steps(items, init_index=init_index, loop=loop))
        if step.sequence is items or list(step.sequence) == list(items):
            return step
        logger.info(f"Rebuilding step cursor '{key}' for {len(items)} new items")
        return register_machine(key, steps(items, init_index=step.index, loop=loop))
    return get_machine(key, lambda: steps(items, init_index=init_index, loop=loop))


def reset_machine(*keys: str) -> None:
    """Drop stored machines so the next get_* call builds fresh ones."""
    if keys:
        logger.debug(f"Resetting machines: {', '.join(keys)}")
    clear_machines(*keys)
