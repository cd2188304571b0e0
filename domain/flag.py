"""
Flag Domain Models

A Flag is a single boolean cell with toggle/on/off mutators. A FlagGroup
owns a fixed set of named flags and can apply one operation to all of them.

Example:
    >>> features = flag_group({"search": True, "export": False})
    >>> features.search.toggle()
    >>> features.all("off")
    >>> features.snapshot()
    {'search': False, 'export': False}
"""

import logging
from collections.abc import Mapping
from typing import Iterator

from domain.enums import FlagOp
from domain.observable import Observable
from domain.options import FlagOptions

logger = logging.getLogger(__name__)


class Flag(Observable):
    """Boolean state cell.

    A disabled flag ignores every mutator call, so its value is frozen at
    ``options.init`` for its whole lifetime.
    """

    def __init__(self, options: FlagOptions | None = None):
        super().__init__()
        self.options = options or FlagOptions()
        self._current = bool(self.options.init)

    @property
    def current(self) -> bool:
        return self._current

    @property
    def disabled(self) -> bool:
        return self.options.disabled

    def toggle(self) -> None:
        self._set(not self._current, "toggle")

    def on(self) -> None:
        self._set(True, "on")

    def off(self) -> None:
        self._set(False, "off")

    def apply(self, op: FlagOp | str) -> None:
        """Run the mutator selected by ``op``.

        Args:
            op: A FlagOp or its name ("toggle", "on", "off")

        Raises:
            ValueError: If op is not a known operation name
        """
        op = FlagOp.coerce(op)
        if op is FlagOp.TOGGLE:
            self.toggle()
        elif op is FlagOp.ON:
            self.on()
        elif op is FlagOp.OFF:
            self.off()

    def _set(self, value: bool, op_name: str) -> None:
        if self.options.disabled:
            logger.debug("Ignoring %s() on disabled flag", op_name)
            return
        old = self._current
        if old == value:
            return
        self._current = value
        self._changed(old, value)

    def __bool__(self) -> bool:
        return self._current

    def __repr__(self) -> str:
        state = "disabled" if self.options.disabled else "enabled"
        return f"Flag(current={self._current}, {state})"


class FlagGroup(Mapping):
    """Fixed-key collection of flags with a bulk dispatcher.

    Flags are reachable by item access (``group["name"]``) and, for keys
    that are valid identifiers, by attribute access (``group.name``).
    Keys may not shadow any public attribute of the group, ``all`` included.
    """

    def __init__(self, flags: Mapping[str, bool]):
        invalid = [key for key in flags if not isinstance(key, str)]
        if invalid:
            raise ValueError(f"Flag names must be strings, got: {invalid}")

        reserved = sorted(key for key in flags if key in RESERVED_GROUP_KEYS)
        if reserved:
            raise ValueError(
                f"Flag names {reserved} collide with reserved FlagGroup attributes. "
                f"Reserved: {', '.join(sorted(RESERVED_GROUP_KEYS))}"
            )

        self._flags: dict[str, Flag] = {
            key: Flag(FlagOptions(init=bool(value))) for key, value in flags.items()
        }

    def all(self, op: FlagOp | str = FlagOp.TOGGLE) -> None:
        """Apply one operation to every flag in the group.

        Args:
            op: Operation to apply, defaults to toggle

        Raises:
            ValueError: If op is not a known operation name
        """
        op = FlagOp.coerce(op)
        logger.debug("Applying %s to %d flags", op.value, len(self._flags))
        for item in self._flags.values():
            item.apply(op)

    def snapshot(self) -> dict[str, bool]:
        """Return the current value of every flag, keyed by name."""
        return {key: item.current for key, item in self._flags.items()}

    def __getitem__(self, key: str) -> Flag:
        return self._flags[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._flags)

    def __len__(self) -> int:
        return len(self._flags)

    def __getattr__(self, name: str) -> Flag:
        # only reached when normal lookup fails
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._flags[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__} has no flag named {name!r}"
            ) from None

    def __repr__(self) -> str:
        return f"FlagGroup({self.snapshot()})"


RESERVED_GROUP_KEYS = frozenset(
    name for name in dir(FlagGroup) if not name.startswith("_")
)


def flag(init: bool = False, disabled: bool = False) -> Flag:
    """Create a Flag.

    Example:
        >>> f = flag(init=True)
        >>> f.toggle()
        >>> f.current
        False
    """
    return Flag(FlagOptions(init=init, disabled=disabled))


def flag_group(flags: Mapping[str, bool]) -> FlagGroup:
    """Create a FlagGroup with one enabled Flag per entry of ``flags``."""
    return FlagGroup(flags)
