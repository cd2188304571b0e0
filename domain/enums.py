"""
Domain Enums

Enumerations for the operations that can be dispatched to flags.
These replace magic strings and provide type safety.
"""

from enum import Enum


class FlagOp(Enum):
    """
    Mutator selectable on a Flag.

    Used by FlagGroup.all() to apply the same operation to every flag
    in the group. The value is the lowercase operation name so callers
    can pass either the enum member or its string form.
    """
    TOGGLE = "toggle"
    ON = "on"
    OFF = "off"

    @classmethod
    def from_string(cls, op_name: str) -> "FlagOp":
        """
        Convert an operation name to a FlagOp.

        Args:
            op_name: Operation name (case-insensitive).
                     Accepts: "toggle", "on", "off"

        Returns:
            Corresponding FlagOp enum value

        Raises:
            ValueError: If op_name doesn't match a valid operation

        Example:
            >>> FlagOp.from_string("Toggle")
            <FlagOp.TOGGLE: 'toggle'>
        """
        mapping = {op.value: op for op in cls}
        key = op_name.strip().lower() if isinstance(op_name, str) else op_name

        if key not in mapping:
            raise ValueError(
                f"Invalid flag operation: {op_name!r}. "
                f"Must be one of: {', '.join(mapping.keys())}"
            )

        return mapping[key]

    @classmethod
    def coerce(cls, op: "FlagOp | str") -> "FlagOp":
        """Return op unchanged if already a FlagOp, otherwise parse it."""
        if isinstance(op, cls):
            return op
        return cls.from_string(op)

    @property
    def display_name(self) -> str:
        """Return the button label used for this operation."""
        return {
            FlagOp.TOGGLE: "Toggle all",
            FlagOp.ON: "All on",
            FlagOp.OFF: "All off",
        }[self]

    @classmethod
    def display_order(cls) -> list["FlagOp"]:
        """Return operations in the order bulk buttons are drawn."""
        return [cls.ON, cls.OFF, cls.TOGGLE]
