"""
Machine Options Domain Models

Pure Python dataclasses holding the construction-time configuration of
flags and step cursors. No Streamlit or infrastructure dependencies.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FlagOptions:
    """Immutable configuration for a single Flag.

    Attributes:
        init: Starting value of the flag
        disabled: When True every mutator is a no-op for the flag's lifetime
    """

    init: bool = False
    disabled: bool = False


@dataclass(frozen=True)
class StepOptions:
    """Immutable configuration for a Step cursor.

    Attributes:
        init_index: Starting position in the sequence (clamped into range
                    when the Step is built)
        loop: When True, next()/prev() wrap around the ends of the sequence
              instead of stopping at them
    """

    init_index: int = 0
    loop: bool = False
