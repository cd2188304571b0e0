"""
Step Cursor Domain Model

A Step is a position in a caller-owned ordered sequence with bounded or
wrapping navigation. The sequence is borrowed, never copied or mutated;
its length is read again on every navigation call.

Example:
    >>> pages = ["Home", "About", "Contact"]
    >>> nav = steps(pages)
    >>> nav.next()
    >>> nav.current
    'About'
"""

import logging
from typing import Generic, Sequence, TypeVar

from domain.observable import Observable
from domain.options import StepOptions

logger = logging.getLogger(__name__)

T = TypeVar('T')


class Step(Observable, Generic[T]):
    """Cursor over a non-empty sequence.

    With ``loop`` off, next()/prev() stop at the last/first element.
    With ``loop`` on, they wrap around.
    """

    def __init__(self, sequence: Sequence[T], options: StepOptions | None = None):
        super().__init__()
        if len(sequence) == 0:
            raise ValueError("Step requires a non-empty sequence")

        self.sequence = sequence
        self.options = options or StepOptions()
        self._index = self._clamp_init_index(self.options.init_index, len(sequence))

    @staticmethod
    def _clamp_init_index(init_index: int, length: int) -> int:
        clamped = min(max(init_index, 0), length - 1)
        if clamped != init_index:
            logger.warning(
                "init_index %d out of range for %d steps, clamped to %d",
                init_index, length, clamped,
            )
        return clamped

    @property
    def current(self) -> T:
        return self.sequence[self._index]

    @property
    def index(self) -> int:
        return self._index

    @property
    def loop(self) -> bool:
        return self.options.loop

    @property
    def is_first(self) -> bool:
        return self._index == 0

    @property
    def is_last(self) -> bool:
        return self._index == len(self.sequence) - 1

    def next(self) -> None:
        length = self._length()
        if self.options.loop:
            self._move((self._index + 1) % length)
        else:
            self._move(min(self._index + 1, length - 1))

    def prev(self) -> None:
        length = self._length()
        if self.options.loop:
            self._move((self._index + length - 1) % length)
        else:
            self._move(max(self._index - 1, 0))

    def start(self) -> None:
        self._move(0)

    def end(self) -> None:
        self._move(self._length() - 1)

    def _length(self) -> int:
        length = len(self.sequence)
        if length == 0:
            raise ValueError("Cannot navigate: the step sequence is empty")
        return length

    def _move(self, index: int) -> None:
        old = self._index
        if old == index:
            return
        self._index = index
        self._changed(old, index)

    def __len__(self) -> int:
        return len(self.sequence)

    def __repr__(self) -> str:
        return (
            f"Step(index={self._index}, length={len(self.sequence)}, "
            f"loop={self.options.loop})"
        )


def steps(items: Sequence[T], init_index: int = 0, loop: bool = False) -> Step[T]:
    """Create a Step cursor over ``items``.

    Args:
        items: Non-empty sequence to navigate (kept by reference)
        init_index: Starting position, clamped into range
        loop: Wrap around at the ends instead of stopping

    Returns:
        The Step instance

    Raises:
        ValueError: If items is empty
    """
    return Step(items, StepOptions(init_index=init_index, loop=loop))
