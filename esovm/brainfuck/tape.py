"""
brainfuck — Tape and Jump Stack

Tape: fixed-size bytearray, every cell wraps modulo 256.
JumpStack: source positions of the currently open ``[`` loops.

The tape does not move its own cursor. The machine owns the cursor and
passes it in, so the wrap rules live in one place (machine.py).
"""

from typing import List, Optional

from ..config import STACK_SIZE, BYTE_MASK
from ..errors import StackUnderflowError, TapeBoundsError

MACHINE = "brainfuck"


class Tape:
    """Zero-initialised byte tape of ``size`` cells."""

    __slots__ = ('cells',)

    def __init__(self, size: int = STACK_SIZE):
        if size < 1:
            raise ValueError(f"tape size must be positive, got {size}")
        self.cells = bytearray(size)

    def __len__(self) -> int:
        return len(self.cells)

    def _check(self, cursor: int):
        if not 0 <= cursor < len(self.cells):
            raise TapeBoundsError(
                MACHINE, f"cursor {cursor} outside tape of {len(self.cells)} cells")

    def read(self, cursor: int) -> int:
        self._check(cursor)
        return self.cells[cursor]

    def write(self, cursor: int, value: int):
        self._check(cursor)
        self.cells[cursor] = value & BYTE_MASK

    def add(self, cursor: int, delta: int):
        """Add ``delta`` to a cell, wrapping modulo 256."""
        self._check(cursor)
        self.cells[cursor] = (self.cells[cursor] + delta) & BYTE_MASK


class JumpStack:
    """LIFO of loop entry positions."""

    def __init__(self):
        self._items: List[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, position: int):
        self._items.append(position)

    def pop(self, position: Optional[int] = None) -> int:
        """Pop the most recent entry. ``position`` is only used for the error."""
        if not self._items:
            raise StackUnderflowError(MACHINE, "cannot pop from empty jump stack", position)
        return self._items.pop()
