"""
Byte Syze — Unified Memory

256 bytes holding both the program and its data. There is no separate
code segment and nothing is decoded ahead of time: the machine fetches
each instruction from this store right before executing it, so a store
into an upcoming cell changes what runs next.

Addresses are masked to 8 bits, which makes every address valid.
"""

from ..config import MEMORY_SIZE, BYTE_MASK
from ..errors import ProgramShapeError

MACHINE = "bytesyze"


class Memory:
    """Flat 256-byte store seeded from a caller image (copied, never aliased)."""

    __slots__ = ('_mem',)

    def __init__(self, image):
        self._mem = bytearray(coerce_image(image))

    def __len__(self) -> int:
        return MEMORY_SIZE

    def read8(self, addr: int) -> int:
        return self._mem[addr & BYTE_MASK]

    def write8(self, addr: int, value: int):
        self._mem[addr & BYTE_MASK] = value & BYTE_MASK

    def dump(self) -> bytes:
        """Copy of the current memory contents."""
        return bytes(self._mem)


def coerce_image(image) -> bytes:
    """Validate a memory image: bytes-like and exactly 256 bytes long."""
    if not isinstance(image, (bytes, bytearray, memoryview)):
        raise ProgramShapeError(
            MACHINE, f"memory must be {MEMORY_SIZE} bytes, not {type(image).__name__}")
    data = bytes(image)
    if len(data) != MEMORY_SIZE:
        raise ProgramShapeError(
            MACHINE, f"memory must be exactly {MEMORY_SIZE} bytes, got {len(data)}")
    return data
