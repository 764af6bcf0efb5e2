"""
Byte Syze — Register Set

  DR — data register
  AR — address register (operand address for load/store/add/subtract)
  IR — instruction register (program counter)
  SR — switch register (scratch, reachable only by swapping with DR)

All four are 8-bit. Writes are masked, so arithmetic anywhere in the
machine can assign raw Python ints and still get modulo-256 behaviour.
"""

from ..config import BYTE_MASK


class Registers:
    """Byte Syze register file, zeroed at power-on."""

    __slots__ = ('_dr', '_ar', '_ir', '_sr')

    def __init__(self):
        self.reset()

    @property
    def DR(self) -> int:
        return self._dr

    @DR.setter
    def DR(self, value: int):
        self._dr = value & BYTE_MASK

    @property
    def AR(self) -> int:
        return self._ar

    @AR.setter
    def AR(self, value: int):
        self._ar = value & BYTE_MASK

    @property
    def IR(self) -> int:
        return self._ir

    @IR.setter
    def IR(self, value: int):
        self._ir = value & BYTE_MASK

    @property
    def SR(self) -> int:
        return self._sr

    @SR.setter
    def SR(self, value: int):
        self._sr = value & BYTE_MASK

    def reset(self):
        self._dr = 0
        self._ar = 0
        self._ir = 0
        self._sr = 0

    def __repr__(self) -> str:
        return (f"Registers(DR={self._dr:02X} AR={self._ar:02X} "
                f"IR={self._ir:02X} SR={self._sr:02X})")
