"""
Byte Syze — single-register machine with self-modifying 256-byte memory.

    from esovm import bytesyze
    bytesyze.evaluate(image, stream)   # image: exactly 256 bytes
"""

from ..stream import ByteStream
from .machine import ByteSyze
from .memory import Memory, coerce_image
from .regs import Registers


def evaluate(memory, stream: ByteStream):
    """Run a 256-byte memory image until IR reaches 255.

    Raises ProgramShapeError if ``memory`` is not exactly 256 bytes. I/O
    failures never abort a run: failed input reads as 0 and failed output
    is dropped.
    """
    ByteSyze(memory, stream).run()


__all__ = ["evaluate", "ByteSyze", "Memory", "Registers", "coerce_image"]
