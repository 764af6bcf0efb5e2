"""
brainfuck — Tape Machine

Execution model:
  1. Fetch the byte at ``position``
  2. Dispatch on it (unknown bytes are no-ops)
  3. Advance ``position`` by one
  4. Stop when ``position`` reaches the end of the program

Loops are resolved at run time with a jump stack rather than a
precomputed bracket table: ``[`` pushes its own position, ``]`` pops it
and, if the current cell is non-zero, pushes it back and jumps there. The
trailing increment then lands on the first instruction of the loop body.
A ``[`` entered on a zero cell pushes nothing and skips to its matching
``]``, so the body runs zero times. An unterminated ``[`` at the end of
the program is not an error.

Cursor rules (kept exactly as the reference dialect defines them):
  >  cursor + 1, clamped to 0 if negative. There is no upper wrap.
  <  cursor - 1, wrapping to len(tape) when it goes negative. That is
     one past the last cell, so ``<`` from 0 followed by ``+`` fails with
     TapeBoundsError while ``<<+`` touches the last cell.
"""

import logging
from typing import Callable, Dict, Union

from ..config import STACK_SIZE
from ..errors import ProgramShapeError, StreamReadError, StreamWriteError
from ..stream import ByteStream
from .tape import MACHINE, JumpStack, Tape

log = logging.getLogger(__name__)

OPEN = ord('[')
CLOSE = ord(']')

Program = Union[str, bytes, bytearray, memoryview]


def coerce_program(program: Program) -> bytes:
    """Return the program as immutable bytes; ``str`` is UTF-8 encoded."""
    if isinstance(program, str):
        return program.encode("utf-8")
    if isinstance(program, (bytes, bytearray, memoryview)):
        return bytes(program)
    raise ProgramShapeError(
        MACHINE, f"program must be str or bytes-like, not {type(program).__name__}")


class TapeMachine:
    """Brainfuck interpreter over a fixed-size tape.

    Usage:
        stream = BufferStream(b"A")
        vm = TapeMachine(",+.", stream)
        vm.run()
        stream.output  # b"B"
    """

    def __init__(self, program: Program, stream: ByteStream, stack_size: int = STACK_SIZE):
        self.program = coerce_program(program)
        self.stream = stream
        self.tape = Tape(stack_size)
        self.jumps = JumpStack()
        self.cursor = 0
        self.position = 0
        self._dispatch = self._build_dispatch()

    # ══════════════════════════════════════════════
    # Execution
    # ══════════════════════════════════════════════

    @property
    def finished(self) -> bool:
        return self.position >= len(self.program)

    def step(self) -> bool:
        """Execute one instruction. Returns False once the program has ended."""
        if self.finished:
            return False
        handler = self._dispatch.get(self.program[self.position])
        if handler is not None:
            handler()
        self.position += 1
        return not self.finished

    def run(self):
        """Run to the end of the program. Errors propagate as EvalError."""
        log.debug("brainfuck: running %d byte program on %d cell tape",
                  len(self.program), len(self.tape))
        while self.step():
            pass
        log.debug("brainfuck: finished at cursor %d, %d open loop(s)",
                  self.cursor, len(self.jumps))

    # ══════════════════════════════════════════════
    # Instruction handlers
    # ══════════════════════════════════════════════

    def _build_dispatch(self) -> Dict[int, Callable[[], None]]:
        return {
            ord('>'): self._op_right,
            ord('<'): self._op_left,
            ord('+'): self._op_inc,
            ord('-'): self._op_dec,
            ord(','): self._op_input,
            ord('.'): self._op_output,
            OPEN:     self._op_open,
            CLOSE:    self._op_close,
        }

    def _op_right(self):
        self.cursor += 1
        if self.cursor < 0:
            self.cursor = 0

    def _op_left(self):
        self.cursor -= 1
        if self.cursor < 0:
            self.cursor = len(self.tape)

    def _op_inc(self):
        self.tape.add(self.cursor, 1)

    def _op_dec(self):
        self.tape.add(self.cursor, -1)

    def _op_input(self):
        try:
            data = self.stream.read(1)
        except (OSError, ValueError) as exc:
            raise StreamReadError(MACHINE, "cannot read byte from io", self.position) from exc
        if not data:
            raise StreamReadError(MACHINE, "cannot read byte from io", self.position)
        self.tape.write(self.cursor, data[0])

    def _op_output(self):
        char = bytes([self.tape.read(self.cursor)])
        try:
            written = self.stream.write(char)
        except (OSError, ValueError) as exc:
            raise StreamWriteError(MACHINE, "cannot write byte to io", self.position) from exc
        if written is not None and written < 1:
            raise StreamWriteError(MACHINE, "cannot write byte to io", self.position)

    def _op_open(self):
        if self.tape.read(self.cursor) == 0:
            self.position = self._matching_close()
            return
        self.jumps.push(self.position)

    def _op_close(self):
        last = self.jumps.pop(self.position)
        if self.tape.read(self.cursor) == 0:
            return
        self.jumps.push(last)
        self.position = last

    def _matching_close(self) -> int:
        """Position of the ``]`` closing the ``[`` at the current position.

        An unclosed loop resolves to the last byte of the program, which
        ends the run normally.
        """
        depth = 0
        for pos in range(self.position, len(self.program)):
            op = self.program[pos]
            if op == OPEN:
                depth += 1
            elif op == CLOSE:
                depth -= 1
                if depth == 0:
                    return pos
        return len(self.program) - 1
