"""
Byte Syze — Main Machine Class

Execution model:
  1. Halt check: stop when IR == 255 (cell 255 is never executed)
  2. Fetch the opcode at Memory[IR]
  3. Execute it (unknown opcodes are no-ops)
  4. IR += 1, unconditionally, modulo 256

The trailing increment also follows jumps. ``!`` swaps AR and IR, so the
next instruction executed is the one *after* the jump target, and AR
holds the address of the ``!`` itself as a return point.

Opcode map:
  <  load      DR = M[AR]
  >  store     M[AR] = DR
  *  point     DR <-> AR
  !  jump      AR <-> IR
  \\  switch    DR <-> SR
  +  add       DR = M[AR] + DR
  -  subtract  DR = M[AR] - DR
  (  input     DR = next input byte, 0 on any failure
  )  output    write DR, failures ignored
  ?  skip      if DR == 0, skip the next instruction
"""

import logging
from typing import Callable, Dict

from ..config import HALT_ADDRESS
from ..stream import ByteStream
from .memory import Memory
from .regs import Registers

log = logging.getLogger(__name__)


class ByteSyze:
    """Byte Syze machine: four registers over one 256-byte memory.

    Usage:
        image = bytearray(256)
        image[0:2] = b"()"          # echo one byte
        stream = BufferStream(b"Z")
        vm = ByteSyze(image, stream)
        vm.run()
        stream.output  # b"Z"
    """

    def __init__(self, memory, stream: ByteStream):
        self.mem = Memory(memory)
        self.regs = Registers()
        self.stream = stream
        self._dispatch = self._build_dispatch()

    # ══════════════════════════════════════════════
    # Execution
    # ══════════════════════════════════════════════

    @property
    def halted(self) -> bool:
        return self.regs.IR >= HALT_ADDRESS

    def step(self):
        """Fetch and execute the instruction at IR, then advance IR."""
        handler = self._dispatch.get(self.mem.read8(self.regs.IR))
        if handler is not None:
            handler()
        self.regs.IR += 1

    def run(self):
        """Step until IR reaches the halt address."""
        log.debug("bytesyze: starting")
        steps = 0
        while not self.halted:
            self.step()
            steps += 1
        log.debug("bytesyze: halted after %d steps, %r", steps, self.regs)

    # ══════════════════════════════════════════════
    # Instruction handlers
    # ══════════════════════════════════════════════

    def _build_dispatch(self) -> Dict[int, Callable[[], None]]:
        return {
            ord('<'):  self._op_load,
            ord('>'):  self._op_store,
            ord('*'):  self._op_point,
            ord('!'):  self._op_jump,
            ord('\\'): self._op_switch,
            ord('+'):  self._op_add,
            ord('-'):  self._op_subtract,
            ord('('):  self._op_input,
            ord(')'):  self._op_output,
            ord('?'):  self._op_skip,
        }

    def _op_load(self):
        self.regs.DR = self.mem.read8(self.regs.AR)

    def _op_store(self):
        self.mem.write8(self.regs.AR, self.regs.DR)

    def _op_point(self):
        r = self.regs
        r.DR, r.AR = r.AR, r.DR

    def _op_jump(self):
        r = self.regs
        r.AR, r.IR = r.IR, r.AR

    def _op_switch(self):
        r = self.regs
        r.DR, r.SR = r.SR, r.DR

    def _op_add(self):
        self.regs.DR = self.mem.read8(self.regs.AR) + self.regs.DR

    def _op_subtract(self):
        self.regs.DR = self.mem.read8(self.regs.AR) - self.regs.DR

    def _op_input(self):
        try:
            data = self.stream.read(1)
        except (OSError, ValueError) as exc:
            log.debug("bytesyze: input failed at IR=%d: %s", self.regs.IR, exc)
            data = b""
        if data is None or len(data) != 1:
            self.regs.DR = 0
        else:
            self.regs.DR = data[0]

    def _op_output(self):
        try:
            self.stream.write(bytes([self.regs.DR]))
        except (OSError, ValueError) as exc:
            log.debug("bytesyze: output dropped at IR=%d: %s", self.regs.IR, exc)

    def _op_skip(self):
        if self.regs.DR == 0:
            self.regs.IR += 1
