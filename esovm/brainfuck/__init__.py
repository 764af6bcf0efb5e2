"""
brainfuck — eight-opcode tape machine.

    from esovm import brainfuck
    brainfuck.evaluate("++++++++[>++++++++<-]>+.", stream)   # writes b"A"
"""

from ..config import STACK_SIZE
from ..stream import ByteStream
from .machine import Program, TapeMachine, coerce_program
from .tape import JumpStack, Tape


def evaluate(program: Program, stream: ByteStream, *, stack_size: int = STACK_SIZE):
    """Run ``program`` to completion against ``stream``.

    Returns None on success and raises an EvalError subclass on failure:
    ProgramShapeError, StackUnderflowError, TapeBoundsError,
    StreamReadError or StreamWriteError.
    """
    TapeMachine(program, stream, stack_size=stack_size).run()


__all__ = ["evaluate", "TapeMachine", "Tape", "JumpStack", "coerce_program", "Program"]
