"""
esovm — Evaluation Errors

Every failure an evaluation can report is an ``EvalError``. Callers that
only care about pass/fail catch the base class; tests and tools that need
the cause catch the specific subclass.
"""

from typing import Optional


class EvalError(Exception):
    """Raised when a program cannot be evaluated to completion."""
    def __init__(self, machine: str, message: str, position: Optional[int] = None):
        self.machine = machine
        self.position = position
        text = f"{machine} eval: {message}"
        if position is not None:
            text += f" (position {position})"
        super().__init__(text)


class ProgramShapeError(EvalError, TypeError):
    """Program value has the wrong type or size. Nothing was executed."""


class StackUnderflowError(EvalError):
    """Loop close with no loop open."""


class TapeBoundsError(EvalError, IndexError):
    """Cell access with the cursor outside the tape."""


class StreamError(EvalError):
    """Base for byte stream failures."""


class StreamReadError(StreamError):
    pass


class StreamWriteError(StreamError):
    pass
