"""
esovm — Executors for two esoteric instruction sets
====================================================

    ┌──────────┐    ┌─────────────────┐    ┌──────────────┐
    │ program  │───>│ brainfuck /     │<──>│ byte stream  │
    │ (bytes)  │    │ bytesyze VM     │    │ (caller's)   │
    └──────────┘    └─────────────────┘    └──────────────┘

  brainfuck — tape machine: 65536-cell byte tape, cursor, jump stack
  bytesyze  — register machine: DR/AR/IR/SR over 256 bytes of shared
              program + data memory

Both expose ``evaluate(program, stream)`` which returns None on success and
raises an ``EvalError`` subclass on failure. The two machines share no code
beyond the stream and error types.
"""

__version__ = "0.1.0"

from . import brainfuck, bytesyze
from .errors import (
    EvalError, ProgramShapeError, StackUnderflowError, TapeBoundsError,
    StreamError, StreamReadError, StreamWriteError,
)
from .stream import ByteStream, BufferStream, DuplexStream
from .log import setup_logging
