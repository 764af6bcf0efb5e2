"""
esovm — Logging Setup

The library itself only creates loggers (``logging.getLogger(__name__)``)
and never installs handlers on import. Applications embedding the machines
call setup_logging() once to get a rich console handler and, optionally,
a log file capturing everything.

Log file format:
  2026-01-01 12:00:00 | DEBUG   | esovm.brainfuck.machine | run:120 | ...
"""

import logging
from pathlib import Path
from typing import Optional, Union

from rich.logging import RichHandler


def setup_logging(name: str = "esovm", level: int = logging.INFO,
                  log_file: Optional[Union[str, Path]] = None) -> logging.Logger:
    """Configure and return the ``name`` logger.

    Console output goes through RichHandler at ``level``. When ``log_file``
    is given a file handler is added at DEBUG. Calling this again for a
    logger that already has handlers returns it unchanged.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG if log_file else level)

    # ── Console handler ──
    ch = RichHandler(
        level=level,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    logger.addHandler(ch)

    # ── File handler: captures everything (DEBUG+) ──
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(path), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-7s | %(name)s | %(funcName)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(fh)

    logger.debug("Logger initialized: %s", name)
    return logger
