"""
Byte stream adapters and logging setup.
"""

import io
import logging

import pytest
from rich.logging import RichHandler

from esovm import setup_logging
from esovm.stream import ByteStream, BufferStream, DuplexStream


# =============================================================================
#  BufferStream
# =============================================================================

def test_buffer_reads_in_order():
    stream = BufferStream(b"abc")
    assert stream.read(2) == b"ab"
    assert stream.pending == 1
    assert stream.read(5) == b"c"
    assert stream.read(1) == b""

def test_buffer_inject_appends():
    stream = BufferStream(b"a")
    stream.inject(b"bc")
    assert stream.read() == b"abc"

def test_buffer_collects_output():
    stream = BufferStream()
    assert stream.write(b"he") == 2
    stream.write(b"y")
    assert stream.output == b"hey"

def test_buffer_closed_raises():
    stream = BufferStream(b"a")
    stream.close()
    assert stream.closed
    with pytest.raises(OSError):
        stream.read(1)
    with pytest.raises(OSError):
        stream.write(b"x")

def test_adapters_satisfy_protocol():
    assert isinstance(BufferStream(), ByteStream)
    assert isinstance(DuplexStream(io.BytesIO(), io.BytesIO()), ByteStream)
    assert isinstance(io.BytesIO(), ByteStream)


# =============================================================================
#  DuplexStream
# =============================================================================

def test_duplex_passthrough():
    reader, writer = io.BytesIO(b"xyz"), io.BytesIO()
    stream = DuplexStream(reader, writer)
    assert stream.read(1) == b"x"
    assert stream.write(b"out") == 3
    stream.flush()
    assert writer.getvalue() == b"out"

def test_duplex_closed_reader_raises_value_error():
    reader = io.BytesIO(b"x")
    reader.close()
    with pytest.raises(ValueError):
        DuplexStream(reader, io.BytesIO()).read(1)


# =============================================================================
#  setup_logging
# =============================================================================

@pytest.fixture
def fresh_logger():
    names = []

    def make(name):
        names.append(name)
        return name

    yield make
    for name in names:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

def test_setup_logging_adds_rich_handler(fresh_logger):
    name = fresh_logger("esovm_test.console")
    logger = setup_logging(name, level=logging.WARNING)
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], RichHandler)
    assert logger.handlers[0].level == logging.WARNING

def test_setup_logging_is_idempotent(fresh_logger):
    name = fresh_logger("esovm_test.twice")
    first = setup_logging(name)
    second = setup_logging(name)
    assert first is second
    assert len(second.handlers) == 1

def test_setup_logging_file(fresh_logger, tmp_path):
    name = fresh_logger("esovm_test.file")
    log_file = tmp_path / "logs" / "run.log"
    logger = setup_logging(name, log_file=log_file)
    assert len(logger.handlers) == 2
    logger.debug("hello from test")
    for handler in logger.handlers:
        handler.flush()
    assert "hello from test" in log_file.read_text(encoding="utf-8")
