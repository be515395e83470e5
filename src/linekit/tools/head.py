"""
Output the first lines or bytes of each input.
"""

import codecs
import io
import logging
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, Optional, Sequence

from linekit.config import LineKitConfig
from linekit.errors import ConfigurationError
from linekit.streams import ByteSource
from linekit.tools.base import ErrorReporter, InputRunner


class HeadMode(Enum):
    """Unit of the quota."""
    LINES = "lines"
    BYTES = "bytes"


@dataclass
class LimiterState:
    """Remaining quota for the current input."""
    remaining: int

    @property
    def exhausted(self) -> bool:
        return self.remaining <= 0

    def consume(self, amount: int) -> None:
        self.remaining -= amount


def banner(name: str, first: bool) -> bytes:
    """Header naming an input. Every banner but the first follows a blank line."""
    lead = "" if first else "\n"
    return f"{lead}==> {name} <==\n".encode()


def head_lines(source: ByteSource, out: BinaryIO, limit: int) -> int:
    """Copy up to limit lines verbatim. Returns the number of lines copied."""
    state = LimiterState(limit)
    while not state.exhausted:
        line = source.read_line()
        if not line:
            break
        out.write(line)
        state.consume(1)
    return limit - state.remaining


def head_bytes(source: ByteSource,
               out: BinaryIO,
               limit: int,
               encoding: str = "utf-8",
               errors: str = "replace",
               chunk_size: int = io.DEFAULT_BUFFER_SIZE) -> int:
    """
    Copy up to limit bytes, decoding them lossily before writing.

    Reads at most chunk_size bytes at a time, so a large limit costs no more
    memory than a small one. Invalid sequences, including a multi-byte
    character cut short by the limit, come out as U+FFFD. Returns the number
    of bytes consumed.
    """
    state = LimiterState(limit)
    decoder = codecs.getincrementaldecoder(encoding)(errors)
    while not state.exhausted:
        chunk = source.read_bytes(min(state.remaining, chunk_size))
        if not chunk:
            break
        state.consume(len(chunk))
        out.write(decoder.decode(chunk).encode(encoding))
    out.write(decoder.decode(b"", final=True).encode(encoding))
    return limit - state.remaining


class HeadLimiter(InputRunner):
    """Copy the first N lines or bytes of each input."""

    def __init__(self,
                 count: Optional[int] = None,
                 mode: HeadMode = HeadMode.LINES,
                 cfg: Optional[LineKitConfig] = None,
                 on_error: Optional[ErrorReporter] = None,
                 logger: Optional[logging.Logger] = None):
        super().__init__(cfg, on_error, logger)
        if count is None:
            count = self.config.default_head_lines
        if count < 1:
            raise ConfigurationError(f"{mode.value} must be at least 1, got {count}", count=count)
        self.count = count
        self.mode = mode
        self._banners = 0

    def begin(self, names: Sequence[str]) -> None:
        self._banners = 0

    def process(self, source: ByteSource, out: BinaryIO, index: int, names: Sequence[str]) -> None:
        if len(names) > 1:
            out.write(banner(source.name, first=self._banners == 0))
            self._banners += 1

        if self.mode == HeadMode.BYTES:
            head_bytes(source, out, self.count, self.config.encoding,
                       self.config.decode_errors, self.config.fixed_buffer_size)
        else:
            head_lines(source, out, self.count)
