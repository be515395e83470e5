"""
Count lines, words, bytes and characters per input, with a grand total.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, Optional, Sequence, Tuple

from linekit.config import LineKitConfig
from linekit.streams import ByteSource, Stream
from linekit.tools.base import ErrorReporter, InputRunner


class Field(Enum):
    """Countable columns, declared in render order."""
    LINES = "lines"
    WORDS = "words"
    BYTES = "bytes"
    CHARS = "chars"


DEFAULT_FIELDS: Tuple[Field, ...] = (Field.LINES, Field.WORDS, Field.BYTES)


def select_fields(lines: bool = False,
                  words: bool = False,
                  byte_count: bool = False,
                  chars: bool = False) -> Tuple[Field, ...]:
    """
    Resolve requested columns into an ordered field set.

    Nothing requested means lines, words and bytes. Bytes wins over chars
    when both are asked for.
    """
    if not (lines or words or byte_count or chars):
        return DEFAULT_FIELDS

    requested = {Field.LINES: lines, Field.WORDS: words, Field.BYTES: byte_count,
                 Field.CHARS: chars and not byte_count}
    return tuple(f for f in Field if requested[f])


@dataclass
class Tally:
    """Counters for one input, or the running total."""
    lines: int = 0
    words: int = 0
    bytes: int = 0
    chars: int = 0

    def add_line(self, line: 'bytes', encoding: str = "utf-8", errors: str = "replace") -> 'Tally':
        text = line.decode(encoding, errors)
        self.lines += 1
        self.words += len(text.split())
        self.bytes += len(line)
        self.chars += len(text)
        return self

    def __iadd__(self, other: 'Tally') -> 'Tally':
        self.lines += other.lines
        self.words += other.words
        self.bytes += other.bytes
        self.chars += other.chars
        return self

    def get(self, field: Field) -> int:
        return getattr(self, field.value)


def format_tally(tally: Tally,
                 fields: Sequence[Field],
                 name: Optional[str] = None,
                 width: int = 8) -> str:
    """Render one row; name is None for standard input."""
    row = "".join(f"{tally.get(f):>{width}}" for f in fields)
    if name is not None:
        row += f" {name}"
    return row


def count_source(source: ByteSource, encoding: str = "utf-8", errors: str = "replace") -> Tally:
    return Stream.lines(source).reduce(
        lambda tally, line: tally.add_line(line, encoding, errors), Tally()
    )


class StreamCounter(InputRunner):
    """Print a tally row per input and, for several inputs, a total row."""

    error_prefix = "Failed to open "

    def __init__(self,
                 fields: Sequence[Field] = DEFAULT_FIELDS,
                 cfg: Optional[LineKitConfig] = None,
                 on_error: Optional[ErrorReporter] = None,
                 logger: Optional[logging.Logger] = None):
        super().__init__(cfg, on_error, logger)
        self.fields = tuple(fields)
        self.total = Tally()

    def begin(self, names: Sequence[str]) -> None:
        self.total = Tally()

    def _emit(self, out: BinaryIO, tally: Tally, name: Optional[str]) -> None:
        row = format_tally(tally, self.fields, name, self.config.tally_width)
        out.write(f"{row}\n".encode(self.config.encoding))

    def process(self, source: ByteSource, out: BinaryIO, index: int, names: Sequence[str]) -> None:
        tally = count_source(source, self.config.encoding, self.config.decode_errors)
        name = None if source.name == self.config.stdin_designator else source.name
        self._emit(out, tally, name)
        self.total += tally

    def finish(self, out: BinaryIO, names: Sequence[str]) -> None:
        if len(names) > 1:
            self._emit(out, self.total, self.config.total_label)
