"""
Concatenate inputs, optionally numbering lines and squeezing blank runs.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import BinaryIO, Optional, Sequence, Tuple

from linekit.config import LineKitConfig
from linekit.streams import ByteSource, Stream
from linekit.tools.base import ErrorReporter, InputRunner


class NumberingMode(Enum):
    """Which output lines receive a line number."""
    NONE = "none"
    ALL = "all"
    NONBLANK = "nonblank"


@dataclass(frozen=True)
class CatState:
    """Line-to-line state. Only next_number spans inputs."""
    previous_blank: bool = False
    next_number: int = 1


def is_blank(line: bytes, encoding: str = "utf-8") -> bool:
    """A line is blank if nothing remains after stripping trailing whitespace."""
    return not line.decode(encoding, "replace").rstrip()


def render_line(line: bytes,
                mode: NumberingMode,
                squeeze: bool,
                state: CatState,
                width: int = 6) -> Tuple[bytes, CatState]:
    """
    Render one line.

    Returns:
        The output fragment (empty when the line is squeezed away) and the
        updated state.
    """
    blank = is_blank(line)

    if squeeze and blank and state.previous_blank:
        return b"", state

    if mode == NumberingMode.ALL or (mode == NumberingMode.NONBLANK and not blank):
        prefix = f"{state.next_number:>{width}}\t".encode()
        return prefix + line, CatState(previous_blank=blank, next_number=state.next_number + 1)

    return line, replace(state, previous_blank=blank)


class Concatenator(InputRunner):
    """Copy inputs to the output in order."""

    error_prefix = "Failed to open "

    def __init__(self,
                 numbering: NumberingMode = NumberingMode.NONE,
                 squeeze: bool = False,
                 cfg: Optional[LineKitConfig] = None,
                 on_error: Optional[ErrorReporter] = None,
                 logger: Optional[logging.Logger] = None):
        super().__init__(cfg, on_error, logger)
        self.numbering = numbering
        self.squeeze = squeeze
        self.state = CatState()

    def begin(self, names: Sequence[str]) -> None:
        self.state = CatState()

    def _render(self, line: bytes) -> bytes:
        fragment, self.state = render_line(
            line, self.numbering, self.squeeze, self.state, self.config.number_width
        )
        return fragment

    def process(self, source: ByteSource, out: BinaryIO, index: int, names: Sequence[str]) -> None:
        # Only the line number carries over from the previous input
        self.state = replace(self.state, previous_blank=False)
        Stream.lines(source).map(self._render).to_writer(out)
