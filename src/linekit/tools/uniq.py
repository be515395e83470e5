"""
Collapse runs of adjacent duplicate lines.
"""

import logging
from dataclasses import dataclass
from typing import BinaryIO, Iterable, Iterator, Optional, Tuple

from linekit.config import LineKitConfig, config as default_config
from linekit.streams import ByteSource, open_input, open_output


@dataclass
class RunState:
    """The line heading the current run and how many lines the run holds."""
    previous: bytes
    count: int = 1


def strip_newline(line: bytes) -> bytes:
    return line[:-1] if line.endswith(b"\n") else line


def same_line(previous: bytes, current: bytes) -> bool:
    """Byte equality, ignoring a single trailing newline on either side."""
    return strip_newline(previous) == strip_newline(current)


def collapse(lines: Iterable[bytes]) -> Iterator[Tuple[int, bytes]]:
    """
    Yield (run length, first line of run) for each run of adjacent duplicates.

    Only the current run's head is held in memory.
    """
    iterator = iter(lines)
    first = next(iterator, None)
    if first is None:
        return

    state = RunState(first)
    for current in iterator:
        if same_line(state.previous, current):
            state.count += 1
        else:
            yield state.count, state.previous
            state = RunState(current)

    yield state.count, state.previous


def format_run(count: int, line: bytes, show_counts: bool, width: int = 4) -> bytes:
    """Render a run. The line's own newline, or lack of one, is kept as read."""
    if show_counts:
        return f"{count:>{width}} ".encode() + line
    return line


class DuplicateCollapser:
    """Collapse adjacent duplicate lines from one input into one output."""

    def __init__(self,
                 show_counts: bool = False,
                 cfg: Optional[LineKitConfig] = None,
                 logger: Optional[logging.Logger] = None):
        self.show_counts = show_counts
        self.config = cfg or default_config
        self.logger = logger or logging.getLogger(__name__)

    def process(self, source: ByteSource, out: BinaryIO) -> int:
        """Collapse one open source into out. Returns the number of runs written."""
        runs = 0
        for count, line in collapse(source):
            out.write(format_run(count, line, self.show_counts, self.config.count_width))
            runs += 1
        return runs

    def run(self,
            input_path: Optional[str] = None,
            output_path: Optional[str] = None,
            stdin: Optional[BinaryIO] = None,
            stdout: Optional[BinaryIO] = None) -> int:
        """
        Collapse input_path (default stdin) into output_path (default stdout).

        Raises:
            InputOpenError: If the input cannot be opened
            OutputOpenError: If the output cannot be opened for appending
        """
        input_path = input_path or self.config.stdin_designator

        with open_input(input_path, stdin=stdin, cfg=self.config) as source:
            out = open_output(output_path, stdout=stdout)
            try:
                runs = self.process(source, out)
            finally:
                if output_path is not None:
                    out.close()

        self.logger.debug(f"Collapsed {input_path} into {runs} run(s)")
        return runs
