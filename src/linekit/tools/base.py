"""Shared run loop for tools that process a list of inputs in order."""

import sys
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import BinaryIO, Callable, Iterable, List, Optional, Sequence

from linekit.config import LineKitConfig, config as default_config
from linekit.errors import InputOpenError
from linekit.streams import ByteSource, open_input

ErrorReporter = Callable[[InputOpenError], None]


@dataclass
class RunReport:
    """Outcome of one invocation across all of its inputs."""
    processed: int = 0
    failures: List[InputOpenError] = field(default_factory=list)
    
    @property
    def ok(self) -> bool:
        return not self.failures


class InputRunner(ABC):
    """
    Open each input in turn, process it, and close it before the next.
    
    Open failures are reported and skipped; anything raised while an open
    input is being processed aborts the whole run.
    """
    
    #: Prefix placed before the open-failure message, if any
    error_prefix = ""
    
    def __init__(self,
                 cfg: Optional[LineKitConfig] = None,
                 on_error: Optional[ErrorReporter] = None,
                 logger: Optional[logging.Logger] = None):
        self.config = cfg or default_config
        self.on_error = on_error or self._default_reporter
        self.logger = logger or logging.getLogger(type(self).__module__)
    
    def _default_reporter(self, error: InputOpenError) -> None:
        print(f"{self.error_prefix}{error}", file=sys.stderr)
    
    def run(self,
            designators: Iterable[str],
            out: BinaryIO,
            stdin: Optional[BinaryIO] = None) -> RunReport:
        """
        Process every input in order, writing to out.
        
        Args:
            designators: Paths and/or the stdin designator; empty means stdin
            out: Binary output handle, shared across inputs
            stdin: Stream backing the stdin designator
        """
        names = list(designators) or [self.config.stdin_designator]
        report = RunReport()
        self.begin(names)
        
        for index, name in enumerate(names):
            try:
                source = open_input(name, stdin=stdin, cfg=self.config)
            except InputOpenError as e:
                self.logger.warning(f"Skipping {name}: {e.error}")
                report.failures.append(e)
                self.on_error(e)
                continue
            
            with source:
                self.process(source, out, index, names)
            report.processed += 1
        
        self.finish(out, names)
        return report
    
    def begin(self, names: Sequence[str]) -> None:
        """Hook called once before the first input is opened."""
        pass
    
    @abstractmethod
    def process(self, source: ByteSource, out: BinaryIO, index: int, names: Sequence[str]) -> None:
        """Drain one open source."""
        pass
    
    def finish(self, out: BinaryIO, names: Sequence[str]) -> None:
        """Hook called once after the last input."""
        pass
