"""
Byte sources: buffered, line-oriented access to files and standard input.
"""

import os
import sys
import logging
from abc import ABC, abstractmethod
from typing import BinaryIO, Iterator, Optional

from linekit.config import LineKitConfig, config as default_config
from linekit.errors import InputOpenError, OutputOpenError

logger = logging.getLogger(__name__)


class ByteSource(ABC):
    """
    A readable byte stream exposing only line reads and raw byte reads.
    
    ``read_line`` returns the next line with its newline byte when present,
    and ``b""`` once the stream is exhausted. A lone newline is ``b"\\n"``,
    so end of stream is never confused with an empty line.
    """
    
    def __init__(self, name: str):
        self.name = name
    
    @property
    @abstractmethod
    def handle(self) -> BinaryIO:
        """Underlying buffered binary handle."""
        pass
    
    def read_line(self) -> bytes:
        """Read up to and including the next newline."""
        return self.handle.readline()
    
    def read_bytes(self, n: int) -> bytes:
        """Read up to n bytes, ignoring line boundaries."""
        return self.handle.read(n)
    
    def close(self) -> None:
        pass
    
    def __iter__(self) -> Iterator[bytes]:
        while True:
            line = self.read_line()
            if not line:
                return
            yield line
    
    def __enter__(self) -> 'ByteSource':
        return self
    
    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
    
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class PipeSource(ByteSource):
    """Interactive or piped stream, normally standard input. Never closed here."""
    
    def __init__(self, stream: BinaryIO, name: str = "-"):
        super().__init__(name)
        self._stream = stream
    
    @property
    def handle(self) -> BinaryIO:
        return self._stream


class FileSource(ByteSource):
    """File-backed stream, opened in binary mode and closed when done."""
    
    def __init__(self, path: str, cfg: Optional[LineKitConfig] = None):
        super().__init__(path)
        cfg = cfg or default_config
        
        try:
            size = os.stat(path).st_size
            buffer_size = cfg.calculate_buffer_size(size)
            self._file = open(path, 'rb', buffering=buffer_size)
        except OSError as e:
            raise InputOpenError(path, e) from e
        
        logger.debug(f"Opened {path} ({size} bytes, buffer={buffer_size})")
    
    @property
    def handle(self) -> BinaryIO:
        return self._file
    
    def close(self) -> None:
        if not self._file.closed:
            self._file.close()


def open_input(designator: str,
               stdin: Optional[BinaryIO] = None,
               cfg: Optional[LineKitConfig] = None) -> ByteSource:
    """
    Resolve an input designator to an open byte source.
    
    Args:
        designator: A path, or the stdin designator ("-")
        stdin: Stream to use for standard input (defaults to sys.stdin.buffer)
        cfg: Configuration to use (defaults to the global instance)
        
    Raises:
        InputOpenError: If the path does not exist or cannot be read
    """
    cfg = cfg or default_config
    if designator == cfg.stdin_designator:
        return PipeSource(stdin if stdin is not None else sys.stdin.buffer, designator)
    return FileSource(designator, cfg)


def open_output(path: Optional[str], stdout: Optional[BinaryIO] = None) -> BinaryIO:
    """
    Open an output destination for appending, or return standard output.
    
    Raises:
        OutputOpenError: If the destination cannot be opened
    """
    if path is None:
        return stdout if stdout is not None else sys.stdout.buffer
    try:
        return open(path, 'ab')
    except OSError as e:
        raise OutputOpenError(path, e) from e
