"""Line sources and lazy streams."""

from linekit.streams.source import (
    ByteSource,
    PipeSource,
    FileSource,
    open_input,
    open_output,
)
from linekit.streams.stream import Stream

__all__ = [
    "ByteSource",
    "PipeSource",
    "FileSource",
    "open_input",
    "open_output",
    "Stream",
]
