"""
linekit: streaming line and byte filters in the manner of classic Unix tools.

Inputs are read incrementally through buffered byte sources, so no tool ever
holds a whole file in memory, and output preserves input bytes exactly,
including whether the last line ends in a newline.
"""

import logging

from linekit.config import LineKitConfig
from linekit.errors import LineKitError, ConfigurationError, InputOpenError, OutputOpenError
from linekit.streams import Stream, open_input, open_output
from linekit.tools import (
    Concatenator,
    HeadLimiter,
    DuplicateCollapser,
    StreamCounter,
    TreeFilter,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__license__ = "Apache-2.0"

__all__ = [
    "LineKitConfig",
    "LineKitError",
    "ConfigurationError",
    "InputOpenError",
    "OutputOpenError",
    "Stream",
    "open_input",
    "open_output",
    "Concatenator",
    "HeadLimiter",
    "DuplicateCollapser",
    "StreamCounter",
    "TreeFilter",
]
