"""Text utilities built on the shared line sources."""

from linekit.tools.base import InputRunner, RunReport
from linekit.tools.cat import Concatenator, NumberingMode, CatState, render_line
from linekit.tools.head import HeadLimiter, HeadMode, LimiterState
from linekit.tools.uniq import DuplicateCollapser, RunState, collapse
from linekit.tools.wc import StreamCounter, Tally, Field, select_fields
from linekit.tools.find import TreeFilter, EntryType
from linekit.tools.echo import echo

__all__ = [
    "InputRunner",
    "RunReport",
    "Concatenator",
    "NumberingMode",
    "CatState",
    "render_line",
    "HeadLimiter",
    "HeadMode",
    "LimiterState",
    "DuplicateCollapser",
    "RunState",
    "collapse",
    "StreamCounter",
    "Tally",
    "Field",
    "select_fields",
    "TreeFilter",
    "EntryType",
    "echo",
]
