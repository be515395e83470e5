"""
Walk directory trees and select entries by type and name.
"""

import os
import re
import stat
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, FrozenSet, Iterable, Iterator, List, Optional, Sequence

from linekit.streams import Stream

logger = logging.getLogger(__name__)


class EntryType(Enum):
    """Entry kinds, keyed by their command-line letter."""
    DIR = "d"
    FILE = "f"
    LINK = "l"


ALL_TYPES: FrozenSet[EntryType] = frozenset(EntryType)


@dataclass(frozen=True)
class Entry:
    path: str
    name: str
    type: Optional[EntryType]


def _entry_type(is_link: bool, is_dir: bool, is_file: bool) -> Optional[EntryType]:
    if is_link:
        return EntryType.LINK
    if is_dir:
        return EntryType.DIR
    if is_file:
        return EntryType.FILE
    return None  # sockets, fifos, devices


def _root_entry(root: str) -> Entry:
    st = os.lstat(root)
    kind = _entry_type(stat.S_ISLNK(st.st_mode), stat.S_ISDIR(st.st_mode), stat.S_ISREG(st.st_mode))
    name = os.path.basename(os.path.normpath(root)) or root
    return Entry(root, name, kind)


def _children(directory: str, on_error: Callable[[OSError], None]) -> Iterator[Entry]:
    try:
        with os.scandir(directory) as it:
            children = sorted(it, key=lambda e: e.name)
    except OSError as e:
        on_error(e)
        return

    for child in children:
        try:
            kind = _entry_type(child.is_symlink(),
                               child.is_dir(follow_symlinks=False),
                               child.is_file(follow_symlinks=False))
        except OSError as e:
            on_error(e)
            continue
        yield Entry(os.path.join(directory, child.name), child.name, kind)


def walk(root: str, on_error: Callable[[OSError], None]) -> Iterator[Entry]:
    """
    Yield root and everything beneath it in preorder, children in name order.

    Symbolic links are yielded but never followed. Errors are passed to
    on_error and the walk carries on with the next sibling. Pending
    directories are kept on an explicit stack, so depth is not limited by
    the recursion limit.
    """
    try:
        top = _root_entry(root)
    except OSError as e:
        on_error(e)
        return
    yield top
    if top.type != EntryType.DIR:
        return

    stack = [_children(root, on_error)]
    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue
        yield entry
        if entry.type == EntryType.DIR:
            stack.append(_children(entry.path, on_error))


def compile_patterns(patterns: Iterable[str]) -> List[re.Pattern[str]]:
    return [re.compile(p) for p in patterns]


def make_filter(types: Optional[Iterable[EntryType]] = None,
                patterns: Sequence[re.Pattern[str]] = ()) -> Callable[[Entry], bool]:
    """
    Build an entry predicate: type in types AND name matches any pattern.

    No types means every type; no patterns means every name.
    """
    wanted = frozenset(types) if types else ALL_TYPES

    def matches(entry: Entry) -> bool:
        if entry.type not in wanted:
            return False
        return not patterns or any(p.search(entry.name) for p in patterns)

    return matches


def _log_error(error: OSError) -> None:
    logger.error(f"{error}")


class TreeFilter:
    """Yield the paths under each root that pass the type and name filters."""

    def __init__(self,
                 types: Optional[Iterable[EntryType]] = None,
                 patterns: Iterable[str] = (),
                 on_error: Optional[Callable[[OSError], None]] = None):
        self.predicate = make_filter(types, compile_patterns(patterns))
        self.on_error = on_error or _log_error

    def find(self, roots: Iterable[str] = (".",)) -> Stream[str]:
        roots = list(roots) or ["."]

        def entries() -> Iterator[Entry]:
            for root in roots:
                yield from walk(root, self.on_error)

        return Stream(entries).filter(self.predicate).map(lambda entry: entry.path)
