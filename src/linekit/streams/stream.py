"""
Lazy streams over lines and other items.
"""

from typing import (
    BinaryIO, Callable, Iterable, Iterator, List, TypeVar, Union
)

from linekit.streams.source import ByteSource

T = TypeVar('T')
U = TypeVar('U')

Stage = Callable[[Iterator], Iterator]


class Stream(Iterable[T]):
    """
    A lazy, single-pass stream. Nothing is read until the stream is iterated.

    Stages are applied in the order they were added, one item at a time,
    so a line is fully handled before the next one is read.
    """

    def __init__(self, source: Union[Iterable[T], Callable[[], Iterator[T]]]):
        """
        Initialize stream.

        Args:
            source: Data source (iterable, or callable returning an iterator)
        """
        if callable(source):
            self._source = source
        elif hasattr(source, '__iter__'):
            self._source = lambda: iter(source)
        else:
            raise TypeError("Source must be iterable or callable")

        self._stages: List[Stage] = []

    def __iter__(self) -> Iterator[T]:
        iterator = self._source()
        for stage in self._stages:
            iterator = stage(iterator)
        return iterator

    def _then(self, stage: Stage) -> 'Stream':
        new_stream = Stream(self._source)
        new_stream._stages = self._stages + [stage]
        return new_stream

    def map(self, func: Callable[[T], U]) -> 'Stream[U]':
        """Apply function to each element."""
        return self._then(lambda items: (func(item) for item in items))

    def filter(self, predicate: Callable[[T], bool]) -> 'Stream[T]':
        """Keep only elements matching predicate."""
        return self._then(lambda items: (item for item in items if predicate(item)))

    def reduce(self, func: Callable[[U, T], U], initial: U) -> U:
        """Fold the stream into a single value."""
        result = initial
        for item in self:
            result = func(result, item)
        return result

    def foreach(self, func: Callable[[T], None]) -> None:
        for item in self:
            func(item)

    def to_writer(self, out: BinaryIO) -> None:
        """Write every non-empty element (bytes) to a binary handle."""
        for item in self:
            if item:
                out.write(item)

    @classmethod
    def lines(cls, source: ByteSource) -> 'Stream[bytes]':
        """Create stream of raw lines read from a byte source."""
        return cls(source.__iter__)
