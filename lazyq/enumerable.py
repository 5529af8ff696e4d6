from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    """the pull contract: next value, or StopIteration once exhausted"""

    @abstractmethod
    def __next__(self) -> T:
        pass

    def __iter__(self) -> Iterator[T]:
        return self

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, source: Iterable[T]):
        """wrap a source; the source is pulled lazily and only once per value"""
        self._producer: Producer[T] = as_producer(source)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

    def __next__(self) -> T:
        return self._producer.pull()

    # no __len__: list() would consult it and drain the stream

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._producer!r})"

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a single-pass, linq-inspired lazy sequence over any python iterable."""
