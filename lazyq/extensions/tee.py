from __future__ import annotations
import logging
from ..types import *
from ..enumerable import Enumerable

logger = logging.getLogger(__name__)


class _TeeBuffer(Generic[T]):
    """
    the record shared by every handle of one split: the producer and every
    value pulled from it so far. handles keep only their own read index.
    """

    def __init__(self, producer: Producer[T]):
        self.producer = producer
        self.items: List[T] = []
        self._busy = False

    def fetch(self, index: int) -> T:
        """value at 'index', pulling it from the producer if nobody has yet"""
        if index < len(self.items):
            return self.items[index]
        if self._busy:
            raise RuntimeError("tee source pulled re-entrantly while a pull is in progress")
        self._busy = True
        try:
            item = self.producer.pull()
        finally:
            self._busy = False
        self.items.append(item)
        return item


class Tee(Enumerable[T]):
    """one independently paced handle onto a shared, buffered source"""

    def __init__(self, shared: _TeeBuffer[T]):
        super().__init__(shared.producer)
        self._shared = shared
        self._index = 0

    @property
    def lag(self) -> int:
        """buffered values this handle has not read yet"""
        return len(self._shared.items) - self._index

    def __next__(self) -> T:
        item = self._shared.fetch(self._index)
        self._index += 1
        return item


def split(source: Iterable[T], count: int = 2) -> Tuple[Tee[T], ...]:
    """split one source into 'count' handles that each observe every value"""
    if count < 1:
        raise ValueError(f"tee needs at least one handle, got {count}")
    shared = _TeeBuffer(as_producer(source))
    logger.debug("split source into %d tee handles", count)
    return tuple(Tee(shared) for _ in range(count))
