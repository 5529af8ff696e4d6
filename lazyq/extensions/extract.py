from __future__ import annotations
import logging
from collections import deque
from ..types import *
from ..enumerable import Enumerable

logger = logging.getLogger(__name__)


class Extract(Enumerable[T]):
    """
    an enumerable with elements removed from the middle.

    the logical sequence is always the pending buffer followed by whatever the
    source has not produced yet. pop() removes one element from that logical
    sequence; iteration drains the buffer first and then pulls fresh values.
    """

    def __init__(self, source: Iterable[T]):
        super().__init__(source)
        self._buffer: Deque[T] = deque()

    @property
    def buffered(self) -> int:
        """values pulled from the source but not yet handed out"""
        return len(self._buffer)

    def __next__(self) -> T:
        if self._buffer:
            return self._buffer.popleft()
        return self._producer.pull()

    def pop(self, index: int, default: Optional[T] = None) -> Optional[T]:
        """
        remove and return the element 'index' positions ahead, keeping every
        element before it buffered in order. returns 'default' when the
        sequence ends first; whatever was buffered on the way stays available.
        """
        if index < 0:
            raise ValueError(f"index must be non-negative, got {index}")

        if index < len(self._buffer):
            item = self._buffer[index]
            del self._buffer[index]
            return item

        # buffer everything in front of the target, then take the target itself
        while len(self._buffer) < index:
            try:
                self._buffer.append(self._producer.pull())
            except StopIteration:
                logger.debug("extract index %d out of range, source held %d", index, len(self._buffer))
                return default
        try:
            return self._producer.pull()
        except StopIteration:
            logger.debug("extract index %d out of range, source held %d", index, len(self._buffer))
            return default


def extract_at(source: Iterable[T], index: int, default: Optional[T] = None) -> Tuple[Optional[T], Extract[T]]:
    """the element at 'index' and an enumerable of every other element"""
    remainder = Extract(source)
    item = remainder.pop(index, default)
    return item, remainder
