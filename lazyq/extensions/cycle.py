from __future__ import annotations
import logging
from ..types import *
from ..enumerable import Enumerable

logger = logging.getLogger(__name__)


class LazyCycle(Enumerable[T]):
    """
    infinite replay of a finite sequence.

    values are handed out as they arrive from the source and recorded in a
    history; once the source runs dry the history is replayed round-robin.
    an empty source gives an empty cycle, not an endless loop.
    """

    def __init__(self, source: Iterable[T]):
        super().__init__(source)
        self._history: List[T] = []
        self._position = 0

    @property
    def history_size(self) -> int:
        return len(self._history)

    def __next__(self) -> T:
        if not self._producer.exhausted:
            try:
                item = self._producer.pull()
            except StopIteration:
                logger.debug("cycle source exhausted, replaying %d values", len(self._history))
            else:
                self._history.append(item)
                return item

        if not self._history:
            raise StopIteration

        item = self._history[self._position]
        self._position = (self._position + 1) % len(self._history)
        return item
