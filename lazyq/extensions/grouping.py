from __future__ import annotations
from ..types import *
from ..enumerable import Enumerable


def _identity(item):
    return item


class GroupBy(Enumerable[Tuple[K, List[T]]]):
    """
    groups maximal runs of consecutive elements sharing a key.

    yields (key, items) pairs in source order. the key selector runs exactly
    once per element; keys are compared with ==, so equal keys that are not
    adjacent produce separate groups. the pair is handed over, not kept.
    """

    def __init__(self, source: Iterable[T], key_selector: Optional[KeySelector[T, K]] = None):
        super().__init__(source)
        self._key_selector = key_selector or _identity
        self._current_key: Optional[K] = None
        self._current_group: Optional[List[T]] = None
        self._finished = False

    def __next__(self) -> Tuple[K, List[T]]:
        if self._finished:
            raise StopIteration

        for item in self._producer:
            key = self._key_selector(item)
            if self._current_group is None:
                self._current_key, self._current_group = key, [item]
            elif key == self._current_key:
                self._current_group.append(item)
            else:
                completed = (self._current_key, self._current_group)
                self._current_key, self._current_group = key, [item]
                return completed

        # source is dry: flush the pending run once, then stay exhausted
        self._finished = True
        if self._current_group is None:
            raise StopIteration
        completed = (self._current_key, self._current_group)
        self._current_key, self._current_group = None, None
        return completed
