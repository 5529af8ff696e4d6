from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from functools import reduce
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

_MISSING = object()


class TerminalAccessor(Generic[T]):
    """
    eager consumers. every method here pulls from the enumerable, and since
    enumerables are single-pass, whatever it pulls is gone afterwards.
    """

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """drain into a list"""
        return list(self._enumerable)

    def array(self) -> np.ndarray:
        """drain into a numpy array"""
        return np.array(self.list())

    def set(self) -> Set[T]:
        """drain into a set"""
        return set(self._enumerable)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """drain into a dictionary; later keys overwrite earlier ones"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._enumerable}

    def pandas(self) -> pd.Series:
        """drain into a pandas series"""
        return pd.Series(self.list())

    def df(self, columns: Optional[List[str]] = None) -> pd.DataFrame:
        """drain into a pandas dataframe, e.g. df(columns=['key', 'group']) after group_by"""
        return pd.DataFrame(self.list(), columns=columns)

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return sum(1 for _ in self._enumerable)
        return sum(1 for x in self._enumerable if predicate(x))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition; stops at the first hit"""
        if predicate is None:
            return next(self._enumerable, _MISSING) is not _MISSING
        return any(predicate(x) for x in self._enumerable)

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition; stops at the first miss"""
        return all(predicate(x) for x in self._enumerable)

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element, pulling nothing past it"""
        if predicate is None:
            item = next(self._enumerable, _MISSING)
            if item is _MISSING: raise ValueError("sequence contains no elements")
            return item
        for item in self._enumerable:
            if predicate(item): return item
        raise ValueError("no element satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        try: return self.first(predicate)
        except ValueError: return default

    def single(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get single element, erroring if not exactly one"""
        data = [x for x in self._enumerable if predicate(x)] if predicate else self.list()
        if len(data) == 0: raise ValueError("sequence contains no matching elements")
        if len(data) > 1: raise ValueError("sequence contains more than one matching element")
        return data[0]

    def aggregate(self, accumulator: Accumulator[T, T], seed: Optional[T] = None) -> T:
        """applies accumulator function over sequence"""
        if seed is not None:
            return reduce(accumulator, self._enumerable, seed)
        first = next(self._enumerable, _MISSING)
        if first is _MISSING: raise ValueError("cannot aggregate empty sequence without seed")
        return reduce(accumulator, self._enumerable, first)
