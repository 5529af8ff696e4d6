from __future__ import annotations
import typing
from itertools import chain, islice, takewhile, dropwhile
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable
    from .cycle import LazyCycle
    from .extract import Extract
    from .tee import Tee
    from .grouping import GroupBy


def _check_count(count: int, name: str = "count") -> None:
    if count < 0:
        raise ValueError(f"{name} must be non-negative, got {count}")


class _CoreOperations(Generic[T]):
    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        from ..enumerable import Enumerable
        return Enumerable(x for x in self if predicate(x))

    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        from ..enumerable import Enumerable
        return Enumerable(selector(x) for x in self)

    def select_many(self: 'Enumerable[T]', selector: Selector[T, Iterable[U]]) -> 'Enumerable[U]':
        """project and flatten sequences"""
        from ..enumerable import Enumerable
        return Enumerable(chain.from_iterable(selector(x) for x in self))

    def select_with_index(self: 'Enumerable[T]', selector: Callable[[T, int], U]) -> 'Enumerable[U]':
        """project each element to a new form, using the element's index"""
        from ..enumerable import Enumerable
        return Enumerable(selector(item, index) for index, item in enumerate(self))

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements, pulling no further than that"""
        from ..enumerable import Enumerable
        _check_count(count)
        # islice stops after exactly count pulls
        return Enumerable(islice(self, count))

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        from ..enumerable import Enumerable
        _check_count(count)
        return Enumerable(islice(self, count, None))

    def take_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """take elements while predicate is true"""
        from ..enumerable import Enumerable
        # note: the first failing element is pulled and dropped
        return Enumerable(takewhile(predicate, self))

    def skip_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """skip elements while predicate is true"""
        from ..enumerable import Enumerable
        return Enumerable(dropwhile(predicate, self))

    def append(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """appends a value to the end of the sequence"""
        from ..enumerable import Enumerable
        return Enumerable(chain(self, (element,)))

    def prepend(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """adds a value to the beginning of the sequence"""
        from ..enumerable import Enumerable
        return Enumerable(chain((element,), self))

    def concat(self: 'Enumerable[T]', other: Iterable[T]) -> 'Enumerable[T]':
        """continues with 'other' once this sequence is exhausted"""
        from ..enumerable import Enumerable
        return Enumerable(chain(self, other))

    def default_if_empty(self: 'Enumerable[T]', default_value: T) -> 'Enumerable[T]':
        """returns the elements of a sequence, or a default value in a singleton collection if the sequence is empty"""
        from ..enumerable import Enumerable
        def default_data():
            empty = True
            for item in self:
                empty = False
                yield item
            if empty:
                yield default_value
        return Enumerable(default_data())

    def of_type(self: 'Enumerable[T]', type_filter: Type[U]) -> 'Enumerable[U]':
        """filters the elements of a sequence based on a specified type"""
        return self.where(lambda item: isinstance(item, type_filter))

    def run_length_encode(self: 'Enumerable[T]') -> 'Enumerable[Tuple[T, int]]':
        """
        consecutive equal elements collapse into (element, count) tuples.
        built on group_by, so runs are emitted as soon as they close.
        """
        return self.group_by().select(lambda pair: (pair[0], len(pair[1])))

    # --- adaptors ---

    def lazy_cycle(self: 'Enumerable[T]') -> 'LazyCycle[T]':
        """repeat this sequence forever, recording values on the first pass"""
        from .cycle import LazyCycle
        return LazyCycle(self)

    def extract(self: 'Enumerable[T]', index: int, default: Optional[T] = None) -> Tuple[Optional[T], 'Extract[T]']:
        """
        pull out the element at 'index' and return it together with an enumerable
        of every other element, in the original order.
        'default' stands in for the element when the sequence is too short.
        """
        from .extract import extract_at
        return extract_at(self, index, default)

    def tee(self: 'Enumerable[T]', count: int = 2) -> Tuple['Tee[T]', ...]:
        """split into independent handles that each see every element"""
        from .tee import split
        return split(self, count)

    def group_by(self: 'Enumerable[T]', key_selector: Optional[KeySelector[T, K]] = None) -> 'GroupBy[T, K]':
        """
        group consecutive runs of elements with equal keys into (key, list) pairs.
        non-adjacent runs sharing a key stay separate.
        """
        from .grouping import GroupBy
        return GroupBy(self, key_selector)
