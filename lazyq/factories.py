import typing
from itertools import count as _count, islice, repeat as _repeat
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable
    from .extensions.cycle import LazyCycle
    from .extensions.extract import Extract
    from .extensions.tee import Tee
    from .extensions.grouping import GroupBy

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """wrap any iterable (list, generator, file, another enumerable) lazily"""
    from .enumerable import Enumerable
    return Enumerable(data)

def from_range(start: int, count: Optional[int] = None) -> 'Enumerable[int]':
    """consecutive integers from start; endless when count is None"""
    from .enumerable import Enumerable
    if count is None:
        return Enumerable(_count(start))
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return Enumerable(range(start, start + count))

def repeat(item: T, count: Optional[int] = None) -> 'Enumerable[T]':
    """the same item over and over; endless when count is None"""
    from .enumerable import Enumerable
    if count is None:
        return Enumerable(_repeat(item))
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return Enumerable(_repeat(item, count))

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(())

def generate(generator_func: Callable[[], T], count: Optional[int] = None) -> 'Enumerable[T]':
    """call generator_func once per pulled value; endless when count is None"""
    from .enumerable import Enumerable
    if count is not None and count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    calls = (generator_func() for _ in _repeat(None))
    return Enumerable(calls if count is None else islice(calls, count))

# --- adaptor entry points ---

def lazy_cycle(source: Iterable[T]) -> 'LazyCycle[T]':
    """replay source forever once it runs dry; empty stays empty"""
    from .extensions.cycle import LazyCycle
    return LazyCycle(source)

def extract(source: Iterable[T], index: int, default: Optional[T] = None) -> Tuple[Optional[T], 'Extract[T]']:
    """(element at index or default, enumerable of all other elements)"""
    from .extensions.extract import extract_at
    return extract_at(source, index, default)

def tee(source: Iterable[T], count: int = 2) -> Tuple['Tee[T]', ...]:
    """split source into independently paced handles"""
    from .extensions.tee import split
    return split(source, count)

def group_by(source: Iterable[T], key_selector: Optional[KeySelector[T, K]] = None) -> 'GroupBy[T, K]':
    """(key, run) pairs for each run of consecutive equal keys"""
    from .extensions.grouping import GroupBy
    return GroupBy(source, key_selector)

# --- aliases ---
lazyq = from_iterable
Q = from_iterable
q = from_iterable
