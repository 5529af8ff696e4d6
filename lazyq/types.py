import logging
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, Deque
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Accumulator = Callable[[U, T], U]

logger = logging.getLogger(__name__)


class Producer(Generic[T]):
    """
    forward-only pull source with an exhaustion latch.
    once the wrapped iterator raises StopIteration it is released and never
    pulled again; every later pull reports exhaustion as well.
    """

    def __init__(self, source: Iterable[T]):
        self._iterator: Optional[Iterator[T]] = iter(source)
        self._pulled = 0

    @property
    def exhausted(self) -> bool:
        return self._iterator is None

    @property
    def pulled(self) -> int:
        """number of values handed out so far"""
        return self._pulled

    def pull(self) -> T:
        """next value, or StopIteration when there are no more"""
        if self._iterator is None:
            raise StopIteration
        try:
            item = next(self._iterator)
        except StopIteration:
            self._iterator = None
            logger.debug("producer exhausted after %d pulls", self._pulled)
            raise
        self._pulled += 1
        return item

    __next__ = pull

    def __iter__(self) -> Iterator[T]:
        return self

    def __repr__(self) -> str:
        return f"Producer(pulled={self._pulled}, exhausted={self.exhausted})"


def as_producer(source: Iterable[T]) -> Producer[T]:
    """wrap a source once; an existing producer is returned as-is"""
    if isinstance(source, Producer):
        return source
    return Producer(source)
