"""
Fluent wrapper over lazy sequences.
"""

import logging
from typing import Callable, Iterable, Iterator, List, Optional, TypeVar, Union

from lq.config import FlatMapNonePolicy
from lq.streams import sequence as seq

T = TypeVar('T')
U = TypeVar('U')

logger = logging.getLogger(__name__)


class Enumerable(Iterable[T]):
    """
    Chainable carrier of one lazy sequence.

    Transformations return a new Enumerable and evaluate nothing. Terminal
    operations (reduce, reduce_to, for_each, to_list) drive the whole
    pipeline on the calling thread.
    """

    def __init__(self, sequence: Iterable[T]):
        """
        Initialize enumerable.

        Args:
            sequence: Any re-iterable source, typically a LazySequence
        """
        if not hasattr(sequence, '__iter__'):
            raise TypeError("Source must be iterable")
        self._seq = sequence

    def __iter__(self) -> Iterator[T]:
        return iter(self._seq)

    # Transformation operators

    def filter(self, predicate: Callable[[T], bool]) -> 'Enumerable[T]':
        """Keep only elements matching predicate."""
        return Enumerable(seq.filter(self._seq, predicate))

    def map(self, transform: Callable[[T], U]) -> 'Enumerable[U]':
        """Apply function to each element."""
        return Enumerable(seq.map(self._seq, transform))

    def flat_map(self, transform: Callable[[T], Iterable[U]],
                 none_policy: Optional[Union[FlatMapNonePolicy, str]] = None,
                 scalars: Optional[bool] = None) -> 'Enumerable[U]':
        """
        Map each element to multiple elements.

        See ``lq.streams.sequence.flat_map`` for the policy arguments.
        """
        return Enumerable(
            seq.flat_map(self._seq, transform, none_policy=none_policy, scalars=scalars)
        )

    # Terminal operators

    def reduce(self, initial: T, reducer: Callable[[T, T], T]) -> T:
        """Reduce stream to single value."""
        return seq.reduce(self._seq, initial, reducer)

    def reduce_to(self, initial: U, reducer: Callable[[U, T], U]) -> U:
        """Reduce stream to a value of a different type."""
        return seq.reduce_to(self._seq, initial, reducer)

    def for_each(self, action: Callable[[T], None]) -> None:
        """Apply function to each element."""
        count = 0
        for item in self._seq:
            action(item)
            count += 1
        logger.debug(f"for_each visited {count} elements")

    def to_list(self) -> List[T]:
        """Collect all elements into a list."""
        result = list(self._seq)
        logger.debug(f"to_list collected {len(result)} elements")
        return result

    # Factory methods

    @classmethod
    def from_iterable(cls, iterable: Iterable[T]) -> 'Enumerable[T]':
        """Create enumerable from iterable."""
        return cls(iterable)


def from_(sequence: Iterable[T]) -> Enumerable[T]:
    """Wrap ``sequence`` for fluent chaining without evaluating it."""
    return Enumerable(sequence)
