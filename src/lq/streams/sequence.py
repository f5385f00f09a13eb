"""
Lazy sequences and the free combinator functions.

``filter``, ``map`` and ``reduce`` shadow builtins of the same name. Import
the module (``from lq.streams import sequence as seq``) or the names
explicitly; do not star-import it.
"""

from typing import Callable, Iterable, Iterator, Optional, Sequence, TypeVar, Union

from lq.config import FlatMapNonePolicy
from lq.streams.operators import (
    FilterOperator, FlatMapOperator, MapOperator, StreamOperator
)

T = TypeVar('T')
U = TypeVar('U')


class LazySequence(Iterable[T]):
    """
    A re-iterable, pull-driven sequence.

    Every ``iter()`` call asks the factory for a fresh iterator, so each
    traversal is independent of any other traversal of the same sequence.
    """

    def __init__(self, factory: Callable[[], Iterator[T]]):
        self._factory = factory

    def __iter__(self) -> Iterator[T]:
        return self._factory()

    @classmethod
    def from_operator(cls, source: Iterable, operator: StreamOperator) -> 'LazySequence':
        """Sequence that runs ``operator`` over a fresh pass of ``source``."""
        return cls(lambda: operator.apply(iter(source)))


def values(items: Sequence[T]) -> LazySequence[T]:
    """Lazy sequence over the elements of ``items``, in order."""
    return LazySequence(lambda: iter(items))


def filter(source: Iterable[T], predicate: Callable[[T], bool]) -> LazySequence[T]:
    """Keep only elements matching predicate."""
    return LazySequence.from_operator(source, FilterOperator(predicate))


def map(source: Iterable[T], transform: Callable[[T], U]) -> LazySequence[U]:
    """Apply transform to each element."""
    return LazySequence.from_operator(source, MapOperator(transform))


def flat_map(source: Iterable[T], transform: Callable[[T], Iterable[U]],
             none_policy: Optional[Union[FlatMapNonePolicy, str]] = None,
             scalars: Optional[bool] = None) -> LazySequence[U]:
    """
    Replace each element with the elements of ``transform(element)``.

    An inner iterable is drained before the next outer element is pulled.

    Args:
        source: Outer sequence
        transform: Function returning an iterable per element
        none_policy: Overrides ``LqConfig.flat_map_none_policy``; a
            FlatMapNonePolicy or its value (``"raise"``, ``"empty"``)
        scalars: Overrides ``LqConfig.flat_map_scalars``

    Without an override, both policies come from the global LqConfig as
    it stands when each traversal starts, not when the sequence is built.

    Raises:
        ValueError: If ``none_policy`` is not a known policy name
    """
    operator = FlatMapOperator(transform, none_policy=none_policy, scalars=scalars)
    return LazySequence.from_operator(source, operator)


def reduce(source: Iterable[T], initial: T, reducer: Callable[[T, T], T]) -> T:
    """Left fold of ``reducer`` over ``source`` starting from ``initial``."""
    result = initial
    for item in source:
        result = reducer(result, item)
    return result


def reduce_to(source: Iterable[T], initial: U, reducer: Callable[[U, T], U]) -> U:
    """Left fold whose accumulator type differs from the element type."""
    result = initial
    for item in source:
        result = reducer(result, item)
    return result
