"""
Stream operators for transformation.

Each operator's ``apply`` is a generator: calling it evaluates nothing, and
the work for one element happens only when the consumer pulls that element.
Operators hold no per-traversal state, so one operator can back any number
of concurrent traversals.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Iterator, Optional, TypeVar, Union

from lq.config import FlatMapNonePolicy, LqConfig

T = TypeVar('T')
U = TypeVar('U')

logger = logging.getLogger(__name__)


class StreamOperator(ABC):
    """Base class for stream operators."""

    @abstractmethod
    def apply(self, iterator: Iterator[T]) -> Iterator[Any]:
        """Apply operator to iterator."""
        pass


class MapOperator(StreamOperator):
    """Replace each element with ``transform(element)``."""

    def __init__(self, transform: Callable[[T], U]):
        self.transform = transform

    def apply(self, iterator: Iterator[T]) -> Iterator[U]:
        transform = self.transform
        for item in iterator:
            yield transform(item)


class FilterOperator(StreamOperator):
    """Forward only the elements ``predicate`` accepts."""

    def __init__(self, predicate: Callable[[T], bool]):
        self.predicate = predicate

    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        predicate = self.predicate
        for item in iterator:
            if not predicate(item):
                continue
            yield item


class FlatMapOperator(StreamOperator):
    """
    Map each element to an iterable and forward its elements in order.

    Args:
        transform: Function returning an iterable for each element
        none_policy: What to do when ``transform`` returns None, as a
            FlatMapNonePolicy or its value (``"raise"``, ``"empty"``).
            Defaults to ``LqConfig.flat_map_none_policy``, read from the
            global config each time a traversal starts.
        scalars: Forward a non-iterable result as a single element instead
            of raising TypeError. Defaults to ``LqConfig.flat_map_scalars``,
            read the same way.

    Raises:
        ValueError: If ``none_policy`` is not a known policy name
    """

    def __init__(self, transform: Callable[[T], Iterable[U]],
                 none_policy: Optional[Union[FlatMapNonePolicy, str]] = None,
                 scalars: Optional[bool] = None):
        self.transform = transform
        self.none_policy = None if none_policy is None else FlatMapNonePolicy(none_policy)
        self.scalars = scalars

    def apply(self, iterator: Iterator[T]) -> Iterator[U]:
        config = LqConfig.get_instance()
        none_policy = config.flat_map_none_policy if self.none_policy is None else self.none_policy
        scalars = config.flat_map_scalars if self.scalars is None else self.scalars

        for item in iterator:
            result = self.transform(item)
            if result is None:
                if none_policy == FlatMapNonePolicy.EMPTY:
                    logger.debug(f"flat_map transform returned None for {item!r}, skipping")
                    continue
                raise TypeError(f"flat_map transform returned None for {item!r}")

            try:
                inner = iter(result)
            except TypeError:
                if not scalars:
                    raise TypeError(
                        f"flat_map transform must return an iterable, "
                        f"got {type(result).__name__}"
                    ) from None
                yield result
                continue

            yield from inner
