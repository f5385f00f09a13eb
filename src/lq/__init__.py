"""
lq: lazy, composable sequence operations.

Filter, map, flat-map and reduce over pull-based, re-iterable sequences,
either as free functions or chained through the fluent Enumerable wrapper:

    >>> import lq
    >>> lq.from_(lq.values([1, 2, 3, 4])).filter(lambda n: n % 2 == 0).to_list()
    [2, 4]
"""

from lq.config import LqConfig, FlatMapNonePolicy
from lq.streams import (
    Enumerable,
    LazySequence,
    from_,
    values,
    filter,
    map,
    flat_map,
    reduce,
    reduce_to,
)

__version__ = "0.1.0"
__license__ = "Apache-2.0"

__all__ = [
    "LqConfig",
    "FlatMapNonePolicy",
    "Enumerable",
    "LazySequence",
    "from_",
    "values",
    "filter",
    "map",
    "flat_map",
    "reduce",
    "reduce_to",
]

# Configure default settings
LqConfig.set_defaults()
