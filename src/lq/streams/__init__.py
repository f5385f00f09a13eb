"""Lazy sequence combinators and the fluent Enumerable wrapper."""

from lq.streams.operators import (
    StreamOperator,
    MapOperator,
    FilterOperator,
    FlatMapOperator,
)
from lq.streams.sequence import (
    LazySequence,
    values,
    filter,
    map,
    flat_map,
    reduce,
    reduce_to,
)
from lq.streams.enumerable import Enumerable, from_

__all__ = [
    "StreamOperator",
    "MapOperator",
    "FilterOperator",
    "FlatMapOperator",
    "LazySequence",
    "values",
    "filter",
    "map",
    "flat_map",
    "reduce",
    "reduce_to",
    "Enumerable",
    "from_",
]
