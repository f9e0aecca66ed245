"""
streamlab: worked examples of stream-style sequence processing.

A small fluent Stream type over Python iterables, plus a catalogue of
classic tutorial exercises (filter, map, flat_map, reduce, sorted,
distinct, skip/limit, min/max, any_match/all_match, concat, numeric sums)
each paired with the result it must produce.

    from streamlab import Stream
    Stream.of("c", "e", "a", "d", "b").sorted().to_list()
    -> ['a', 'b', 'c', 'd', 'e']

This package owns NO execution strategy of its own.
Every operation delegates to the language's iteration primitives
(itertools, functools, sorted, min/max, concurrent.futures).
"""

from streamlab.optional import OptionalValue
from streamlab.stream import Stream, StreamBuilder
from streamlab.numeric import NumericStream, SummaryStatistics

__version__ = "0.1.0"

__all__ = ["OptionalValue", "Stream", "StreamBuilder", "NumericStream", "SummaryStatistics"]
