"""
Numeric streams: a Stream of numbers with arithmetic terminal operations.

Summation follows the element types:
    - int and Decimal elements sum exactly (Decimal keeps its scale,
      so 11.11 + 22.22 + 33.33 is exactly 66.66)
    - as soon as one element is a float, math.fsum is used, which
      avoids the drift of naive left-to-right float addition
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from streamlab.optional import OptionalValue
from streamlab.stream import Stream


def _total(items: List[Any]) -> Any:
    if any(isinstance(item, float) for item in items):
        return math.fsum(items)
    return sum(items, 0)


@dataclass
class SummaryStatistics:
    """count/sum/min/max/average of a numeric stream, gathered in one pass."""

    count: int = 0
    sum: Any = 0
    min: Optional[Any] = None
    max: Optional[Any] = None
    average: Any = 0.0


class NumericStream(Stream):
    """
    A Stream whose elements are numbers (int, float or Decimal).

    Created by Stream.range(), Stream.range_closed() or map_to_number().
    Intermediate operations keep the numeric type, so map() must stay
    numeric. map_to_obj(), flat_map() and boxed() return a plain Stream.
    """

    def sum(self) -> Any:
        return _total(list(self._take()))

    def average(self) -> OptionalValue:
        items = list(self._take())
        if not items:
            return OptionalValue.empty()
        return OptionalValue.of(_total(items) / len(items))

    def summary_statistics(self) -> SummaryStatistics:
        items = list(self._take())
        if not items:
            return SummaryStatistics()
        total = _total(items)
        return SummaryStatistics(
            count=len(items),
            sum=total,
            min=min(items),
            max=max(items),
            average=total / len(items),
        )

    def boxed(self) -> Stream:
        return self._chain(self._take(), Stream)

    def map_to_obj(self, fn: Callable[[Any], Any]) -> Stream:
        """Map to arbitrary values; the result is a plain Stream."""
        return self._chain(map(fn, self._take()), Stream)
