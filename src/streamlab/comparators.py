"""
Comparators for sorted(), min() and max().

A Comparator wraps a two-argument function returning a negative number,
zero or a positive number. Python's own sort works on keys, so every
comparator can be turned into one with as_key().
"""

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Callable, Optional, Union


def _natural_compare(a: Any, b: Any) -> int:
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


@dataclass(frozen=True)
class Comparator:
    """
    An ordering over stream elements.

    Example:
        comparing(len).then_comparing(natural_order())

    orders words by length, then alphabetically.
    """

    compare: Callable[[Any, Any], int]

    def __call__(self, a: Any, b: Any) -> int:
        return self.compare(a, b)

    def reversed(self) -> "Comparator":
        outer = self.compare
        return Comparator(lambda a, b: outer(b, a))

    def then_comparing(self, other: Union["Comparator", Callable[[Any], Any]]) -> "Comparator":
        """Break ties with another comparator, or with a key function."""
        if not isinstance(other, Comparator):
            other = comparing(other)
        first = self.compare
        second = other.compare

        def compare(a: Any, b: Any) -> int:
            result = first(a, b)
            return result if result != 0 else second(a, b)

        return Comparator(compare)

    def as_key(self) -> Callable[[Any], Any]:
        return cmp_to_key(self.compare)


def natural_order() -> Comparator:
    return Comparator(_natural_compare)


def reverse_order() -> Comparator:
    return natural_order().reversed()


def comparing(key: Callable[[Any], Any], comparator: Optional[Comparator] = None) -> Comparator:
    """Order elements by an extracted key, naturally unless a comparator is given."""
    key_comparator = comparator or natural_order()
    return Comparator(lambda a, b: key_comparator.compare(key(a), key(b)))
