"""
Collectors: strategies for turning a stream into a container or a summary.

A Collector is three functions:
    supplier     creates the mutable accumulation container
    accumulator  folds one element into the container
    finisher     converts the container into the final result

Stream.collect() drives them. The factories below cover the common cases.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from streamlab.comparators import Comparator, natural_order
from streamlab.errors import DuplicateKeyError
from streamlab.evaluator import as_callable
from streamlab.optional import OptionalValue


def _identity(x: Any) -> Any:
    return x


@dataclass(frozen=True)
class Collector:
    supplier: Callable[[], Any]
    accumulator: Callable[[Any, Any], Any]
    finisher: Callable[[Any], Any] = _identity

    def collect(self, items) -> Any:
        container = self.supplier()
        for item in items:
            self.accumulator(container, item)
        return self.finisher(container)


def to_list() -> Collector:
    return Collector(list, lambda acc, item: acc.append(item))


def to_set() -> Collector:
    return Collector(set, lambda acc, item: acc.add(item))


def to_tuple() -> Collector:
    return Collector(list, lambda acc, item: acc.append(item), tuple)


def to_dict(
    key_fn: Callable[[Any], Any],
    value_fn: Callable[[Any], Any] = _identity,
    merge: Optional[Callable[[Any, Any], Any]] = None,
) -> Collector:
    """
    Collect into a dict keyed by key_fn(item).

    Raises (at collect time):
        DuplicateKeyError: two elements share a key and no merge is given
    """

    def accumulate(acc: Dict[Any, Any], item: Any) -> None:
        key = key_fn(item)
        value = value_fn(item)
        if key in acc:
            if merge is None:
                raise DuplicateKeyError(
                    f"Duplicate key {key!r} (attempted merging values {acc[key]!r} and {value!r})"
                )
            acc[key] = merge(acc[key], value)
        else:
            acc[key] = value

    return Collector(dict, accumulate)


def joining(separator: str = "", prefix: str = "", suffix: str = "") -> Collector:
    return Collector(
        list,
        lambda acc, item: acc.append(str(item)),
        lambda acc: prefix + separator.join(acc) + suffix,
    )


def counting() -> Collector:
    return Collector(lambda: [0], _increment, lambda acc: acc[0])


def _increment(acc: List[int], item: Any) -> None:
    acc[0] += 1


def summing(fn: Callable[[Any], Any] = _identity) -> Collector:
    def accumulate(acc: List[Any], item: Any) -> None:
        acc[0] += fn(item)

    return Collector(lambda: [0], accumulate, lambda acc: acc[0])


def averaging(fn: Callable[[Any], Any] = _identity) -> Collector:
    """Arithmetic mean of fn(item); 0.0 for an empty stream."""

    def accumulate(acc: List[Any], item: Any) -> None:
        acc[0] += fn(item)
        acc[1] += 1

    def finish(acc: List[Any]) -> Any:
        return acc[0] / acc[1] if acc[1] else 0.0

    return Collector(lambda: [0, 0], accumulate, finish)


def grouping_by(key_fn: Callable[[Any], Any], downstream: Optional[Collector] = None) -> Collector:
    """Group elements by key; each group is reduced with the downstream collector."""
    downstream = downstream or to_list()

    def accumulate(acc: Dict[Any, Any], item: Any) -> None:
        key = key_fn(item)
        if key not in acc:
            acc[key] = downstream.supplier()
        downstream.accumulator(acc[key], item)

    def finish(acc: Dict[Any, Any]) -> Dict[Any, Any]:
        return {key: downstream.finisher(group) for key, group in acc.items()}

    return Collector(dict, accumulate, finish)


def partitioning_by(predicate, downstream: Optional[Collector] = None) -> Collector:
    """Split elements into {True: ..., False: ...}; both keys are always present."""
    downstream = downstream or to_list()
    test = as_callable(predicate)

    def accumulate(acc: Dict[bool, Any], item: Any) -> None:
        downstream.accumulator(acc[bool(test(item))], item)

    def finish(acc: Dict[bool, Any]) -> Dict[bool, Any]:
        return {key: downstream.finisher(group) for key, group in acc.items()}

    return Collector(
        lambda: {True: downstream.supplier(), False: downstream.supplier()},
        accumulate,
        finish,
    )


def _best_by(comparator: Comparator, keep_new: Callable[[int], bool]) -> Collector:
    def accumulate(acc: List[Any], item: Any) -> None:
        if not acc:
            acc.append(item)
        elif keep_new(comparator.compare(item, acc[0])):
            acc[0] = item

    return Collector(
        list,
        accumulate,
        lambda acc: OptionalValue.of(acc[0]) if acc else OptionalValue.empty(),
    )


def min_by(comparator: Optional[Comparator] = None) -> Collector:
    return _best_by(comparator or natural_order(), lambda result: result < 0)


def max_by(comparator: Optional[Comparator] = None) -> Collector:
    return _best_by(comparator or natural_order(), lambda result: result > 0)
