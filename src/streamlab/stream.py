"""
The Stream type.

A Stream is a one-shot, lazy sequence of elements with chainable
operations:

    intermediate operations (filter, map, sorted, skip, ...) return a new
    Stream and do no work until a terminal operation runs;

    terminal operations (count, collect, reduce, any_match, ...) pull the
    elements through the chain and return a plain value or an OptionalValue.

Every Stream can be operated on exactly once. Reusing one raises
StreamConsumedError, so a pipeline never silently sees an exhausted
iterator.

A Stream marked parallel() evaluates matching predicates, for_each
actions and combinable reductions on a thread pool. Results equal the
sequential results; only for_each ordering is unspecified.
"""

import itertools
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Callable, Iterable, Iterator, List, Optional

from streamlab import config
from streamlab.collectors import Collector, to_list
from streamlab.comparators import Comparator, natural_order
from streamlab.errors import IllegalStateError, StreamConsumedError
from streamlab.evaluator import as_callable
from streamlab.logger import logger
from streamlab.optional import OptionalValue

_NO_ELEMENT = object()
_DEFAULT_WORKERS = 4
_BATCH_FACTOR = 4


def _distinct(items: Iterable[Any]) -> Iterator[Any]:
    seen = set()
    seen_unhashable: List[Any] = []
    for item in items:
        try:
            if item in seen:
                continue
            seen.add(item)
        except TypeError:
            # Unhashable elements fall back to equality checks
            if item in seen_unhashable:
                continue
            seen_unhashable.append(item)
        yield item


def _flatten(items: Iterable[Any], fn: Callable[[Any], Any]) -> Iterator[Any]:
    for item in items:
        yield from fn(item)


def _peek(items: Iterable[Any], action: Callable[[Any], None]) -> Iterator[Any]:
    for item in items:
        action(item)
        yield item


def _sorted(items: Iterable[Any], comparator: Comparator) -> Iterator[Any]:
    yield from sorted(items, key=comparator.as_key())


def _present_or_empty(value: Any) -> OptionalValue:
    """Empty for the no-element marker; a None element raises TypeError."""
    if value is _NO_ELEMENT:
        return OptionalValue.empty()
    return OptionalValue.of(value)


def _check_size(n: int, operation: str) -> None:
    if n < 0:
        raise ValueError(f"{operation}() needs a non-negative size, got {n}")


def _chunks(items: List[Any], count: int) -> List[List[Any]]:
    size = max(1, -(-len(items) // count))
    return [items[i:i + size] for i in range(0, len(items), size)]


class StreamBuilder:
    """
    Mutable builder for a Stream.

    Example:
        Stream.builder().add("大秦").add("大商").add("大魏").build()
    """

    def __init__(self):
        self._items: List[Any] = []
        self._built = False

    def accept(self, value: Any) -> None:
        if self._built:
            raise IllegalStateError("StreamBuilder has already been built")
        self._items.append(value)

    def add(self, value: Any) -> "StreamBuilder":
        self.accept(value)
        return self

    def build(self) -> "Stream":
        if self._built:
            raise IllegalStateError("StreamBuilder has already been built")
        self._built = True
        return Stream(self._items)


class Stream:
    """
    A lazy, single-use sequence of elements.

    Properties:
        parallel:
            Whether terminal matching, for_each and combinable reductions
            run on a thread pool (see parallel() / sequential()).
    """

    def __init__(self, iterable: Iterable[Any] = (), parallel: bool = False):
        self._iterator = iter(iterable)
        self._parallel = parallel
        self._consumed = False

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def of(cls, *values: Any) -> "Stream":
        return cls(values)

    @classmethod
    def from_iterable(cls, iterable: Iterable[Any]) -> "Stream":
        return cls(iterable)

    @classmethod
    def empty(cls) -> "Stream":
        return cls(())

    @staticmethod
    def builder() -> StreamBuilder:
        return StreamBuilder()

    @staticmethod
    def concat(first: "Stream", second: "Stream") -> "Stream":
        """All elements of first, then all elements of second."""
        parallel = first.is_parallel() or second.is_parallel()
        return Stream(itertools.chain(first._take(), second._take()), parallel=parallel)

    @classmethod
    def iterate(
        cls,
        seed: Any,
        fn: Callable[[Any], Any],
        has_next: Optional[Callable[[Any], bool]] = None,
    ) -> "Stream":
        """seed, fn(seed), fn(fn(seed)), ... while has_next holds (forever if None)."""

        def generate():
            value = seed
            while has_next is None or has_next(value):
                yield value
                value = fn(value)

        return cls(generate())

    @classmethod
    def generate(cls, supplier: Callable[[], Any]) -> "Stream":
        """An infinite stream of supplier() results; bound it with limit()."""

        def generate():
            while True:
                yield supplier()

        return cls(generate())

    @staticmethod
    def range(start: int, end: int):
        """Integers from start (inclusive) to end (exclusive), as a NumericStream."""
        from streamlab.numeric import NumericStream
        return NumericStream(range(start, end))

    @staticmethod
    def range_closed(start: int, end: int):
        """Integers from start to end, both inclusive, as a NumericStream."""
        from streamlab.numeric import NumericStream
        return NumericStream(range(start, end + 1))

    # =========================================================================
    # Internal plumbing
    # =========================================================================

    def _take(self) -> Iterator[Any]:
        if self._consumed:
            raise StreamConsumedError("stream has already been operated upon or closed")
        self._consumed = True
        return self._iterator

    def _chain(self, iterable: Iterable[Any], cls: Optional[type] = None) -> "Stream":
        return (cls or type(self))(iterable, parallel=self._parallel)

    def __iter__(self) -> Iterator[Any]:
        return self._take()

    # =========================================================================
    # Execution mode
    # =========================================================================

    def parallel(self) -> "Stream":
        self._parallel = True
        return self

    def sequential(self) -> "Stream":
        self._parallel = False
        return self

    def is_parallel(self) -> bool:
        return self._parallel

    # =========================================================================
    # Intermediate operations
    # =========================================================================

    def filter(self, predicate) -> "Stream":
        """Keep elements for which predicate (callable or Predicate tree) holds."""
        return self._chain(filter(as_callable(predicate), self._take()))

    def map(self, fn: Callable[[Any], Any]) -> "Stream":
        return self._chain(map(fn, self._take()))

    def flat_map(self, fn: Callable[[Any], Iterable[Any]]) -> "Stream":
        """Replace each element with the elements of fn(element), in order."""
        return self._chain(_flatten(self._take(), fn), Stream)

    def map_to_number(self, fn: Optional[Callable[[Any], Any]] = None):
        from streamlab.numeric import NumericStream
        items = self._take()
        return self._chain(map(fn, items) if fn else items, NumericStream)

    def distinct(self) -> "Stream":
        """Drop repeated elements, keeping each first occurrence in place."""
        return self._chain(_distinct(self._take()))

    def sorted(self, comparator: Optional[Comparator] = None) -> "Stream":
        """Stable sort, naturally ordered unless a comparator is given."""
        return self._chain(_sorted(self._take(), comparator or natural_order()))

    def peek(self, action: Callable[[Any], None]) -> "Stream":
        return self._chain(_peek(self._take(), action))

    def skip(self, n: int) -> "Stream":
        """Drop the first n elements; skipping past the end leaves an empty stream."""
        _check_size(n, "skip")
        return self._chain(itertools.islice(self._take(), n, None))

    def limit(self, n: int) -> "Stream":
        """Keep at most n elements."""
        _check_size(n, "limit")
        return self._chain(itertools.islice(self._take(), n))

    def take_while(self, predicate) -> "Stream":
        return self._chain(itertools.takewhile(as_callable(predicate), self._take()))

    def drop_while(self, predicate) -> "Stream":
        return self._chain(itertools.dropwhile(as_callable(predicate), self._take()))

    # =========================================================================
    # Terminal operations
    # =========================================================================

    def for_each(self, action: Callable[[Any], None]) -> None:
        """Run action on every element; parallel streams give no ordering guarantee."""
        items = self._take()
        if not self._parallel:
            for item in items:
                action(item)
            return
        with ThreadPoolExecutor(max_workers=config.settings.parallel_workers) as executor:
            # list() re-raises the first failing action
            list(executor.map(action, items))

    def for_each_ordered(self, action: Callable[[Any], None]) -> None:
        for item in self._take():
            action(item)

    def collect(self, collector: Collector) -> Any:
        return collector.collect(self._take())

    def to_list(self) -> List[Any]:
        return self.collect(to_list())

    def count(self) -> int:
        return sum(1 for _ in self._take())

    def min(self, comparator: Optional[Comparator] = None) -> OptionalValue:
        key = (comparator or natural_order()).as_key()
        return _present_or_empty(min(self._take(), key=key, default=_NO_ELEMENT))

    def max(self, comparator: Optional[Comparator] = None) -> OptionalValue:
        key = (comparator or natural_order()).as_key()
        return _present_or_empty(max(self._take(), key=key, default=_NO_ELEMENT))

    def reduce(self, *args: Any) -> Any:
        """
        Fold the elements into one value.

        reduce(accumulator)
            Returns an OptionalValue; empty for an empty stream.
        reduce(identity, accumulator)
            Returns the folded value; identity for an empty stream.
        reduce(identity, accumulator, combiner)
            As above. On a parallel stream, chunks are folded from identity
            on separate threads and the partial results merged with combiner.
        """
        if len(args) == 1:
            accumulator = args[0]
            result = _NO_ELEMENT
            for item in self._take():
                result = item if result is _NO_ELEMENT else accumulator(result, item)
            if result is _NO_ELEMENT:
                return OptionalValue.empty()
            return OptionalValue.of(result)

        if len(args) == 2:
            identity, accumulator = args
            result = identity
            for item in self._take():
                result = accumulator(result, item)
            return result

        if len(args) == 3:
            identity, accumulator, combiner = args
            if not self._parallel:
                return self.sequential().reduce(identity, accumulator)
            return self._parallel_reduce(identity, accumulator, combiner)

        raise TypeError(f"reduce() takes 1 to 3 arguments ({len(args)} given)")

    def any_match(self, predicate) -> bool:
        """True as soon as one element matches; False for an empty stream."""
        test = as_callable(predicate)
        if self._parallel:
            return self._parallel_find(test, decisive=True)
        return any(test(item) for item in self._take())

    def all_match(self, predicate) -> bool:
        """True when every element matches; True for an empty stream."""
        test = as_callable(predicate)
        if self._parallel:
            return not self._parallel_find(test, decisive=False)
        return all(test(item) for item in self._take())

    def none_match(self, predicate) -> bool:
        test = as_callable(predicate)
        if self._parallel:
            return not self._parallel_find(test, decisive=True)
        return not any(test(item) for item in self._take())

    def find_first(self) -> OptionalValue:
        return _present_or_empty(next(self._take(), _NO_ELEMENT))

    def find_any(self) -> OptionalValue:
        """Some element of the stream; this implementation returns the first."""
        return self.find_first()

    # =========================================================================
    # Parallel helpers
    # =========================================================================

    def _parallel_find(self, test: Callable[[Any], bool], decisive: bool) -> bool:
        """
        True once any element's test result equals decisive.

        Elements are pulled in bounded batches, so an unbounded stream stops
        at the first decisive batch. Pending work is cancelled.
        """
        items = self._take()
        workers = config.settings.parallel_workers or _DEFAULT_WORKERS
        batch_size = workers * _BATCH_FACTOR
        with ThreadPoolExecutor(max_workers=workers) as executor:
            while True:
                batch = list(itertools.islice(items, batch_size))
                if not batch:
                    return False
                logger.debug(f"Parallel match over a batch of {len(batch)} element(s)")
                futures = [executor.submit(test, item) for item in batch]
                for future in as_completed(futures):
                    if bool(future.result()) == decisive:
                        for pending in futures:
                            pending.cancel()
                        return True

    def _parallel_reduce(self, identity: Any, accumulator: Callable, combiner: Callable) -> Any:
        items = list(self._take())
        if not items:
            return identity
        workers = config.settings.parallel_workers or min(len(items), _DEFAULT_WORKERS)
        chunks = _chunks(items, workers)
        logger.debug(f"Parallel reduce over {len(items)} element(s) in {len(chunks)} chunk(s)")

        def fold(chunk: List[Any]) -> Any:
            result = identity
            for item in chunk:
                result = accumulator(result, item)
            return result

        with ThreadPoolExecutor(max_workers=config.settings.parallel_workers) as executor:
            partials = list(executor.map(fold, chunks))

        result = partials[0]
        for partial in partials[1:]:
            result = combiner(result, partial)
        return result
