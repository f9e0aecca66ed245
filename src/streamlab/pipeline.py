"""
Declarative pipelines.

A Pipeline is an ordered list of intermediate steps described as data
rather than code, so it can be written to and read from JSON/YAML
(see streamlab.serialization) and replayed against any source.

Example:
    Pipeline([
        FilterStep(between(18, 45)),
        SortStep(descending=True),
        LimitStep(3),
    ]).run([8, 12, 28, 19, 22, 39, 33, 44, 54, 33, 23])

    -> [44, 39, 33]

Map steps refer to functions by name. Only the names in MAP_FUNCTIONS
are accepted, which keeps a stored pipeline free of executable code.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Union

from streamlab.comparators import natural_order, reverse_order
from streamlab.errors import PipelineError
from streamlab.logger import logger
from streamlab.predicates import Predicate
from streamlab.stream import Stream


def capitalize_word(word: str) -> str:
    """Upper-case the first letter of words longer than one character."""
    if len(word) > 1:
        return word[0].upper() + word[1:]
    return word


MAP_FUNCTIONS: Dict[str, Callable[[Any], Any]] = {
    "capitalize": capitalize_word,
    "upper": str.upper,
    "lower": str.lower,
    "double": lambda x: 2 * x,
    "negate": lambda x: -x,
    "length": len,
    "str": str,
}


@dataclass(frozen=True)
class FilterStep:
    predicate: Predicate


@dataclass(frozen=True)
class MapStep:
    """Apply a named function from MAP_FUNCTIONS to every element."""

    function: str

    def __post_init__(self):
        if self.function not in MAP_FUNCTIONS:
            raise PipelineError(
                f"Unknown map function '{self.function}' (known: {sorted(MAP_FUNCTIONS)})"
            )


@dataclass(frozen=True)
class DistinctStep:
    pass


@dataclass(frozen=True)
class SortStep:
    descending: bool = False


@dataclass(frozen=True)
class SkipStep:
    n: int


@dataclass(frozen=True)
class LimitStep:
    n: int


Step = Union[FilterStep, MapStep, DistinctStep, SortStep, SkipStep, LimitStep]


def apply_step(stream: Stream, step: Step) -> Stream:
    if isinstance(step, FilterStep):
        return stream.filter(step.predicate)
    if isinstance(step, MapStep):
        return stream.map(MAP_FUNCTIONS[step.function])
    if isinstance(step, DistinctStep):
        return stream.distinct()
    if isinstance(step, SortStep):
        return stream.sorted(reverse_order() if step.descending else natural_order())
    if isinstance(step, SkipStep):
        return stream.skip(step.n)
    if isinstance(step, LimitStep):
        return stream.limit(step.n)
    raise PipelineError(f"Unsupported pipeline step: {type(step)}")


@dataclass
class Pipeline:
    """
    An ordered chain of intermediate steps.

    Properties:
        steps: Steps applied in list order
        name: Optional label, carried through serialization
    """

    steps: List[Step] = field(default_factory=list)
    name: str = ""

    def apply(self, stream: Stream) -> Stream:
        for step in self.steps:
            logger.debug(f"Pipeline '{self.name}': applying {step}")
            stream = apply_step(stream, step)
        return stream

    def run(self, source: Iterable[Any]) -> List[Any]:
        return self.apply(Stream.from_iterable(source)).to_list()
