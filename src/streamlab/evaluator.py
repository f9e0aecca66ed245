"""
Evaluation of predicate trees against stream elements.
"""

import operator
from typing import Any, Callable, Union

from streamlab.predicates import (
    Predicate,
    Comparison,
    ComparisonOperator,
    Contains,
    Compound,
    LogicalOperator,
    Not,
)

_COMPARISONS = {
    ComparisonOperator.EQUALS: operator.eq,
    ComparisonOperator.NOT_EQUALS: operator.ne,
    ComparisonOperator.GREATER_THAN: operator.gt,
    ComparisonOperator.GREATER_EQUAL: operator.ge,
    ComparisonOperator.LESS_THAN: operator.lt,
    ComparisonOperator.LESS_EQUAL: operator.le,
}


def evaluate(predicate: Predicate, item: Any) -> bool:
    """
    Test one element against a predicate tree.

    AND and OR short-circuit: the right side is only evaluated when the
    left side does not decide the result.

    Raises:
        TypeError: for node types this evaluator does not know
    """
    if isinstance(predicate, Comparison):
        return bool(_COMPARISONS[predicate.operator](item, predicate.value))

    if isinstance(predicate, Contains):
        return predicate.value in item

    if isinstance(predicate, Compound):
        if predicate.operator == LogicalOperator.AND:
            return evaluate(predicate.left, item) and evaluate(predicate.right, item)
        return evaluate(predicate.left, item) or evaluate(predicate.right, item)

    if isinstance(predicate, Not):
        return not evaluate(predicate.operand, item)

    raise TypeError(f"Unsupported Predicate type: {type(predicate)}")


def as_callable(predicate: Union[Predicate, Callable[[Any], bool]]) -> Callable[[Any], bool]:
    """Accept either a predicate tree or a plain callable and return a callable."""
    if isinstance(predicate, Predicate):
        return lambda item: evaluate(predicate, item)
    if callable(predicate):
        return predicate
    raise TypeError(f"Expected a Predicate or a callable, got {type(predicate)}")
