"""
Declarative predicates for streamlab.

Conditions passed to filter(), any_match(), all_match() and friends can be
plain callables or predicate trees built from the classes below. Trees
are immutable, comparable and serializable, which is what lets a
Pipeline be stored as YAML.

ARCHITECTURAL RULE:
    This module is structure only.
    Evaluation lives in streamlab.evaluator.
    Dict/YAML encoding lives in streamlab.serialization.
"""

from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Predicate(ABC):
    """
    Base class for all predicate nodes.

    It exists to give the node hierarchy a common type.
    """
    pass


class ComparisonOperator(Enum):
    """Operators comparing the tested element with a fixed value."""

    EQUALS = "=="
    NOT_EQUALS = "!="
    GREATER_THAN = ">"
    GREATER_EQUAL = ">="
    LESS_THAN = "<"
    LESS_EQUAL = "<="


class LogicalOperator(Enum):
    """Operators combining two predicates."""

    AND = "AND"
    OR = "OR"


@dataclass(frozen=True)
class Comparison(Predicate):
    """
    Compares the element against a value.

    Example:
        item >= 18

    Becomes:
        Comparison(operator=ComparisonOperator.GREATER_EQUAL, value=18)

    The element is always the left operand.
    """

    operator: ComparisonOperator
    value: Any


@dataclass(frozen=True)
class Contains(Predicate):
    """
    True when the value occurs in the element (substring or membership).

    Example:
        Contains("安") matches "长安".
    """

    value: Any


@dataclass(frozen=True)
class Compound(Predicate):
    """
    Two predicates joined by AND or OR.

    Example:
        item == "西安" OR "安" in item

    Becomes:
        Compound(
            operator=LogicalOperator.OR,
            left=Comparison(ComparisonOperator.EQUALS, "西安"),
            right=Contains("安"),
        )
    """

    operator: LogicalOperator
    left: Predicate
    right: Predicate


@dataclass(frozen=True)
class Not(Predicate):
    """Negation of another predicate."""

    operand: Predicate


def equals(value: Any) -> Comparison:
    return Comparison(ComparisonOperator.EQUALS, value)


def not_equals(value: Any) -> Comparison:
    return Comparison(ComparisonOperator.NOT_EQUALS, value)


def greater_than(value: Any) -> Comparison:
    return Comparison(ComparisonOperator.GREATER_THAN, value)


def at_least(value: Any) -> Comparison:
    return Comparison(ComparisonOperator.GREATER_EQUAL, value)


def less_than(value: Any) -> Comparison:
    return Comparison(ComparisonOperator.LESS_THAN, value)


def at_most(value: Any) -> Comparison:
    return Comparison(ComparisonOperator.LESS_EQUAL, value)


def between(lower: Any, upper: Any) -> Compound:
    """Half-open range: lower <= item < upper."""
    return Compound(LogicalOperator.AND, at_least(lower), less_than(upper))


def contains(value: Any) -> Contains:
    return Contains(value)


def negate(predicate: Predicate) -> Not:
    return Not(predicate)


def _fold(operator: LogicalOperator, predicates: tuple) -> Predicate:
    if not predicates:
        raise ValueError(f"{operator.value} needs at least one predicate")
    result = predicates[0]
    for predicate in predicates[1:]:
        result = Compound(operator, result, predicate)
    return result


def all_of(*predicates: Predicate) -> Predicate:
    return _fold(LogicalOperator.AND, predicates)


def any_of(*predicates: Predicate) -> Predicate:
    return _fold(LogicalOperator.OR, predicates)
