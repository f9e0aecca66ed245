"""
The worked-example catalogue.

Each StreamExample reproduces one classic stream tutorial exercise with
its hardcoded input and the output it is expected to produce. Examples
are independent: none reads another's data and each builds its own
source sequence.

Run them all with streamlab.runner.run_catalogue(), or print them with
demo_examples.py.
"""

import operator
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, List

from streamlab import collectors
from streamlab.comparators import natural_order, reverse_order
from streamlab.optional import OptionalValue
from streamlab.pipeline import capitalize_word
from streamlab.predicates import any_of, between, contains, equals, greater_than
from streamlab.stream import Stream


@dataclass
class StreamExample:
    """
    One tutorial example.

    Properties:
        name: Short identifier (e.g. "skip_limit")
        description: Which operation(s) the example demonstrates
        run: Builds the input, runs the pipeline, returns the result
        expected: The result run() must produce
    """

    name: str
    description: str
    run: Callable[[], Any]
    expected: Any


def _for_each() -> List[str]:
    cities = ["长沙", "深圳", "武汉", "伊犁", "洛阳", "开封"]
    visited: List[str] = []
    Stream.from_iterable(cities).for_each(visited.append)
    return visited


def _filter() -> List[int]:
    numbers = [8, 12, 28, 19, 22, 39, 33, 44, 54, 33, 23]
    return Stream.from_iterable(numbers).filter(between(18, 45)).to_list()


def _map() -> List[str]:
    words = ["how", "are", "you", ",", "I", "am", "fine", "!"]
    return Stream.from_iterable(words).map(capitalize_word).to_list()


def _of() -> List[List[int]]:
    return Stream.of([1, 2, 3], [41, 52, 63]).collect(collectors.to_list())


def _of_values() -> List[str]:
    return Stream.of("覆巢之下", "安有完卵", "天下攘攘", "皆为利往").to_list()


def _distinct() -> List[str]:
    return Stream.of("秦汗", "武汉", "汉武", "武汉", "大楚").distinct().to_list()


def _flat_map() -> List[int]:
    return (
        Stream.of([1, 2, 3], [41, 51, 61])
        .flat_map(lambda numbers: numbers)
        .map(lambda n: 2 * n)
        .to_list()
    )


def _builder() -> List[str]:
    return Stream.builder().add("大秦").add("大商").add("大魏").build().collect(collectors.to_list())


def _collectors() -> set:
    return Stream.from_iterable(["a", "b", "c", "d", "e"]).collect(collectors.to_set())


def _sorted() -> tuple:
    letters = ["c", "e", "a", "d", "b"]
    ascending = Stream.from_iterable(letters).sorted(natural_order()).to_list()
    descending = Stream.from_iterable(letters).sorted(reverse_order()).to_list()
    return ascending, descending


def _count() -> int:
    return Stream.of("c", "e", "a", "d", "b").count()


def _min_max() -> tuple:
    numbers = [31, 22, 133, 465, 125]
    lowest = Stream.from_iterable(numbers).min(natural_order())
    highest = Stream.from_iterable(numbers).max(natural_order())
    return lowest.get(), highest.get()


def _skip_limit() -> List[str]:
    return Stream.from_iterable(["a", "b", "c", "d", "e", "f", "g"]).skip(2).limit(3).to_list()


def _concat() -> List[Any]:
    return Stream.concat(Stream.of("a", "b"), Stream.of(110, 120)).to_list()


def _any_match() -> tuple:
    cities = ["长沙", "长安", "常州", "昌平"]
    exact = Stream.from_iterable(cities).parallel().any_match(equals("长安"))
    loose = Stream.from_iterable(cities).parallel().any_match(any_of(equals("西安"), contains("安")))
    return exact, loose


def _all_match() -> tuple:
    ages = [22, 34, 55, 43, 28]
    over_18 = Stream.from_iterable(ages).all_match(lambda age: age > 18)
    over_28 = Stream.from_iterable(ages).parallel().all_match(greater_than(28))
    return over_18, over_28


def _reduce() -> OptionalValue:
    return Stream.of("you", "give", "me", "stop").reduce(lambda before, after: f"{before},{after}")


def _reduce_decimal() -> Decimal:
    amounts = [Decimal("11.11"), Decimal("22.22"), Decimal("33.33")]
    return Stream.from_iterable(amounts).reduce(Decimal(0), operator.add)


def _find_first() -> str:
    return Stream.of("you", "give", "me", "stop").find_first().get()


def _find_any() -> str:
    return Stream.of("you", "give", "me", "stop").find_any().get()


def _int_range_sum() -> int:
    return Stream.range(1, 5).sum()


def _double_sum() -> float:
    doubles = [23.48, 52.26, 13.5]
    return Stream.from_iterable(doubles).map_to_number(float).sum()


def _int_reduce() -> int:
    return Stream.of(5, 1, 100).reduce(0, operator.add)


def _decimal_reduce() -> Decimal:
    return Stream.of(Decimal(0), Decimal(1), Decimal(10)).reduce(Decimal(0), operator.add)


def build_example_catalogue() -> List[StreamExample]:
    return [
        StreamExample("for_each", "for_each visits every element in order",
                      _for_each, ["长沙", "深圳", "武汉", "伊犁", "洛阳", "开封"]),
        StreamExample("filter", "filter keeps elements in [18, 45), original order",
                      _filter, [28, 19, 22, 39, 33, 44, 33, 23]),
        StreamExample("map", "map capitalizes words longer than one character",
                      _map, ["How", "Are", "You", ",", "I", "Am", "Fine", "!"]),
        StreamExample("of", "of() over two lists keeps them as elements",
                      _of, [[1, 2, 3], [41, 52, 63]]),
        StreamExample("of_values", "of() over literal values",
                      _of_values, ["覆巢之下", "安有完卵", "天下攘攘", "皆为利往"]),
        StreamExample("distinct", "distinct keeps first occurrences",
                      _distinct, ["秦汗", "武汉", "汉武", "大楚"]),
        StreamExample("flat_map", "flat_map merges lists, then map doubles",
                      _flat_map, [2, 4, 6, 82, 102, 122]),
        StreamExample("builder", "builder() assembles a stream element by element",
                      _builder, ["大秦", "大商", "大魏"]),
        StreamExample("collectors", "to_set() collector",
                      _collectors, {"a", "b", "c", "d", "e"}),
        StreamExample("sorted", "sorted in natural and reverse order",
                      _sorted, (["a", "b", "c", "d", "e"], ["e", "d", "c", "b", "a"])),
        StreamExample("count", "count() of five elements",
                      _count, 5),
        StreamExample("min_max", "min() and max() with natural order",
                      _min_max, (22, 465)),
        StreamExample("skip_limit", "skip(2) then limit(3)",
                      _skip_limit, ["c", "d", "e"]),
        StreamExample("concat", "concat() of a string stream and an int stream",
                      _concat, ["a", "b", 110, 120]),
        StreamExample("any_match", "parallel any_match with exact and compound predicates",
                      _any_match, (True, True)),
        StreamExample("all_match", "all_match sequentially and in parallel",
                      _all_match, (True, False)),
        StreamExample("reduce", "reduce() without identity joins words",
                      _reduce, OptionalValue.of("you,give,me,stop")),
        StreamExample("reduce_decimal", "reduce() of Decimals from zero",
                      _reduce_decimal, Decimal("66.66")),
        StreamExample("find_first", "find_first()",
                      _find_first, "you"),
        StreamExample("find_any", "find_any() on a sequential stream",
                      _find_any, "you"),
        StreamExample("int_range_sum", "range(1, 5).sum()",
                      _int_range_sum, 10),
        StreamExample("double_sum", "map_to_number().sum() over floats",
                      _double_sum, 89.24),
        StreamExample("int_reduce", "reduce(0, add) over ints",
                      _int_reduce, 106),
        StreamExample("decimal_reduce", "reduce(0, add) over 0, 1 and 10 as Decimals",
                      _decimal_reduce, Decimal("11")),
    ]
