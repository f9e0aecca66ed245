"""
Test the worked-example catalogue.

Every example must produce exactly its expected output.
"""

from decimal import Decimal

import pytest
from streamlab.catalogue import build_example_catalogue
from streamlab.formatting import format_items, format_value


CATALOGUE = {example.name: example for example in build_example_catalogue()}


def test_catalogue_names_unique():
    names = [example.name for example in build_example_catalogue()]
    assert len(names) == len(set(names))


def test_catalogue_covers_tutorial():
    expected = {
        "for_each", "filter", "map", "of", "of_values", "distinct", "flat_map",
        "builder", "collectors", "sorted", "count", "min_max", "skip_limit",
        "concat", "any_match", "all_match", "reduce", "reduce_decimal",
        "find_first", "find_any", "int_range_sum", "double_sum", "int_reduce",
        "decimal_reduce",
    }
    assert set(CATALOGUE) == expected


@pytest.mark.parametrize("name", sorted(CATALOGUE))
def test_example_produces_expected(name):
    example = CATALOGUE[name]
    assert example.run() == example.expected


def test_examples_rerun_independently():
    """Each run builds fresh streams, so examples can be run repeatedly."""
    example = CATALOGUE["skip_limit"]
    assert example.run() == example.run()


def test_console_output_matches_tutorial():
    assert format_items(CATALOGUE["filter"].run()) == "28\t19\t22\t39\t33\t44\t33\t23"
    assert format_items(CATALOGUE["map"].run(), " ") == "How Are You , I Am Fine !"
    assert format_value(CATALOGUE["of"].run()) == "[[1, 2, 3], [41, 52, 63]]"
    assert format_items(CATALOGUE["any_match"].run()) == "true\ttrue"
    assert format_items(CATALOGUE["all_match"].run(), ",") == "true,false"
    assert format_items(CATALOGUE["min_max"].run()) == "22\t465"


def test_reduce_decimal_is_exact_decimal():
    result = CATALOGUE["reduce_decimal"].run()
    assert isinstance(result, Decimal)
    assert str(result) == "66.66"
