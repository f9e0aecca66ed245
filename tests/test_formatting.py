"""
Tests for console formatting of results.
"""

from decimal import Decimal

from streamlab.formatting import format_items, format_value
from streamlab.optional import OptionalValue


class TestFormatValue:
    """Test rendering of single values."""

    def test_booleans(self):
        assert format_value(True) == "true"
        assert format_value(False) == "false"

    def test_none(self):
        assert format_value(None) == "null"

    def test_nested_lists(self):
        assert format_value([[1, 2, 3], [41, 52, 63]]) == "[[1, 2, 3], [41, 52, 63]]"

    def test_tuple(self):
        assert format_value((22, 465)) == "[22, 465]"

    def test_set_sorted(self):
        assert format_value({"e", "a", "c"}) == "[a, c, e]"

    def test_mixed_set(self):
        assert sorted(format_value({1, "a"})[1:-1].split(", ")) == ["1", "a"]

    def test_dict(self):
        assert format_value({True: [1], False: []}) == "{true=[1], false=[]}"

    def test_decimal(self):
        assert format_value(Decimal("66.66")) == "66.66"
        assert format_value(Decimal("1E+1")) == "10"

    def test_optional(self):
        assert format_value(OptionalValue.of("you")) == "Optional[you]"
        assert format_value(OptionalValue.empty()) == "Optional.empty"

    def test_unicode(self):
        assert format_value(["秦汗", "大楚"]) == "[秦汗, 大楚]"


class TestFormatItems:
    """Test rendering of sequences."""

    def test_tab_separated(self):
        assert format_items([28, 19, 22]) == "28\t19\t22"

    def test_custom_separator(self):
        assert format_items(["a", "b", 110, 120], " ") == "a b 110 120"

    def test_empty(self):
        assert format_items([]) == ""
