"""
Tests for NumericStream aggregation.
"""

from decimal import Decimal

import pytest
from streamlab.numeric import NumericStream, SummaryStatistics
from streamlab.stream import Stream


class TestRange:
    """Test integer ranges."""

    def test_range_sum(self):
        """range(1, 5) is 1..4, summing to 10."""
        assert Stream.range(1, 5).sum() == 10

    def test_range_closed(self):
        assert Stream.range_closed(1, 5).to_list() == [1, 2, 3, 4, 5]

    def test_range_is_numeric(self):
        assert isinstance(Stream.range(0, 3), NumericStream)

    def test_intermediate_keeps_numeric_type(self):
        assert Stream.range(1, 7).filter(lambda x: x % 2 == 0).sum() == 12

    def test_boxed_is_plain_stream(self):
        boxed = Stream.range(0, 2).boxed()
        assert type(boxed) is Stream
        assert boxed.to_list() == [0, 1]

    def test_map_to_obj_is_plain_stream(self):
        mapped = Stream.range(0, 3).map_to_obj(str)
        assert type(mapped) is Stream
        assert mapped.to_list() == ["0", "1", "2"]


class TestSum:
    """Test summation semantics per element type."""

    def test_float_sum(self):
        assert Stream.from_iterable([23.48, 52.26, 13.5]).map_to_number().sum() == 89.24

    def test_float_sum_compensated(self):
        """fsum does not lose the small terms naive addition drops."""
        values = [1e16, 1.0, -1e16]
        assert Stream.from_iterable(values).map_to_number().sum() == 1.0

    def test_decimal_sum_exact(self):
        amounts = [Decimal("11.11"), Decimal("22.22"), Decimal("33.33")]
        total = Stream.from_iterable(amounts).map_to_number().sum()
        assert total == Decimal("66.66")
        assert str(total) == "66.66"

    def test_map_to_number_with_function(self):
        assert Stream.of("a", "bb", "ccc").map_to_number(len).sum() == 6

    def test_empty_sum_is_zero(self):
        assert Stream.empty().map_to_number().sum() == 0


class TestAverageAndStatistics:
    """Test average() and summary_statistics()."""

    def test_average(self):
        assert Stream.range(1, 5).average().get() == 2.5

    def test_average_empty(self):
        assert Stream.range(0, 0).average().is_empty()

    def test_summary_statistics(self):
        stats = Stream.from_iterable([31, 22, 133, 465, 125]).map_to_number().summary_statistics()
        assert stats.count == 5
        assert stats.sum == 776
        assert stats.min == 22
        assert stats.max == 465
        assert stats.average == pytest.approx(155.2)

    def test_summary_statistics_empty(self):
        assert Stream.range(0, 0).summary_statistics() == SummaryStatistics()
