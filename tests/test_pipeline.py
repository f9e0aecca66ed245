"""
Tests for declarative pipelines.
"""

import pytest
from streamlab.errors import PipelineError
from streamlab.pipeline import (
    DistinctStep,
    FilterStep,
    LimitStep,
    MapStep,
    Pipeline,
    SkipStep,
    SortStep,
    capitalize_word,
)
from streamlab.predicates import between, contains
from streamlab.stream import Stream


class TestCapitalizeWord:
    """Test the capitalize map function."""

    def test_longer_words_capitalized(self):
        assert capitalize_word("how") == "How"

    def test_single_characters_untouched(self):
        assert capitalize_word("I") == "I"
        assert capitalize_word(",") == ","


class TestSteps:
    """Test individual steps."""

    def test_unknown_map_function_rejected(self):
        with pytest.raises(PipelineError):
            MapStep("explode")

    def test_pipeline_error_is_value_error(self):
        with pytest.raises(ValueError):
            MapStep("explode")

    def test_steps_immutable(self):
        step = LimitStep(3)
        with pytest.raises(AttributeError):
            step.n = 4


class TestPipeline:
    """Test running pipelines."""

    def test_empty_pipeline_is_identity(self):
        assert Pipeline().run([3, 1, 2]) == [3, 1, 2]

    def test_filter_sort_limit(self):
        pipeline = Pipeline([FilterStep(between(18, 45)), SortStep(descending=True), LimitStep(3)])
        assert pipeline.run([8, 12, 28, 19, 22, 39, 33, 44, 54, 33, 23]) == [44, 39, 33]

    def test_skip_limit(self):
        pipeline = Pipeline([SkipStep(2), LimitStep(3)])
        assert pipeline.run(["a", "b", "c", "d", "e", "f", "g"]) == ["c", "d", "e"]

    def test_distinct_and_map(self):
        pipeline = Pipeline([DistinctStep(), FilterStep(contains("汉")), MapStep("length")])
        assert pipeline.run(["秦汗", "武汉", "汉武", "武汉", "大楚"]) == [2, 2]

    def test_capitalize(self):
        pipeline = Pipeline([MapStep("capitalize")], name="capitalize")
        words = ["how", "are", "you", ",", "I", "am", "fine", "!"]
        assert pipeline.run(words) == ["How", "Are", "You", ",", "I", "Am", "Fine", "!"]

    def test_apply_returns_stream(self):
        stream = Pipeline([SortStep()]).apply(Stream.of("c", "a", "b"))
        assert isinstance(stream, Stream)
        assert stream.to_list() == ["a", "b", "c"]
