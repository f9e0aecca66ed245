"""
Tests for serialization of predicates, pipelines and reports.

Pipelines must survive a JSON/YAML round-trip unchanged and keep
producing the same output afterwards.
"""

import json

import pytest
import yaml
from streamlab.errors import PipelineError
from streamlab.pipeline import (
    DistinctStep,
    FilterStep,
    LimitStep,
    MapStep,
    Pipeline,
    SkipStep,
    SortStep,
)
from streamlab.predicates import any_of, between, contains, equals, negate
from streamlab.runner import CatalogueReport, ExampleResult
from streamlab.serialization import (
    pipeline_from_dict,
    pipeline_from_json,
    pipeline_from_yaml,
    pipeline_to_dict,
    pipeline_to_json,
    pipeline_to_yaml,
    predicate_from_dict,
    predicate_to_dict,
    report_to_dict,
    report_to_json,
    report_to_yaml,
    step_from_dict,
)


def build_sample_pipeline() -> Pipeline:
    return Pipeline(
        name="sample",
        steps=[
            FilterStep(any_of(between(18, 45), negate(equals(54)))),
            DistinctStep(),
            MapStep("double"),
            SortStep(descending=True),
            SkipStep(1),
            LimitStep(3),
        ],
    )


def test_predicate_dict_shape():
    assert predicate_to_dict(contains("安")) == {"type": "contains", "value": "安"}
    assert predicate_to_dict(equals(1)) == {"type": "cmp", "operator": "==", "value": 1}


def test_predicate_roundtrip():
    predicate = any_of(between(18, 45), negate(contains("x")))
    assert predicate_from_dict(predicate_to_dict(predicate)) == predicate


def test_unknown_predicate_dict():
    with pytest.raises(TypeError):
        predicate_from_dict({"type": "regex", "value": ".*"})


def test_unknown_step_op():
    with pytest.raises(PipelineError):
        step_from_dict({"op": "shuffle"})


def test_dict_roundtrip():
    pipeline = build_sample_pipeline()
    assert pipeline_from_dict(pipeline_to_dict(pipeline)) == pipeline


def test_json_roundtrip():
    pipeline = build_sample_pipeline()
    before = pipeline_to_dict(pipeline)
    restored = pipeline_from_json(pipeline_to_json(pipeline))
    assert pipeline_to_dict(restored) == before


def test_yaml_roundtrip_runs_the_same():
    pipeline = build_sample_pipeline()
    restored = pipeline_from_yaml(pipeline_to_yaml(pipeline))
    source = [8, 12, 28, 19, 22, 39, 33, 44, 54, 33, 23]
    assert restored.run(source) == pipeline.run(source)


def test_yaml_written_by_hand():
    text = """
name: adults
steps:
  - op: filter
    predicate:
      type: compound
      operator: AND
      left: {type: cmp, operator: ">=", value: 18}
      right: {type: cmp, operator: "<", value: 45}
  - op: skip
    n: 2
"""
    pipeline = pipeline_from_yaml(text)
    assert pipeline.name == "adults"
    assert pipeline.run([8, 12, 28, 19, 22, 39]) == [22, 39]


def test_yaml_keeps_unicode_readable():
    pipeline = Pipeline([FilterStep(contains("安"))])
    assert "安" in pipeline_to_yaml(pipeline)


def test_report_export():
    report = CatalogueReport()
    report.add(ExampleResult(name="any_match", passed=True, actual=(True, True), expected=(True, True)))
    report.add(ExampleResult(name="broken", passed=False, expected=1, error="ZeroDivisionError: division by zero"))

    d = report_to_dict(report)
    assert d["total"] == 2
    assert d["failed"] == 1
    assert d["results"][0]["actual"] == "[true, true]"
    assert d["results"][1]["actual"] == "null"

    assert json.loads(report_to_json(report)) == d
    assert yaml.safe_load(report_to_yaml(report)) == d
