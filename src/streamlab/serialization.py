"""
Serialization helpers for predicates, pipelines and catalogue reports.

Provides lossless JSON/YAML round-trip for pipelines via an intermediate
dict representation, and one-way export of catalogue reports.
This module intentionally keeps serialization structure stable and explicit.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from streamlab.errors import PipelineError
from streamlab.formatting import format_value
from streamlab.pipeline import (
    Pipeline,
    Step,
    FilterStep,
    MapStep,
    DistinctStep,
    SortStep,
    SkipStep,
    LimitStep,
)
from streamlab.predicates import (
    Predicate,
    Comparison,
    ComparisonOperator,
    Contains,
    Compound,
    LogicalOperator,
    Not,
)
from streamlab.runner import CatalogueReport, ExampleResult


def predicate_to_dict(p: Predicate) -> Dict[str, Any]:
    if isinstance(p, Comparison):
        return {"type": "cmp", "operator": p.operator.value, "value": p.value}
    if isinstance(p, Contains):
        return {"type": "contains", "value": p.value}
    if isinstance(p, Compound):
        return {
            "type": "compound",
            "operator": p.operator.value,
            "left": predicate_to_dict(p.left),
            "right": predicate_to_dict(p.right),
        }
    if isinstance(p, Not):
        return {"type": "not", "operand": predicate_to_dict(p.operand)}
    raise TypeError(f"Unsupported Predicate type: {type(p)}")


def predicate_from_dict(d: Dict[str, Any]) -> Predicate:
    t = d.get("type")
    if t == "cmp":
        return Comparison(operator=ComparisonOperator(d["operator"]), value=d["value"])
    if t == "contains":
        return Contains(d["value"])
    if t == "compound":
        return Compound(
            operator=LogicalOperator(d["operator"]),
            left=predicate_from_dict(d["left"]),
            right=predicate_from_dict(d["right"]),
        )
    if t == "not":
        return Not(predicate_from_dict(d["operand"]))
    raise TypeError(f"Unsupported predicate dict type: {t}")


def step_to_dict(step: Step) -> Dict[str, Any]:
    if isinstance(step, FilterStep):
        return {"op": "filter", "predicate": predicate_to_dict(step.predicate)}
    if isinstance(step, MapStep):
        return {"op": "map", "function": step.function}
    if isinstance(step, DistinctStep):
        return {"op": "distinct"}
    if isinstance(step, SortStep):
        return {"op": "sort", "descending": step.descending}
    if isinstance(step, SkipStep):
        return {"op": "skip", "n": step.n}
    if isinstance(step, LimitStep):
        return {"op": "limit", "n": step.n}
    raise TypeError(f"Unsupported pipeline step type: {type(step)}")


def step_from_dict(d: Dict[str, Any]) -> Step:
    op = d.get("op")
    if op == "filter":
        return FilterStep(predicate_from_dict(d["predicate"]))
    if op == "map":
        return MapStep(d["function"])
    if op == "distinct":
        return DistinctStep()
    if op == "sort":
        return SortStep(descending=d.get("descending", False))
    if op == "skip":
        return SkipStep(d["n"])
    if op == "limit":
        return LimitStep(d["n"])
    raise PipelineError(f"Unknown pipeline op: {op}")


def pipeline_to_dict(p: Pipeline) -> Dict[str, Any]:
    return {"name": p.name, "steps": [step_to_dict(s) for s in p.steps]}


def pipeline_from_dict(d: Dict[str, Any]) -> Pipeline:
    return Pipeline(
        steps=[step_from_dict(s) for s in d.get("steps", [])],
        name=d.get("name", ""),
    )


def pipeline_to_json(p: Pipeline) -> str:
    return json.dumps(pipeline_to_dict(p), sort_keys=True, ensure_ascii=False)


def pipeline_from_json(s: str) -> Pipeline:
    return pipeline_from_dict(json.loads(s))


def pipeline_to_yaml(p: Pipeline) -> str:
    return yaml.safe_dump(pipeline_to_dict(p), allow_unicode=True)


def pipeline_from_yaml(s: str) -> Pipeline:
    return pipeline_from_dict(yaml.safe_load(s))


def result_to_dict(r: ExampleResult) -> Dict[str, Any]:
    return {
        "name": r.name,
        "passed": r.passed,
        "actual": format_value(r.actual),
        "expected": format_value(r.expected),
        "error": r.error,
    }


def report_to_dict(report: CatalogueReport) -> Dict[str, Any]:
    return {
        "total": report.total,
        "passed": report.passed,
        "failed": report.failed,
        "results": [result_to_dict(r) for r in report.results],
    }


def report_to_json(report: CatalogueReport) -> str:
    return json.dumps(report_to_dict(report), sort_keys=True, ensure_ascii=False)


def report_to_yaml(report: CatalogueReport) -> str:
    return yaml.safe_dump(report_to_dict(report), allow_unicode=True, sort_keys=False)
