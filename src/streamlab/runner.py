"""
Catalogue runner: executes worked examples and reports the outcome.

Each example runs on its own. An exception ends only the example that
raised it; it is logged and recorded on that example's result, and the
remaining examples still run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from streamlab.catalogue import StreamExample, build_example_catalogue
from streamlab.logger import logger


@dataclass
class ExampleResult:
    """Outcome of one example."""
    name: str
    passed: bool
    actual: Any = None
    expected: Any = None
    error: Optional[str] = None


@dataclass
class CatalogueReport:
    """Summary of a catalogue run."""

    total: int = 0
    passed: int = 0
    failed: int = 0
    results: List[ExampleResult] = field(default_factory=list)

    def add(self, result: ExampleResult) -> None:
        self.results.append(result)
        self.total += 1
        if result.passed:
            self.passed += 1
        else:
            self.failed += 1

    def failures(self) -> List[ExampleResult]:
        return [r for r in self.results if not r.passed]


def run_example(example: StreamExample) -> ExampleResult:
    try:
        actual = example.run()
    except Exception as exc:
        logger.warning(f"Example '{example.name}' raised {type(exc).__name__}: {exc}")
        return ExampleResult(
            name=example.name,
            passed=False,
            expected=example.expected,
            error=f"{type(exc).__name__}: {exc}",
        )

    passed = actual == example.expected
    if not passed:
        logger.warning(f"Example '{example.name}' produced {actual!r}, expected {example.expected!r}")
    return ExampleResult(name=example.name, passed=passed, actual=actual, expected=example.expected)


def run_catalogue(examples: Optional[List[StreamExample]] = None) -> CatalogueReport:
    """
    Run every example (the built-in catalogue by default).

    Returns a CatalogueReport with one ExampleResult per example, in
    catalogue order.
    """
    if examples is None:
        examples = build_example_catalogue()

    report = CatalogueReport()
    for example in examples:
        report.add(run_example(example))

    logger.info(f"Ran {report.total} example(s): {report.passed} passed, {report.failed} failed")
    return report
