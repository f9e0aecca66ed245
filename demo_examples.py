"""
Demo: Run every worked example, print its console output and a summary.
"""

from streamlab.catalogue import build_example_catalogue
from streamlab.formatting import format_value
from streamlab.runner import run_catalogue
from streamlab.serialization import report_to_yaml


def print_report(report):
    """Pretty-print a CatalogueReport."""
    print()
    print("=" * 70)
    print("STREAM EXAMPLES")
    print("=" * 70)
    print()

    for result in report.results:
        mark = "PASS" if result.passed else "FAIL"
        print(f"  [{mark}] {result.name}")
        if result.error:
            print(f"         error:    {result.error}")
        else:
            print(f"         output:   {format_value(result.actual)}")
        if not result.passed:
            print(f"         expected: {format_value(result.expected)}")
    print()

    print(f"  Total:   {report.total}")
    print(f"  Passed:  {report.passed}")
    print(f"  Failed:  {report.failed}")
    print()


if __name__ == "__main__":
    examples = build_example_catalogue()
    report = run_catalogue(examples)
    print_report(report)

    print("-" * 70)
    print("YAML export:")
    print("-" * 70)
    print(report_to_yaml(report))
