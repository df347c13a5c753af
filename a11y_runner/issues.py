"""Issue filtering and aggregation for audit results."""
from __future__ import annotations

from functools import reduce
from typing import Iterable, List, Sequence

import typer

from .schema import AggregateReport, AuditReport, FilteredResult, Issue, ReportEntry, SimplifiedIssue

COLOR_CONTRAST_CODE = "color-contrast"


def extract_color_contrast_instances(issues: Sequence[Issue], code: str = COLOR_CONTRAST_CODE) -> List[Issue]:
    """Return the first contiguous run of issues tagged with ``code``.

    pa11y reports color-contrast problems in two groups, the first valid and
    the second not, so scanning stops at the first issue that follows the run.
    Any later runs of the same code are not collected.
    """
    collected: List[Issue] = []
    collecting = False
    for i, issue in enumerate(issues):
        if issue.code == code:
            collecting = True
            collected.append(issue)
        elif collecting and i > 0 and issues[i - 1].code == code:
            break
    return collected


def process_test_result(report: AuditReport, silent: bool = False) -> FilteredResult:
    """Filter one report and echo its summary line.

    With ``silent`` set only the non-zero summary is suppressed; a zero count
    is always echoed. A silenced result keeps its count but carries no issues.
    """
    instances = extract_color_contrast_instances(report.issues)
    count = len(instances)
    if silent and count > 0:
        return FilteredResult(name=report.name, simplified_list=[], error_count=count)
    typer.echo(f"'{report.name}' - {count} color contrast violations")
    return FilteredResult(
        name=report.name,
        simplified_list=[SimplifiedIssue(selector=i.selector, context=i.context) for i in instances],
        error_count=count,
    )


def _fold(acc: AggregateReport, result: FilteredResult) -> AggregateReport:
    entries = [
        ReportEntry(name=result.name, selector=s.selector, context=s.context)
        for s in result.simplified_list
    ]
    return AggregateReport(
        entries=[*acc.entries, *entries],
        total_errors=acc.total_errors + result.error_count,
    )


def aggregate_results(results: Iterable[FilteredResult]) -> AggregateReport:
    aggregate = reduce(_fold, results, AggregateReport())
    typer.echo(f"Total errors across all tests: {aggregate.total_errors}")
    return aggregate


__all__ = [
    "COLOR_CONTRAST_CODE",
    "extract_color_contrast_instances",
    "process_test_result",
    "aggregate_results",
]
