# SPDX-License-Identifier: MIT
"""Report aggregation — folds a push's violations into a pass/fail report."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from pushguard.rules.base import Severity, Violation

PASSED_SUMMARY = "✅ All compliance checks passed!"


def _count(violations: tuple[Violation, ...], severity: Severity) -> int:
    return sum(1 for v in violations if v.severity == severity)


@dataclass(frozen=True)
class ComplianceReport:
    """Aggregated result of scanning every changed file in a push."""

    violations: tuple[Violation, ...]
    passed: bool
    summary: str

    def count(self, severity: Severity) -> int:
        return _count(self.violations, severity)

    @property
    def high_count(self) -> int:
        return self.count(Severity.HIGH)

    @property
    def medium_count(self) -> int:
        return self.count(Severity.MEDIUM)

    @property
    def low_count(self) -> int:
        return self.count(Severity.LOW)


def _failure_summary(total: int, high: int, medium: int, low: int) -> str:
    return (
        f"❌ Found {total} compliance violation(s):\n"
        f"- {high} high severity\n"
        f"- {medium} medium severity\n"
        f"- {low} low severity"
    )


def aggregate(violations: Iterable[Violation]) -> ComplianceReport:
    """Build a ComplianceReport, preserving detection order.

    Args:
        violations: Violations concatenated across all files and commits.

    Returns:
        Report with ``passed`` set iff there are no violations.
    """
    ordered = tuple(violations)
    if not ordered:
        return ComplianceReport(violations=ordered, passed=True, summary=PASSED_SUMMARY)
    summary = _failure_summary(
        len(ordered),
        _count(ordered, Severity.HIGH),
        _count(ordered, Severity.MEDIUM),
        _count(ordered, Severity.LOW),
    )
    return ComplianceReport(violations=ordered, passed=False, summary=summary)


def check_gate(report: ComplianceReport, fail_on: Severity | None) -> bool:
    """Return True if any violation meets or exceeds the fail_on severity."""
    if fail_on is None:
        return False
    return any(v.severity.rank >= fail_on.rank for v in report.violations)
