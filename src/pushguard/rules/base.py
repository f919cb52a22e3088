# SPDX-License-Identifier: MIT
"""Severity enum, violation record, and pattern rule for the compliance engine."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum


class Severity(StrEnum):
    """Triage priority of a violation. Ordered high > medium > low for display and gating."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK: dict[Severity, int] = {
    Severity.LOW: 0,
    Severity.MEDIUM: 1,
    Severity.HIGH: 2,
}


@dataclass(frozen=True)
class Violation:
    """A single compliance issue detected in one file's diff."""

    file: str
    issue: str
    severity: Severity
    rule_id: str = ""


@dataclass(frozen=True)
class PatternRule:
    """One catalog entry: a compiled pattern plus the violation it produces."""

    id: str
    pattern: re.Pattern[str]
    issue: str
    severity: Severity

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None

    def violation_for(self, filename: str) -> Violation:
        return Violation(file=filename, issue=self.issue, severity=self.severity, rule_id=self.id)
