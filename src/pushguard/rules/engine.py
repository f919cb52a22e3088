# SPDX-License-Identifier: MIT
"""Rule engine — runs the catalog against one file's diff fragment."""

from __future__ import annotations

from pushguard.rules.base import PatternRule, Violation


class RuleEngine:
    """Holds an ordered rule list and applies it to diff fragments."""

    def __init__(self, rules: list[PatternRule] | None = None) -> None:
        from pushguard.rules.catalog import RULE_CATALOG

        self._rules: list[PatternRule] = list(RULE_CATALOG if rules is None else rules)

    @property
    def rules(self) -> list[PatternRule]:
        return list(self._rules)

    def detect(self, filename: str, diff_text: str) -> list[Violation]:
        """Return at most one violation per rule, in rule order."""
        return [rule.violation_for(filename) for rule in self._rules if rule.matches(diff_text)]
