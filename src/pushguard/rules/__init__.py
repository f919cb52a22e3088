# SPDX-License-Identifier: MIT
"""Compliance rule engine — fixed lexical checks over diff fragments."""

from pushguard.rules.base import PatternRule, Severity, Violation
from pushguard.rules.catalog import RULE_CATALOG
from pushguard.rules.config import PushGuardConfig, load_config
from pushguard.rules.context import FilePatch, split_diff
from pushguard.rules.engine import RuleEngine

__all__ = [
    "RULE_CATALOG",
    "FilePatch",
    "PatternRule",
    "PushGuardConfig",
    "RuleEngine",
    "Severity",
    "Violation",
    "detect",
    "detect_in_diff",
    "load_config",
    "split_diff",
]


def detect(filename: str, diff_text: str) -> list[Violation]:
    """Convenience: run the default catalog against one file's diff fragment."""
    return RuleEngine().detect(filename, diff_text)


def detect_in_diff(diff_text: str) -> list[Violation]:
    """Convenience: split a full unified diff and run the catalog on every file."""
    engine = RuleEngine()
    violations: list[Violation] = []
    for file_patch in split_diff(diff_text):
        violations.extend(engine.detect(file_patch.path, file_patch.patch))
    return violations
