# SPDX-License-Identifier: MIT
"""Rule catalog — the fixed, ordered list of lexical compliance checks."""

from __future__ import annotations

import re

from pushguard.rules.base import PatternRule, Severity

# Order is significant: violations are emitted in catalog order.
RULE_CATALOG: list[PatternRule] = [
    # Hardcoded secrets / credentials
    PatternRule(
        id="hardcoded-password",
        pattern=re.compile(r"""(password|passwd|pwd)\s*=\s*['"][^'"]+['"]""", re.IGNORECASE),
        issue="Hardcoded password detected",
        severity=Severity.HIGH,
    ),
    PatternRule(
        id="hardcoded-api-key",
        pattern=re.compile(r"""(api[_-]?key|apikey)\s*=\s*['"][^'"]+['"]""", re.IGNORECASE),
        issue="Hardcoded API key detected",
        severity=Severity.HIGH,
    ),
    PatternRule(
        id="hardcoded-secret",
        pattern=re.compile(r"""(secret|token)\s*=\s*['"][^'"]+['"]""", re.IGNORECASE),
        issue="Hardcoded secret/token detected",
        severity=Severity.HIGH,
    ),
    PatternRule(
        id="aws-credentials",
        pattern=re.compile(r"aws_access_key_id|aws_secret_access_key", re.IGNORECASE),
        issue="AWS credentials detected",
        severity=Severity.HIGH,
    ),
    # Debug leftovers
    PatternRule(
        id="console-statement",
        pattern=re.compile(r"console\.(log|debug|info|warn|error)"),
        issue="Console statements detected - use proper logging framework",
        severity=Severity.LOW,
    ),
    PatternRule(
        id="todo-marker",
        pattern=re.compile(r"(TODO|FIXME|HACK|XXX):?", re.IGNORECASE),
        issue="TODO/FIXME comments detected - should be tracked as issues",
        severity=Severity.LOW,
    ),
    # Suppressed linting
    PatternRule(
        id="lint-disabled",
        pattern=re.compile(r"(eslint-disable|@ts-ignore|@ts-nocheck)"),
        issue="Linting rules disabled - fix the underlying issue instead",
        severity=Severity.MEDIUM,
    ),
    # Dynamic code evaluation
    PatternRule(
        id="unsafe-eval",
        pattern=re.compile(r"\beval\s*\("),
        issue="Unsafe eval() usage detected",
        severity=Severity.HIGH,
    ),
]
