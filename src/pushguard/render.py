# SPDX-License-Identifier: MIT
"""Report renderer — markdown issue body, title, and labels for a compliance report.

The body layout is consumed downstream as-is; keep line order and spacing
stable.
"""

from __future__ import annotations

import html
import re

import navi_sanitize
import nh3

from pushguard.report import ComplianceReport
from pushguard.rules.base import Severity, Violation

UNKNOWN_AUTHOR = "unknown"
SHORT_SHA_LEN = 7

REPORT_TITLE = "## \U0001f50d Compliance Report"
CLOSING_ADVICE = (
    "⚠️ Please address these violations before merging to maintain compliance standards."
)

_SEVERITY_EMOJI: dict[Severity, str] = {
    Severity.HIGH: "\U0001f534",
    Severity.MEDIUM: "\U0001f7e1",
    Severity.LOW: "\U0001f535",
}

# --- Output sanitization ---

# Dangerous URL schemes as markdown link targets — not covered by nh3
# since [text](javascript:...) is markdown, not HTML.
_DANGEROUS_SCHEME_RE = re.compile(
    r"(\]\(\s*)(?:javascript|data|vbscript)\s*:",
    re.IGNORECASE,
)


def _sanitize_text(text: str) -> str:
    """Strip HTML tags and dangerous link targets from commit-supplied text.

    nh3 entity-escapes its output. Text it only escaped is plain and passes
    through verbatim; otherwise the cleaned, still-escaped form is used.
    """
    cleaned = nh3.clean(text, tags=set())
    if html.unescape(cleaned) != text:
        text = cleaned
    return _DANGEROUS_SCHEME_RE.sub(r"\1", text)


def _is_invisible(ch: str) -> bool:
    return not navi_sanitize.clean(ch)


def _sanitize_path(path: str) -> str:
    """Make a file path safe for display inside a code span.

    Only characters navi-sanitize drops outright (zero-width, bidi, control)
    are removed. Homoglyphs are left alone: the path is an identifier and
    distinct files must keep distinct names. Backticks and line breaks would
    end the code span.
    """
    path = "".join(ch for ch in path if not _is_invisible(ch))
    return path.replace("`", "").replace("\r", " ").replace("\n", " ")


def short_sha(commit_id: str) -> str:
    """First seven characters of a commit id, or the whole id if shorter."""
    return commit_id[:SHORT_SHA_LEN]


def group_by_file(violations: tuple[Violation, ...] | list[Violation]) -> dict[str, list[Violation]]:
    """Group violations by file, files in first-occurrence order."""
    grouped: dict[str, list[Violation]] = {}
    for violation in violations:
        grouped.setdefault(violation.file, []).append(violation)
    return grouped


def _violation_line(violation: Violation) -> str:
    emoji = _SEVERITY_EMOJI.get(violation.severity, "⚪")
    return f"- {emoji} **{violation.severity.value.upper()}**: {violation.issue}"


def render(
    report: ComplianceReport,
    commit_id: str,
    commit_message: str,
    author_name: str | None,
) -> str:
    """Format a compliance report as a markdown issue body.

    Args:
        report: Aggregated report for the push.
        commit_id: Full commit SHA shown (abbreviated) in the header.
        commit_message: Commit message shown in the header.
        author_name: Commit author; ``unknown`` when missing.

    Returns:
        Markdown document. Passing reports end after the summary.
    """
    author = _sanitize_text(author_name) if author_name else UNKNOWN_AUTHOR
    lines: list[str] = [
        REPORT_TITLE,
        "",
        f"**Commit:** {short_sha(commit_id)}",
        f"**Author:** {author}",
        f"**Message:** {_sanitize_text(commit_message or '')}",
        "",
        "---",
        "",
        report.summary,
        "",
    ]

    if report.passed:
        lines.append("")
        return "\n".join(lines)

    lines.append("### Violations:")
    lines.append("")
    for file, file_violations in group_by_file(report.violations).items():
        lines.append(f"#### \U0001f4c4 `{_sanitize_path(file)}`")
        lines.append("")
        lines.extend(_violation_line(v) for v in file_violations)
        lines.append("")

    lines.append("")
    lines.append("---")
    lines.append("")
    lines.append(CLOSING_ADVICE)
    return "\n".join(lines)


def render_title(report: ComplianceReport, commit_id: str) -> str:
    """Issue title for a report."""
    if report.passed:
        return f"✅ Compliance Check Passed - {short_sha(commit_id)}"
    return f"❌ Compliance Violations Detected - {short_sha(commit_id)}"


def issue_labels(report: ComplianceReport) -> list[str]:
    """Labels attached to the report issue."""
    return ["compliance", "passed" if report.passed else "violation"]
