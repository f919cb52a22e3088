# SPDX-License-Identifier: MIT
"""GitHub integration — fetch changed files per commit, post the report as an issue.

Per-commit retrieval failures are logged and skipped: a single bad commit
never prevents a report for the rest of the push.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Any

from pushguard.push_event import PushEvent
from pushguard.render import issue_labels, render, render_title
from pushguard.report import ComplianceReport, aggregate
from pushguard.rules.base import Violation
from pushguard.rules.config import PushGuardConfig
from pushguard.rules.context import FilePatch
from pushguard.rules.engine import RuleEngine

log = logging.getLogger(__name__)


# --- Commit retrieval ---


@dataclass(frozen=True)
class CommitFetchResult:
    """Files of one commit, or the reason they could not be fetched."""

    sha: str
    files: list[FilePatch] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def fetch_commit_files(repository: Any, sha: str) -> CommitFetchResult:
    """Fetch a commit's changed files through the GitHub API.

    Files without a textual patch (binary, rename-only) are dropped here.

    Args:
        repository: PyGithub Repository object.
        sha: Commit id from the push payload.

    Returns:
        CommitFetchResult carrying either the files or the error message.
    """
    try:
        commit = repository.get_commit(sha)
        files = [FilePatch(path=f.filename, patch=f.patch) for f in commit.files if f.patch]
    except Exception as exc:
        log.error("Error analyzing commit %s: %s", sha, exc)
        return CommitFetchResult(sha=sha, error=str(exc))
    return CommitFetchResult(sha=sha, files=files)


def collect_violations(
    results: Iterable[CommitFetchResult],
    engine: RuleEngine | None = None,
) -> list[Violation]:
    """Run the rule engine over every fetched file; failed fetches contribute nothing."""
    engine = engine or RuleEngine()
    violations: list[Violation] = []
    for result in results:
        if not result.ok:
            continue
        for file_patch in result.files:
            violations.extend(engine.detect(file_patch.path, file_patch.patch))
    return violations


# --- Branch filter ---


def should_check(event: PushEvent, config: PushGuardConfig) -> bool:
    """True if the push targets a checked branch and did not delete it."""
    return not event.deleted and event.branch in config.branches


# --- Run ---


@dataclass(frozen=True)
class PushCheckOutcome:
    """Everything produced for one push."""

    report: ComplianceReport
    title: str
    body: str
    labels: list[str]
    issue_number: int | None = None


def build_outcome(event: PushEvent, report: ComplianceReport) -> PushCheckOutcome:
    """Render title, body, and labels using the push's latest commit for the header."""
    latest = event.latest_commit
    if latest is not None:
        commit_id, message, author = latest.id, latest.message, latest.author_name
    else:
        commit_id, message, author = event.after, "", None
    return PushCheckOutcome(
        report=report,
        title=render_title(report, commit_id),
        body=render(report, commit_id, message, author),
        labels=issue_labels(report),
    )


def run_push_check(
    *,
    event: PushEvent,
    repository: Any,
    config: PushGuardConfig,
    dry_run: bool = False,
) -> PushCheckOutcome | None:
    """Check every commit of a push and post the report as a new issue.

    Commits are fetched one at a time, in push order.

    Args:
        event: Parsed push payload.
        repository: PyGithub Repository object for ``event.repository``.
        config: Branch filter and gate settings.
        dry_run: Build the report without creating the issue.

    Returns:
        The outcome, or None when the push was skipped by the branch filter.

    Raises:
        github.GithubException: If creating the issue fails.
    """
    if not should_check(event, config):
        log.info("Skipping compliance check for branch: %s", event.branch)
        return None

    log.info(
        "Running compliance check for push to %s by %s",
        event.branch,
        event.pusher.name or "unknown",
    )

    results = [fetch_commit_files(repository, commit.id) for commit in event.commits]
    failed = sum(1 for r in results if not r.ok)
    if failed:
        log.warning("%d/%d commits could not be analyzed", failed, len(results))

    report = aggregate(collect_violations(results))
    outcome = build_outcome(event, report)

    if dry_run:
        return outcome

    issue = repository.create_issue(title=outcome.title, body=outcome.body, labels=outcome.labels)
    log.info("Compliance report posted: %s", "PASSED" if report.passed else "FAILED")
    return replace(outcome, issue_number=issue.number)
