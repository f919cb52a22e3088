"""pushguard — lexical compliance checks for pushes to a repository's primary branch."""

from pushguard.github_push import (
    CommitFetchResult,
    PushCheckOutcome,
    collect_violations,
    fetch_commit_files,
    run_push_check,
    should_check,
)
from pushguard.push_event import PushEvent, load_push_event
from pushguard.render import issue_labels, render, render_title
from pushguard.report import ComplianceReport, aggregate, check_gate
from pushguard.rules import Severity, Violation, detect, detect_in_diff, load_config

__all__ = [
    "CommitFetchResult",
    "ComplianceReport",
    "PushCheckOutcome",
    "PushEvent",
    "Severity",
    "Violation",
    "aggregate",
    "check_gate",
    "collect_violations",
    "detect",
    "detect_in_diff",
    "fetch_commit_files",
    "issue_labels",
    "load_config",
    "load_push_event",
    "render",
    "render_title",
    "run_push_check",
    "should_check",
]
