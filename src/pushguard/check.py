# SPDX-License-Identifier: MIT
"""pushguard CI entry point — reads the push event, runs the check, posts the issue.

Usage (GitHub Actions, ``on: push``):
    python -m pushguard check

Environment variables:
    GITHUB_TOKEN        — GitHub API token (contents: read, issues: write)
    GITHUB_EVENT_PATH   — path to push event JSON (set by GitHub Actions)
    GITHUB_OUTPUT       — step outputs file (set by GitHub Actions, optional)
    PUSHGUARD_BRANCHES  — comma-separated branches to check (default: main,master)
    PUSHGUARD_FAIL_ON   — none|high|medium|low; fail the job at this severity (default: none)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from github import Github
from pydantic import ValidationError

from pushguard.github_push import PushCheckOutcome, run_push_check
from pushguard.push_event import load_push_event
from pushguard.render import render
from pushguard.report import ComplianceReport, aggregate, check_gate
from pushguard.rules import detect_in_diff, load_config

LOCAL_COMMIT_ID = "local"


def _write_outputs(outcome: PushCheckOutcome) -> None:
    """Append step outputs when running under GitHub Actions."""
    github_output = os.environ.get("GITHUB_OUTPUT", "")
    if not github_output:
        return
    report = outcome.report
    with open(github_output, "a", encoding="utf-8") as f:
        f.write(f"passed={str(report.passed).lower()}\n")
        f.write(f"violations-count={len(report.violations)}\n")
        f.write(f"high-count={report.high_count}\n")
        f.write(f"medium-count={report.medium_count}\n")
        f.write(f"low-count={report.low_count}\n")
        if outcome.issue_number is not None:
            f.write(f"issue-number={outcome.issue_number}\n")


def main(
    *,
    fail_on: str | None = None,
    branches: str | None = None,
    dry_run: bool = False,
) -> None:
    """CI entry point — reads env, runs the compliance check, creates the issue."""
    try:
        config = load_config(cli_fail_on=fail_on, cli_branches=branches)
    except ValueError as exc:
        print(f"::error::Invalid configuration: {exc}")
        sys.exit(1)

    token = os.environ.get("GITHUB_TOKEN", "")
    event_path_str = os.environ.get("GITHUB_EVENT_PATH", "")

    if not token and not dry_run:
        print("::error::GITHUB_TOKEN not set")
        sys.exit(1)
    if not event_path_str:
        print("::error::GITHUB_EVENT_PATH not set")
        sys.exit(1)

    event_path = Path(event_path_str)
    if not event_path.is_file():
        print(f"::error::Event file not found: {event_path}")
        sys.exit(1)

    # 1. Parse event
    print("=== pushguard compliance check ===")
    try:
        event = load_push_event(event_path)
    except ValidationError as exc:
        print(f"::error::Invalid push event: {exc.error_count()} validation error(s)")
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"::error::Cannot read push event: {exc}")
        sys.exit(1)
    safe_branch = event.branch.replace("\n", " ").replace("\r", " ")
    print(f"Push to {safe_branch} ({len(event.commits)} commits) in {event.repository.slug}")

    # 2. Run check (branch filter, per-commit fetch, aggregate, post)
    gh = Github(token) if token else Github()
    repository = gh.get_repo(event.repository.slug, lazy=True)
    try:
        outcome = run_push_check(
            event=event,
            repository=repository,
            config=config,
            dry_run=dry_run,
        )
    except Exception as exc:
        print(f"::error::Failed to post compliance report: {exc}")
        sys.exit(1)

    if outcome is None:
        print(f"Skipped: branch {safe_branch!r} is not checked")
        return

    report = outcome.report
    print(f"  Violations: {len(report.violations)} — {'PASSED' if report.passed else 'FAILED'}")
    if dry_run:
        print(outcome.title)
        print(outcome.body)
    elif outcome.issue_number is not None:
        print(f"  Issue #{outcome.issue_number} created")

    _write_outputs(outcome)

    if check_gate(report, config.fail_on):
        print(f"::warning::Compliance gate FAILED (fail-on={config.fail_on})")
        sys.exit(1)


def read_diff(diff_file: str | None) -> str:
    """Read a unified diff from a file, or from stdin when no file is given.

    Raises:
        OSError: If the file cannot be opened.
        UnicodeDecodeError: If the diff is not valid UTF-8.
    """
    if diff_file:
        return Path(diff_file).read_text(encoding="utf-8")
    return sys.stdin.read()


def scan(diff_text: str, *, fail_on: str | None = None) -> ComplianceReport:
    """Local mode — check a full unified diff and print the rendered report.

    Exits 1 when the report trips the configured gate.
    """
    try:
        config = load_config(cli_fail_on=fail_on)
    except ValueError as exc:
        print(f"::error::Invalid configuration: {exc}")
        sys.exit(1)

    report = aggregate(detect_in_diff(diff_text))
    print(render(report, LOCAL_COMMIT_ID, "", None))
    if check_gate(report, config.fail_on):
        sys.exit(1)
    return report
