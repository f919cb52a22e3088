# SPDX-License-Identifier: MIT
"""Run configuration — which branches are checked and which severity fails the job."""

from __future__ import annotations

import os
from dataclasses import dataclass

from pushguard.rules.base import Severity

DEFAULT_BRANCHES: frozenset[str] = frozenset({"main", "master"})

# "none" disables the exit gate; the report is still posted.
FAIL_ON_LEVELS: dict[str, Severity | None] = {
    "none": None,
    "high": Severity.HIGH,
    "medium": Severity.MEDIUM,
    "low": Severity.LOW,
}


@dataclass(frozen=True)
class PushGuardConfig:
    """Configuration for a compliance run."""

    branches: frozenset[str] = DEFAULT_BRANCHES
    fail_on: Severity | None = None


def _parse_branches(raw: str) -> frozenset[str]:
    return frozenset(b.strip() for b in raw.split(",") if b.strip())


def load_config(
    cli_fail_on: str | None = None,
    cli_branches: str | None = None,
) -> PushGuardConfig:
    """Load config with CLI > env > default priority.

    Args:
        cli_fail_on: Severity name from the CLI --fail-on flag.
        cli_branches: Comma-separated branch names from the CLI --branches flag.

    Returns:
        PushGuardConfig for the resolved settings.

    Raises:
        ValueError: If the fail-on severity name is not recognized.
    """
    fail_on_name = (cli_fail_on or os.environ.get("PUSHGUARD_FAIL_ON", "none")).strip().lower()
    if fail_on_name not in FAIL_ON_LEVELS:
        msg = f"Unknown severity: {fail_on_name!r}. Valid values: {sorted(FAIL_ON_LEVELS.keys())}"
        raise ValueError(msg)

    branches = _parse_branches(cli_branches or os.environ.get("PUSHGUARD_BRANCHES", ""))
    return PushGuardConfig(
        branches=branches or DEFAULT_BRANCHES,
        fail_on=FAIL_ON_LEVELS[fail_on_name],
    )
