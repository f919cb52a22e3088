# SPDX-License-Identifier: MIT
"""Package entry point — run pushguard via `python -m pushguard`.

Subcommands:
    check   CI mode: read the push event, post the report issue (default)
    scan    local mode: check a unified diff from a file or stdin
"""

import argparse
import logging
import sys

from pushguard.check import main, read_diff, scan

_SEVERITY_CHOICES = ["none", "high", "medium", "low"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="pushguard push compliance checker")
    sub = parser.add_subparsers(dest="command")

    check_parser = sub.add_parser("check", help="Check a push event (GitHub Actions)")
    check_parser.add_argument(
        "--fail-on",
        choices=_SEVERITY_CHOICES,
        default=None,
        help="Fail the job at this severity (overrides PUSHGUARD_FAIL_ON env var)",
    )
    check_parser.add_argument(
        "--branches",
        default=None,
        help="Comma-separated branches to check (overrides PUSHGUARD_BRANCHES env var)",
    )
    check_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the report instead of creating an issue",
    )

    scan_parser = sub.add_parser("scan", help="Check a unified diff (file or stdin)")
    scan_parser.add_argument("diff_file", nargs="?", default=None, help="Diff file (default: stdin)")
    scan_parser.add_argument("--fail-on", choices=_SEVERITY_CHOICES, default=None)
    return parser


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    args = _build_parser().parse_args()
    if args.command == "scan":
        try:
            diff_text = read_diff(args.diff_file)
        except (OSError, UnicodeDecodeError) as exc:
            print(f"::error::Cannot read diff: {exc}")
            sys.exit(1)
        scan(diff_text, fail_on=args.fail_on)
    elif args.command == "check":
        main(fail_on=args.fail_on, branches=args.branches, dry_run=args.dry_run)
    else:
        main()
