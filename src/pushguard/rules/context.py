# SPDX-License-Identifier: MIT
"""Diff splitter — turns a full unified diff into per-file patch fragments.

GitHub's commit API already hands out one patch per file. Local scans start
from ``git diff`` output instead, so the fragments are cut out here in the
same shape: hunk headers and hunk lines, no file headers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class FilePatch:
    """A changed file and its diff fragment."""

    path: str
    patch: str


_FILE_HEADER_RE = re.compile(r"^diff --git a/.+ b/(.+)$")
_HUNK_HEADER_RE = re.compile(r"^@@ -\d+(?:,\d+)? \+\d+(?:,\d+)? @@")


def split_diff(diff_text: str) -> list[FilePatch]:
    """Split a unified diff into FilePatch objects, one per file with hunks.

    Files with no hunks (binary files, pure renames, mode changes) are
    omitted, matching the API behaviour of a missing ``patch`` field.
    """
    if not diff_text.strip():
        return []

    patches: list[FilePatch] = []
    current_path: str | None = None
    hunk_lines: list[str] = []
    in_hunk = False

    def _flush_file() -> None:
        nonlocal current_path, hunk_lines, in_hunk
        if current_path is not None and hunk_lines:
            patches.append(FilePatch(path=current_path, patch="\n".join(hunk_lines)))
        current_path = None
        hunk_lines = []
        in_hunk = False

    # Only "\n" ends a diff line; str.splitlines would also break on U+2028, \f, etc.
    lines = diff_text.split("\n")
    if lines[-1] == "":
        lines.pop()

    for raw_line in lines:
        line = raw_line.removesuffix("\r")
        file_match = _FILE_HEADER_RE.match(line)
        if file_match:
            _flush_file()
            current_path = file_match.group(1)
            continue

        if current_path is None:
            continue

        if _HUNK_HEADER_RE.match(line):
            in_hunk = True
            hunk_lines.append(line)
            continue

        if not in_hunk:
            # index, mode, rename, ---/+++ and "Binary files" metadata
            continue

        if line.startswith(("+", "-", " ", "\\")) or line == "":
            hunk_lines.append(line)
        else:
            # Unexpected line ends the hunk; wait for the next header
            in_hunk = False

    _flush_file()
    return patches
