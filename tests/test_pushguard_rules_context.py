# SPDX-License-Identifier: MIT
"""Tests for pushguard.rules.context — splitting a unified diff into file patches."""

from __future__ import annotations

from pushguard.rules import detect_in_diff
from pushguard.rules.context import FilePatch, split_diff

_TWO_FILE_DIFF = (
    "diff --git a/src/app.js b/src/app.js\n"
    "index 83db48f..bf269f4 100644\n"
    "--- a/src/app.js\n"
    "+++ b/src/app.js\n"
    "@@ -1,2 +1,3 @@\n"
    " const x = 1;\n"
    "+console.log(x);\n"
    " module.exports = x;\n"
    "diff --git a/config.py b/config.py\n"
    "new file mode 100644\n"
    "--- /dev/null\n"
    "+++ b/config.py\n"
    "@@ -0,0 +1 @@\n"
    "+password = 'secret123'\n"
)


class TestSplitDiff:
    def test_empty(self) -> None:
        assert split_diff("") == []
        assert split_diff("   \n\n") == []

    def test_two_files(self) -> None:
        patches = split_diff(_TWO_FILE_DIFF)
        assert [p.path for p in patches] == ["src/app.js", "config.py"]
        assert patches[0].patch == (
            "@@ -1,2 +1,3 @@\n const x = 1;\n+console.log(x);\n module.exports = x;"
        )
        assert patches[1].patch == "@@ -0,0 +1 @@\n+password = 'secret123'"

    def test_file_headers_excluded_from_patch(self) -> None:
        for p in split_diff(_TWO_FILE_DIFF):
            assert "+++" not in p.patch
            assert "index " not in p.patch
            assert "diff --git" not in p.patch

    def test_binary_file_skipped(self) -> None:
        diff = (
            "diff --git a/logo.png b/logo.png\n"
            "index 0000000..1111111 100644\n"
            "Binary files a/logo.png and b/logo.png differ\n"
        )
        assert split_diff(diff) == []

    def test_pure_rename_skipped(self) -> None:
        diff = (
            "diff --git a/old.py b/new.py\n"
            "similarity index 100%\n"
            "rename from old.py\n"
            "rename to new.py\n"
        )
        assert split_diff(diff) == []

    def test_rename_with_changes_uses_new_path(self) -> None:
        diff = (
            "diff --git a/old.py b/new.py\n"
            "similarity index 90%\n"
            "rename from old.py\n"
            "rename to new.py\n"
            "--- a/old.py\n"
            "+++ b/new.py\n"
            "@@ -1 +1 @@\n"
            "-a = 1\n"
            "+a = 2\n"
        )
        assert split_diff(diff) == [FilePatch(path="new.py", patch="@@ -1 +1 @@\n-a = 1\n+a = 2")]

    def test_multiple_hunks_kept_together(self) -> None:
        diff = (
            "diff --git a/a.py b/a.py\n"
            "--- a/a.py\n"
            "+++ b/a.py\n"
            "@@ -1 +1 @@\n"
            "+one\n"
            "@@ -10 +10 @@\n"
            "+two\n"
            "\\ No newline at end of file\n"
        )
        (patch,) = split_diff(diff)
        assert patch.patch.count("@@ -") == 2
        assert patch.patch.endswith("\\ No newline at end of file")

    def test_preamble_ignored(self) -> None:
        diff = "From abc123 Mon Sep 17 00:00:00 2001\nSubject: eval(x)\n\n" + _TWO_FILE_DIFF
        assert [p.path for p in split_diff(diff)] == ["src/app.js", "config.py"]


class TestDetectInDiff:
    def test_violations_per_file_in_file_order(self) -> None:
        violations = detect_in_diff(_TWO_FILE_DIFF)
        assert [(v.file, v.rule_id) for v in violations] == [
            ("src/app.js", "console-statement"),
            ("config.py", "hardcoded-password"),
        ]

    def test_clean_diff(self) -> None:
        diff = "diff --git a/r.md b/r.md\n--- a/r.md\n+++ b/r.md\n@@ -1 +1 @@\n-old\n+new\n"
        assert detect_in_diff(diff) == []

    def test_unicode_line_separator_does_not_end_hunk(self) -> None:
        diff = (
            "diff --git a/a.js b/a.js\n"
            "--- a/a.js\n"
            "+++ b/a.js\n"
            "@@ -1,1 +1,2 @@\n"
            "+// note x\u2028y\n"
            "+const password = 'abc';\n"
        )
        [file_patch] = split_diff(diff)
        assert file_patch.patch == (
            "@@ -1,1 +1,2 @@\n+// note x\u2028y\n+const password = 'abc';"
        )
        assert [v.rule_id for v in detect_in_diff(diff)] == ["hardcoded-password"]

    def test_crlf_line_endings(self) -> None:
        diff = _TWO_FILE_DIFF.replace("\n", "\r\n")
        assert split_diff(diff) == split_diff(_TWO_FILE_DIFF)
