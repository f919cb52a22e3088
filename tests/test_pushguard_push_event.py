# SPDX-License-Identifier: MIT
"""Tests for pushguard.push_event — push payload parsing and helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

from pushguard.push_event import PushEvent, Repository, RepositoryOwner, load_push_event


def _payload(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "ref": "refs/heads/main",
        "before": "0" * 40,
        "after": "1234567890abcdef1234567890abcdef12345678",
        "pusher": {"name": "hiimbex", "email": "bex@example.com"},
        "repository": {
            "id": 1,
            "name": "testing-things",
            "full_name": "hiimbex/testing-things",
            "owner": {"name": "hiimbex", "login": "hiimbex"},
        },
        "commits": [
            {
                "id": "1234567890abcdef1234567890abcdef12345678",
                "message": "Add new feature",
                "author": {"name": "Bex", "email": "bex@example.com", "username": "hiimbex"},
                "added": ["src/app.js"],
            }
        ],
        "installation": {"id": 2},
    }
    data.update(overrides)
    return data


class TestPushEvent:
    def test_parses_payload(self) -> None:
        event = PushEvent.model_validate(_payload())
        assert event.branch == "main"
        assert event.pusher.name == "hiimbex"
        assert event.repository.slug == "hiimbex/testing-things"
        assert len(event.commits) == 1
        assert event.commits[0].author_name == "Bex"

    def test_branch_strips_prefix_only(self) -> None:
        event = PushEvent.model_validate(_payload(ref="refs/heads/feature/refs/heads/x"))
        assert event.branch == "feature/refs/heads/x"

    def test_tag_ref_not_a_branch(self) -> None:
        event = PushEvent.model_validate(_payload(ref="refs/tags/main"))
        assert event.branch == "refs/tags/main"

    def test_latest_commit_is_last(self) -> None:
        commits = [
            {"id": "a" * 40, "message": "first", "author": {"name": "A"}},
            {"id": "b" * 40, "message": "second", "author": {"name": "B"}},
        ]
        event = PushEvent.model_validate(_payload(commits=commits))
        assert event.latest_commit is not None
        assert event.latest_commit.message == "second"

    def test_no_commits(self) -> None:
        event = PushEvent.model_validate(_payload(commits=[]))
        assert event.latest_commit is None

    def test_missing_author(self) -> None:
        event = PushEvent.model_validate(_payload(commits=[{"id": "c" * 40, "message": "m"}]))
        assert event.commits[0].author_name is None

    def test_deleted_defaults_false(self) -> None:
        assert PushEvent.model_validate(_payload()).deleted is False

    def test_missing_repository_rejected(self) -> None:
        data = _payload()
        del data["repository"]
        with pytest.raises(ValidationError):
            PushEvent.model_validate(data)


class TestRepository:
    def test_owner_name_preferred(self) -> None:
        repo = Repository(name="r", owner=RepositoryOwner(name="org-name", login="org-login"))
        assert repo.owner_login == "org-name"

    def test_owner_login_fallback(self) -> None:
        repo = Repository(name="r", owner=RepositoryOwner(login="octo"))
        assert repo.owner_login == "octo"
        assert repo.slug == "octo/r"

    def test_full_name_wins(self) -> None:
        repo = Repository(name="r", full_name="x/r", owner=RepositoryOwner(login="octo"))
        assert repo.slug == "x/r"


class TestLoadPushEvent:
    def test_load_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "event.json"
        path.write_text(json.dumps(_payload()), encoding="utf-8")
        event = load_push_event(path)
        assert event.after.startswith("1234567")

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_push_event(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "event.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_push_event(path)
