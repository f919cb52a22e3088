# SPDX-License-Identifier: MIT
"""Push event model — the subset of GitHub's ``push`` payload the check reads."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

BRANCH_REF_PREFIX = "refs/heads/"


class CommitAuthor(BaseModel):
    name: str | None = None
    email: str | None = None
    username: str | None = None


class PushCommit(BaseModel):
    """One commit listed in the push payload."""

    id: str
    message: str = ""
    author: CommitAuthor | None = None

    @property
    def author_name(self) -> str | None:
        return self.author.name if self.author is not None else None


class Pusher(BaseModel):
    name: str | None = None
    email: str | None = None


class RepositoryOwner(BaseModel):
    name: str | None = None
    login: str | None = None


class Repository(BaseModel):
    """Repository coordinates."""

    name: str
    owner: RepositoryOwner
    full_name: str | None = None

    @property
    def owner_login(self) -> str:
        """Owner name, falling back to login (user vs. organization payloads)."""
        return self.owner.name or self.owner.login or ""

    @property
    def slug(self) -> str:
        """``owner/name`` as accepted by ``Github.get_repo``."""
        return self.full_name or f"{self.owner_login}/{self.name}"


class PushEvent(BaseModel):
    """GitHub push webhook payload."""

    ref: str
    after: str = ""
    deleted: bool = False
    pusher: Pusher = Field(default_factory=Pusher)
    repository: Repository
    commits: list[PushCommit] = Field(default_factory=list)

    @property
    def branch(self) -> str:
        """Branch name with the ``refs/heads/`` prefix removed."""
        return self.ref.removeprefix(BRANCH_REF_PREFIX)

    @property
    def latest_commit(self) -> PushCommit | None:
        return self.commits[-1] if self.commits else None


def load_push_event(event_path: Path) -> PushEvent:
    """Parse a GitHub Actions push event payload.

    Raises:
        FileNotFoundError: If event_path doesn't exist.
        pydantic.ValidationError: If the JSON is malformed or lacks push fields.
    """
    return PushEvent.model_validate_json(event_path.read_text(encoding="utf-8"))
