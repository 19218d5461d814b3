"""GitHub Actions run context and the helpers that read it.

`ActionContext` mirrors what a workflow step sees: the runner's `GITHUB_*`
variables plus the decoded event payload from `GITHUB_EVENT_PATH`.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from github_script_utils.config import ActionsSettings
from github_script_utils.github.models import RepoInfo

logger = logging.getLogger(__name__)

_HEADS_PREFIX = "refs/heads/"


@dataclass(frozen=True, slots=True)
class ActionContext:
    """Snapshot of the current workflow run."""

    event_name: str
    ref: str
    sha: str
    repository: str
    server_url: str = "https://github.com"
    api_url: str = "https://api.github.com"
    payload: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_env(cls, settings: ActionsSettings | None = None) -> ActionContext:
        """Build the context from runner environment variables."""

        settings = settings or ActionsSettings()
        payload: dict[str, Any] = {}
        if settings.event_path is not None:
            if settings.event_path.exists():
                raw = json.loads(settings.event_path.read_text(encoding="utf-8"))
                if isinstance(raw, dict):
                    payload = raw
            else:
                logger.warning(
                    "Event payload file not found; using an empty payload",
                    extra={"path": str(settings.event_path)},
                )

        return cls(
            event_name=settings.event_name,
            ref=settings.ref,
            sha=settings.sha,
            repository=settings.repository,
            server_url=settings.server_url.rstrip("/"),
            api_url=settings.api_url.rstrip("/"),
            payload=payload,
        )

    @property
    def pull_request(self) -> dict[str, Any] | None:
        value = self.payload.get("pull_request")
        return value if isinstance(value, dict) and value else None

    @property
    def issue(self) -> dict[str, Any] | None:
        value = self.payload.get("issue")
        return value if isinstance(value, dict) and value else None


def get_repo_info(ctx: ActionContext) -> RepoInfo:
    return RepoInfo.parse(ctx.repository)


def get_current_pull_request_number(ctx: ActionContext) -> int | None:
    """Return the pull request number, only for events carrying a `pull_request` payload."""

    pr = ctx.pull_request
    number = pr.get("number") if pr else None
    return number if isinstance(number, int) else None


def get_current_issue_number(ctx: ActionContext) -> int | None:
    """Return the issue number, falling back to the pull request (PRs are issues too)."""

    for source in (ctx.issue, ctx.pull_request):
        number = source.get("number") if source else None
        if isinstance(number, int) and number:
            return number
    return None


def is_pull_request_context(ctx: ActionContext) -> bool:
    return ctx.pull_request is not None


def is_issue_context(ctx: ActionContext) -> bool:
    return ctx.issue is not None and ctx.pull_request is None


def get_current_sha(ctx: ActionContext) -> str:
    pr = ctx.pull_request
    if pr:
        head = pr.get("head")
        if isinstance(head, dict) and head.get("sha"):
            return str(head["sha"])
    after = ctx.payload.get("after")
    if isinstance(after, str) and after:
        return after
    return ctx.sha


def get_current_branch(ctx: ActionContext) -> str:
    pr = ctx.pull_request
    if pr:
        head = pr.get("head")
        if isinstance(head, dict) and isinstance(head.get("ref"), str):
            return head["ref"]

    if ctx.ref.startswith(_HEADS_PREFIX):
        return ctx.ref[len(_HEADS_PREFIX) :]
    return ctx.ref


def get_repository_url(ctx: ActionContext) -> str:
    repo = get_repo_info(ctx)
    return f"{ctx.server_url}/{repo.full_name}"


def get_issue_url(ctx: ActionContext, issue_number: int) -> str:
    return f"{get_repository_url(ctx)}/issues/{issue_number}"


def get_pull_request_url(ctx: ActionContext, pull_number: int) -> str:
    return f"{get_repository_url(ctx)}/pull/{pull_number}"
