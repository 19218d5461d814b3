"""Typed records for the GitHub payloads the helpers return.

Provider JSON is projected into these immediately after a fetch so the rest of
the package never handles raw response shapes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Literal, get_args

logger = logging.getLogger(__name__)

DeploymentState = Literal[
    "error",
    "failure",
    "inactive",
    "pending",
    "success",
    "queued",
    "in_progress",
]

DEPLOYMENT_STATES: tuple[str, ...] = get_args(DeploymentState)


@dataclass(frozen=True, slots=True)
class RepoInfo:
    """Repository identification."""

    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @classmethod
    def parse(cls, value: str) -> RepoInfo:
        """Parse an "owner/repo" string."""

        try:
            owner, name = value.strip().strip("/").split("/", 1)
        except ValueError as e:
            raise ValueError("repository must be in the form 'owner/repo'") from e
        if not owner.strip() or not name.strip() or "/" in name:
            raise ValueError("repository must be in the form 'owner/repo'")
        return cls(owner=owner.strip(), repo=name.strip())


@dataclass(frozen=True, slots=True)
class User:
    login: str
    id: int | None = None


@dataclass(frozen=True, slots=True)
class Label:
    name: str
    id: int | None = None
    color: str = ""
    description: str | None = None


@dataclass(frozen=True, slots=True)
class IssueComment:
    """Comment on an issue or pull request conversation."""

    id: int
    body: str
    user: User | None
    created_at: datetime | None
    updated_at: datetime | None
    html_url: str | None
    issue_url: str | None = None


@dataclass(frozen=True, slots=True)
class PullRequestRef:
    ref: str
    sha: str
    repo_full_name: str | None = None


@dataclass(frozen=True, slots=True)
class PullRequest:
    """Pull request fields used by the search and label helpers."""

    id: int | None
    number: int
    title: str
    body: str | None
    state: str
    draft: bool
    user: User | None
    labels: tuple[Label, ...] = ()
    head: PullRequestRef | None = None
    base: PullRequestRef | None = None
    html_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def label_names(self) -> list[str]:
        return [label.name for label in self.labels]


@dataclass(frozen=True, slots=True)
class PullRequestFile:
    filename: str
    status: str
    additions: int
    deletions: int
    changes: int
    patch: str | None = None


@dataclass(frozen=True, slots=True)
class Branch:
    name: str
    sha: str | None = None
    protected: bool = False


@dataclass(frozen=True, slots=True)
class Deployment:
    id: int
    sha: str
    ref: str
    task: str
    environment: str
    description: str | None
    creator: User | None
    created_at: datetime | None
    updated_at: datetime | None
    statuses_url: str | None
    repository_url: str | None
    payload: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class DeploymentStatus:
    id: int
    state: str
    creator: User | None
    description: str | None
    environment: str
    target_url: str | None
    created_at: datetime | None
    updated_at: datetime | None
    deployment_url: str | None
    repository_url: str | None


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so they compare with parsed GitHub timestamps."""

    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def parse_datetime(value: object) -> datetime | None:
    if not isinstance(value, str) or not value.strip():
        return None
    # GitHub commonly returns timestamps like "2025-01-01T00:00:00Z".
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.debug("Unparseable timestamp", extra={"value": value})
        return None


def _str(value: object, default: str = "") -> str:
    return value if isinstance(value, str) else default


def _opt_str(value: object) -> str | None:
    if not isinstance(value, str) or not value.strip():
        return None
    return value


def _int(value: object, default: int = 0) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return value


def _require_object(data: object, kind: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(
            f"Invalid {kind} response: expected an object, got {type(data).__name__}"
        )
    return data


def _require_int(data: dict[str, Any], key: str, kind: str) -> int:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Invalid {kind} response: missing {key}")
    return value


def parse_user(value: object) -> User | None:
    if not isinstance(value, dict):
        return None
    login = value.get("login")
    if not isinstance(login, str) or not login.strip():
        return None
    user_id = value.get("id")
    return User(login=login, id=user_id if isinstance(user_id, int) else None)


def parse_label(value: object) -> Label | None:
    if isinstance(value, str):
        return Label(name=value)
    if not isinstance(value, dict):
        return None
    name = value.get("name")
    if not isinstance(name, str):
        return None
    label_id = value.get("id")
    return Label(
        name=name,
        id=label_id if isinstance(label_id, int) else None,
        color=_str(value.get("color")),
        description=_opt_str(value.get("description")),
    )


def _parse_ref(value: object) -> PullRequestRef | None:
    if not isinstance(value, dict):
        return None
    repo = value.get("repo")
    full_name: str | None = None
    if isinstance(repo, dict):
        full_name = _opt_str(repo.get("full_name"))
        if full_name is None:
            owner = repo.get("owner")
            name = repo.get("name")
            if isinstance(owner, dict) and isinstance(name, str):
                login = owner.get("login")
                if isinstance(login, str):
                    full_name = f"{login}/{name}"
    return PullRequestRef(
        ref=_str(value.get("ref")),
        sha=_str(value.get("sha")),
        repo_full_name=full_name,
    )


def parse_issue_comment(data: dict[str, Any]) -> IssueComment:
    data = _require_object(data, "comment")
    return IssueComment(
        id=_require_int(data, "id", "comment"),
        body=_str(data.get("body")),
        user=parse_user(data.get("user")),
        created_at=parse_datetime(data.get("created_at")),
        updated_at=parse_datetime(data.get("updated_at")),
        html_url=_opt_str(data.get("html_url")),
        issue_url=_opt_str(data.get("issue_url")),
    )


def parse_pull_request(data: dict[str, Any]) -> PullRequest:
    data = _require_object(data, "pull request")
    raw_labels = data.get("labels")
    labels: list[Label] = []
    if isinstance(raw_labels, list):
        for item in raw_labels:
            label = parse_label(item)
            if label is not None:
                labels.append(label)

    pr_id = data.get("id")
    body = data.get("body")
    return PullRequest(
        id=pr_id if isinstance(pr_id, int) else None,
        number=_require_int(data, "number", "pull request"),
        title=_str(data.get("title")),
        body=body if isinstance(body, str) else None,
        state=_str(data.get("state")),
        draft=bool(data.get("draft")),
        user=parse_user(data.get("user")),
        labels=tuple(labels),
        head=_parse_ref(data.get("head")),
        base=_parse_ref(data.get("base")),
        html_url=_opt_str(data.get("html_url")),
        created_at=parse_datetime(data.get("created_at")),
        updated_at=parse_datetime(data.get("updated_at")),
    )


def parse_pull_request_file(data: dict[str, Any]) -> PullRequestFile:
    data = _require_object(data, "pull request file")
    filename = data.get("filename")
    if not isinstance(filename, str) or not filename:
        raise ValueError("Invalid pull request file response: missing filename")
    return PullRequestFile(
        filename=filename,
        status=_str(data.get("status")),
        additions=_int(data.get("additions")),
        deletions=_int(data.get("deletions")),
        changes=_int(data.get("changes")),
        patch=_opt_str(data.get("patch")),
    )


def parse_branch(data: dict[str, Any]) -> Branch:
    data = _require_object(data, "branch")
    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise ValueError("Invalid branch response: missing name")
    commit = data.get("commit")
    sha = _opt_str(commit.get("sha")) if isinstance(commit, dict) else None
    return Branch(name=name, sha=sha, protected=bool(data.get("protected")))


def parse_deployment(data: dict[str, Any]) -> Deployment:
    data = _require_object(data, "deployment")
    payload = data.get("payload")
    return Deployment(
        id=_require_int(data, "id", "deployment"),
        sha=_str(data.get("sha")),
        ref=_str(data.get("ref")),
        task=_str(data.get("task"), "deploy"),
        environment=_str(data.get("environment")),
        description=_opt_str(data.get("description")),
        creator=parse_user(data.get("creator")),
        created_at=parse_datetime(data.get("created_at")),
        updated_at=parse_datetime(data.get("updated_at")),
        statuses_url=_opt_str(data.get("statuses_url")),
        repository_url=_opt_str(data.get("repository_url")),
        payload=payload if isinstance(payload, dict) else {},
    )


def parse_deployment_status(data: dict[str, Any]) -> DeploymentStatus:
    data = _require_object(data, "deployment status")
    return DeploymentStatus(
        id=_require_int(data, "id", "deployment status"),
        state=_str(data.get("state")),
        creator=parse_user(data.get("creator")),
        description=_opt_str(data.get("description")),
        environment=_str(data.get("environment")),
        target_url=_opt_str(data.get("target_url")),
        created_at=parse_datetime(data.get("created_at")),
        updated_at=parse_datetime(data.get("updated_at")),
        deployment_url=_opt_str(data.get("deployment_url")),
        repository_url=_opt_str(data.get("repository_url")),
    )
