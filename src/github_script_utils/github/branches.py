"""Branch helpers."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import requests

from github_script_utils.github.client import GitHubClient, is_not_found
from github_script_utils.github.models import RepoInfo, parse_branch
from github_script_utils.github.pagination import collect

logger = logging.getLogger(__name__)


def _branch_path(branch: str, suffix: str = "") -> str:
    if not branch.strip():
        raise ValueError("branch is required")
    return f"branches/{quote(branch, safe='')}{suffix}"


def check_branch_exists(client: GitHubClient, *, repo: RepoInfo, branch: str) -> bool:
    """Return True if `branch` exists. A 404 means it does not; other errors propagate."""

    try:
        client.get_json(client.repo_url(repo, _branch_path(branch)))
    except requests.HTTPError as e:
        if is_not_found(e):
            return False
        raise
    return True


def list_all_branches(client: GitHubClient, *, repo: RepoInfo, limit: int = 100) -> list[str]:
    """Return up to `limit` branch names in API order."""

    url = client.repo_url(repo, "branches")
    branches = collect(
        lambda page, per_page: [
            parse_branch(item) for item in client.get_page(url, page=page, per_page=per_page)
        ],
        limit=limit,
    )
    return [branch.name for branch in branches]


def get_branch_protection(
    client: GitHubClient, *, repo: RepoInfo, branch: str
) -> dict[str, Any] | None:
    """Return the branch protection payload, or None when the branch is unprotected."""

    try:
        data = client.get_json(client.repo_url(repo, _branch_path(branch, "/protection")))
    except requests.HTTPError as e:
        if is_not_found(e):
            logger.debug("No protection rules", extra={"branch": branch})
            return None
        raise
    return data if isinstance(data, dict) else None


def get_default_branch(client: GitHubClient, *, repo: RepoInfo) -> str:
    data = client.get_json(client.repo_url(repo))
    default_branch = data.get("default_branch") if isinstance(data, dict) else None
    if not isinstance(default_branch, str) or not default_branch.strip():
        raise ValueError("Unexpected repository response: missing default_branch")
    return default_branch
