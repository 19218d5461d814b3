"""Deployment and deployment status helpers."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from github_script_utils.github.client import GitHubClient
from github_script_utils.github.models import (
    DEPLOYMENT_STATES,
    Deployment,
    DeploymentState,
    DeploymentStatus,
    RepoInfo,
    parse_deployment,
    parse_deployment_status,
)
from github_script_utils.github.pagination import collect

logger = logging.getLogger(__name__)


def list_deployments(
    client: GitHubClient,
    *,
    repo: RepoInfo,
    ref: str | None = None,
    environment: str | None = None,
    limit: int = 100,
) -> list[Deployment]:
    """List deployments, optionally narrowed to a ref and/or environment."""

    url = client.repo_url(repo, "deployments")
    params: dict[str, str] = {}
    if ref:
        params["ref"] = ref
    if environment:
        params["environment"] = environment

    return collect(
        lambda page, per_page: [
            parse_deployment(item)
            for item in client.get_page(url, page=page, per_page=per_page, params=params)
        ],
        limit=limit,
    )


def get_deployment_statuses(
    client: GitHubClient,
    *,
    repo: RepoInfo,
    deployment_id: int,
    limit: int = 100,
) -> list[DeploymentStatus]:
    """Return the statuses of a deployment (a single page, newest first)."""

    url = client.repo_url(repo, f"deployments/{deployment_id}/statuses")
    return collect(
        lambda page, per_page: [
            parse_deployment_status(item)
            for item in client.get_page(url, page=page, per_page=per_page)
        ],
        limit=limit,
        max_rounds=1,
    )


def set_deployment_status(
    client: GitHubClient,
    *,
    repo: RepoInfo,
    deployment_id: int,
    state: DeploymentState,
    description: str | None = None,
    target_url: str | None = None,
    environment: str | None = None,
) -> DeploymentStatus:
    """Create a new status for a deployment.

    Raises:
        ValueError: If `state` is not a GitHub deployment state.
    """

    if state not in DEPLOYMENT_STATES:
        raise ValueError(f"Invalid deployment state: {state!r}")

    payload: dict[str, Any] = {"state": state}
    if description:
        payload["description"] = description
    if target_url:
        payload["target_url"] = target_url
    if environment:
        payload["environment"] = environment

    logger.info(
        f"Setting deployment {deployment_id} status to {state}",
        extra={"deployment_id": deployment_id},
    )
    data = client.post_json(
        client.repo_url(repo, f"deployments/{deployment_id}/statuses"), json=payload
    )
    return parse_deployment_status(data)


def delete_deployment(client: GitHubClient, *, repo: RepoInfo, deployment_id: int) -> None:
    """Mark a deployment inactive, then delete it (GitHub refuses to delete active ones)."""

    set_deployment_status(client, repo=repo, deployment_id=deployment_id, state="inactive")
    logger.info(f"Deleting deployment {deployment_id}", extra={"deployment_id": deployment_id})
    client.delete(client.repo_url(repo, f"deployments/{deployment_id}"))


def create_deployment(
    client: GitHubClient,
    *,
    repo: RepoInfo,
    ref: str,
    environment: str,
    description: str | None = None,
    payload: dict[str, Any] | None = None,
    auto_merge: bool = True,
    required_contexts: Sequence[str] | None = None,
) -> Deployment:
    body: dict[str, Any] = {
        "ref": ref,
        "environment": environment,
        "auto_merge": auto_merge,
    }
    if description:
        body["description"] = description
    if payload:
        body["payload"] = payload
    if required_contexts is not None:
        body["required_contexts"] = list(required_contexts)

    logger.info(
        f"Creating deployment of {ref} to {environment}",
        extra={"ref": ref, "environment": environment},
    )
    data = client.post_json(client.repo_url(repo, "deployments"), json=body)
    return parse_deployment(data)
