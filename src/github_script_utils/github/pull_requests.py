"""Pull request lookup and label helpers."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Literal
from urllib.parse import quote

import requests

from github_script_utils.github.client import GitHubClient, is_not_found
from github_script_utils.github.models import (
    PullRequest,
    PullRequestFile,
    RepoInfo,
    parse_pull_request,
    parse_pull_request_file,
)
from github_script_utils.github.pagination import MAX_PAGE_SIZE, collect, has_all_labels

logger = logging.getLogger(__name__)

PullRequestState = Literal["open", "closed", "all"]
PullRequestSort = Literal["created", "updated", "popularity", "long-running"]
SortDirection = Literal["asc", "desc"]


def require_labels(labels: Sequence[str]) -> None:
    """Reject an empty label set before any request is made."""

    if len(labels) == 0:
        raise ValueError("At least one label must be specified")


def list_pull_requests_page(
    client: GitHubClient,
    repo: RepoInfo,
    *,
    page: int,
    per_page: int,
    state: PullRequestState = "open",
    sort: PullRequestSort | None = None,
    direction: SortDirection | None = None,
) -> list[PullRequest]:
    """Fetch and project one page of `GET /repos/{owner}/{repo}/pulls`."""

    params: dict[str, str] = {"state": state}
    if sort is not None:
        params["sort"] = sort
    if direction is not None:
        params["direction"] = direction
    items = client.get_page(
        client.repo_url(repo, "pulls"), page=page, per_page=per_page, params=params
    )
    return [parse_pull_request(item) for item in items]


def find_pull_requests_by_labels(
    client: GitHubClient,
    *,
    repo: RepoInfo,
    labels: Sequence[str],
    state: PullRequestState = "open",
    limit: int = 30,
    sort: PullRequestSort = "created",
    direction: SortDirection = "desc",
) -> list[PullRequest]:
    """Find pull requests carrying all of `labels` within a single page.

    Twice `limit` pull requests (at most 100) are requested so enough remain after
    filtering; no further pages are fetched.
    """

    require_labels(labels)
    logger.info(f"Searching for PRs with labels: {', '.join(labels)}")

    matching = collect(
        lambda page, per_page: list_pull_requests_page(
            client,
            repo,
            page=page,
            per_page=per_page,
            state=state,
            sort=sort,
            direction=direction,
        ),
        limit=limit,
        page_size=limit * 2,
        max_rounds=1,
        predicate=lambda pr: has_all_labels(pr.label_names, labels),
    )

    logger.info(f"Found {len(matching)} PRs matching label criteria")
    return matching


def get_pull_request(client: GitHubClient, *, repo: RepoInfo, pull_number: int) -> PullRequest:
    logger.info(f"Getting pull request #{pull_number}")
    data = client.get_json(client.repo_url(repo, f"pulls/{pull_number}"))
    return parse_pull_request(data)


def add_labels_to_pull_request(
    client: GitHubClient,
    *,
    repo: RepoInfo,
    pull_number: int,
    labels: Sequence[str],
) -> None:
    if not labels:
        logger.info("No labels to add")
        return

    logger.info(f"Adding labels to PR #{pull_number}: {', '.join(labels)}")
    client.post_json(
        client.repo_url(repo, f"issues/{pull_number}/labels"),
        json={"labels": list(labels)},
    )


def remove_labels_from_pull_request(
    client: GitHubClient,
    *,
    repo: RepoInfo,
    pull_number: int,
    labels: Sequence[str],
) -> None:
    """Remove each label in turn.

    A label that is not on the pull request (404) is logged and skipped; the
    remaining labels are still removed. Any other error propagates.
    """

    if not labels:
        logger.info("No labels to remove")
        return

    logger.info(f"Removing labels from PR #{pull_number}: {', '.join(labels)}")

    for label in labels:
        url = client.repo_url(repo, f"issues/{pull_number}/labels/{quote(label, safe='')}")
        try:
            client.delete(url)
        except requests.HTTPError as e:
            if not is_not_found(e):
                raise
            logger.info(f"Label '{label}' was not present on PR #{pull_number}")


def pull_request_has_labels(
    client: GitHubClient,
    *,
    repo: RepoInfo,
    pull_number: int,
    labels: Sequence[str],
    require_all: bool = True,
) -> bool:
    """Check a pull request's labels (all of them by default, any with `require_all=False`)."""

    pr = get_pull_request(client, repo=repo, pull_number=pull_number)
    names = pr.label_names
    if require_all:
        return has_all_labels(names, labels)
    return any(label in names for label in labels)


def get_pull_request_files(
    client: GitHubClient, *, repo: RepoInfo, pull_number: int
) -> list[PullRequestFile]:
    """Return the files changed in a pull request (first 100 only)."""

    logger.info(f"Getting files for PR #{pull_number}")
    url = client.repo_url(repo, f"pulls/{pull_number}/files")
    return collect(
        lambda page, per_page: [
            parse_pull_request_file(item)
            for item in client.get_page(url, page=page, per_page=per_page)
        ],
        limit=MAX_PAGE_SIZE,
        max_rounds=1,
    )
