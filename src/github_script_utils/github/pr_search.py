"""Multi-page pull request search with client-side criteria."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from github_script_utils.github.client import GitHubClient
from github_script_utils.github.models import PullRequest, RepoInfo
from github_script_utils.github.pagination import collect, has_all_labels
from github_script_utils.github.pull_requests import (
    PullRequestSort,
    PullRequestState,
    SortDirection,
    list_pull_requests_page,
    require_labels,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LabelConflict:
    """Result of checking whether another open PR already carries a label."""

    has_conflict: bool
    conflicting_pr: PullRequest | None = None


def find_prs_with_labels(
    client: GitHubClient,
    *,
    repo: RepoInfo,
    labels: Sequence[str],
    state: PullRequestState = "open",
    limit: int = 100,
    exclude_prs: Sequence[int] = (),
) -> list[PullRequest]:
    """Find pull requests carrying all of `labels`, following pages as needed.

    Raises:
        ValueError: If `labels` is empty. No request is made in that case.
    """

    require_labels(labels)
    logger.info(f"Searching for PRs with labels: {', '.join(labels)}")

    excluded = set(exclude_prs)

    def matches(pr: PullRequest) -> bool:
        if pr.number in excluded:
            return False
        return has_all_labels(pr.label_names, labels)

    pull_requests = collect(
        lambda page, per_page: list_pull_requests_page(
            client, repo, page=page, per_page=per_page, state=state
        ),
        limit=limit,
        page_size=limit * 2,
        predicate=matches,
    )

    logger.info(f"Found {len(pull_requests)} PRs matching label criteria")
    return pull_requests


def search_pull_requests(
    client: GitHubClient,
    *,
    repo: RepoInfo,
    labels: Sequence[str] = (),
    state: PullRequestState = "open",
    author: str | None = None,
    limit: int = 100,
    sort: PullRequestSort = "created",
    direction: SortDirection = "desc",
    exclude_prs: Sequence[int] = (),
) -> list[PullRequest]:
    """Search pull requests by author, labels and exclusions.

    Every criterion is optional; labels use AND semantics when given.
    """

    excluded = set(exclude_prs)

    def matches(pr: PullRequest) -> bool:
        if pr.number in excluded:
            return False
        if author and (pr.user is None or pr.user.login != author):
            return False
        if labels and not has_all_labels(pr.label_names, labels):
            return False
        return True

    return collect(
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
        predicate=matches,
    )


def find_open_prs_with_label(
    client: GitHubClient,
    *,
    repo: RepoInfo,
    label: str,
    exclude_prs: Sequence[int] = (),
    limit: int = 100,
) -> list[PullRequest]:
    return find_prs_with_labels(
        client,
        repo=repo,
        labels=[label],
        state="open",
        exclude_prs=exclude_prs,
        limit=limit,
    )


def check_label_conflicts(
    client: GitHubClient,
    *,
    repo: RepoInfo,
    pr_number: int,
    label: str,
) -> LabelConflict:
    """Check whether another open pull request already carries `label`."""

    conflicting = find_open_prs_with_label(
        client, repo=repo, label=label, exclude_prs=[pr_number], limit=1
    )
    if conflicting:
        return LabelConflict(has_conflict=True, conflicting_pr=conflicting[0])
    return LabelConflict(has_conflict=False)
