"""Issue / pull request comment helpers, including sticky comments.

A sticky comment carries a hidden HTML marker so it can be found and updated in
place on later runs instead of posting a duplicate.
"""

from __future__ import annotations

import logging
from datetime import datetime

from github_script_utils.github.client import GitHubClient
from github_script_utils.github.models import (
    IssueComment,
    RepoInfo,
    ensure_utc,
    parse_issue_comment,
)
from github_script_utils.github.pagination import MAX_PAGE_SIZE, collect

logger = logging.getLogger(__name__)


def sticky_marker(identifier: str) -> str:
    """Return the hidden marker that tags a sticky comment."""

    return f"<!-- sticky-comment-id: {identifier} -->"


def _list_comments_page(
    client: GitHubClient, repo: RepoInfo, issue_number: int, page: int, per_page: int
) -> list[IssueComment]:
    url = client.repo_url(repo, f"issues/{issue_number}/comments")
    return [
        parse_issue_comment(item)
        for item in client.get_page(url, page=page, per_page=per_page)
    ]


def find_comment_by_identifier(
    client: GitHubClient,
    *,
    repo: RepoInfo,
    issue_number: int,
    identifier: str,
) -> IssueComment | None:
    """Return the first comment carrying the sticky marker for `identifier`.

    Only the first page of comments (up to 100) is inspected.
    """

    marker = sticky_marker(identifier)
    comments = collect(
        lambda page, per_page: _list_comments_page(client, repo, issue_number, page, per_page),
        limit=1,
        page_size=MAX_PAGE_SIZE,
        max_rounds=1,
        predicate=lambda comment: marker in comment.body,
    )
    return comments[0] if comments else None


def create_sticky_comment(
    client: GitHubClient,
    *,
    repo: RepoInfo,
    issue_number: int,
    identifier: str,
    body: str,
    update_if_exists: bool = True,
) -> IssueComment:
    """Create or update a sticky comment on an issue or pull request.

    Args:
        client: REST transport.
        repo: Target repository.
        issue_number: Issue or pull request number.
        identifier: Unique identifier used to find the comment again.
        body: Comment markdown. The marker is prepended on its own line.
        update_if_exists: When False, always post a new comment.

    Returns:
        The created or updated comment.
    """

    full_body = f"{sticky_marker(identifier)}\n{body}"

    if update_if_exists:
        existing = find_comment_by_identifier(
            client, repo=repo, issue_number=issue_number, identifier=identifier
        )
        if existing is not None:
            logger.info(
                f"Updating existing sticky comment {identifier} (ID: {existing.id})",
                extra={"issue_number": issue_number, "comment_id": existing.id},
            )
            data = client.patch_json(
                client.repo_url(repo, f"issues/comments/{existing.id}"),
                json={"body": full_body},
            )
            return parse_issue_comment(data)

    logger.info(
        f"Creating new sticky comment with identifier: {identifier}",
        extra={"issue_number": issue_number},
    )
    data = client.post_json(
        client.repo_url(repo, f"issues/{issue_number}/comments"),
        json={"body": full_body},
    )
    return parse_issue_comment(data)


def search_comments(
    client: GitHubClient,
    *,
    repo: RepoInfo,
    issue_number: int,
    body_contains: str | None = None,
    author: str | None = None,
    created_after: datetime | None = None,
    created_before: datetime | None = None,
    limit: int = 100,
) -> list[IssueComment]:
    """Search the comments of an issue or pull request.

    A single page of `min(limit, 100)` comments is fetched and filtered locally.
    Body matching is case-insensitive; date bounds are exclusive.
    """

    needle = body_contains.lower() if body_contains else None
    if created_after is not None:
        created_after = ensure_utc(created_after)
    if created_before is not None:
        created_before = ensure_utc(created_before)

    def matches(comment: IssueComment) -> bool:
        if needle and needle not in comment.body.lower():
            return False
        if author and (comment.user is None or comment.user.login != author):
            return False
        if created_after is not None and (
            comment.created_at is None or comment.created_at <= created_after
        ):
            return False
        if created_before is not None and (
            comment.created_at is None or comment.created_at >= created_before
        ):
            return False
        return True

    return collect(
        lambda page, per_page: _list_comments_page(client, repo, issue_number, page, per_page),
        limit=limit,
        predicate=matches,
        max_rounds=1,
    )


def delete_comment(client: GitHubClient, *, repo: RepoInfo, comment_id: int) -> None:
    logger.info(f"Deleting comment ID: {comment_id}", extra={"comment_id": comment_id})
    client.delete(client.repo_url(repo, f"issues/comments/{comment_id}"))


def delete_sticky_comment(
    client: GitHubClient,
    *,
    repo: RepoInfo,
    issue_number: int,
    identifier: str,
) -> bool:
    """Delete the sticky comment for `identifier`. Returns False if none exists."""

    existing = find_comment_by_identifier(
        client, repo=repo, issue_number=issue_number, identifier=identifier
    )
    if existing is not None:
        delete_comment(client, repo=repo, comment_id=existing.id)
        return True

    logger.info(f"Sticky comment with identifier '{identifier}' not found")
    return False
