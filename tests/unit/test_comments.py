"""Unit tests for sticky comments and comment search (mocked)."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any
from unittest.mock import Mock

import pytest

from github_script_utils.github.comments import (
    create_sticky_comment,
    delete_comment,
    delete_sticky_comment,
    find_comment_by_identifier,
    search_comments,
    sticky_marker,
)
from github_script_utils.github.models import RepoInfo

ISSUES_URL = "https://api.github.com/repos/test-owner/test-repo/issues"


def _comment(
    comment_id: int,
    body: str,
    *,
    login: str = "alice",
    created_at: str = "2024-01-15T10:00:00Z",
) -> dict[str, Any]:
    return {
        "id": comment_id,
        "body": body,
        "user": {"login": login, "id": 1},
        "created_at": created_at,
        "updated_at": created_at,
        "html_url": f"https://github.com/test-owner/test-repo/issues/1#issuecomment-{comment_id}",
    }


def test_sticky_marker_format() -> None:
    assert sticky_marker("build-report") == "<!-- sticky-comment-id: build-report -->"


def test_find_comment_by_identifier_returns_marked_comment(
    mock_client: Mock, repo: RepoInfo
) -> None:
    mock_client.get_page.return_value = [
        _comment(1, "hello"),
        _comment(2, f"{sticky_marker('report')}\nold body"),
        _comment(3, f"{sticky_marker('report')}\nduplicate"),
    ]

    found = find_comment_by_identifier(mock_client, repo=repo, issue_number=1, identifier="report")

    assert found is not None
    assert found.id == 2
    mock_client.get_page.assert_called_once_with(f"{ISSUES_URL}/1/comments", page=1, per_page=100)


def test_find_comment_by_identifier_returns_none(mock_client: Mock, repo: RepoInfo) -> None:
    mock_client.get_page.return_value = [_comment(1, "hello")]

    assert (
        find_comment_by_identifier(mock_client, repo=repo, issue_number=1, identifier="x") is None
    )


def test_create_sticky_comment_updates_existing(
    mock_client: Mock, repo: RepoInfo, caplog: pytest.LogCaptureFixture
) -> None:
    marker = sticky_marker("report")
    mock_client.get_page.return_value = [_comment(42, f"{marker}\nold")]
    mock_client.patch_json.return_value = _comment(42, f"{marker}\nnew")

    with caplog.at_level(logging.INFO):
        comment = create_sticky_comment(
            mock_client, repo=repo, issue_number=1, identifier="report", body="new"
        )

    assert comment.id == 42
    mock_client.patch_json.assert_called_once_with(
        f"{ISSUES_URL}/comments/42", json={"body": f"{marker}\nnew"}
    )
    mock_client.post_json.assert_not_called()
    assert "Updating existing sticky comment report (ID: 42)" in caplog.messages


def test_create_sticky_comment_creates_when_missing(mock_client: Mock, repo: RepoInfo) -> None:
    marker = sticky_marker("report")
    mock_client.get_page.return_value = []
    mock_client.post_json.return_value = _comment(7, f"{marker}\nbody")

    comment = create_sticky_comment(
        mock_client, repo=repo, issue_number=3, identifier="report", body="body"
    )

    assert comment.id == 7
    mock_client.post_json.assert_called_once_with(
        f"{ISSUES_URL}/3/comments", json={"body": f"{marker}\nbody"}
    )
    mock_client.patch_json.assert_not_called()


def test_create_sticky_comment_without_update_skips_lookup(
    mock_client: Mock, repo: RepoInfo
) -> None:
    mock_client.post_json.return_value = _comment(8, "x")

    create_sticky_comment(
        mock_client,
        repo=repo,
        issue_number=3,
        identifier="report",
        body="body",
        update_if_exists=False,
    )

    mock_client.get_page.assert_not_called()
    mock_client.post_json.assert_called_once()


def test_search_comments_applies_all_filters(mock_client: Mock, repo: RepoInfo) -> None:
    mock_client.get_page.return_value = [
        _comment(1, "Build FAILED", login="bot", created_at="2024-01-10T00:00:00Z"),
        _comment(2, "build failed again", login="bot", created_at="2024-01-20T00:00:00Z"),
        _comment(3, "build failed", login="human", created_at="2024-01-20T00:00:00Z"),
        _comment(4, "all good", login="bot", created_at="2024-01-20T00:00:00Z"),
        _comment(5, "build failed late", login="bot", created_at="2024-02-20T00:00:00Z"),
    ]

    result = search_comments(
        mock_client,
        repo=repo,
        issue_number=1,
        body_contains="build failed",
        author="bot",
        created_after=datetime(2024, 1, 15, tzinfo=UTC),
        created_before=datetime(2024, 2, 1),
    )

    assert [c.id for c in result] == [2]


def test_search_comments_excludes_unparseable_dates_from_date_filters(
    mock_client: Mock, repo: RepoInfo
) -> None:
    mock_client.get_page.return_value = [
        _comment(1, "deploy done", created_at="yesterday-ish"),
        _comment(2, "deploy done", created_at="2024-01-20T00:00:00Z"),
    ]

    dated = search_comments(
        mock_client, repo=repo, issue_number=1, created_after=datetime(2024, 1, 1, tzinfo=UTC)
    )
    undated = search_comments(mock_client, repo=repo, issue_number=1, body_contains="deploy")

    assert [c.id for c in dated] == [2]
    assert [c.id for c in undated] == [1, 2]


def test_search_comments_is_single_page_and_truncated(mock_client: Mock, repo: RepoInfo) -> None:
    mock_client.get_page.return_value = [_comment(n, "hit") for n in range(1, 6)]

    result = search_comments(mock_client, repo=repo, issue_number=1, body_contains="HIT", limit=3)

    assert [c.id for c in result] == [1, 2, 3]
    mock_client.get_page.assert_called_once_with(f"{ISSUES_URL}/1/comments", page=1, per_page=3)


def test_delete_comment(mock_client: Mock, repo: RepoInfo) -> None:
    delete_comment(mock_client, repo=repo, comment_id=99)

    mock_client.delete.assert_called_once_with(f"{ISSUES_URL}/comments/99")


def test_delete_sticky_comment(mock_client: Mock, repo: RepoInfo) -> None:
    mock_client.get_page.return_value = [_comment(5, f"{sticky_marker('r')}\nbody")]

    assert delete_sticky_comment(mock_client, repo=repo, issue_number=1, identifier="r") is True
    mock_client.delete.assert_called_once_with(f"{ISSUES_URL}/comments/5")


def test_delete_sticky_comment_not_found(
    mock_client: Mock, repo: RepoInfo, caplog: pytest.LogCaptureFixture
) -> None:
    mock_client.get_page.return_value = []

    with caplog.at_level(logging.INFO):
        deleted = delete_sticky_comment(mock_client, repo=repo, issue_number=1, identifier="r")

    assert deleted is False
    mock_client.delete.assert_not_called()
    assert "Sticky comment with identifier 'r' not found" in caplog.messages
