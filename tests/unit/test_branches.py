"""Unit tests for branch helpers (mocked)."""

from __future__ import annotations

from unittest.mock import Mock

import pytest
import requests

from github_script_utils.github.branches import (
    check_branch_exists,
    get_branch_protection,
    get_default_branch,
    list_all_branches,
)
from github_script_utils.github.models import RepoInfo

REPO_URL = "https://api.github.com/repos/test-owner/test-repo"


def _http_error(status: int) -> requests.HTTPError:
    response = Mock(spec=requests.Response)
    response.status_code = status
    return requests.HTTPError(f"{status} error", response=response)


def _branches(*names: str) -> list[dict[str, object]]:
    return [{"name": name, "commit": {"sha": f"sha-{name}"}, "protected": False} for name in names]


def test_check_branch_exists(mock_client: Mock, repo: RepoInfo) -> None:
    mock_client.get_json.return_value = {"name": "main"}

    assert check_branch_exists(mock_client, repo=repo, branch="main") is True
    mock_client.get_json.assert_called_once_with(f"{REPO_URL}/branches/main")


def test_check_branch_exists_encodes_slashes(mock_client: Mock, repo: RepoInfo) -> None:
    mock_client.get_json.return_value = {"name": "feature/x"}

    check_branch_exists(mock_client, repo=repo, branch="feature/x")

    mock_client.get_json.assert_called_once_with(f"{REPO_URL}/branches/feature%2Fx")


def test_check_branch_missing_returns_false(mock_client: Mock, repo: RepoInfo) -> None:
    mock_client.get_json.side_effect = _http_error(404)

    assert check_branch_exists(mock_client, repo=repo, branch="gone") is False


def test_check_branch_other_errors_propagate(mock_client: Mock, repo: RepoInfo) -> None:
    mock_client.get_json.side_effect = _http_error(500)

    with pytest.raises(requests.HTTPError):
        check_branch_exists(mock_client, repo=repo, branch="main")


def test_list_all_branches_paginates(mock_client: Mock, repo: RepoInfo) -> None:
    mock_client.get_page.side_effect = [_branches("a", "b"), _branches("c", "d"), _branches("e")]

    names = list_all_branches(mock_client, repo=repo, limit=2)

    assert names == ["a", "b"]
    assert mock_client.get_page.call_count == 1


def test_list_all_branches_stops_on_short_page(mock_client: Mock, repo: RepoInfo) -> None:
    full = _branches(*[f"b{i}" for i in range(100)])
    mock_client.get_page.side_effect = [full, _branches("last")]

    names = list_all_branches(mock_client, repo=repo, limit=500)

    assert len(names) == 101
    assert names[-1] == "last"
    assert [c.kwargs["page"] for c in mock_client.get_page.call_args_list] == [1, 2]
    assert {c.kwargs["per_page"] for c in mock_client.get_page.call_args_list} == {100}


def test_get_branch_protection(mock_client: Mock, repo: RepoInfo) -> None:
    rules = {"required_status_checks": {"strict": True}}
    mock_client.get_json.return_value = rules

    assert get_branch_protection(mock_client, repo=repo, branch="main") == rules
    mock_client.get_json.assert_called_once_with(f"{REPO_URL}/branches/main/protection")


def test_get_branch_protection_unprotected(mock_client: Mock, repo: RepoInfo) -> None:
    mock_client.get_json.side_effect = _http_error(404)

    assert get_branch_protection(mock_client, repo=repo, branch="dev") is None


def test_get_default_branch(mock_client: Mock, repo: RepoInfo) -> None:
    mock_client.get_json.return_value = {"default_branch": "trunk"}

    assert get_default_branch(mock_client, repo=repo) == "trunk"
    mock_client.get_json.assert_called_once_with(REPO_URL)
