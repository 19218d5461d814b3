"""Test configuration and fixtures."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from github_script_utils.github.client import GitHubClient
from github_script_utils.github.models import RepoInfo

API = "https://api.github.com"


def _repo_url(repo: RepoInfo, path: str = "") -> str:
    base = f"{API}/repos/{repo.full_name}"
    path = path.strip("/")
    return f"{base}/{path}" if path else base


@pytest.fixture
def repo() -> RepoInfo:
    """Provide a test repository."""
    return RepoInfo(owner="test-owner", repo="test-repo")


@pytest.fixture
def mock_client() -> Mock:
    """Provide a fresh mocked GitHub client with real URL building."""
    client = Mock(spec=GitHubClient)
    client.repo_url.side_effect = _repo_url
    return client


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep runner / token variables from the host out of the tests."""
    for name in (
        "GITHUB_TOKEN",
        "GITHUB_SCRIPT_UTILS_TOKEN",
        "GITHUB_API_URL",
        "GITHUB_REPOSITORY",
        "GITHUB_EVENT_NAME",
        "GITHUB_EVENT_PATH",
        "GITHUB_REF",
        "GITHUB_SHA",
        "GITHUB_SERVER_URL",
        "GITHUB_REQUEST_TIMEOUT",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
