"""GitHub REST helpers: transport, typed records and per-entity operations."""

from github_script_utils.github.client import GitHubClient, is_not_found
from github_script_utils.github.models import RepoInfo
from github_script_utils.github.pagination import MAX_PAGE_SIZE, collect

__all__ = ["GitHubClient", "MAX_PAGE_SIZE", "RepoInfo", "collect", "is_not_found"]
