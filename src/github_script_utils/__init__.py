"""GitHub Script Utils.

Helpers for GitHub REST automation scripts:
- configuration loaded from the environment / `.env`
- structured logging
- typed wrappers for pull requests, comments, labels, branches and deployments
- Actions context, markdown and string formatting utilities
"""

__version__ = "0.1.0"

from github_script_utils.config import Settings
from github_script_utils.github.client import GitHubClient
from github_script_utils.github.models import RepoInfo

__all__ = ["__version__", "GitHubClient", "RepoInfo", "Settings"]
