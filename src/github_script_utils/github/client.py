"""GitHub REST API client wrapper.

Thin transport over a `requests.Session`. Helpers in this package build URLs and
query parameters; this class only knows how to send them and decode JSON.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from github_script_utils.github.models import RepoInfo

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.github.com"


def is_not_found(exc: BaseException) -> bool:
    """Return True when `exc` is an HTTP error carrying a 404 response."""

    if not isinstance(exc, requests.HTTPError):
        return False
    response = exc.response
    return response is not None and response.status_code == 404


class GitHubClient:
    """Small wrapper around `requests` for the REST calls the helpers need."""

    def __init__(
        self,
        *,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        if not token:
            raise ValueError("GitHub token is required")

        self._rest_base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
                "User-Agent": "github-script-utils",
            }
        )

    @property
    def base_url(self) -> str:
        return self._rest_base_url

    def repo_url(self, repo: RepoInfo, path: str = "") -> str:
        """Build a repository-scoped REST URL without a trailing slash."""

        base = f"{self._rest_base_url}/repos/{repo.full_name}"
        path = path.strip("/")
        if not path:
            return base
        return f"{base}/{path}"

    def get_json(self, url: str, *, params: dict[str, Any] | None = None) -> Any:
        logger.debug("GET %s", url, extra={"params": params or {}})
        resp = self._session.get(url, params=params or None, timeout=self._timeout)
        resp.raise_for_status()
        return resp.json()

    def get_page(
        self,
        url: str,
        *,
        page: int,
        per_page: int,
        params: dict[str, Any] | None = None,
    ) -> list[Any]:
        """Fetch one page of a list endpoint.

        Args:
            url: Endpoint returning a JSON list.
            page: 1-based page number.
            per_page: Page size requested from GitHub.
            params: Fixed query parameters sent with every page.

        Returns:
            The decoded items of that page, unchanged.

        Raises:
            ValueError: If the response body is not a JSON list.
        """

        query: dict[str, Any] = dict(params or {})
        query["per_page"] = per_page
        query["page"] = page
        payload = self.get_json(url, params=query)
        if not isinstance(payload, list):
            raise ValueError(f"Expected a JSON list from {url}, got {type(payload).__name__}")
        return payload

    def post_json(self, url: str, *, json: dict[str, Any] | None = None) -> Any:
        logger.debug("POST %s", url)
        resp = self._session.post(url, json=json, timeout=self._timeout)
        resp.raise_for_status()
        if not resp.content:
            return None
        return resp.json()

    def patch_json(self, url: str, *, json: dict[str, Any]) -> Any:
        logger.debug("PATCH %s", url)
        resp = self._session.patch(url, json=json, timeout=self._timeout)
        resp.raise_for_status()
        return resp.json()

    def delete(self, url: str, *, json: dict[str, Any] | None = None) -> None:
        logger.debug("DELETE %s", url)
        resp = self._session.delete(url, json=json, timeout=self._timeout)
        resp.raise_for_status()

    def close(self) -> None:
        """Close the underlying HTTP session."""

        self._session.close()
        logger.debug("GitHub client closed")
