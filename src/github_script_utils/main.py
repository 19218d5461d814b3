"""CLI entrypoint exposing the most common helpers to shell steps."""

from __future__ import annotations

import argparse
import logging
import sys

import requests
from pydantic import ValidationError

from github_script_utils import __version__
from github_script_utils.config import ActionsSettings, Settings
from github_script_utils.github.branches import list_all_branches
from github_script_utils.github.client import GitHubClient
from github_script_utils.github.comments import create_sticky_comment, delete_sticky_comment
from github_script_utils.github.deployments import list_deployments
from github_script_utils.github.models import RepoInfo
from github_script_utils.github.pr_search import find_prs_with_labels
from github_script_utils.logging import configure_logging

logger = logging.getLogger(__name__)


def _parse_csv(value: str | None) -> list[str]:
    if value is None:
        return []
    return [p.strip() for p in value.split(",") if p.strip()]


def _parse_int_csv(value: str | None) -> list[int]:
    try:
        return [int(p) for p in _parse_csv(value)]
    except ValueError as e:
        raise ValueError(f"expected comma-separated integers: {value!r}") from e


def _add_repo_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--repo",
        "--repository",
        dest="repository",
        default=None,
        help="Target repository in the form 'owner/repo' (defaults to GITHUB_REPOSITORY)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gh-script-utils",
        description="GitHub REST helpers for automation scripts",
    )
    parser.add_argument(
        "--version", action="version", version=f"github-script-utils {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    sticky = subparsers.add_parser(
        "sticky-comment", help="Create or update a comment identified by a hidden marker"
    )
    _add_repo_argument(sticky)
    sticky.add_argument("--issue", type=int, required=True, help="Issue or PR number")
    sticky.add_argument("--identifier", required=True, help="Sticky comment identifier")
    sticky.add_argument("--body", required=True, help="Comment body (markdown)")
    sticky.add_argument(
        "--no-update",
        action="store_true",
        help="Always post a new comment instead of updating an existing one",
    )

    delete_sticky = subparsers.add_parser(
        "delete-sticky-comment", help="Delete a sticky comment by identifier"
    )
    _add_repo_argument(delete_sticky)
    delete_sticky.add_argument("--issue", type=int, required=True, help="Issue or PR number")
    delete_sticky.add_argument("--identifier", required=True, help="Sticky comment identifier")

    find_prs = subparsers.add_parser("find-prs", help="Find PRs carrying all given labels")
    _add_repo_argument(find_prs)
    find_prs.add_argument(
        "--labels", required=True, help="Comma-separated labels, e.g. 'bug,urgent'"
    )
    find_prs.add_argument(
        "--state", choices=["open", "closed", "all"], default="open", help="PR state filter"
    )
    find_prs.add_argument("--limit", type=int, default=100, help="Maximum PRs to return")
    find_prs.add_argument(
        "--exclude", default=None, help="Comma-separated PR numbers to exclude"
    )

    branches = subparsers.add_parser("list-branches", help="List repository branches")
    _add_repo_argument(branches)
    branches.add_argument("--limit", type=int, default=100, help="Maximum branches to return")

    deployments = subparsers.add_parser("list-deployments", help="List deployments")
    _add_repo_argument(deployments)
    deployments.add_argument("--ref", default=None, help="Only deployments of this ref")
    deployments.add_argument("--environment", default=None, help="Only this environment")
    deployments.add_argument("--limit", type=int, default=100, help="Maximum deployments")

    return parser


def _resolve_repo(value: str | None) -> RepoInfo:
    repository = value or ActionsSettings().repository
    if not repository:
        raise ValueError("--repo is required outside GitHub Actions")
    return RepoInfo.parse(repository)


def _run(args: argparse.Namespace, client: GitHubClient) -> int:
    repo = _resolve_repo(args.repository)

    if args.command == "sticky-comment":
        comment = create_sticky_comment(
            client,
            repo=repo,
            issue_number=args.issue,
            identifier=args.identifier,
            body=args.body,
            update_if_exists=not args.no_update,
        )
        print(f"Sticky comment {comment.id}: {comment.html_url or ''}".rstrip())
        return 0

    if args.command == "delete-sticky-comment":
        deleted = delete_sticky_comment(
            client, repo=repo, issue_number=args.issue, identifier=args.identifier
        )
        print("Deleted" if deleted else "Not found")
        return 0

    if args.command == "find-prs":
        prs = find_prs_with_labels(
            client,
            repo=repo,
            labels=_parse_csv(args.labels),
            state=args.state,
            limit=args.limit,
            exclude_prs=_parse_int_csv(args.exclude),
        )
        for pr in prs:
            print(f"#{pr.number}\t{pr.title}")
        return 0

    if args.command == "list-branches":
        for name in list_all_branches(client, repo=repo, limit=args.limit):
            print(name)
        return 0

    if args.command == "list-deployments":
        for deployment in list_deployments(
            client,
            repo=repo,
            ref=args.ref,
            environment=args.environment,
            limit=args.limit,
        ):
            print(f"{deployment.id}\t{deployment.environment}\t{deployment.ref}")
        return 0

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings()
        token = settings.require_token()
    except (ValidationError, ValueError) as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your environment or .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    client = GitHubClient(
        token=token,
        base_url=settings.github_base_url,
        timeout=settings.request_timeout,
    )
    try:
        return _run(args, client)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except requests.HTTPError:
        logger.exception("GitHub API request failed", extra={"command": args.command})
        return 1
    finally:
        client.close()


if __name__ == "__main__":
    raise SystemExit(main())
