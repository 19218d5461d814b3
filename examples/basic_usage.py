#!/usr/bin/env python3
"""Workflow-step example.

This demonstrates using the helpers directly from a CI step:

* load settings and the Actions run context from the environment
* post (or refresh) a sticky summary comment on the current pull request
* list other open PRs that already carry a deploy label

Run it inside a `pull_request` workflow with `GITHUB_TOKEN` exported.
"""

from __future__ import annotations

import argparse
from typing import Sequence

from github_script_utils.config import Settings
from github_script_utils.context import ActionContext, get_current_pull_request_number, get_repo_info
from github_script_utils.github.client import GitHubClient
from github_script_utils.github.comments import create_sticky_comment
from github_script_utils.github.pr_search import check_label_conflicts
from github_script_utils.github.pull_requests import get_pull_request_files
from github_script_utils.logging import configure_logging
from github_script_utils.text import create_markdown_table, escape_markdown


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Post a PR summary comment (example).")
    parser.add_argument("--label", default="deploy:staging", help="Deploy label to check")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    settings = Settings()
    configure_logging(settings.log_level)

    ctx = ActionContext.from_env()
    pr_number = get_current_pull_request_number(ctx)
    if pr_number is None:
        print("Not a pull request event; nothing to do")
        return 0

    repo = get_repo_info(ctx)
    client = GitHubClient(token=settings.require_token(), base_url=settings.github_base_url)
    try:
        files = get_pull_request_files(client, repo=repo, pull_number=pr_number)
        rows = [[escape_markdown(f.filename), f.status, str(f.changes)] for f in files]
        body = "### Changed files\n\n" + create_markdown_table(["File", "Status", "Changes"], rows)

        conflict = check_label_conflicts(client, repo=repo, pr_number=pr_number, label=args.label)
        if conflict.has_conflict and conflict.conflicting_pr is not None:
            body += f"\n\n`{args.label}` is already used by #{conflict.conflicting_pr.number}."

        comment = create_sticky_comment(
            client, repo=repo, issue_number=pr_number, identifier="pr-summary", body=body
        )
    finally:
        client.close()

    print(f"Summary comment: {comment.html_url}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
