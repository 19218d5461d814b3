"""Workflow input helpers.

Inputs forwarded through composite actions sometimes arrive wrapped in an extra
pair of double quotes; these helpers strip them.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from github_script_utils.context import ActionContext

_OUTER_QUOTES = re.compile(r'^"|"$')
_HEADS_PREFIX = "refs/heads/"


def sanitize_input(value: Any) -> Any:
    """Remove one leading and one trailing double quote from string values."""

    if isinstance(value, str):
        return _OUTER_QUOTES.sub("", value)
    return value


def sanitize_inputs(inputs: Mapping[str, Any]) -> dict[str, Any]:
    return {key: sanitize_input(value) for key, value in inputs.items()}


def _strip_heads(ref: str) -> str:
    return ref.replace(_HEADS_PREFIX, "", 1)


def get_branch(ctx: ActionContext) -> str:
    """Work out the branch a workflow run is about, across event types."""

    event_data = ctx.payload.get(ctx.event_name)
    if isinstance(event_data, dict):
        head = event_data.get("head")
        if isinstance(head, dict) and isinstance(head.get("ref"), str) and head["ref"]:
            return head["ref"]

    if ctx.ref.startswith(_HEADS_PREFIX):
        return _strip_heads(ctx.ref)

    pr = ctx.payload.get("pull_request")
    if isinstance(pr, dict):
        head = pr.get("head")
        if isinstance(head, dict) and isinstance(head.get("ref"), str) and head["ref"]:
            return head["ref"]

    push = ctx.payload.get("push")
    if isinstance(push, dict) and isinstance(push.get("ref"), str) and push["ref"]:
        return _strip_heads(push["ref"])

    return ctx.ref or "main"
