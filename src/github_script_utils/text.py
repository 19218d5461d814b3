"""Date and markdown formatting helpers for comment bodies and logs."""

from __future__ import annotations

import re
import time
from collections.abc import Sequence
from datetime import UTC, datetime

_MARKDOWN_SPECIAL = re.compile(r"([\\`*_{}\[\]()#+\-.!])")


def format_date(value: datetime) -> str:
    """Format as ISO-8601 UTC with millisecond precision, e.g. `2024-01-15T10:30:00.000Z`.

    Naive datetimes are taken to be UTC.
    """

    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    value = value.astimezone(UTC)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def parse_github_date(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def delay(seconds: float) -> None:
    """Sleep between API calls."""

    time.sleep(seconds)


def truncate_text(text: str, max_length: int) -> str:
    """Truncate to `max_length` characters, the trailing `...` included."""

    if len(text) <= max_length:
        return text
    return f"{text[: max_length - 3]}..."


def escape_markdown(text: str) -> str:
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


def code_block(code: str, language: str | None = None) -> str:
    return f"```{language or ''}\n{code}\n```"


def create_markdown_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    lines = [
        f"| {' | '.join(headers)} |",
        f"| {' | '.join('---' for _ in headers)} |",
    ]
    lines.extend(f"| {' | '.join(row)} |" for row in rows)
    return "\n".join(lines)
