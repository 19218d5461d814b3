"""Case conversion helpers."""

from __future__ import annotations

import re

_SNAKE_SEGMENT = re.compile(r"_(\w)")
_KEBAB_SEGMENT = re.compile(r"-(\w)")
_UPPER = re.compile(r"[A-Z]")
_WORD = re.compile(r"\w\S*")


def snake_to_camel(value: str) -> str:
    return _SNAKE_SEGMENT.sub(lambda m: m.group(1).upper(), value)


def camel_to_snake(value: str) -> str:
    return _UPPER.sub(lambda m: f"_{m.group(0).lower()}", value)


def kebab_to_camel(value: str) -> str:
    return _KEBAB_SEGMENT.sub(lambda m: m.group(1).upper(), value)


def camel_to_kebab(value: str) -> str:
    return _UPPER.sub(lambda m: f"-{m.group(0).lower()}", value)


def capitalize(value: str) -> str:
    """Uppercase the first character only (unlike `str.capitalize`)."""

    return value[:1].upper() + value[1:]


def to_title_case(value: str) -> str:
    return _WORD.sub(lambda m: m.group(0)[:1].upper() + m.group(0)[1:].lower(), value)
