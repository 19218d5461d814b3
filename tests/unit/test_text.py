"""Unit tests for text formatting and case conversion helpers."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from github_script_utils import text
from github_script_utils.strings import (
    camel_to_kebab,
    camel_to_snake,
    capitalize,
    kebab_to_camel,
    snake_to_camel,
    to_title_case,
)
from github_script_utils.text import (
    code_block,
    create_markdown_table,
    delay,
    escape_markdown,
    format_date,
    parse_github_date,
    truncate_text,
)


def test_truncate_text() -> None:
    assert truncate_text("Hello, World!", 10) == "Hello, ..."
    assert truncate_text("Short", 10) == "Short"
    assert truncate_text("Exactly10!", 10) == "Exactly10!"
    assert truncate_text("", 5) == ""
    assert truncate_text("Hi", 2) == "Hi"
    assert truncate_text("Hi", 1) == "..."


def test_escape_markdown() -> None:
    assert escape_markdown("*bold*") == "\\*bold\\*"
    assert escape_markdown("_italic_") == "\\_italic\\_"
    assert escape_markdown("`code`") == "\\`code\\`"
    assert escape_markdown("[link](url)") == "\\[link\\]\\(url\\)"
    assert escape_markdown("plain text") == "plain text"


def test_code_block() -> None:
    assert code_block('console.log("hello");', "javascript") == (
        '```javascript\nconsole.log("hello");\n```'
    )
    assert code_block("some code") == "```\nsome code\n```"


def test_create_markdown_table() -> None:
    table = create_markdown_table(["Name", "Age"], [["Alice", "30"], ["Bob", "25"]])

    assert table == "| Name | Age |\n| --- | --- |\n| Alice | 30 |\n| Bob | 25 |"
    assert create_markdown_table(["A", "B"], []) == "| A | B |\n| --- | --- |"


def test_format_date() -> None:
    assert format_date(datetime(2024, 1, 15, 10, 30, tzinfo=UTC)) == "2024-01-15T10:30:00.000Z"
    assert format_date(datetime(2024, 1, 15, 10, 30, 0, 123456)) == "2024-01-15T10:30:00.123Z"
    eastern = timezone(timedelta(hours=-5))
    assert format_date(datetime(2024, 1, 15, 5, 30, tzinfo=eastern)) == "2024-01-15T10:30:00.000Z"


def test_parse_github_date() -> None:
    parsed = parse_github_date("2024-01-15T10:30:00Z")

    assert parsed == datetime(2024, 1, 15, 10, 30, tzinfo=UTC)


def test_snake_and_kebab_to_camel() -> None:
    assert snake_to_camel("hello_world") == "helloWorld"
    assert snake_to_camel("a_b_c_d") == "aBCD"
    assert snake_to_camel("") == ""
    assert kebab_to_camel("my-variable-name") == "myVariableName"
    assert kebab_to_camel("single") == "single"


def test_camel_to_snake_and_kebab() -> None:
    assert camel_to_snake("myVariableName") == "my_variable_name"
    assert camel_to_snake("XMLHttpRequest") == "_x_m_l_http_request"
    assert camel_to_kebab("helloWorld") == "hello-world"
    assert camel_to_kebab("") == ""


def test_capitalize_and_title_case() -> None:
    assert capitalize("hello") == "Hello"
    assert capitalize("hELLO") == "HELLO"
    assert capitalize("") == ""
    assert to_title_case("the quick brown fox") == "The Quick Brown Fox"
    assert to_title_case("mixed CaSe WoRdS") == "Mixed Case Words"
    assert to_title_case("") == ""


def test_delay_sleeps_for_given_seconds(monkeypatch: pytest.MonkeyPatch) -> None:
    sleeps: list[float] = []
    monkeypatch.setattr(text.time, "sleep", sleeps.append)

    delay(0.25)

    assert sleeps == [0.25]
