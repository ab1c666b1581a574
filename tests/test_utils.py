"""Unit tests for utility functions (stencil.utils)."""

from __future__ import annotations

import pytest

from stencil.utils import (
    print_error,
    print_header,
    print_success,
    print_summary_table,
    print_warning,
    sanitize_name,
)


class TestSanitizeName:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("My Shop-App", "myshopapp"),
            ("  sales  ", "sales"),
            ("2nd Try", "ndtry"),
            ("___", ""),
        ],
    )
    def test_sanitize(self, raw: str, expected: str):
        assert sanitize_name(raw) == expected


class TestRichHelpers:
    @pytest.mark.unit
    def test_messages_are_not_parsed_as_markup(self, capsys):
        print_error("[bold]not markup[/bold]")
        print_success("ok")
        print_warning("careful")
        out = capsys.readouterr().out
        assert "[bold]not markup[/bold]" in out
        assert "ok" in out
        assert "careful" in out

    @pytest.mark.unit
    def test_summary_table_and_header(self, capsys):
        print_header("Generate")
        print_summary_table({"Files written": "3"}, title="Generation")
        out = capsys.readouterr().out
        assert "Generate" in out
        assert "Files written" in out
        assert "3" in out
