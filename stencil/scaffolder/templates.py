"""Jinja2 rendering for transform instructions.

Placeholders in transformed files and in destination paths are Jinja2
expressions evaluated against the printed answers, e.g. ``{{ project.name }}``
or ``{{ name | snake_case }}``.  Unknown placeholders are errors rather than
empty strings.

Only ``{{ ... }}`` expressions are interpreted.  Statement and comment
delimiters are moved to sequences that do not occur in text files, so
sources containing ``{%`` or ``{#`` (shell ``${#arr[@]}``, Liquid
templates) pass through unchanged.  A literal ``{{`` is written as
``{{ "{{" }}``.
"""

from __future__ import annotations

import re
from typing import Any

from jinja2 import Environment, StrictUndefined

_UNUSED_BLOCK = ("\x00{%", "%}\x00")
_UNUSED_COMMENT = ("\x00{#", "#}\x00")


class TemplateRenderer:
    """Renders template text with answer context."""

    def __init__(self) -> None:
        self.env = Environment(
            block_start_string=_UNUSED_BLOCK[0],
            block_end_string=_UNUSED_BLOCK[1],
            comment_start_string=_UNUSED_COMMENT[0],
            comment_end_string=_UNUSED_COMMENT[1],
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self.env.filters["slugify"] = _slugify_filter
        self.env.filters["pascal_case"] = _pascal_case_filter
        self.env.filters["snake_case"] = _snake_case_filter
        self.env.filters["camel_case"] = _camel_case_filter
        self.env.filters["package_path"] = _package_path_filter
        self._crlf_env = self.env.overlay(newline_sequence="\r\n")

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context.

        Line endings follow the input: text whose first line ends with
        ``\\r\\n`` is rendered with ``\\r\\n`` throughout.
        """
        env = self._crlf_env if _uses_crlf(template_string) else self.env
        template = env.from_string(template_string)
        return template.render(**context)


def _uses_crlf(text: str) -> bool:
    first = text.find("\n")
    return first > 0 and text[first - 1] == "\r"


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _slugify_filter(value: str) -> str:
    """Convert a string to a URL/filename-safe slug."""
    slug = re.sub(r"[^a-z0-9]+", "-", value.lower().strip())
    return slug.strip("-")


def _pascal_case_filter(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``SomeThing``."""
    parts = re.split(r"[-_\s]+", value)
    return "".join(word.capitalize() for word in parts if word)


def _snake_case_filter(value: str) -> str:
    """Convert ``SomeThing`` or ``some-thing`` to ``some_thing``."""
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", value)
    s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
    return re.sub(r"[-\s]+", "_", s2).lower()


def _camel_case_filter(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``someThing``."""
    pascal = _pascal_case_filter(value)
    if pascal:
        return pascal[0].lower() + pascal[1:]
    return ""


def _package_path_filter(value: str) -> str:
    """Convert ``com.acme.shop`` to ``com/acme/shop``."""
    return value.replace(".", "/")
