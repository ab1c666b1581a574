"""Shared pytest fixtures for the stencil test suite.

Provides reusable fixtures for:
- Template directories with a ``template.xml`` description
- Scripted console input for the answering loop
- A Rich console writing into memory
- A small message bundle
"""

from __future__ import annotations

import io
import textwrap
from pathlib import Path
from typing import Callable

import pytest
from rich.console import Console

from stencil.messages import MessageBundle


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

MINIMAL_DESCRIPTION = """\
<template modelName="project">
    <questions>
        <plain name="name" caption="Project name"/>
    </questions>
    <operations>
        <copy src="static.txt" dst="static.txt"/>
    </operations>
</template>
"""


@pytest.fixture
def minimal_description() -> str:
    """One ``plain`` question and one ``copy`` instruction."""
    return MINIMAL_DESCRIPTION


@pytest.fixture
def make_template(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a template directory under ``tmp_path/templates``.

    Usage::

        path = make_template("svc", DESCRIPTION, {"README.md": "# {{ name }}"})
    """

    def factory(name: str, description: str, files: dict[str, str] | None = None) -> Path:
        root = tmp_path / "templates" / name
        root.mkdir(parents=True, exist_ok=True)
        (root / "template.xml").write_text(textwrap.dedent(description), encoding="utf-8")
        for relative, content in (files or {}).items():
            target = root / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return root

    return factory


@pytest.fixture
def templates_root(tmp_path: Path) -> Path:
    root = tmp_path / "templates"
    root.mkdir(exist_ok=True)
    return root


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------


class ScriptedInput:
    """Input source returning canned lines and recording the prompts shown."""

    def __init__(self, lines: list[str]) -> None:
        self.lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise AssertionError(f"Unexpected prompt: {prompt!r}")
        return self.lines.pop(0)


@pytest.fixture
def scripted_input() -> Callable[[list[str]], ScriptedInput]:
    return ScriptedInput


@pytest.fixture
def memory_console() -> Console:
    """A Rich console that records output instead of printing it."""
    return Console(file=io.StringIO(), force_terminal=False, width=120)


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


@pytest.fixture
def messages() -> MessageBundle:
    return MessageBundle(
        {
            "databases": "HSQLDB, PostgreSQL, MySQL",
            "platformVersions": ["6.9.0", "6.8.5"],
            "enterVersionManually": "Enter version manually",
        }
    )
