"""Execution of template generation instructions.

Instructions run strictly in declaration order because later ones may rely
on files or directories created by earlier ones.  The first failing
instruction aborts the run; nothing already written is rolled back.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

from jinja2 import TemplateError as JinjaTemplateError

from stencil.errors import GenerationError
from stencil.prompting.questions import Printable
from stencil.scaffolder.models import GenerationInstruction, Template
from stencil.scaffolder.templates import TemplateRenderer

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Context building
# ---------------------------------------------------------------------------


def printed_answers(questions: Iterable[Printable], answers: Mapping[str, Any]) -> dict[str, str]:
    """Render every answered question's value through its ``print_value``."""
    return {
        question.name: question.print_value(answers[question.name])
        for question in questions
        if question.name in answers
    }


def build_context(
    questions: Iterable[Printable],
    answers: Mapping[str, Any],
    model_name: str = "",
) -> dict[str, Any]:
    """Build the placeholder context for a generation run.

    Printed answers are available at top level and, when *model_name* is
    set, under that name as well (``{{ project.name }}``).
    """
    printed = printed_answers(questions, answers)
    context: dict[str, Any] = dict(printed)
    if model_name:
        context[model_name] = printed
    return context


# ---------------------------------------------------------------------------
# Executor
# ---------------------------------------------------------------------------


class GenerationExecutor:
    """Applies generation instructions from *source_root* into *target_root*."""

    def __init__(
        self,
        source_root: str | Path,
        target_root: str | Path,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.source_root = Path(source_root)
        self.target_root = Path(target_root)
        self.renderer = renderer or TemplateRenderer()

    def execute(
        self,
        instructions: Sequence[GenerationInstruction],
        context: dict[str, Any],
    ) -> list[Path]:
        """Apply *instructions* in order and return every written file."""
        written: list[Path] = []
        for instruction in instructions:
            written.extend(self.apply(instruction, context))
        logger.info("Generated %d files into %s", len(written), self.target_root)
        return written

    def apply(self, instruction: GenerationInstruction, context: dict[str, Any]) -> list[Path]:
        """Apply a single instruction.

        Raises:
            GenerationError: If the source cannot be read, a placeholder is
                undefined, or the destination cannot be written.
        """
        src = self.source_root / instruction.src
        try:
            dst = self.target_root / self.renderer.render_string(instruction.dst, context)
            logger.debug("%s %s -> %s", instruction.operation, src, dst)
            if instruction.transform:
                return self._transform(src, dst, context)
            return self._copy(src, dst)
        except (OSError, UnicodeDecodeError, JinjaTemplateError) as exc:
            raise GenerationError(
                f"Unable to {instruction.operation} {instruction.src} -> {instruction.dst}: {exc}",
                instruction,
            ) from exc

    # -- Operations --------------------------------------------------------

    def _copy(self, src: Path, dst: Path) -> list[Path]:
        if src.is_dir():
            shutil.copytree(src, dst, dirs_exist_ok=True)
            return sorted(p for p in dst.rglob("*") if p.is_file())
        dst.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(src, dst)
        return [dst]

    def _transform(self, src: Path, dst: Path, context: dict[str, Any]) -> list[Path]:
        if src.is_dir():
            written: list[Path] = []
            for source_file in sorted(p for p in src.rglob("*") if p.is_file()):
                written.extend(
                    self._transform(source_file, dst / source_file.relative_to(src), context)
                )
            return written
        # Line endings are kept exactly as in the source.
        content = self.renderer.render_string(src.read_bytes().decode("utf-8"), context)
        dst.parent.mkdir(parents=True, exist_ok=True)
        dst.write_text(content, encoding="utf-8", newline="")
        return [dst]


# ---------------------------------------------------------------------------
# Convenience
# ---------------------------------------------------------------------------


def generate(
    template: Template,
    answers: Mapping[str, Any],
    output_dir: str | Path,
) -> list[Path]:
    """Run every instruction of *template* into *output_dir*."""
    tree = template.question_tree()
    context = build_context(tree or (), answers, template.model_name)
    executor = GenerationExecutor(template.path, output_dir)
    return executor.execute(template.instructions, context)
