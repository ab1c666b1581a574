"""Pydantic v2 models for parsed templates.

A template bundles a root directory, the name under which answers are exposed
to placeholders, the questions it needs answered and the ordered generation
instructions to execute.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from stencil.prompting.questions import OptionsQuestion, PlainQuestion
from stencil.prompting.tree import QuestionsBuilder, QuestionTree


# ---------------------------------------------------------------------------
# Template questions
# ---------------------------------------------------------------------------


class PlainTemplateQuestion(BaseModel):
    """A free-text question declared by a template."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["plain"] = "plain"
    name: str = Field(..., description="Answer key, also the placeholder name")
    caption: str = Field(default="", description="Prompt shown to the user")

    def to_question(self) -> PlainQuestion:
        return PlainQuestion(self.name, self.caption)


class OptionsTemplateQuestion(BaseModel):
    """A single-choice question declared by a template."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["options"] = "options"
    name: str = Field(..., description="Answer key, also the placeholder name")
    caption: str = Field(default="", description="Prompt shown to the user")
    options: tuple[str, ...] = Field(..., min_length=1, description="Option labels in order")

    def to_question(self) -> OptionsQuestion:
        return OptionsQuestion(self.name, self.caption, list(self.options))


TemplateQuestion = Annotated[
    Union[PlainTemplateQuestion, OptionsTemplateQuestion],
    Field(discriminator="kind"),
]


# ---------------------------------------------------------------------------
# Instructions and template
# ---------------------------------------------------------------------------


class GenerationInstruction(BaseModel):
    """Copy or transform *src* (relative to the template) into *dst*."""

    model_config = ConfigDict(frozen=True)

    src: str = Field(..., description="Source path relative to the template root")
    dst: str = Field(..., description="Destination path relative to the output directory")
    transform: bool = Field(
        default=False,
        description="Render the source as a template instead of copying it verbatim",
    )

    @property
    def operation(self) -> str:
        return "transform" if self.transform else "copy"


class Template(BaseModel):
    """A parsed template description."""

    model_config = ConfigDict(frozen=True)

    path: Path = Field(..., description="Template root directory")
    model_name: str = Field(default="", description="Namespace of answers in placeholders")
    questions: tuple[TemplateQuestion, ...] = Field(default=())
    instructions: tuple[GenerationInstruction, ...] = Field(default=())

    def question_tree(self) -> Optional[QuestionTree]:
        """Convert the declared questions into a question tree.

        Returns ``None`` when the template declares no questions.
        """
        if not self.questions:
            return None
        builder = QuestionsBuilder()
        for question in self.questions:
            builder.add(question.to_question())
        return builder.build(self.model_name)
