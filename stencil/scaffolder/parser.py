"""Template description parser.

A template directory contains a ``template.xml`` description::

    <template modelName="project">
        <questions>
            <plain name="name" caption="Project name"/>
            <options name="license" caption="License">
                <option>MIT</option>
                <option>Apache-2.0</option>
            </options>
        </questions>
        <operations>
            <copy src="static" dst="static"/>
            <transform src="README.md" dst="README.md"/>
        </operations>
    </template>

Questions and operations keep their document order.  Any unknown element in
either region rejects the whole template.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Union

from stencil.errors import TemplateError
from stencil.scaffolder.locator import TemplateLocator
from stencil.scaffolder.models import (
    GenerationInstruction,
    OptionsTemplateQuestion,
    PlainTemplateQuestion,
    Template,
)

logger = logging.getLogger(__name__)

DESCRIPTION_FILE = "template.xml"

_INVALID = "Invalid template"


def parse_template(
    template_name: str,
    locator: TemplateLocator,
    description_file: str = DESCRIPTION_FILE,
) -> Template:
    """Locate template *template_name* and parse its description.

    Raises:
        TemplateError: If the description file is missing or malformed.
    """
    base_path = locator.find(template_name)
    description = base_path / description_file
    if not description.is_file():
        raise TemplateError(
            f"Unable to find {description_file} for template {template_name}"
        )
    return parse_description(description, base_path)


def parse_description(description: Path, base_path: Path | None = None) -> Template:
    """Parse a template description file into a :class:`Template`."""
    try:
        root = ET.parse(description).getroot()
    except ET.ParseError as exc:
        raise TemplateError(f"{_INVALID}: {description}: {exc}") from exc

    questions_element = root.find("questions")
    operations_element = root.find("operations")
    if operations_element is None:
        raise TemplateError(f"{_INVALID}: {description} has no operations")

    questions = _parse_questions(questions_element) if questions_element is not None else []
    instructions = _parse_instructions(operations_element)

    template = Template(
        path=base_path if base_path is not None else description.parent,
        model_name=root.get("modelName", ""),
        questions=tuple(questions),
        instructions=tuple(instructions),
    )
    logger.debug(
        "Parsed template %s: %d questions, %d instructions",
        template.path,
        len(template.questions),
        len(template.instructions),
    )
    return template


def _parse_questions(
    element: ET.Element,
) -> list[Union[PlainTemplateQuestion, OptionsTemplateQuestion]]:
    questions: list[Union[PlainTemplateQuestion, OptionsTemplateQuestion]] = []
    for child in element:
        name = child.get("name", "")
        caption = child.get("caption", "")
        if child.tag == "plain":
            questions.append(PlainTemplateQuestion(name=name, caption=caption))
        elif child.tag == "options":
            options = _parse_options(child)
            if not options:
                raise TemplateError(f"{_INVALID}: options question {name!r} has no options")
            questions.append(OptionsTemplateQuestion(name=name, caption=caption, options=options))
        else:
            raise TemplateError(f"{_INVALID}: unknown question <{child.tag}>")
    return questions


def _parse_options(element: ET.Element) -> tuple[str, ...]:
    options: list[str] = []
    for child in element:
        if child.tag != "option":
            raise TemplateError(f"{_INVALID}: unknown option element <{child.tag}>")
        options.append((child.text or "").strip())
    return tuple(options)


def _parse_instructions(element: ET.Element) -> list[GenerationInstruction]:
    instructions: list[GenerationInstruction] = []
    for child in element:
        if child.tag not in ("transform", "copy"):
            raise TemplateError(f"{_INVALID}: unknown operation <{child.tag}>")
        src = child.get("src", "").strip()
        dst = child.get("dst", "").strip()
        if not src or not dst:
            raise TemplateError(f"{_INVALID}: <{child.tag}> requires non-empty src and dst")
        instructions.append(
            GenerationInstruction(src=src, dst=dst, transform=child.tag == "transform")
        )
    return instructions
