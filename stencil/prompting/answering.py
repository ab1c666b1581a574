"""Single-question answering step.

:func:`answer` is the transition function of the answering protocol: it
takes a question, the raw text typed by the user and the answers collected so
far, and returns either :class:`Committed` with the converted value or
:class:`Rejected` with a message to show before asking again.  Conversion and
validation failures never escape as exceptions, and *answers* is never
modified.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from stencil.errors import ReadError, ValidationFailed
from stencil.prompting.defaults import Absent
from stencil.prompting.questions import Answerable


@dataclass(frozen=True)
class Committed:
    value: Any


@dataclass(frozen=True)
class Rejected:
    message: str


Outcome = Union[Committed, Rejected]


def answer(question: Answerable, raw_text: str, answers: Mapping[str, Any]) -> Outcome:
    """Convert and validate *raw_text* for *question*.

    Empty input falls back to the question's default, printed and read back
    so it goes through the same conversion as typed text.
    """
    text = raw_text
    if not raw_text.strip() and not isinstance(question.default, Absent):
        text = question.print_value(question.default_value(answers))

    try:
        value = question.read(text)
    except ReadError as exc:
        return Rejected(exc.message)

    try:
        question.validate(value)
    except ValidationFailed as exc:
        return Rejected(exc.message)

    return Committed(value)
