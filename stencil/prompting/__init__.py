"""Interactive prompting engine.

Typed questions with defaults and validation, composed into ordered question
trees and answered one at a time.

Usage::

    from stencil.prompting import ConsoleDriver, QuestionTree

    tree = QuestionTree.build(lambda q: q.question("name", "Project name"))
    answers = ConsoleDriver().ask(tree)
"""

from stencil.prompting.answering import Committed, Outcome, Rejected, answer
from stencil.prompting.answers import Answers
from stencil.prompting.defaults import NO_DEFAULT, Computed, Fixed
from stencil.prompting.driver import ConsoleDriver
from stencil.prompting.questions import (
    Answerable,
    ConfirmationQuestion,
    HasDefault,
    OptionsQuestion,
    PlainQuestion,
    Printable,
    Question,
    QuestionKind,
    Readable,
    Validatable,
)
from stencil.prompting.tree import QuestionsBuilder, QuestionTree

__all__ = [
    "Answerable",
    "Answers",
    "Committed",
    "Computed",
    "ConfirmationQuestion",
    "ConsoleDriver",
    "Fixed",
    "HasDefault",
    "NO_DEFAULT",
    "OptionsQuestion",
    "Outcome",
    "PlainQuestion",
    "Printable",
    "Question",
    "QuestionKind",
    "QuestionTree",
    "QuestionsBuilder",
    "Readable",
    "Rejected",
    "Validatable",
    "answer",
]
