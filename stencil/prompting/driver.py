"""Interactive answering loop.

The core only knows how to answer one question (:func:`answer`).  The
:class:`ConsoleDriver` walks a :class:`QuestionTree` in order, shows each
prompt on the Rich console, reads raw text and asks again until the answer is
committed.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape

from stencil.prompting.answering import Committed, answer
from stencil.prompting.answers import Answers
from stencil.prompting.tree import QuestionTree
from stencil.utils import console as default_console

logger = logging.getLogger(__name__)

InputSource = Callable[[str], str]


class ConsoleDriver:
    """Ask every question of a tree on the console.

    Args:
        console: Rich console used for error messages.
        input_source: Callable receiving the rendered prompt and returning the
            raw line typed by the user.  Defaults to ``console.input``.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        input_source: Optional[InputSource] = None,
    ) -> None:
        self.console = console or default_console
        self.input_source = input_source or partial(self.console.input, markup=False)

    def ask(self, tree: QuestionTree, answers: Optional[Answers] = None) -> Answers:
        """Answer every applicable question of *tree* and return the answers.

        Questions already present in *answers* are not asked again.
        """
        answers = answers if answers is not None else Answers()
        for question in tree:
            if question.name in answers:
                continue
            if not question.is_applicable(answers):
                logger.debug("Skipping question %s", question.name)
                continue
            while True:
                raw = self.input_source(question.render_prompt(answers) + "\n")
                outcome = answer(question, raw, answers)
                if isinstance(outcome, Committed):
                    answers.commit(question.name, outcome.value)
                    break
                self.console.print(f"[bold red]{escape(outcome.message)}[/bold red]")
        return answers
