"""Composite question tree and its builder.

Usage::

    def setup(q: QuestionsBuilder) -> None:
        q.question("projectName", "Project name")
        q.question(
            "namespace",
            "Project namespace",
            lambda it: it.set_computed_default(lambda a: a["projectName"].lower()),
        )
        q.confirmation("confirmed", "Generate?")

    tree = QuestionTree.build(setup)
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from typing import Callable, Optional, TypeVar, overload

from stencil.errors import QuestionDefinitionError
from stencil.prompting.questions import (
    ConfirmationQuestion,
    OptionsQuestion,
    PlainQuestion,
    Question,
)

Q = TypeVar("Q", PlainQuestion, OptionsQuestion, ConfirmationQuestion)


class QuestionsBuilder:
    """Accumulates questions in call order until :meth:`build` freezes them."""

    def __init__(self) -> None:
        self._questions: list[Question] = []

    def _append(self, question: Q, configure: Optional[Callable[[Q], None]]) -> Q:
        if configure is not None:
            configure(question)
        self._questions.append(question)
        return question

    def question(
        self,
        name: str,
        caption: str,
        configure: Optional[Callable[[PlainQuestion], None]] = None,
    ) -> PlainQuestion:
        """Add a free-text question."""
        return self._append(PlainQuestion(name, caption), configure)

    def options(
        self,
        name: str,
        caption: str,
        options: Sequence[str],
        configure: Optional[Callable[[OptionsQuestion], None]] = None,
    ) -> OptionsQuestion:
        """Add a single-choice question."""
        return self._append(OptionsQuestion(name, caption, options), configure)

    def confirmation(
        self,
        name: str,
        caption: str,
        configure: Optional[Callable[[ConfirmationQuestion], None]] = None,
    ) -> ConfirmationQuestion:
        """Add a yes/no question."""
        return self._append(ConfirmationQuestion(name, caption), configure)

    def add(self, question: Question) -> Question:
        """Add an already constructed question."""
        self._questions.append(question)
        return question

    def build(self, name: str = "") -> "QuestionTree":
        """Freeze the accumulated questions into a tree.

        Raises:
            QuestionDefinitionError: If no question was added, a question has
                an empty name, or two questions share a name.
        """
        return QuestionTree(self._questions, name=name)


class QuestionTree(Sequence[Question]):
    """Immutable, ordered, duplicate-free sequence of questions.

    Iteration order is the order in which questions must be answered.
    Usually created through :class:`QuestionsBuilder`; the constructor runs
    the same checks and freezes every question it receives.
    """

    def __init__(self, questions: Iterable[Question], name: str = "") -> None:
        questions = tuple(questions)
        if not questions:
            raise QuestionDefinitionError("Question list must not be empty")

        names = Counter(question.name for question in questions)
        if "" in names:
            raise QuestionDefinitionError("Question name must not be empty")
        duplicate = next((n for n, count in names.items() if count > 1), None)
        if duplicate is not None:
            raise QuestionDefinitionError(f"Duplicated questions with name {duplicate}")

        for question in questions:
            question.freeze()
        self._questions: tuple[Question, ...] = questions
        self.name = name

    @classmethod
    def build(cls, setup: Callable[[QuestionsBuilder], None], name: str = "") -> "QuestionTree":
        builder = QuestionsBuilder()
        setup(builder)
        return builder.build(name)

    @overload
    def __getitem__(self, index: int) -> Question: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Question, ...]: ...

    def __getitem__(self, index):
        return self._questions[index]

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions)

    def __len__(self) -> int:
        return len(self._questions)

    def get(self, name: str) -> Optional[Question]:
        """Return the question called *name*, or ``None``."""
        return next((q for q in self._questions if q.name == name), None)

    @property
    def names(self) -> list[str]:
        return [q.name for q in self._questions]

    def __repr__(self) -> str:
        return f"QuestionTree(name={self.name!r}, questions={self.names!r})"
