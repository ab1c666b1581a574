"""Default values for questions.

A default is one of three shapes:

* :data:`NO_DEFAULT` -- nothing to offer, no hint is rendered.
* :class:`Fixed` -- a constant value.
* :class:`Computed` -- a function of the answers gathered so far.  It is
  evaluated only when the question is rendered or resolved, never when the
  question tree is built, so it may refer to questions that precede it in the
  tree.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from stencil.errors import QuestionDefinitionError

T = TypeVar("T")


@dataclass(frozen=True)
class Absent:
    """No default value."""

    def resolve(self, answers: Mapping[str, Any]) -> None:
        return None


@dataclass(frozen=True)
class Fixed(Generic[T]):
    """A constant default value."""

    value: T

    def resolve(self, answers: Mapping[str, Any]) -> T:
        return self.value


@dataclass(frozen=True)
class Computed(Generic[T]):
    """A default computed lazily from previous answers."""

    function: Callable[[Mapping[str, Any]], T]

    def resolve(self, answers: Mapping[str, Any]) -> T:
        # A computed default may only read questions answered earlier in
        # traversal order; anything else is a broken tree, not bad input.
        try:
            return self.function(answers)
        except KeyError as exc:
            raise QuestionDefinitionError(
                f"Default value refers to unanswered question {exc.args[0]!r}"
            ) from exc


NO_DEFAULT = Absent()

DefaultValue = Union[Absent, Fixed[T], Computed[T]]
