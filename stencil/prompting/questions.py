"""Question model.

The set of question kinds is closed: free text (:class:`PlainQuestion`),
single choice (:class:`OptionsQuestion`) and yes/no
(:class:`ConfirmationQuestion`).  Each kind converts raw text to its value
type (``read``), renders a value back as text (``print_value``), validates
converted values and renders its own prompt, including a hint derived from
its default value.

The four capabilities are also described as small protocols.  Consumers
depend on the capabilities they use: :func:`~stencil.prompting.answering.answer`
takes an :class:`Answerable`, template contexts are built from
:class:`Printable` questions.

Questions are configured while a tree is being built and frozen once they
belong to a :class:`~stencil.prompting.tree.QuestionTree`.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Callable, Generic, Optional, Protocol, TypeVar, Union, runtime_checkable

from stencil.errors import QuestionDefinitionError, ReadError
from stencil.prompting.defaults import NO_DEFAULT, Absent, Computed, DefaultValue, Fixed
from stencil.prompting.validation import Validator, accept_all, check_options_range

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
T_contra = TypeVar("T_contra", contravariant=True)

Condition = Callable[[Mapping[str, Any]], bool]


# ---------------------------------------------------------------------------
# Capabilities
# ---------------------------------------------------------------------------


@runtime_checkable
class Readable(Protocol[T_co]):
    def read(self, text: str) -> T_co: ...


@runtime_checkable
class Printable(Protocol[T_contra]):
    """A named answer that can be rendered back as text."""

    name: str

    def print_value(self, value: T_contra) -> str: ...


@runtime_checkable
class Validatable(Protocol[T_contra]):
    def validate(self, value: T_contra) -> None: ...


@runtime_checkable
class HasDefault(Protocol[T_co]):
    default: DefaultValue

    def default_value(self, answers: Mapping[str, Any]) -> Optional[T_co]: ...


@runtime_checkable
class Answerable(Readable[T], Printable[T], Validatable[T], HasDefault[T], Protocol[T]):
    """Everything needed to turn raw text into a committed answer."""


class QuestionKind(str, Enum):
    """Discriminator for the closed set of question kinds."""

    PLAIN = "plain"
    OPTIONS = "options"
    CONFIRMATION = "confirmation"


# ---------------------------------------------------------------------------
# Base question
# ---------------------------------------------------------------------------


class SimpleQuestion(Generic[T]):
    """Shared state and behaviour of every question kind.

    Attributes:
        name: Unique key of the answer in :class:`Answers`.
        caption: Human-readable prompt text.
    """

    kind: QuestionKind

    def __init__(self, name: str, caption: str) -> None:
        self.name = name
        self.caption = caption
        self.default: DefaultValue = NO_DEFAULT
        self.condition: Optional[Condition] = None
        self._validator: Optional[Validator] = None
        self._frozen = False

    # -- Configuration -----------------------------------------------------

    def freeze(self) -> None:
        """Reject any further configuration."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            raise QuestionDefinitionError(
                f"Question {self.name!r} belongs to a question tree and can no longer be changed"
            )

    def set_default(self, value: T) -> None:
        """Use a constant default.  Defaults may be reassigned."""
        self._check_mutable()
        self.default = Fixed(value)

    def set_computed_default(self, function: Callable[[Mapping[str, Any]], T]) -> None:
        """Compute the default from previous answers when the question is asked."""
        self._check_mutable()
        self.default = Computed(function)

    def validate_with(self, validator: Validator) -> None:
        """Replace the default validator.  Allowed only once per question."""
        self._check_mutable()
        if self._validator is not None:
            raise QuestionDefinitionError(
                f"Validation for question {self.name!r} is already set"
            )
        self._validator = validator

    def ask_if(self, condition: Condition) -> None:
        """Only ask this question when *condition* holds for previous answers."""
        self._check_mutable()
        self.condition = condition

    # -- Capabilities ------------------------------------------------------

    def read(self, text: str) -> T:
        raise NotImplementedError

    def print_value(self, value: T) -> str:
        return str(value)

    def validate(self, value: T) -> None:
        validator = self._validator or self._default_validator()
        validator(value)

    def _default_validator(self) -> Validator:
        return accept_all

    def default_value(self, answers: Mapping[str, Any]) -> Optional[T]:
        return self.default.resolve(answers)

    def is_applicable(self, answers: Mapping[str, Any]) -> bool:
        return self.condition is None or bool(self.condition(answers))

    # -- Prompt rendering --------------------------------------------------

    def render_default(self, answers: Mapping[str, Any]) -> str:
        """Return the default hint, or an empty string when there is none."""
        if isinstance(self.default, Absent):
            return ""
        printed = self.print_value(self.default_value(answers))
        return f"({printed})" if printed else ""

    def render_prompt(self, answers: Mapping[str, Any]) -> str:
        hint = self.render_default(answers)
        return f"> {self.caption} {hint}".rstrip()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, caption={self.caption!r})"


# ---------------------------------------------------------------------------
# Question kinds
# ---------------------------------------------------------------------------


class PlainQuestion(SimpleQuestion[str]):
    """Free-text question; the answer is the text itself."""

    kind = QuestionKind.PLAIN

    def read(self, text: str) -> str:
        return text

    def print_value(self, value: str) -> str:
        return value


class OptionsQuestion(SimpleQuestion[int]):
    """Single choice among a non-empty list of options.

    Users type the one-based number of an option; the stored answer is the
    zero-based index.
    """

    kind = QuestionKind.OPTIONS

    def __init__(self, name: str, caption: str, options: Sequence[str]) -> None:
        super().__init__(name, caption)
        if not options:
            raise QuestionDefinitionError(
                f"Options question {name!r} requires at least one option"
            )
        self.options: tuple[str, ...] = tuple(options)

    def _range_hint(self) -> str:
        return f"Input 1-{len(self.options)}"

    def read(self, text: str) -> int:
        try:
            return int(text.strip()) - 1
        except ValueError:
            raise ReadError(self._range_hint()) from None

    def print_value(self, value: int) -> str:
        return str(value + 1)

    def _default_validator(self) -> Validator:
        return check_options_range(len(self.options))

    def render_prompt(self, answers: Mapping[str, Any]) -> str:
        lines = [super().render_prompt(answers)]
        lines.extend(f"{index}. {option}" for index, option in enumerate(self.options, 1))
        return "\n".join(lines)


class ConfirmationQuestion(SimpleQuestion[bool]):
    """Yes/no question answered with a single ``y`` or ``n``."""

    kind = QuestionKind.CONFIRMATION

    def read(self, text: str) -> bool:
        normalized = text.strip().lower()
        if normalized == "y":
            return True
        if normalized == "n":
            return False
        raise ReadError()

    def print_value(self, value: bool) -> str:
        return "y" if value else "n"

    def render_default(self, answers: Mapping[str, Any]) -> str:
        if isinstance(self.default, Absent):
            return "(y/n)"
        return "(Y/n)" if self.default_value(answers) else "(y/N)"


Question = Union[PlainQuestion, OptionsQuestion, ConfirmationQuestion]
