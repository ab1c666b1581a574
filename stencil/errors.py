"""Exception hierarchy for stencil.

Structural problems (bad question definitions, broken templates, failed
generation steps) are fatal and propagate up to the command boundary.
Conversion and validation problems are recoverable; they are raised only
inside ``read``/validator callables and are turned into ``Rejected``
outcomes by :func:`stencil.prompting.answering.answer`.
"""

from __future__ import annotations

from typing import Any


class StencilError(Exception):
    """Base class for every stencil error."""


class CommandExecutionError(StencilError):
    """Raised when a command cannot continue and must abort."""


class QuestionDefinitionError(CommandExecutionError):
    """Raised when a question or question tree is constructed incorrectly."""


class TemplateError(CommandExecutionError):
    """Raised when a template description is missing or malformed."""


class GenerationError(CommandExecutionError):
    """Raised when a generation instruction fails.

    Attributes:
        instruction: The instruction that failed, if known.
    """

    def __init__(self, message: str, instruction: Any = None) -> None:
        self.instruction = instruction
        super().__init__(message)


# ---------------------------------------------------------------------------
# Recoverable errors
# ---------------------------------------------------------------------------


class ReadError(StencilError):
    """Raw text could not be converted to the question's value type."""

    def __init__(self, message: str = "Invalid value") -> None:
        self.message = message
        super().__init__(message)


class ValidationFailed(StencilError):
    """A converted value was rejected by the question's validator."""

    def __init__(self, message: str = "Invalid value") -> None:
        self.message = message
        super().__init__(message)
