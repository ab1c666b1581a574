"""Validation helpers for question answers.

A validator is any callable taking the converted value and returning
``None`` on success.  To reject a value it calls :func:`fail` (or one of the
``check_*`` helpers), which raises :class:`~stencil.errors.ValidationFailed`
carrying the message shown to the user.
"""

from __future__ import annotations

import re
from typing import Any, Callable, NoReturn

from stencil.errors import ValidationFailed

Validator = Callable[[Any], None]

PACKAGE_PATTERN = r"[a-zA-Z][0-9a-zA-Z]*(\.[a-zA-Z][0-9a-zA-Z]*)*"
CLASS_PATTERN = r"\b[A-Z]+[\w\d]*"


def accept_all(value: Any) -> None:
    """Validator that accepts every value."""


def fail(message: str) -> NoReturn:
    """Reject the value being validated with *message*."""
    raise ValidationFailed(message)


def check_regex(value: Any, pattern: str, fail_message: str = "Invalid value") -> None:
    """Fail unless *value* is a string fully matching *pattern*.

    Raises:
        TypeError: If *value* is not a string; regex checks only make sense
            on free-text answers.
    """
    if not isinstance(value, str):
        raise TypeError("Trying to validate non string value with regex")
    if re.fullmatch(pattern, value) is None:
        fail(fail_message)


def check_is_package(value: Any, fail_message: str = "Is not valid package name") -> None:
    """Fail unless *value* looks like a dotted package name (``com.acme.app``)."""
    check_regex(value, PACKAGE_PATTERN, fail_message)


def check_is_class(value: Any, fail_message: str = "Invalid class name") -> None:
    """Fail unless *value* looks like a capitalised class name."""
    check_regex(value, CLASS_PATTERN, fail_message)


def check_options_range(option_count: int) -> Validator:
    """Build the default validator for a single-choice question."""

    def _validate(index: int) -> None:
        if not 0 <= index < option_count:
            fail(f"Input 1-{option_count}")

    return _validate
