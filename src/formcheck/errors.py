"""Formcheck exception hierarchy.

Shared across types, rules, checkers and the validator so every module
raises and catches the same types.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from formcheck.messages import Message


class FormCheckError(Exception):
    """Base for all formcheck-specific errors."""


class ConfigurationError(FormCheckError):
    """Raised when a checker, rule or type is set up incorrectly.

    Always raised at construction time, never during ``validate()``.
    """


class CoercionError(FormCheckError, ValueError):
    """A raw string cannot be parsed as the field's declared type."""

    def __init__(self, raw: str, expected: str) -> None:
        self.raw = raw
        self.expected = expected
        super().__init__(f"Cannot coerce {raw!r} to {expected}")


class ErrorKind(Enum):
    """Why a single field failed validation."""

    MISSING = "missing"
    COERCION = "coercion"
    RULE = "rule"


class FieldError(FormCheckError):
    """A per-field validation failure.

    Non-fatal: the validator records it and moves on to the next field.

    Attributes:
        field: The wire field name.
        label: The display label used in messages.
        kind: Which stage rejected the value.
        messages: Every violation for the field, in rule order.
    """

    def __init__(
        self,
        field: str,
        label: str,
        kind: ErrorKind,
        messages: tuple[Message, ...],
    ) -> None:
        self.field = field
        self.label = label
        self.kind = kind
        self.messages = messages
        super().__init__(f"{field}: {kind.value} ({len(messages)} violation(s))")


class UnvalidatedFieldError(FormCheckError, LookupError):
    """``get_required()`` was called for a field with no valid value.

    This is a usage bug: check ``is_valid()`` before reaching for
    required values.
    """

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(
            f"Field {field!r} has no valid value. "
            f"Call is_valid() before get_required(), or use get()."
        )
