"""Checker — per-field validation settings.

A checker binds a wire field name, a display label, a field type and an
ordered tuple of rules. Checkers are immutable; ``meet()`` returns a new
checker with one more rule::

    Checker("age", "Age", Integer64()).meet(Min(18)).meet(Max(100))
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

from formcheck.errors import ConfigurationError, ErrorKind, FieldError
from formcheck.kinds import FieldType
from formcheck.messages import Message, MessageKind
from formcheck.rules import Required, Rule, evaluate
from formcheck.values import Value


@dataclass(frozen=True, slots=True)
class Checker:
    """How one field is coerced and checked.

    Attributes:
        field: Name of the field in the submitted form or query string.
        label: Human-readable name, used in messages.
        kind: Field type used to coerce the raw string.
        rules: Constraints checked, in order, after coercion.
        multiple: Check every submitted value instead of only the first
            (checkboxes, multi-selects).
    """

    field: str
    label: str
    kind: FieldType
    rules: tuple[Rule, ...] = ()
    multiple: bool = False

    def __post_init__(self) -> None:
        if not self.field:
            msg = "Checker field name must not be empty"
            raise ConfigurationError(msg)
        if isinstance(self.kind, type):
            msg = (
                f"Checker {self.field!r}: pass a field type instance, "
                f"e.g. {self.kind.__name__}() instead of {self.kind.__name__}"
            )
            raise ConfigurationError(msg)
        if not isinstance(self.kind, FieldType):
            msg = (
                f"Checker {self.field!r}: kind must have a coerce() method, "
                f"got {type(self.kind).__name__}"
            )
            raise ConfigurationError(msg)

    def meet(self, rule: Rule) -> Checker:
        """Return a copy of this checker with *rule* appended."""
        return replace(self, rules=(*self.rules, rule))

    @property
    def required(self) -> bool:
        """True if a missing value is an error."""
        return any(isinstance(rule, Required) for rule in self.rules)

    def run(
        self,
        raw_values: Sequence[str] | None,
        *,
        empty_is_missing: bool = True,
    ) -> tuple[Value, ...]:
        """Coerce and check the raw values for this field.

        Returns the coerced values: one for a single-valued checker,
        all of them for a ``multiple`` checker, none for a missing
        optional field.

        Raises:
            FieldError: If the field is missing but required, a value
                cannot be coerced, or any rule fails.
        """
        candidates = self._present(raw_values, empty_is_missing)
        if not candidates:
            if self.required:
                blank = Message(MessageKind.BLANK, self.field, self.label)
                raise FieldError(self.field, self.label, ErrorKind.MISSING, (blank,))
            return ()

        return tuple(self._check_value(raw) for raw in candidates)

    def _present(
        self,
        raw_values: Sequence[str] | None,
        empty_is_missing: bool,
    ) -> Sequence[str]:
        if not raw_values:
            return ()
        if self.multiple:
            if empty_is_missing:
                return [raw for raw in raw_values if raw != ""]
            return raw_values
        first = raw_values[0]
        if empty_is_missing and first == "":
            return ()
        return (first,)

    def _check_value(self, raw: str) -> Value:
        try:
            value = self.kind.coerce(raw)
        except ValueError:
            message = Message(MessageKind.FORMAT, self.field, self.label, raw)
            raise FieldError(
                self.field, self.label, ErrorKind.COERCION, (message,)
            ) from None

        messages: list[Message] = []
        for rule in self.rules:
            violation = evaluate(rule, value)
            if violation is not None:
                messages.append(
                    Message(
                        violation.kind,
                        self.field,
                        self.label,
                        raw,
                        violation.rule_values,
                        violation.template,
                    )
                )
        if messages:
            raise FieldError(self.field, self.label, ErrorKind.RULE, tuple(messages))
        return value
