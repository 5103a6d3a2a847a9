"""Built-in rules — constraints checked after coercion.

Rules are small frozen dataclasses forming a closed union::

    type Rule = Max | Min | Required | Format | OneOf | Predicate

``evaluate(rule, value)`` matches over that union and returns a
``RuleViolation`` on failure, or ``None`` if the value passes.

The same rule can mean different things for different values. ``Max(5)``
is an upper bound for an ``IntValue`` but a maximum *length* for a
``StrValue``. Bounds are inclusive.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import assert_never

from formcheck.errors import ConfigurationError
from formcheck.messages import MessageKind
from formcheck.values import IntValue, StrValue, Value


@dataclass(frozen=True, slots=True)
class RuleViolation:
    """A failed rule, before the checker adds field context."""

    kind: MessageKind
    rule_values: tuple[str, ...] = ()
    template: str | None = None


def _check_bound(name: str, bound: object) -> None:
    # bool is an int subclass; Max(True) is always a mistake
    if isinstance(bound, bool) or not isinstance(bound, int):
        msg = f"{name}() bound must be an int, got {type(bound).__name__}"
        raise ConfigurationError(msg)


# ---------------------------------------------------------------------------
# Bounds
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Max:
    """Upper bound: value for integers, character length for strings."""

    bound: int

    def __post_init__(self) -> None:
        _check_bound("Max", self.bound)


@dataclass(frozen=True, slots=True)
class Min:
    """Lower bound: value for integers, character length for strings."""

    bound: int

    def __post_init__(self) -> None:
        _check_bound("Min", self.bound)


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Required:
    """Field must be present and non-empty.

    Presence is decided by the checker before coercion, so evaluating
    ``Required`` against a value always passes.
    """


# ---------------------------------------------------------------------------
# Format and choice
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Format:
    """The value's string form must contain a match for *pattern*."""

    pattern: str

    def __post_init__(self) -> None:
        try:
            re.compile(self.pattern)
        except re.error as e:
            msg = f"Format() pattern {self.pattern!r} is invalid: {e}"
            raise ConfigurationError(msg) from e


@dataclass(frozen=True, slots=True)
class OneOf:
    """The value's string form must be one of *choices*."""

    choices: tuple[str, ...]

    def __init__(self, *choices: str) -> None:
        if not choices:
            msg = "OneOf() needs at least one choice"
            raise ConfigurationError(msg)
        object.__setattr__(self, "choices", tuple(choices))


# ---------------------------------------------------------------------------
# Custom logic
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Predicate:
    """Caller-supplied check.

    *message* is a ``str.format`` template with ``{label}``, ``{field}``
    and ``{value}``. Without one, a failure reads as a format error.

    Usage::

        Predicate(lambda v: v.as_int() % 2 == 0, "{label} must be even")
    """

    check: Callable[[Value], bool]
    message: str | None = None

    def __post_init__(self) -> None:
        if self.message is None:
            return
        # Renderers fill these same names, all with strings
        try:
            self.message.format(label="", field="", value="", rule="", rules="")
        except (KeyError, IndexError, ValueError, AttributeError) as e:
            msg = f"Predicate() message {self.message!r} is invalid: {e!r}"
            raise ConfigurationError(msg) from e


type Rule = Max | Min | Required | Format | OneOf | Predicate


def evaluate(rule: Rule, value: Value) -> RuleViolation | None:
    """Check *value* against *rule*. Never mutates the value."""
    match rule:
        case Max(bound):
            return _match_max(bound, value)
        case Min(bound):
            return _match_min(bound, value)
        case Required():
            return None
        case Format(pattern):
            if re.search(pattern, str(value)) is None:
                return RuleViolation(MessageKind.FORMAT)
            return None
        case OneOf():
            if str(value) not in rule.choices:
                return RuleViolation(MessageKind.CHOICE, rule.choices)
            return None
        case Predicate(check, message):
            if check(value):
                return None
            if message is None:
                return RuleViolation(MessageKind.FORMAT)
            return RuleViolation(MessageKind.CUSTOM, template=message)
        case _:
            assert_never(rule)


def _match_max(bound: int, value: Value) -> RuleViolation | None:
    match value:
        case StrValue(text):
            if len(text) > bound:
                return RuleViolation(MessageKind.MAX_LEN, (str(bound),))
        case IntValue(number):
            if number > bound:
                return RuleViolation(MessageKind.MAX, (str(bound),))
    return None


def _match_min(bound: int, value: Value) -> RuleViolation | None:
    match value:
        case StrValue(text):
            if len(text) < bound:
                return RuleViolation(MessageKind.MIN_LEN, (str(bound),))
        case IntValue(number):
            if number < bound:
                return RuleViolation(MessageKind.MIN, (str(bound),))
    return None
