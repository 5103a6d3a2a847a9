"""Validator — runs checkers over raw input and holds the outcome.

Usage::

    from formcheck import Checker, Integer64, Max, Min, String, Validator

    validator = Validator()
    validator.register(
        Checker("name", "Name", String()).meet(Max(5)).meet(Min(2))
    ).register(
        Checker("age", "Age", Integer64()).meet(Max(100)).meet(Min(18))
    )
    validator.validate({"name": ["bob"], "age": ["20"]})
    if validator.is_valid():
        age = validator.get_required("age").as_int()

A validator is not safe for concurrent use: give each request its own,
or guard ``validate()`` with a lock.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from formcheck._internal.multimap import RawInput, lookup_values
from formcheck.checker import Checker
from formcheck.config import ValidatorConfig
from formcheck.errors import FieldError, UnvalidatedFieldError
from formcheck.result import ValidationResult
from formcheck.values import Value

logger = logging.getLogger("formcheck.validator")


class Validator:
    """Owns an ordered set of checkers and the results of the last pass."""

    __slots__ = ("_checkers", "_config", "_errors", "_messages", "_values")

    def __init__(self, config: ValidatorConfig | None = None) -> None:
        self._config = config or ValidatorConfig()
        self._checkers: dict[str, Checker] = {}
        self._values: dict[str, tuple[Value, ...]] = {}
        self._errors: dict[str, FieldError] = {}
        self._messages: dict[str, list[str]] = {}

    @property
    def config(self) -> ValidatorConfig:
        return self._config

    @property
    def checkers(self) -> tuple[Checker, ...]:
        """Registered checkers, in registration order."""
        return tuple(self._checkers.values())

    @property
    def errors(self) -> dict[str, list[str]]:
        """Rendered messages for every invalid field."""
        return {name: list(messages) for name, messages in self._messages.items()}

    # -- Registration --

    def register(self, checker: Checker) -> Validator:
        """Add a checker. Returns the validator so calls can be chained.

        Registering a second checker for the same field replaces the
        first one, keeping its position in the run order.
        """
        if checker.field in self._checkers:
            logger.debug("Replacing checker for field %r", checker.field)
        self._checkers[checker.field] = checker
        return self

    # -- Validation --

    def validate(self, raw_input: RawInput) -> ValidationResult:
        """Run every checker against *raw_input*.

        Results from any previous call are discarded first. A failing
        field never stops the remaining fields from being checked.
        """
        self.reset()
        renderer = self._config.renderer

        for name, checker in self._checkers.items():
            raw_values = lookup_values(raw_input, name)
            try:
                values = checker.run(
                    raw_values, empty_is_missing=self._config.empty_is_missing
                )
            except FieldError as e:
                self._errors[name] = e
                self._messages[name] = [renderer.render(m) for m in e.messages]
                logger.debug(
                    "Field %r rejected (%s): %d violation(s)",
                    name,
                    e.kind.value,
                    len(e.messages),
                )
                continue
            if values:
                self._values[name] = values

        logger.debug(
            "Validated %d field(s): %d valid, %d invalid",
            len(self._checkers),
            len(self._values),
            len(self._errors),
        )
        return ValidationResult(
            data={name: values[0] for name, values in self._values.items()},
            errors=self.errors,
        )

    def reset(self) -> None:
        """Forget the last pass, as if ``validate()`` was never called."""
        self._values.clear()
        self._errors.clear()
        self._messages.clear()

    # -- Queries --

    def is_valid(self) -> bool:
        """True if the last ``validate()`` found no errors.

        Also true before any ``validate()`` call.
        """
        return not self._errors

    def get_required(self, field: str) -> Value:
        """Return the value for *field*, which must have validated.

        Call ``is_valid()`` first; when it is true, this cannot raise
        for a field carrying a ``Required`` rule.

        Raises:
            UnvalidatedFieldError: If *field* has no valid value.
        """
        values = self._values.get(field)
        if not values:
            raise UnvalidatedFieldError(field)
        return values[0]

    def get(self, field: str) -> Value | None:
        """Return the value for *field*, or ``None`` if it has none."""
        values = self._values.get(field)
        return values[0] if values else None

    def get_list(self, field: str) -> list[Value]:
        """Return every value for *field* (``multiple`` checkers)."""
        return list(self._values.get(field, ()))

    def errors_for(self, field: str) -> list[str]:
        """Return the rendered messages for *field*, in rule order."""
        return list(self._messages.get(field, ()))

    def field_error(self, field: str) -> FieldError | None:
        """Return the structured error for *field*, if it failed."""
        return self._errors.get(field)


def validate(
    data: RawInput,
    checkers: Iterable[Checker],
    *,
    config: ValidatorConfig | None = None,
) -> ValidationResult:
    """Validate *data* against *checkers* in one call.

    Args:
        data: Mapping of field names to lists of raw strings, or any
            multi-value mapping with ``get_list`` (``FormData``,
            ``QueryParams``).
        checkers: Checkers to run, in order.
        config: Optional configuration (renderer, empty handling).

    Returns:
        A ``ValidationResult`` with ``.data`` (first value per valid field)
        and ``.errors`` (field → list of messages).

    Example::

        result = validate(params, [
            Checker("title", "Title", String()).meet(Required()).meet(Max(200)),
        ])
        if not result:
            ...
    """
    validator = Validator(config)
    for checker in checkers:
        validator.register(checker)
    return validator.validate(data)
