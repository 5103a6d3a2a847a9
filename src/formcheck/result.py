"""Validation result — what one ``validate()`` call produced."""

from dataclasses import dataclass

from formcheck.values import Value


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Frozen copy of a validator's state right after a pass.

    Later ``validate()`` or ``reset()`` calls on the same validator leave
    it untouched. Truthiness follows validity::

        result = validator.validate(params)
        if not result:
            return render_form(errors=result.errors)

    Attributes:
        data: First coerced value per field that passed. Optional fields
            that were not submitted have no entry.
        errors: Rendered messages per failed field, e.g.
            ``{"age": ["Age can't be less than 18"]}``.
    """

    data: dict[str, Value]
    errors: dict[str, list[str]]

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def __bool__(self) -> bool:
        return self.is_valid
