"""Coerced field values — a small tagged union.

Every successful coercion produces exactly one of these. The tag always
matches the type that produced it, so ``Integer64`` yields ``IntValue``
and ``String`` yields ``StrValue``.

Accessors never convert between kinds::

    IntValue(20).as_int()   # 20
    IntValue(20).as_str()   # None, not "20"
"""

from dataclasses import dataclass


class Value:
    """Base for coerced values. Use the tag-checked accessors."""

    __slots__ = ()

    def as_str(self) -> str | None:
        """The wrapped string, or ``None`` if this is not a ``StrValue``."""
        return None

    def as_int(self) -> int | None:
        """The wrapped integer, or ``None`` if this is not an ``IntValue``."""
        return None


@dataclass(frozen=True, slots=True)
class StrValue(Value):
    text: str

    def as_str(self) -> str | None:
        return self.text

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class IntValue(Value):
    number: int

    def as_int(self) -> int | None:
        return self.number

    def __str__(self) -> str:
        return str(self.number)
