"""Field types — coercion from a raw string to a ``Value``.

Each type is a stateless strategy with a single method::

    def coerce(self, raw: str) -> Value:
        '''Return the coerced value, or raise ValueError.'''

Raise ``CoercionError`` (a ``ValueError``) from built-in types; a plain
``ValueError`` from a custom type is reported the same way.

Coercion is pure: the same string always gives the same value or the
same failure. Custom types follow the same protocol: any object with
a matching ``coerce`` works with ``Checker``.
"""

import re
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from formcheck.errors import CoercionError
from formcheck.values import IntValue, StrValue, Value

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


@runtime_checkable
class FieldType(Protocol):
    """Turns one raw string into a typed ``Value``."""

    def coerce(self, raw: str) -> Value: ...


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class String:
    """Any string, kept verbatim (no trimming)."""

    def coerce(self, raw: str) -> Value:
        return StrValue(raw)


# Optional sign, ASCII digits only; ``int()`` alone would also accept
# "+5", " 5 ", "5_000" and non-ASCII digits.
_I64_RE = re.compile(r"-?[0-9]+", re.ASCII)


@dataclass(frozen=True, slots=True)
class Integer64:
    """A base-10 signed 64-bit integer."""

    def coerce(self, raw: str) -> Value:
        if not _I64_RE.fullmatch(raw):
            raise CoercionError(raw, "integer")
        # int() refuses very long digit strings; no i64 needs more than 19
        if len(raw.lstrip("-").lstrip("0")) > 19:
            raise CoercionError(raw, "integer")
        number = int(raw)
        if not I64_MIN <= number <= I64_MAX:
            raise CoercionError(raw, "integer")
        return IntValue(number)


# ---------------------------------------------------------------------------
# Formatted strings
# ---------------------------------------------------------------------------

# Structure only, not deliverability
_EMAIL_RE = re.compile(
    r"[a-zA-Z0-9._%+\-]+@(?:[a-zA-Z0-9](?:[a-zA-Z0-9-]*[a-zA-Z0-9])?\.)+[a-zA-Z]{2,}"
)


@dataclass(frozen=True, slots=True)
class Email:
    """An e-mail address (basic format check)."""

    def coerce(self, raw: str) -> Value:
        if not _EMAIL_RE.fullmatch(raw):
            raise CoercionError(raw, "email address")
        return StrValue(raw)


_CHINA_MOBILE_RE = re.compile(r"1[0-9]{10}")


@dataclass(frozen=True, slots=True)
class ChinaMobile:
    """An 11-digit mainland China mobile number."""

    def coerce(self, raw: str) -> Value:
        if not _CHINA_MOBILE_RE.fullmatch(raw):
            raise CoercionError(raw, "mobile number")
        return StrValue(raw)
