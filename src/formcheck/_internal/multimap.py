"""MultiValueMapping protocol and raw-input lookup.

Callers hand the validator either a plain ``Mapping[str, Sequence[str]]``
or a framework object (``FormData``, ``QueryParams``) that exposes
``get_list``. Both are read through ``lookup_values``.
"""

from collections.abc import Iterator, Mapping, Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class MultiValueMapping(Protocol):
    """A read-only string mapping where keys can have multiple values.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key.
    """

    def __getitem__(self, key: str) -> str: ...
    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[str]: ...
    def __len__(self) -> int: ...
    def get(self, key: str, default: str | None = None) -> str | None: ...
    def get_list(self, key: str) -> list[str]: ...


type RawInput = Mapping[str, Sequence[str]] | MultiValueMapping


def lookup_values(raw_input: RawInput, field: str) -> Sequence[str] | None:
    """Return every raw value for *field*, or ``None`` if it is absent."""
    if field not in raw_input:
        return None
    if isinstance(raw_input, MultiValueMapping):
        return raw_input.get_list(field)
    values = raw_input[field]
    if isinstance(values, str):
        # Plain ``dict[str, str]`` input: one value per field
        return (values,)
    return values
