"""Validator configuration.

ValidatorConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass, field

from formcheck.messages import EnglishRenderer, MessageRenderer


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Validator configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ValidatorConfig(renderer=ChineseRenderer())
    """

    # Turns structured messages into text for errors_for()
    renderer: MessageRenderer = field(default_factory=EnglishRenderer)

    # Treat a submitted "" like an absent field (empty text inputs)
    empty_is_missing: bool = True
