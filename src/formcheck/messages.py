"""Violation messages and the renderers that turn them into text.

Checkers produce structured ``Message`` objects. The validator hands each
one to a ``MessageRenderer`` so applications can pick the wording, and
the language, without touching rules::

    class ShoutingRenderer(EnglishRenderer):
        templates = {**EnglishRenderer.templates,
                     MessageKind.BLANK: "{label} IS REQUIRED"}

    Validator(ValidatorConfig(renderer=ShoutingRenderer()))
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Protocol


class MessageKind(Enum):
    """What kind of violation a message describes."""

    MAX = "max"  # numeric value above the bound
    MIN = "min"
    MAX_LEN = "max_len"  # string longer than the bound
    MIN_LEN = "min_len"
    BLANK = "blank"  # required but missing
    FORMAT = "format"
    CHOICE = "choice"
    CUSTOM = "custom"  # carries its own template


@dataclass(frozen=True, slots=True)
class Message:
    """A single violation, with everything a renderer might show.

    ``raw`` is ``None`` when the field was missing. ``rule_values``
    holds the rule's parameters as strings (bounds, choices).
    ``template`` is only set for ``CUSTOM`` messages.
    """

    kind: MessageKind
    field: str
    label: str
    raw: str | None = None
    rule_values: tuple[str, ...] = ()
    template: str | None = None


class MessageRenderer(Protocol):
    """Anything that can turn a ``Message`` into display text."""

    def render(self, message: Message) -> str: ...


class TemplateRenderer:
    """Renders messages from a table of ``str.format`` templates.

    Templates may use ``{label}``, ``{field}``, ``{value}`` and
    ``{rule}`` (the first rule value). ``{rules}`` joins all of them.
    Subclasses only need to supply ``templates``.
    """

    templates: ClassVar[Mapping[MessageKind, str]] = {}

    def render(self, message: Message) -> str:
        if message.kind is MessageKind.CUSTOM and message.template is not None:
            template = message.template
        else:
            template = self.templates[message.kind]
        return template.format(
            label=message.label,
            field=message.field,
            value=message.raw if message.raw is not None else "",
            rule=message.rule_values[0] if message.rule_values else "",
            rules=", ".join(message.rule_values),
        )


class EnglishRenderer(TemplateRenderer):
    """Default renderer."""

    templates: ClassVar[Mapping[MessageKind, str]] = {
        MessageKind.MAX: "{label} can't be more than {rule}",
        MessageKind.MIN: "{label} can't be less than {rule}",
        MessageKind.MAX_LEN: "{label} can't be longer than {rule} characters",
        MessageKind.MIN_LEN: "{label} can't be shorter than {rule} characters",
        MessageKind.BLANK: "{label} is required",
        MessageKind.FORMAT: "{label} is in the wrong format",
        MessageKind.CHOICE: "{label} must be one of: {rules}",
        MessageKind.CUSTOM: "{label} is invalid",
    }


class ChineseRenderer(TemplateRenderer):
    """Simplified Chinese renderer."""

    templates: ClassVar[Mapping[MessageKind, str]] = {
        MessageKind.MAX: "{label}不能大于{rule}",
        MessageKind.MIN: "{label}不能小于{rule}",
        MessageKind.MAX_LEN: "{label}长度不能大于{rule}",
        MessageKind.MIN_LEN: "{label}长度不能小于{rule}",
        MessageKind.BLANK: "{label}不能为空",
        MessageKind.FORMAT: "{label}格式不正确",
        MessageKind.CHOICE: "{label}必须是以下之一：{rules}",
        MessageKind.CUSTOM: "{label}不正确",
    }
