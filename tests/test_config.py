"""Tests for formcheck.config — ValidatorConfig frozen dataclass."""

import pytest

from formcheck.config import ValidatorConfig
from formcheck.messages import ChineseRenderer, EnglishRenderer


class TestValidatorConfig:
    def test_defaults(self) -> None:
        cfg = ValidatorConfig()

        assert isinstance(cfg.renderer, EnglishRenderer)
        assert cfg.empty_is_missing is True

    def test_override(self) -> None:
        renderer = ChineseRenderer()
        cfg = ValidatorConfig(renderer=renderer, empty_is_missing=False)

        assert cfg.renderer is renderer
        assert cfg.empty_is_missing is False

    def test_frozen(self) -> None:
        cfg = ValidatorConfig()

        with pytest.raises(AttributeError):
            cfg.empty_is_missing = False  # type: ignore[misc]
