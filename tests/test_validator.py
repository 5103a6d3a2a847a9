"""Tests for formcheck.validator — orchestration, queries and re-runs."""

import logging

import pytest

from formcheck.checker import Checker
from formcheck.config import ValidatorConfig
from formcheck.errors import ErrorKind, UnvalidatedFieldError
from formcheck.kinds import Email, Integer64, String
from formcheck.messages import ChineseRenderer
from formcheck.result import ValidationResult
from formcheck.rules import Max, Min, OneOf, Required
from formcheck.validator import Validator, validate
from formcheck.values import IntValue, StrValue


def _validator() -> Validator:
    validator = Validator()
    validator.register(
        Checker("name", "Name", String()).meet(Max(5)).meet(Min(2))
    ).register(
        Checker("age", "Age", Integer64()).meet(Max(100)).meet(Min(18))
    )
    return validator


class _Params:
    """Minimal multi-value mapping, shaped like a framework's FormData."""

    def __init__(self, data: dict[str, list[str]]) -> None:
        self._data = data

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self):
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def get(self, key: str, default: str | None = None) -> str | None:
        values = self._data.get(key)
        return values[0] if values else default

    def get_list(self, key: str) -> list[str]:
        return list(self._data.get(key, []))


# ---------------------------------------------------------------------------
# Integer field scenario
# ---------------------------------------------------------------------------


class TestAgeScenario:
    def _age(self) -> Validator:
        return Validator().register(
            Checker("age", "Age", Integer64()).meet(Max(100)).meet(Min(18))
        )

    def test_valid(self) -> None:
        validator = self._age()
        validator.validate({"age": ["20"]})
        assert validator.is_valid()
        assert validator.get_required("age").as_int() == 20

    def test_below_minimum(self) -> None:
        validator = self._age()
        validator.validate({"age": ["17"]})
        assert not validator.is_valid()
        errors = validator.errors_for("age")
        assert len(errors) == 1
        assert "Age" in errors[0]
        assert "age" not in errors[0]

    def test_not_a_number(self) -> None:
        validator = self._age()
        validator.validate({"age": ["abc"]})
        assert not validator.is_valid()
        err = validator.field_error("age")
        assert err is not None
        assert err.kind is ErrorKind.COERCION
        assert len(err.messages) == 1
        assert validator.get("age") is None

    def test_huge_number_is_field_error(self) -> None:
        validator = self._age()
        validator.register(Checker("name", "Name", String()))
        validator.validate({"age": ["9" * 5000], "name": ["bob"]})
        assert not validator.is_valid()
        assert validator.field_error("age").kind is ErrorKind.COERCION
        assert validator.get("name") == StrValue("bob")

    @pytest.mark.parametrize(("raw", "valid"), [("100", True), ("101", False), ("18", True), ("17", False)])
    def test_bounds_inclusive(self, raw: str, valid: bool) -> None:
        validator = self._age()
        validator.validate({"age": [raw]})
        assert validator.is_valid() is valid


# ---------------------------------------------------------------------------
# String field scenario
# ---------------------------------------------------------------------------


class TestNameScenario:
    def test_valid(self) -> None:
        validator = _validator()
        validator.validate({"name": ["bob"], "age": ["20"]})
        assert validator.is_valid()
        assert validator.get_required("name") == StrValue("bob")

    def test_too_short(self) -> None:
        validator = _validator()
        validator.validate({"name": ["a"], "age": ["20"]})
        assert not validator.is_valid()
        assert validator.errors_for("name") == ["Name can't be shorter than 2 characters"]
        assert validator.errors_for("age") == []

    def test_too_long(self) -> None:
        validator = _validator()
        validator.validate({"name": ["bobbybob"]})
        assert validator.errors_for("name") == ["Name can't be longer than 5 characters"]


# ---------------------------------------------------------------------------
# Orchestration
# ---------------------------------------------------------------------------


class TestValidate:
    def test_one_failure_does_not_stop_others(self) -> None:
        validator = _validator()
        validator.validate({"name": ["a"], "age": ["abc"]})
        assert set(validator.errors) == {"name", "age"}

    def test_returns_result(self) -> None:
        result = _validator().validate({"name": ["bob"], "age": ["20"]})
        assert isinstance(result, ValidationResult)
        assert result
        assert result.data == {"name": StrValue("bob"), "age": IntValue(20)}

    def test_result_falsy_when_invalid(self) -> None:
        result = _validator().validate({"name": ["bob"], "age": ["17"]})
        assert not result
        assert result.errors == {"age": ["Age can't be less than 18"]}

    def test_missing_optional_field(self) -> None:
        validator = _validator()
        validator.validate({"name": ["bob"]})
        assert validator.is_valid()
        assert validator.get("age") is None
        assert validator.errors_for("age") == []

    def test_missing_required_field(self) -> None:
        validator = Validator().register(Checker("email", "Email", Email()).meet(Required()))
        validator.validate({})
        assert not validator.is_valid()
        assert validator.errors_for("email") == ["Email is required"]

    def test_plain_string_values(self) -> None:
        validator = _validator()
        validator.validate({"name": "bob", "age": "20"})  # type: ignore[dict-item]
        assert validator.is_valid()
        assert validator.get_required("age") == IntValue(20)

    def test_multi_value_mapping(self) -> None:
        validator = Validator().register(
            Checker("color", "Color", String(), multiple=True).meet(OneOf("red", "blue"))
        )
        validator.validate(_Params({"color": ["red", "blue"]}))
        assert validator.is_valid()
        assert validator.get_list("color") == [StrValue("red"), StrValue("blue")]
        assert validator.get("color") == StrValue("red")

    def test_unregistered_fields_ignored(self) -> None:
        validator = _validator()
        validator.validate({"name": ["bob"], "extra": ["x"]})
        assert validator.get("extra") is None
        assert validator.is_valid()


class TestRerun:
    def test_new_input_replaces_state(self) -> None:
        validator = _validator()
        validator.validate({"name": ["a"], "age": ["20"]})
        assert not validator.is_valid()

        validator.validate({"name": ["bob"]})
        assert validator.is_valid()
        assert validator.errors_for("name") == []
        assert validator.get("age") is None

    def test_idempotent(self) -> None:
        validator = _validator()
        first = validator.validate({"name": ["a"], "age": ["20"]})
        second = validator.validate({"name": ["a"], "age": ["20"]})
        assert first == second

    def test_reset(self) -> None:
        validator = _validator()
        validator.validate({"name": ["a"], "age": ["20"]})
        validator.reset()
        assert validator.is_valid()
        assert validator.get("age") is None
        assert len(validator.checkers) == 2


class TestRegistration:
    def test_chaining_returns_validator(self) -> None:
        validator = Validator()
        assert validator.register(Checker("a", "A", String())) is validator

    def test_order_preserved(self) -> None:
        validator = _validator()
        assert [c.field for c in validator.checkers] == ["name", "age"]

    def test_duplicate_field_last_wins(self) -> None:
        validator = _validator()
        validator.register(Checker("name", "Full name", String()).meet(Min(10)))
        assert [c.field for c in validator.checkers] == ["name", "age"]
        validator.validate({"name": ["bob"]})
        assert validator.errors_for("name") == ["Full name can't be shorter than 10 characters"]

    def test_duplicate_field_logged(self, caplog) -> None:
        validator = _validator()
        with caplog.at_level(logging.DEBUG, logger="formcheck.validator"):
            validator.register(Checker("name", "Name", String()))
        assert any("Replacing checker" in r.getMessage() for r in caplog.records)


class TestQueries:
    def test_is_valid_before_validate(self) -> None:
        assert _validator().is_valid()

    def test_is_valid_with_no_checkers(self) -> None:
        validator = Validator()
        validator.validate({"anything": ["x"]})
        assert validator.is_valid()

    def test_get_required_missing_raises(self) -> None:
        validator = _validator()
        validator.validate({"name": ["bob"]})
        with pytest.raises(UnvalidatedFieldError) as exc_info:
            validator.get_required("age")
        assert exc_info.value.field == "age"

    def test_get_required_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            _validator().get_required("name")

    def test_get_required_invalid_raises(self) -> None:
        validator = _validator()
        validator.validate({"name": ["bob"], "age": ["17"]})
        with pytest.raises(UnvalidatedFieldError):
            validator.get_required("age")

    def test_errors_for_unregistered(self) -> None:
        validator = _validator()
        validator.validate({})
        assert validator.errors_for("nope") == []

    def test_errors_for_returns_copy(self) -> None:
        validator = _validator()
        validator.validate({"name": ["a"]})
        validator.errors_for("name").append("junk")
        assert len(validator.errors_for("name")) == 1

    def test_field_error_none_when_valid(self) -> None:
        validator = _validator()
        validator.validate({"name": ["bob"]})
        assert validator.field_error("name") is None


class TestLogging:
    def test_rejected_field_logged(self, caplog) -> None:
        validator = _validator()
        with caplog.at_level(logging.DEBUG, logger="formcheck.validator"):
            validator.validate({"age": ["abc"]})
        assert any("'age' rejected (coercion)" in r.getMessage() for r in caplog.records)

    def test_summary_logged(self, caplog) -> None:
        validator = _validator()
        with caplog.at_level(logging.DEBUG, logger="formcheck.validator"):
            validator.validate({"name": ["bob"], "age": ["20"]})
        assert any("2 valid, 0 invalid" in r.getMessage() for r in caplog.records)


class TestConfig:
    def test_custom_renderer(self) -> None:
        validator = Validator(ValidatorConfig(renderer=ChineseRenderer()))
        validator.register(Checker("name", "姓名", String()).meet(Max(5)).meet(Min(2)))
        validator.validate({"name": ["b"]})
        assert validator.errors_for("name") == ["姓名长度不能小于2"]

    def test_empty_is_missing_disabled(self) -> None:
        config = ValidatorConfig(empty_is_missing=False)
        validator = Validator(config).register(Checker("age", "Age", Integer64()))
        validator.validate({"age": [""]})
        assert not validator.is_valid()
        assert validator.config is config


class TestValidateFunction:
    def test_valid(self) -> None:
        result = validate(
            {"title": ["Hello"]},
            [Checker("title", "Title", String()).meet(Required()).meet(Max(200))],
        )
        assert result.is_valid
        assert result.data["title"].as_str() == "Hello"

    def test_invalid(self) -> None:
        result = validate({}, [Checker("title", "Title", String()).meet(Required())])
        assert not result
        assert result.errors == {"title": ["Title is required"]}

    def test_config_passed_through(self) -> None:
        result = validate(
            {},
            [Checker("title", "标题", String()).meet(Required())],
            config=ValidatorConfig(renderer=ChineseRenderer()),
        )
        assert result.errors == {"title": ["标题不能为空"]}
