"""Formcheck — declarative validation for submitted forms and query strings.

Turns a mapping of field name → raw string values into typed values,
or into per-field messages keyed by a human-readable label.

Basic usage::

    from formcheck import Checker, Integer64, Max, Min, String, Validator

    params = {"name": ["bob"], "age": ["20"]}

    validator = Validator()
    validator.register(
        Checker("name", "Name", String()).meet(Max(5)).meet(Min(2))
    ).register(
        Checker("age", "Age", Integer64()).meet(Max(100)).meet(Min(18))
    )
    validator.validate(params)

    assert validator.is_valid()
    assert validator.get_required("name").as_str() == "bob"
    assert validator.get_required("age").as_int() == 20
"""

import importlib

__version__ = "0.1.0"
__all__ = [
    "Checker",
    "ChinaMobile",
    "ChineseRenderer",
    "CoercionError",
    "ConfigurationError",
    "Email",
    "EnglishRenderer",
    "ErrorKind",
    "FieldError",
    "FieldType",
    "FormCheckError",
    "Format",
    "IntValue",
    "Integer64",
    "Max",
    "Message",
    "MessageKind",
    "MessageRenderer",
    "Min",
    "OneOf",
    "Predicate",
    "Required",
    "StrValue",
    "String",
    "UnvalidatedFieldError",
    "ValidationResult",
    "Validator",
    "ValidatorConfig",
    "Value",
    "validate",
]

# Public name → defining module. Resolved on first attribute access.
_LAZY_IMPORTS: dict[str, str] = {
    "Checker": "formcheck.checker",
    "ValidatorConfig": "formcheck.config",
    "CoercionError": "formcheck.errors",
    "ConfigurationError": "formcheck.errors",
    "ErrorKind": "formcheck.errors",
    "FieldError": "formcheck.errors",
    "FormCheckError": "formcheck.errors",
    "UnvalidatedFieldError": "formcheck.errors",
    "ChinaMobile": "formcheck.kinds",
    "Email": "formcheck.kinds",
    "FieldType": "formcheck.kinds",
    "Integer64": "formcheck.kinds",
    "String": "formcheck.kinds",
    "ChineseRenderer": "formcheck.messages",
    "EnglishRenderer": "formcheck.messages",
    "Message": "formcheck.messages",
    "MessageKind": "formcheck.messages",
    "MessageRenderer": "formcheck.messages",
    "ValidationResult": "formcheck.result",
    "Format": "formcheck.rules",
    "Max": "formcheck.rules",
    "Min": "formcheck.rules",
    "OneOf": "formcheck.rules",
    "Predicate": "formcheck.rules",
    "Required": "formcheck.rules",
    "Validator": "formcheck.validator",
    "validate": "formcheck.validator",
    "IntValue": "formcheck.values",
    "StrValue": "formcheck.values",
    "Value": "formcheck.values",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import formcheck`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_name), name)
