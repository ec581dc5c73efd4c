"""Validation of dataclass instances by rules in their fields' metadata.

A field is checked by the tag in ``field(metadata={"validate": "..."})``.
Fields whose names start with an underscore are never checked.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from taskbox.rules import (
    FieldRules,
    Kind,
    RequireStructError,
    ValidationError,
    ValidationErrors,
    tag_rules,
    validation_function,
)


def validate(value: Any) -> None:
    """Check ``value`` against its fields' rules.

    Raises :class:`ValidationErrors` listing every failed check, or a
    :class:`~taskbox.rules.RuleError` when the rules themselves are unusable.
    """
    if value is None:
        return
    if _kind_of(value) is not Kind.STRUCT:
        raise RequireStructError()
    _validate_struct(value)


def _kind_of(value: Any) -> Kind:
    if value is None:
        return Kind.INVALID
    if isinstance(value, bool):
        return Kind.BOOL
    if isinstance(value, int):
        return Kind.INT
    if isinstance(value, float):
        return Kind.FLOAT
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, (bytes, bytearray)):
        return Kind.BYTES
    if isinstance(value, (list, tuple)):
        return Kind.SLICE
    if isinstance(value, dict):
        return Kind.MAP
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return Kind.STRUCT
    return Kind.INVALID


def _validate_struct(value: Any) -> None:
    errors: list[ValidationError] = []
    for item in dataclasses.fields(value):
        if item.name.startswith("_"):
            continue
        rules = tag_rules(item.name, item.metadata.get("validate", ""))
        if not rules.rules:
            continue
        errors.extend(_validate_field(getattr(value, item.name), rules))
    if errors:
        raise ValidationErrors(errors)


def _validate_field(value: Any, rules: FieldRules) -> list[ValidationError]:
    kind = _kind_of(value)
    if kind is Kind.SLICE:
        return [error for element in value for error in _validate_value(element, rules)]
    if kind is Kind.STRUCT:
        if any(rule.name == "nested" for rule in rules.rules):
            return _validate_nested(value)
        return []
    return _validate_value(value, rules)


def _validate_nested(value: Any) -> list[ValidationError]:
    try:
        _validate_struct(value)
    except ValidationErrors as errors:
        return list(errors)
    return []


def _validate_value(value: Any, rules: FieldRules) -> list[ValidationError]:
    kind = _kind_of(value)
    errors: list[ValidationError] = []
    for rule in rules.rules:
        check = validation_function(kind, rule.name)
        try:
            check(value, rule.cond)
        except ValidationError as error:
            errors.append(ValidationError(rules.field_name, error.message, error.reason))
    return errors