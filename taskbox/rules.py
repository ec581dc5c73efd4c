"""Validation rules: parsing of rule tags and the checks each rule performs."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

STR_LEN_NOT_EQUAL = "length of the string not equal to"
STR_REGEXP_NOT_MATCH = "string does not contain any matches to the regular expression"
STR_NOT_IN_LIST = "string is not in the list"
INT_CANT_BE_LESS = "cannot be less"
INT_CANT_BE_GREATER = "cannot be greater"
INT_NOT_IN_LIST = "int is not in the list"

_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1
_DECIMAL = re.compile(r"[+-]?[0-9]+")


class RuleError(Exception):
    """Raised when rules cannot be applied at all, as opposed to a failed check."""


class RequireStructError(RuleError):
    """Raised when the value to validate is not a structure."""

    def __init__(self) -> None:
        super().__init__("'Validate' requires structure")


class EmptyRuleError(RuleError):
    """Raised when a rule tag holds an empty rule."""

    def __init__(self) -> None:
        super().__init__("the rule cannot be empty")


class UnknownRuleError(RuleError):
    """Raised for a rule that is malformed or has no check."""

    def __init__(self, rule: str | None = None) -> None:
        message = "unknow rule" if rule is None else f"'{rule}' unknow rule"
        super().__init__(message)
        self.rule = rule


class KindNoRulesError(RuleError):
    """Raised when no rule applies to values of a kind."""

    def __init__(self, kind: Kind) -> None:
        super().__init__(f"'{kind.value}' for this field kind no validation rules")
        self.kind = kind


class InvalidConditionError(RuleError):
    """Raised when a rule's condition cannot be used."""

    def __init__(self, condition: str, rule: str, detail: str | None = None) -> None:
        message = f"'{condition}' invalid condition for the rule '{rule}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.condition = condition
        self.rule = rule


class RegexpCompileError(RuleError):
    """Raised when a regular expression condition does not compile."""

    def __init__(self, condition: str, detail: str) -> None:
        super().__init__(f"'{condition}' regex compilation error: {detail}")
        self.condition = condition


class ValidationError(Exception):
    """A failed check; ``reason`` names the kind of failure."""

    def __init__(self, field: str, message: str, reason: str | None = None) -> None:
        super().__init__(field, message)
        self.field = field
        self.message = message
        self.reason = message if reason is None else reason

    def __str__(self) -> str:
        if not self.field:
            return self.message
        return f"{self.field}: {self.message}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return (self.field, self.message, self.reason) == (
            other.field,
            other.message,
            other.reason,
        )

    def __hash__(self) -> int:
        return hash((self.field, self.message, self.reason))


class ValidationErrors(Exception):
    """All the failed checks of a structure."""

    def __init__(self, errors: Iterable[ValidationError] = ()) -> None:
        self.errors = list(errors)
        super().__init__(self.errors)

    def __str__(self) -> str:
        return "".join(f"field {error.field}: {error.message}\n" for error in self.errors)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def __getitem__(self, index: int) -> ValidationError:
        return self.errors[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationErrors):
            return NotImplemented
        return self.errors == other.errors

    __hash__ = None  # type: ignore[assignment]


class Kind(str, Enum):
    """The kind of a value, which decides the rules that apply to it."""

    INVALID = "invalid"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    BYTES = "bytes"
    SLICE = "slice"
    MAP = "map"
    STRUCT = "struct"


@dataclass(frozen=True)
class RuleInfo:
    """A rule's name and its condition."""

    name: str
    cond: str = ""


@dataclass(frozen=True)
class FieldRules:
    """The rules of one field."""

    field_name: str
    rules: tuple[RuleInfo, ...] = field(default_factory=tuple)


Validator = Callable[[Any, str], None]


def _parse_int(text: str) -> int:
    """Parse an integer with an optional sign and a 0x, 0o, 0b or 0 (octal) prefix."""
    syntax_error = ValueError(f'strconv.ParseInt: parsing "{text}": invalid syntax')
    if not text or not text.isascii() or text != text.strip():
        raise syntax_error
    sign = text[0] if text[0] in "+-" else ""
    body = text[len(sign):]
    if len(body) > 1 and body[0] == "0" and body[1] not in "xXbBoO":
        body = "0o" + body[1:]
    try:
        number = int(sign + body, 0)
    except ValueError:
        raise syntax_error from None
    if not _INT_MIN <= number <= _INT_MAX:
        raise ValueError(f'strconv.ParseInt: parsing "{text}": value out of range')
    return number


def _string_len(value: str, condition: str) -> None:
    if not _DECIMAL.fullmatch(condition):
        raise InvalidConditionError(condition, "len")
    if len(value) != int(condition):
        raise ValidationError(
            "", f"{STR_LEN_NOT_EQUAL} {condition}", STR_LEN_NOT_EQUAL
        )


def _string_regexp(value: str, condition: str) -> None:
    if not condition:
        raise InvalidConditionError(condition, "regexp")
    try:
        pattern = re.compile(condition)
    except re.error as error:
        raise RegexpCompileError(condition, str(error)) from error
    if pattern.search(value) is None:
        raise ValidationError(
            "", f"{STR_REGEXP_NOT_MATCH} '{condition}'", STR_REGEXP_NOT_MATCH
        )


def _string_in(value: str, condition: str) -> None:
    if not condition:
        raise InvalidConditionError(condition, "in")
    if value not in condition:
        raise ValidationError("", f"{STR_NOT_IN_LIST} '{condition}'", STR_NOT_IN_LIST)


def _int_condition(condition: str, rule: str, text: str | None = None) -> int:
    try:
        return _parse_int(condition if text is None else text)
    except ValueError as error:
        raise InvalidConditionError(condition, rule, str(error)) from None


def _int_min(value: int, condition: str) -> None:
    if value < _int_condition(condition, "min"):
        raise ValidationError("", f"{INT_CANT_BE_LESS} {condition}", INT_CANT_BE_LESS)


def _int_max(value: int, condition: str) -> None:
    if value > _int_condition(condition, "max"):
        raise ValidationError(
            "", f"{INT_CANT_BE_GREATER} {condition}", INT_CANT_BE_GREATER
        )


def _int_in(value: int, condition: str) -> None:
    for item in condition.split(","):
        if value == _int_condition(condition, "in", item):
            return
    raise ValidationError("", f"{INT_NOT_IN_LIST} {condition}", INT_NOT_IN_LIST)


_VALIDATORS: dict[Kind, dict[str, Validator]] = {
    Kind.STRING: {"len": _string_len, "regexp": _string_regexp, "in": _string_in},
    Kind.INT: {"min": _int_min, "max": _int_max, "in": _int_in},
}


def validation_function(kind: Kind, rule: str) -> Validator:
    """Return the check of ``rule`` for values of ``kind``.

    The check returns None when the value passes, raises :class:`ValidationError`
    when it does not and :class:`RuleError` when the condition is unusable.
    """
    rules = _VALIDATORS.get(kind)
    if rules is None:
        raise KindNoRulesError(kind)
    check = rules.get(rule)
    if check is None:
        raise UnknownRuleError(rule)
    return check


def tag_rules(field_name: str, tag: str) -> FieldRules:
    """Parse a tag of the form ``rule:cond|rule:cond|nested`` into field rules."""
    return FieldRules(field_name, tuple(_parse_tag_rules(tag)))


def _parse_tag_rules(tag: str) -> list[RuleInfo]:
    tag = tag.strip(" ")
    if not tag:
        return []
    rules: list[RuleInfo] = []
    for text in tag.split("|"):
        if not text:
            raise EmptyRuleError()
        parts = text.split(":")
        if len(parts) == 2:
            rules.append(RuleInfo(parts[0], parts[1]))
        elif parts == ["nested"]:
            rules.append(RuleInfo("nested", ""))
        else:
            raise UnknownRuleError()
    return rules