import pytest

from taskbox.rules import (
    INT_CANT_BE_GREATER,
    INT_CANT_BE_LESS,
    INT_NOT_IN_LIST,
    STR_LEN_NOT_EQUAL,
    STR_NOT_IN_LIST,
    STR_REGEXP_NOT_MATCH,
    EmptyRuleError,
    FieldRules,
    InvalidConditionError,
    Kind,
    KindNoRulesError,
    RegexpCompileError,
    RuleInfo,
    UnknownRuleError,
    ValidationError,
    ValidationErrors,
    tag_rules,
    validation_function,
)


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (ValidationError("field", "test error"), "field: test error"),
        (ValidationError("", "test error"), "test error"),
    ],
)
def test_validation_error_message(error, expected):
    assert str(error) == expected


@pytest.mark.parametrize(
    ("errors", "expected"),
    [
        (
            ValidationErrors(
                [ValidationError("f1", "error1"), ValidationError("f2", "error2")]
            ),
            "field f1: error1\nfield f2: error2\n",
        ),
        (ValidationErrors([]), ""),
    ],
)
def test_validation_errors_message(errors, expected):
    assert str(errors) == expected


def test_validation_errors_sequence():
    errors = ValidationErrors([ValidationError("a", "x"), ValidationError("b", "y")])
    assert len(errors) == 2
    assert [error.field for error in errors] == ["a", "b"]
    assert errors[1] == ValidationError("b", "y")


def test_validation_function_kind_without_rules():
    with pytest.raises(KindNoRulesError) as info:
        validation_function(Kind.INVALID, "rule")
    assert str(info.value) == "'invalid' for this field kind no validation rules"


def test_validation_function_unknown_rule():
    with pytest.raises(UnknownRuleError) as info:
        validation_function(Kind.STRING, "rule")
    assert str(info.value) == "'rule' unknow rule"


def test_validation_function_success():
    check = validation_function(Kind.STRING, "len")
    assert check("милый", "5") is None
    with pytest.raises(ValidationError):
        check("Мой милый дом!", "5")


@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        ("", FieldRules("field", ())),
        ("rule:condition", FieldRules("field", (RuleInfo("rule", "condition"),))),
        (
            "rule1:condition1|rule2:condition2",
            FieldRules(
                "field",
                (RuleInfo("rule1", "condition1"), RuleInfo("rule2", "condition2")),
            ),
        ),
        ("nested", FieldRules("field", (RuleInfo("nested", ""),))),
        ("  min:1|nested ", FieldRules("field", (RuleInfo("min", "1"), RuleInfo("nested")))),
    ],
)
def test_tag_rules(tag, expected):
    assert tag_rules("field", tag) == expected


def test_tag_rules_empty_rule():
    with pytest.raises(EmptyRuleError) as info:
        tag_rules("field", "|")
    assert str(info.value) == "the rule cannot be empty"


def test_tag_rules_incorrect_rule():
    with pytest.raises(UnknownRuleError) as info:
        tag_rules("field", "rule:cond|rule")
    assert str(info.value) == "unknow rule"


@pytest.mark.parametrize(
    ("kind", "rule", "cond", "value"),
    [
        (Kind.STRING, "len", "5", "милый"),
        (Kind.STRING, "regexp", "дом", "Дом, милый дом!"),
        (Kind.STRING, "in", "sweet,милый", "милый"),
        (Kind.INT, "min", "10", 123),
        (Kind.INT, "max", "10", 9),
        (Kind.INT, "in", "9,10,11", 9),
    ],
)
def test_validator_success(kind, rule, cond, value):
    assert validation_function(kind, rule)(value, cond) is None


@pytest.mark.parametrize(
    ("kind", "rule", "cond", "value", "error"),
    [
        (Kind.STRING, "len", "s", "Мой милый дом!", InvalidConditionError),
        (Kind.STRING, "regexp", "", "Дом, милый дом!", InvalidConditionError),
        (Kind.STRING, "regexp", "/[", "Дом, милый дом!", RegexpCompileError),
        (Kind.STRING, "in", "", "милый", InvalidConditionError),
        (Kind.INT, "min", "10,11", 123, InvalidConditionError),
        (Kind.INT, "max", " ", 123, InvalidConditionError),
        (Kind.INT, "in", "12,aa,45 ", 123, InvalidConditionError),
        (Kind.INT, "in", "", 123, InvalidConditionError),
    ],
)
def test_validator_bad_condition(kind, rule, cond, value, error):
    with pytest.raises(error):
        validation_function(kind, rule)(value, cond)


@pytest.mark.parametrize(
    ("kind", "rule", "cond", "value", "reason", "message"),
    [
        (Kind.STRING, "len", "5", "Мой милый дом!", STR_LEN_NOT_EQUAL,
         "length of the string not equal to 5"),
        (Kind.STRING, "regexp", "dam", "Дом, милый дом!", STR_REGEXP_NOT_MATCH,
         "string does not contain any matches to the regular expression 'dam'"),
        (Kind.STRING, "in", "sweet,honey", "милый", STR_NOT_IN_LIST,
         "string is not in the list 'sweet,honey'"),
        (Kind.INT, "min", "10", 9, INT_CANT_BE_LESS, "cannot be less 10"),
        (Kind.INT, "max", "10", 11, INT_CANT_BE_GREATER, "cannot be greater 10"),
        (Kind.INT, "in", "10,12", 11, INT_NOT_IN_LIST, "int is not in the list 10,12"),
    ],
)
def test_validator_failure(kind, rule, cond, value, reason, message):
    with pytest.raises(ValidationError) as info:
        validation_function(kind, rule)(value, cond)
    assert info.value.reason == reason
    assert info.value.message == message
    assert info.value.field == ""


def test_bad_condition_messages():
    with pytest.raises(InvalidConditionError) as info:
        validation_function(Kind.STRING, "len")("abc", "cond")
    assert str(info.value) == "'cond' invalid condition for the rule 'len'"
    with pytest.raises(InvalidConditionError) as info:
        validation_function(Kind.INT, "min")(1, "s")
    assert str(info.value) == (
        "'s' invalid condition for the rule 'min': "
        'strconv.ParseInt: parsing "s": invalid syntax'
    )


def test_int_condition_accepts_base_prefixes():
    check = validation_function(Kind.INT, "min")
    assert check(16, "0x10") is None
    with pytest.raises(ValidationError):
        check(7, "010")