import pytest

from runedrakraft.model.catalog import FROSTSHRIEK, QUANTUM
from runedrakraft.model.validation import (
    InfusionInputError, MissingField, NotANumber, OutOfRange, parse_decimal, validate
)


def test_valid_input_returns_parsed_values(cryo_params):
    result = validate(cryo_params, FROSTSHRIEK)
    assert result.is_valid
    assert result.factor_a == 10.0
    assert result.factor_b == 5.0
    result.raise_for_error()


@pytest.mark.parametrize("factor_a, factor_b, field", [
    ("", "", "factor_a"),
    ("10", "", "factor_b"),
    ("abc", "", "factor_b"),
])
def test_missing_field_checked_before_parsing(cryo_params, factor_a, factor_b, field):
    params = cryo_params.copy(factor_a=factor_a, factor_b=factor_b)
    result = validate(params, FROSTSHRIEK)
    assert isinstance(result.error, MissingField)
    assert result.error.field == field


def test_missing_messages_are_variant_specific(quantum_params):
    result = validate(quantum_params.copy(factor_a=""), QUANTUM)
    assert str(result.error) == "Please enter Plinthride Factor"

    result = validate(quantum_params.copy(factor_b=""), QUANTUM)
    assert str(result.error) == "Please enter Stabilizer Constant"


@pytest.mark.parametrize("text", ["abc", "1,5", " 5", "5 ", "1.2.3", "--1", "nan", "inf", "\u0665", "1\u0660"])
def test_not_a_number(quantum_params, text):
    result = validate(quantum_params.copy(factor_a=text), QUANTUM)
    assert isinstance(result.error, NotANumber)
    assert result.error.text == text
    assert str(result.error) == "Plinthride Factor must be a number"


def test_cryo_not_a_number_message(cryo_params):
    result = validate(cryo_params.copy(factor_a="ten"), FROSTSHRIEK)
    assert isinstance(result.error, NotANumber)
    assert str(result.error) == "Frostbite Factor must be 1-100"


@pytest.mark.parametrize("factor_a, factor_b, field, message", [
    ("0.5", "2", "factor_a", "Plinthride Factor must be 1-100"),
    ("101", "2", "factor_a", "Plinthride Factor must be 1-100"),
    ("8", "0.05", "factor_b", "Stabilizer Constant must be 0.1-10"),
    ("8", "11", "factor_b", "Stabilizer Constant must be 0.1-10"),
])
def test_out_of_range(quantum_params, factor_a, factor_b, field, message):
    result = validate(quantum_params.copy(factor_a=factor_a, factor_b=factor_b), QUANTUM)
    assert isinstance(result.error, OutOfRange)
    assert result.error.field == field
    assert str(result.error) == message


def test_bounds_are_inclusive(quantum_params):
    assert validate(quantum_params.copy(factor_a="1", factor_b="0.1"), QUANTUM).is_valid
    assert validate(quantum_params.copy(factor_a="100", factor_b="10"), QUANTUM).is_valid


def test_cryo_stabilizer_is_not_range_checked(cryo_params):
    result = validate(cryo_params.copy(factor_b="1000"), FROSTSHRIEK)
    assert result.is_valid
    assert result.factor_b == 1000.0


def test_first_failure_wins(quantum_params):
    result = validate(quantum_params.copy(factor_a="abc", factor_b="99"), QUANTUM)
    assert result.error.field == "factor_a"


def test_raise_for_error(cryo_params):
    result = validate(cryo_params.copy(factor_a=""), FROSTSHRIEK)
    with pytest.raises(InfusionInputError):
        result.raise_for_error()
    # Input errors are ValueErrors
    with pytest.raises(ValueError):
        result.raise_for_error()


@pytest.mark.parametrize("text, expected", [
    ("10", 10.0),
    ("0.1", 0.1),
    (".5", 0.5),
    ("5.", 5.0),
    ("-3", -3.0),
    ("1e2", 100.0),
    ("", None),
    ("abc", None),
    ("\u0665", None),
])
def test_parse_decimal(text, expected):
    assert parse_decimal(text) == expected
