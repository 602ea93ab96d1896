import pytest

from tinkerbox.brid.errors import (
    DocumentError,
    InvalidChar,
    InvalidCharError,
    InvalidCheckDigitCharError,
    WrongCheckDigits,
    WrongNumberOfDigits,
)


def test_wrong_number_of_digits_message():
    assert str(WrongNumberOfDigits()) == "Número errado de dígitos"


def test_wrong_check_digits_message():
    assert str(WrongCheckDigits()) == "Dígitos de verificação errados"


def test_invalid_char_message():
    error = InvalidCharError(InvalidChar(",", 3))
    assert str(error) == "Caractere inválido como dígito no índice 3: ','"


def test_invalid_check_digit_char_message():
    error = InvalidCheckDigitCharError(InvalidChar("f", 12))
    assert str(error) == "Caractere inválido como dígito de verificação no índice 12: 'f'"


def test_invalid_char_is_kept():
    error = InvalidCharError(InvalidChar("|", 10))
    assert error.invalid_char == InvalidChar(char="|", index=10)


def test_errors_compare_by_kind_and_content():
    assert InvalidCharError(InvalidChar("x", 1)) == InvalidCharError(InvalidChar("x", 1))
    assert InvalidCharError(InvalidChar("x", 1)) != InvalidCharError(InvalidChar("x", 2))
    assert InvalidCharError(InvalidChar("x", 1)) != InvalidCheckDigitCharError(
        InvalidChar("x", 1)
    )
    assert WrongNumberOfDigits() == WrongNumberOfDigits()
    assert WrongNumberOfDigits() != WrongCheckDigits()


def test_equal_errors_hash_alike():
    errors = {WrongNumberOfDigits(), WrongNumberOfDigits(), WrongCheckDigits()}
    assert len(errors) == 2


@pytest.mark.parametrize(
    "error",
    [
        WrongNumberOfDigits(),
        WrongCheckDigits(),
        InvalidCharError(InvalidChar("a", 0)),
        InvalidCheckDigitCharError(InvalidChar("a", 0)),
    ],
)
def test_all_errors_are_caught_as_document_error(error):
    with pytest.raises(DocumentError) as info:
        raise error
    assert info.value == error


def test_document_error_is_value_error():
    with pytest.raises(ValueError) as info:
        raise WrongCheckDigits()
    assert info.value == WrongCheckDigits()
    assert str(info.value) == "Dígitos de verificação errados"


def test_invalid_char_is_immutable():
    invalid = InvalidChar("a", 0)
    with pytest.raises(AttributeError):
        invalid.index = 5
    assert invalid.index == 0