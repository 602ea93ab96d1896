import pytest

from tinkerbox.brid.check_digits import CheckDigits
from tinkerbox.brid.errors import (
    InvalidChar,
    InvalidCharError,
    InvalidCheckDigitCharError,
    WrongCheckDigits,
    WrongNumberOfDigits,
)
from tinkerbox.brid.ids import CNPJ, CPF, UncheckedCNPJ, UncheckedCPF

CPF_DIGITS = "11144477735"
UNCHECKED_CPF_DIGITS = "111444777"
CNPJ_DIGITS = "12ABC34501DE35"
UNCHECKED_CNPJ_DIGITS = "12ABC34501DE"


# Unchecked CPF


@pytest.mark.parametrize("text", ["111.444.777", "111444777"])
def test_unchecked_cpf_from_chars(text):
    assert UncheckedCPF.from_chars(text) == UncheckedCPF(UNCHECKED_CPF_DIGITS)


@pytest.mark.parametrize("text", ["111.444.77", "111.444.777-3"])
def test_unchecked_cpf_wrong_number_of_digits(text):
    with pytest.raises(WrongNumberOfDigits):
        UncheckedCPF.from_chars(text)


def test_unchecked_cpf_invalid_char():
    with pytest.raises(InvalidCharError) as info:
        UncheckedCPF.from_chars("111,444.777")
    assert info.value == InvalidCharError(InvalidChar(",", 3))


def test_unchecked_cpf_with_check_digits():
    assert UncheckedCPF(UNCHECKED_CPF_DIGITS).with_check_digits() == CPF(CPF_DIGITS)
    assert UncheckedCPF(UNCHECKED_CPF_DIGITS).checked() == CPF(CPF_DIGITS)


def test_unchecked_cpf_chars():
    value = UncheckedCPF(UNCHECKED_CPF_DIGITS)
    assert [value.char(i) for i in range(9)] == list("111444777")
    assert value.chars() == ("1", "1", "1", "4", "4", "4", "7", "7", "7")


@pytest.mark.parametrize("text", ["111.444.777", "111444777"])
def test_unchecked_cpf_parse(text):
    assert UncheckedCPF.parse(text) == UncheckedCPF(UNCHECKED_CPF_DIGITS)


def test_unchecked_cpf_from_char_list():
    chars = ["1", "1", "1", "4", "4", "4", "7", "7", "7"]
    assert UncheckedCPF.from_chars(chars) == UncheckedCPF(UNCHECKED_CPF_DIGITS)


def test_unchecked_cpf_display():
    assert str(UncheckedCPF(UNCHECKED_CPF_DIGITS)) == "111.444.777"


def test_unchecked_cpf_calculate_check_digits():
    assert UncheckedCPF(UNCHECKED_CPF_DIGITS).calculate_check_digits() == CheckDigits("35")


# Unchecked CNPJ


@pytest.mark.parametrize("text", ["12.AbC.345/01De", "12AbC34501De"])
def test_unchecked_cnpj_from_chars(text):
    assert UncheckedCNPJ.from_chars(text) == UncheckedCNPJ(UNCHECKED_CNPJ_DIGITS)


@pytest.mark.parametrize("text", ["12.AbC.345/01D", "12AbC34501De-3"])
def test_unchecked_cnpj_wrong_number_of_digits(text):
    with pytest.raises(WrongNumberOfDigits):
        UncheckedCNPJ.from_chars(text)


def test_unchecked_cnpj_invalid_char():
    with pytest.raises(InvalidCharError) as info:
        UncheckedCNPJ.from_chars("12.AbC.345|01De")
    assert info.value == InvalidCharError(InvalidChar("|", 10))


def test_unchecked_cnpj_with_check_digits():
    assert UncheckedCNPJ(UNCHECKED_CNPJ_DIGITS).with_check_digits() == CNPJ(CNPJ_DIGITS)


def test_unchecked_cnpj_chars():
    value = UncheckedCNPJ(UNCHECKED_CNPJ_DIGITS)
    expected = ["1", "2", "A", "B", "C", "3", "4", "5", "0", "1", "D", "E"]
    assert [value.char(i) for i in range(12)] == expected
    assert value.chars() == tuple(expected)


@pytest.mark.parametrize("text", ["12.AbC.345/01De", "12AbC34501De"])
def test_unchecked_cnpj_parse(text):
    assert UncheckedCNPJ.parse(text) == UncheckedCNPJ(UNCHECKED_CNPJ_DIGITS)


def test_unchecked_cnpj_from_char_list():
    chars = ["1", "2", "A", "b", "C", "3", "4", "5", "0", "1", "D", "e"]
    assert UncheckedCNPJ.from_chars(chars) == UncheckedCNPJ(UNCHECKED_CNPJ_DIGITS)


def test_unchecked_cnpj_display():
    assert str(UncheckedCNPJ(UNCHECKED_CNPJ_DIGITS)) == "12.ABC.345/01DE"


# CPF


@pytest.mark.parametrize("text", ["111.444.777-35", "11144477735"])
def test_cpf_from_chars(text):
    assert CPF.from_chars(text) == CPF(CPF_DIGITS)


@pytest.mark.parametrize("text", ["111.444.777-3", "111.444.777-350"])
def test_cpf_wrong_number_of_digits(text):
    with pytest.raises(WrongNumberOfDigits):
        CPF.from_chars(text)


def test_cpf_invalid_char():
    with pytest.raises(InvalidCharError) as info:
        CPF.from_chars("111,444.777-35")
    assert info.value == InvalidCharError(InvalidChar(",", 3))


def test_cpf_invalid_check_digit_char():
    with pytest.raises(InvalidCheckDigitCharError) as info:
        CPF.from_chars("111.444.777-f5")
    assert info.value == InvalidCheckDigitCharError(InvalidChar("f", 12))


@pytest.mark.parametrize("text", ["111.444.777-05", "111.444.777-30"])
def test_cpf_wrong_check_digits(text):
    with pytest.raises(WrongCheckDigits):
        CPF.from_chars(text)


def test_cpf_without_check_digits():
    cpf = CPF(CPF_DIGITS)
    assert cpf.without_check_digits() == UncheckedCPF(UNCHECKED_CPF_DIGITS)
    assert cpf.unchecked() == UncheckedCPF(UNCHECKED_CPF_DIGITS)


def test_cpf_check_digits():
    assert CPF(CPF_DIGITS).check_digits() == CheckDigits("35")


def test_cpf_chars():
    cpf = CPF(CPF_DIGITS)
    expected = ["1", "1", "1", "4", "4", "4", "7", "7", "7", "3", "5"]
    assert [cpf.char(i) for i in range(11)] == expected
    assert cpf.chars() == tuple(expected)


@pytest.mark.parametrize("text", ["111.444.777-35", "11144477735"])
def test_cpf_parse(text):
    assert CPF.parse(text) == CPF(CPF_DIGITS)


def test_cpf_from_char_list():
    chars = ["1", "1", "1", "4", "4", "4", "7", "7", "7", "3", "5"]
    assert CPF.from_chars(chars) == CPF(CPF_DIGITS)


def test_cpf_display():
    assert str(CPF(CPF_DIGITS)) == "111.444.777-35"


def test_cpf_display_round_trip():
    cpf = CPF(CPF_DIGITS)
    assert CPF.parse(str(cpf)) == cpf


# CNPJ


@pytest.mark.parametrize("text", ["12.AbC.345/01De-35", "12ABC34501DE35"])
def test_cnpj_from_chars(text):
    assert CNPJ.from_chars(text) == CNPJ(CNPJ_DIGITS)


@pytest.mark.parametrize("text", ["12.AbC.345/01De-3", "12.AbC.345/01De-350"])
def test_cnpj_wrong_number_of_digits(text):
    with pytest.raises(WrongNumberOfDigits):
        CNPJ.from_chars(text)


def test_cnpj_invalid_char():
    with pytest.raises(InvalidCharError) as info:
        CNPJ.from_chars("12.AbC.345|01De-35")
    assert info.value == InvalidCharError(InvalidChar("|", 10))


def test_cnpj_invalid_check_digit_char():
    with pytest.raises(InvalidCheckDigitCharError) as info:
        CNPJ.from_chars("12.AbC.345/01De-f5")
    assert info.value == InvalidCheckDigitCharError(InvalidChar("f", 16))


@pytest.mark.parametrize("text", ["12.AbC.345/01De-05", "12.AbC.345/01De-30"])
def test_cnpj_wrong_check_digits(text):
    with pytest.raises(WrongCheckDigits):
        CNPJ.from_chars(text)


def test_cnpj_without_check_digits():
    assert CNPJ(CNPJ_DIGITS).without_check_digits() == UncheckedCNPJ(UNCHECKED_CNPJ_DIGITS)


def test_cnpj_check_digits():
    assert CNPJ(CNPJ_DIGITS).check_digits() == CheckDigits("35")


def test_cnpj_chars():
    cnpj = CNPJ(CNPJ_DIGITS)
    expected = ["1", "2", "A", "B", "C", "3", "4", "5", "0", "1", "D", "E", "3", "5"]
    assert [cnpj.char(i) for i in range(14)] == expected
    assert cnpj.chars() == tuple(expected)


@pytest.mark.parametrize("text", ["12.AbC.345/01De-35", "12ABC34501DE35"])
def test_cnpj_parse(text):
    assert CNPJ.parse(text) == CNPJ(CNPJ_DIGITS)


def test_cnpj_from_char_list():
    chars = ["1", "2", "A", "b", "C", "3", "4", "5", "0", "1", "D", "e", "3", "5"]
    assert CNPJ.from_chars(chars) == CNPJ(CNPJ_DIGITS)


def test_cnpj_display():
    assert str(CNPJ(CNPJ_DIGITS)) == "12.ABC.345/01DE-35"


def test_direct_construction_rejects_bad_digits():
    with pytest.raises(ValueError):
        CPF("1114447773")
    with pytest.raises(ValueError):
        UncheckedCNPJ("12abc34501de")