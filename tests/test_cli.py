import pytest

from tinkerbox.brid.cli import main


@pytest.fixture
def plain(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")


def test_valida_cpf_valid(plain, capsys):
    assert main(["valida-cpf", "111.444.777-35"]) == 0
    out = capsys.readouterr().out
    assert out == "111.444.777-35: Válido (111.444.777-35)\n"


def test_valida_cpf_wrong_check_digits(plain, capsys):
    main(["valida-cpf", "111.444.777-05"])
    out = capsys.readouterr().out
    assert out == "111.444.777-05: Inválido Dígitos de verificação errados\n"


def test_valida_cnpj_normalises_case(plain, capsys):
    main(["valida-cnpj", "12AbC34501De35"])
    out = capsys.readouterr().out
    assert out == "12AbC34501De35: Válido (12.ABC.345/01DE-35)\n"


def test_calcula_cpf_prints_one_line_per_input(plain, capsys):
    main(["calcula-cpf", "111444777", "11144477"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0] == "111444777: Válido (111.444.777)"
    assert lines[1] == "11144477: Inválido Número errado de dígitos"


def test_calcula_cnpj_invalid_char(plain, capsys):
    main(["calcula-cnpj", "12.AbC.345|01De"])
    out = capsys.readouterr().out
    assert "Inválido" in out
    assert "'|'" in out


def test_colored_output(monkeypatch, capsys):
    monkeypatch.delenv("NO_COLOR", raising=False)
    main(["valida-cpf", "11144477735"])
    out = capsys.readouterr().out
    assert out.startswith("11144477735: \x1b[")
    assert "Válido" in out


def test_missing_command_exits():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2


def test_no_inputs_prints_nothing(plain, capsys):
    assert main(["valida-cnpj"]) == 0
    assert capsys.readouterr().out == ""