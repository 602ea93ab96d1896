"""Command line checks and calculations for CPF and CNPJ numbers."""

from __future__ import annotations

import argparse
import os
from collections.abc import Iterable

from tinkerbox.brid.errors import DocumentError
from tinkerbox.brid.ids import CNPJ, CPF, UncheckedCNPJ, UncheckedCPF

_COMMANDS = {
    "valida-cpf": ("cpf", CPF),
    "valida-cnpj": ("cnpj", CNPJ),
    "calcula-cpf": ("unchecked_cpf", UncheckedCPF),
    "calcula-cnpj": ("unchecked_cnpj", UncheckedCNPJ),
}


def _paint(text: str, code: int) -> str:
    if "NO_COLOR" in os.environ:
        return text
    return f"\x1b[{code}m{text}\x1b[0m"


def _handle_inputs(kind, inputs: Iterable[str]) -> None:
    for text in inputs:
        try:
            value = kind.parse(text)
        except DocumentError as error:
            print(f"{text}: {_paint('Inválido', 31)} {error}")
        else:
            print(f"{text}: {_paint('Válido', 32)} ({value})")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="brid")
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (argument, _) in _COMMANDS.items():
        sub = commands.add_parser(name)
        sub.add_argument(argument, nargs="*")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Validate or parse every given identifier and report each one."""
    args = _build_parser().parse_args(argv)
    argument, kind = _COMMANDS[args.command]
    _handle_inputs(kind, getattr(args, argument))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())