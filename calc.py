#!/usr/bin/env python3
"""
calc.py — CLI kalkulatora.

Konfiguracja: zmienne środowiskowe z prefiksem CALCULATOR_
lub plik .env (np. CALCULATOR_PROMPT="> ").

Podkomendy:
    repl    - interaktywna pętla (wyjście: EXIT)
    eval    - policz wyrażenie i wypisz wynik
    format  - wypisz wyrażenie odtworzone z AST
    tree    - wypisz drzewo AST

Użycie:
    python calc.py repl
    python calc.py eval --text "(1 + 2) * (10 / 5)"
    echo "2 * 4 + 6 / 2" | python calc.py eval
    python calc.py format -t "--1"
    python calc.py tree -t "1 - 2 - 3"
"""
from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console

from adapters.calculator import Calculator
from adapters.console.terminal_console import TerminalConsole
from adapters.parser.recursive_descent_parser import parse_expression
from adapters.visitors import Evaluator, PrettyPrinter, TreeRenderer, format_number
from config import Settings
from contracts import EvaluatorError, Expression, ParserError


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _read_text(args: argparse.Namespace) -> str:
    text = getattr(args, "text", None) or sys.stdin.read().strip()
    if not text:
        print("Błąd: podaj wyrażenie przez --text lub stdin", file=sys.stderr)
        sys.exit(1)
    return text


def _parse_or_exit(text: str) -> Expression:
    try:
        return parse_expression(text)
    except ParserError as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(1)


# -- podkomendy ------------------------------------------------------------

def _repl(args: argparse.Namespace, settings: Settings) -> None:
    Calculator(TerminalConsole(_console()), settings=settings).run()


def _eval(args: argparse.Namespace, settings: Settings) -> None:
    ast = _parse_or_exit(_read_text(args))
    try:
        value = Evaluator().visit_expression(ast)
    except EvaluatorError as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(1)
    _console().print(format_number(value), markup=False)


def _format(args: argparse.Namespace, settings: Settings) -> None:
    ast = _parse_or_exit(_read_text(args))
    _console().print(PrettyPrinter().visit_expression(ast), markup=False)


def _tree(args: argparse.Namespace, settings: Settings) -> None:
    ast = _parse_or_exit(_read_text(args))
    _console().print(TreeRenderer().visit_expression(ast))


# -- main ------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="calc",
        description="Kalkulator wyrażeń arytmetycznych",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("repl", help="Interaktywna pętla kalkulatora")

    p = sub.add_parser("eval", help="Policz wartość wyrażenia")
    p.add_argument("--text", "-t", help="Wyrażenie (lub stdin)")

    p = sub.add_parser("format", help="Wypisz wyrażenie odtworzone z AST")
    p.add_argument("--text", "-t", help="Wyrażenie (lub stdin)")

    p = sub.add_parser("tree", help="Wypisz drzewo AST")
    p.add_argument("--text", "-t", help="Wyrażenie (lub stdin)")

    args = parser.parse_args(argv)

    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    commands = {
        "repl":   _repl,
        "eval":   _eval,
        "format": _format,
        "tree":   _tree,
    }
    commands[args.command](args, settings)


if __name__ == "__main__":
    main()
