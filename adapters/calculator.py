"""
Adapter: Calculator
Pętla czytaj–licz–wypisz nad portem Console.

evaluate_line() to cały kontrakt rdzenia: jedna linia tekstu na wejściu,
jedna linia na wyjściu: wynik albo komunikat błędu. run() dokłada baner,
znak zachęty i komendę wyjścia (porównywaną bez względu na wielkość liter).
"""
from __future__ import annotations

import logging

from config import Settings
from contracts import EvaluatorError, ParserError
from ports.console import Console
from adapters.parser.recursive_descent_parser import Parser
from adapters.visitors.evaluator import Evaluator
from adapters.visitors.pretty_printer import format_number

logger = logging.getLogger("calculator.repl")


class Calculator:
    def __init__(self, console: Console, settings: Settings | None = None) -> None:
        self._console = console
        self._settings = settings or Settings()
        self._evaluator = Evaluator()

    def evaluate_line(self, line: str) -> str:
        """Zwraca wynik w postaci dziesiętnej albo tekst błędu."""
        try:
            ast = Parser(line).parse()
            value = self._evaluator.visit_expression(ast)
        except (ParserError, EvaluatorError) as exc:
            logger.debug("Line %r rejected: %s", line, exc)
            return str(exc)
        return format_number(value)

    def run(self) -> None:
        exit_command = self._settings.exit_command.upper()
        self._console.println(self._settings.banner)

        while True:
            self._console.print(self._settings.prompt)
            line = self._console.readline()
            if line is None:
                logger.debug("Input exhausted, leaving loop.")
                break
            if line.strip().upper() == exit_command:
                break
            self._console.println(self.evaluate_line(line))
