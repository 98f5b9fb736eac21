"""
Adapter: TerminalConsole
Implementuje port Console na rich.console.Console.

Markup i podświetlanie są wyłączone, tekst użytkownika (np. "[1]")
ma trafić na ekran dosłownie.
"""
from __future__ import annotations

from typing import Optional

from rich.console import Console as RichConsole


class TerminalConsole:
    def __init__(self, console: RichConsole | None = None) -> None:
        self._console = console or RichConsole(highlight=False)

    # -- Console protocol --------------------------------------------------

    def readline(self) -> Optional[str]:
        try:
            return self._console.input().strip()
        except EOFError:
            return None

    def println(self, text: str) -> None:
        self._console.print(text, markup=False, highlight=False)

    def print(self, text: str) -> None:
        self._console.print(text, end="", markup=False, highlight=False)
