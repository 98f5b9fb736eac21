"""
Port: Console
Odpowiedzialność: wejście/wyjście pętli kalkulatora (terminal lub atrapa w testach).
"""
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class Console(Protocol):
    def readline(self) -> Optional[str]:
        """
        Reads one line of user input, trimmed of surrounding whitespace.
        Returns None when the input is exhausted (EOF).
        """
        ...

    def println(self, text: str) -> None:
        """Writes text followed by a newline."""
        ...

    def print(self, text: str) -> None:
        """Writes text without a trailing newline (used for the prompt)."""
        ...
