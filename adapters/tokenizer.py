"""
Adapter: Tokenizer
Leniwy, jednoprzebiegowy iterator tokenów wyrażenia arytmetycznego.

Reguły:
  - pomijane są wyłącznie spacje (' '); tabulator to nieznany znak
  - '+', '-', '*', '/', '(', ')' → token operatora / nawiasu
  - cyfra ASCII (0-9) rozpoczyna liczbę: zachłannie zbierane cyfry ASCII
    i kropki, poprawność rozstrzyga dopiero float() ("1.2.3" → InvalidNumberError)
  - cyfry spoza ASCII (np. "٣") nie tworzą liczb, to nieznane znaki
  - każdy inny znak → InvalidCharacterError
Znak minus nigdy nie należy do liczby, negację obsługuje parser.
"""
from __future__ import annotations

from contracts import (
    InvalidCharacterError,
    InvalidNumberError,
    Token,
    TokenizingError,
    TokenType,
)

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
}

_DIGITS = frozenset("0123456789")


class Tokenizer:
    """Iterator po tokenach; po pierwszym błędzie jest wyczerpany."""

    def __init__(self, expression: str) -> None:
        self._expr = expression
        self._pos = 0
        self._failed = False

    def __iter__(self) -> Tokenizer:
        return self

    def __next__(self) -> Token:
        if self._failed:
            raise StopIteration
        try:
            return self._next_token()
        except TokenizingError:
            self._failed = True
            raise

    # -- Prywatne ----------------------------------------------------------

    def _next_token(self) -> Token:
        expr = self._expr
        while self._pos < len(expr) and expr[self._pos] == " ":
            self._pos += 1
        if self._pos >= len(expr):
            raise StopIteration

        c = expr[self._pos]
        self._pos += 1

        token_type = _SINGLE_CHAR_TOKENS.get(c)
        if token_type is not None:
            return Token(token_type=token_type)
        if c in _DIGITS:
            return self._number(start=self._pos - 1)
        raise InvalidCharacterError(c)

    def _number(self, start: int) -> Token:
        expr = self._expr
        while self._pos < len(expr) and (expr[self._pos] in _DIGITS or expr[self._pos] == "."):
            self._pos += 1
        text = expr[start:self._pos]
        try:
            return Token.number(float(text))
        except ValueError as exc:
            raise InvalidNumberError(text) from exc


def tokenize(expression: str) -> list[Token]:
    """Tokenizuje całe wejście. Rzuca TokenizingError przy pierwszym błędzie."""
    return list(Tokenizer(expression))
