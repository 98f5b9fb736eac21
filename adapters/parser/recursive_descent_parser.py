"""
Adapter: Parser
Parser rekurencyjnie zstępujący dla wyrażeń arytmetycznych.

Gramatyka (EBNF), priorytet od najniższego, operatory binarne lewostronne:
  expression = term
  term       = factor ( ('+' | '-') factor )*
  factor     = unary  ( ('*' | '/') unary  )*
  unary      = '-' unary | primary
  primary    = NUMBER | '(' expression ')'

Konstruktor tokenizuje całe wejście od razu, błąd leksykalny przerywa
tworzenie parsera (UnexpectedTokenError). parse() buduje jedno drzewo,
kursor przesuwa się tylko do przodu, więc parse() wołamy raz na instancję.

Licznik nawiasów (_depth) pozwala odróżnić nadmiarowy ')' od zamknięcia
grupy: poza nawiasami ')' w pętli term/factor to "Too many ')'.",
a '(' po kompletnym lewym operandzie w pętli term to "Unexpected '('.".

Wysokość drzewa i zagłębienie nawiasów/negacji są ograniczone do MAX_DEPTH
("Expression nested too deeply."), żeby ani parser, ani wizytatory nie
przekroczyły limitu rekurencji interpretera.
"""
from __future__ import annotations

import logging
from typing import Optional

from contracts import (
    AddNode,
    DivideNode,
    Expression,
    ExpressionSyntaxError,
    GroupingNode,
    MultiplyNode,
    NegateNode,
    NumberNode,
    SubtractNode,
    Token,
    TokenizingError,
    TokenType,
    UnexpectedTokenError,
)
from adapters.tokenizer import Tokenizer

logger = logging.getLogger("calculator.parser")

_TOO_MANY_RIGHT_PARENS = "Too many ')'."
_UNEXPECTED_LEFT_PAREN = "Unexpected '('."
_EXPECT_RIGHT_PAREN = "Expect ')' after expression."
_EXPECTED_PRIMARY = "Expected number or '('."
_TOO_DEEP = "Expression nested too deeply."

MAX_DEPTH = 100


class Parser:
    def __init__(self, expression: str, max_depth: int = MAX_DEPTH) -> None:
        try:
            self._tokens: list[Token] = list(Tokenizer(expression))
        except TokenizingError as exc:
            raise UnexpectedTokenError(exc) from exc
        self._pos = 0
        self._depth = 0
        self._nesting = 0
        self._max_depth = max_depth
        logger.debug("Tokenized %r into %d tokens", expression, len(self._tokens))

    def parse(self) -> Expression:
        node, _ = self._expression()
        return node

    # -- Gramatyka ---------------------------------------------------------
    # Metody zwracają (węzeł, wysokość poddrzewa).

    def _expression(self) -> tuple[Expression, int]:
        return self._term()

    def _term(self) -> tuple[Expression, int]:
        node, height = self._factor()
        while True:
            token = self._peek()
            if token is None:
                break
            if token.token_type == TokenType.PLUS:
                self._consume()
                right, right_height = self._factor()
                node, height = AddNode(left=node, right=right), self._fold(height, right_height)
            elif token.token_type == TokenType.MINUS:
                self._consume()
                right, right_height = self._factor()
                node, height = SubtractNode(left=node, right=right), self._fold(height, right_height)
            elif token.token_type == TokenType.RIGHT_PAREN and self._depth == 0:
                raise ExpressionSyntaxError(_TOO_MANY_RIGHT_PARENS)
            elif token.token_type == TokenType.LEFT_PAREN and self._depth == 0:
                raise ExpressionSyntaxError(_UNEXPECTED_LEFT_PAREN)
            else:
                break
        return node, height

    def _factor(self) -> tuple[Expression, int]:
        node, height = self._unary()
        while True:
            token = self._peek()
            if token is None:
                break
            if token.token_type == TokenType.STAR:
                self._consume()
                right, right_height = self._unary()
                node, height = MultiplyNode(left=node, right=right), self._fold(height, right_height)
            elif token.token_type == TokenType.SLASH:
                self._consume()
                right, right_height = self._unary()
                node, height = DivideNode(left=node, right=right), self._fold(height, right_height)
            elif token.token_type == TokenType.RIGHT_PAREN and self._depth == 0:
                raise ExpressionSyntaxError(_TOO_MANY_RIGHT_PARENS)
            else:
                break
        return node, height

    def _unary(self) -> tuple[Expression, int]:
        token = self._peek()
        if token is not None and token.token_type == TokenType.MINUS:
            self._consume()
            self._enter()
            operand, height = self._unary()
            self._nesting -= 1
            return NegateNode(operand=operand), self._fold(height)
        return self._primary()

    def _primary(self) -> tuple[Expression, int]:
        token = self._next()
        if token is not None and token.token_type == TokenType.NUMBER:
            return NumberNode(value=token.value), 1
        if token is not None and token.token_type == TokenType.LEFT_PAREN:
            self._depth += 1
            self._enter()
            inner, height = self._expression()
            self._consume_right_paren()
            self._nesting -= 1
            return GroupingNode(operand=inner), self._fold(height)
        raise ExpressionSyntaxError(_EXPECTED_PRIMARY)

    # -- Limit zagłębienia -------------------------------------------------
    # Parser i wizytatory schodzą rekurencyjnie, więc wysokość drzewa
    # (także długich łańcuchów "1 + 1 + ...") jest ograniczona.

    def _enter(self) -> None:
        self._nesting += 1
        if self._nesting > self._max_depth:
            raise ExpressionSyntaxError(_TOO_DEEP)

    def _fold(self, *heights: int) -> int:
        height = max(heights) + 1
        if height > self._max_depth:
            raise ExpressionSyntaxError(_TOO_DEEP)
        return height

    # -- Kursor ------------------------------------------------------------

    def _is_at_end(self) -> bool:
        return self._pos >= len(self._tokens)

    def _peek(self) -> Optional[Token]:
        if self._is_at_end():
            return None
        return self._tokens[self._pos]

    def _next(self) -> Optional[Token]:
        token = self._peek()
        self._consume()
        return token

    def _consume(self) -> None:
        if not self._is_at_end():
            self._pos += 1

    def _consume_right_paren(self) -> None:
        token = self._next()
        if token is None or token.token_type != TokenType.RIGHT_PAREN:
            raise ExpressionSyntaxError(_EXPECT_RIGHT_PAREN)
        self._depth -= 1


def parse_expression(expression: str) -> Expression:
    """Tokenizuje i parsuje wyrażenie. Rzuca ParserError."""
    return Parser(expression).parse()
