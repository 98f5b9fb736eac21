"""
contracts.py — Jedyne źródło prawdy dla typów danych kalkulatora.
Tokeny, węzły AST i hierarchia błędów; wszystkie moduły importują stąd.
"""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ─────────────────────────── Tokenizer ───────────────────────────────────

class TokenType(str, Enum):
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    NUMBER = "number"


class Token(BaseModel):
    model_config = ConfigDict(frozen=True)

    token_type: TokenType
    value: Optional[float] = None  # tylko dla NUMBER

    @classmethod
    def number(cls, value: float) -> Token:
        return cls(token_type=TokenType.NUMBER, value=value)


# ─────────────────────────── AST ─────────────────────────────────────────

class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


class NumberNode(_Node):
    node_type: Literal["number"] = "number"
    value: float


class _BinaryNode(_Node):
    left: Expression
    right: Expression


class AddNode(_BinaryNode):
    node_type: Literal["add"] = "add"


class SubtractNode(_BinaryNode):
    node_type: Literal["subtract"] = "subtract"


class MultiplyNode(_BinaryNode):
    node_type: Literal["multiply"] = "multiply"


class DivideNode(_BinaryNode):
    node_type: Literal["divide"] = "divide"


class NegateNode(_Node):
    node_type: Literal["negate"] = "negate"
    operand: Expression


class GroupingNode(_Node):
    """Nawias z wejścia, zachowany w drzewie, żeby printer odtworzył nawiasowanie."""
    node_type: Literal["grouping"] = "grouping"
    operand: Expression


Expression = Annotated[
    Union[
        NumberNode, AddNode, SubtractNode, MultiplyNode,
        DivideNode, NegateNode, GroupingNode,
    ],
    Field(discriminator="node_type"),
]

for _model in (AddNode, SubtractNode, MultiplyNode, DivideNode, NegateNode, GroupingNode):
    _model.model_rebuild()


# ─────────────────────────── Błędy ───────────────────────────────────────

class TokenizingError(Exception):
    """Błąd leksykalny; po nim tokenizer nie zwraca już nic."""


class InvalidCharacterError(TokenizingError):
    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"Unexpected token '{char}'")


class InvalidNumberError(TokenizingError):
    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__("Invalid number format")


class ParserError(Exception):
    """Błąd składni; tekst zawsze z prefiksem 'Syntax error: '."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Syntax error: {message}")


class UnexpectedTokenError(ParserError):
    """Tokenizacja wejścia nie powiodła się."""

    def __init__(self, error: TokenizingError) -> None:
        self.error = error
        super().__init__(str(error))


class ExpressionSyntaxError(ParserError):
    """Naruszenie gramatyki."""


class EvaluatorError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
