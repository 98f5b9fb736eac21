"""
Adapter: PrettyPrinter
Implementuje port ExpressionVisitor[str]: odtwarza tekst wyrażenia z AST.

Operatory binarne z pojedynczą spacją ("1 + 2"), negacja bez spacji ("-1"),
grupowanie w nawiasach. Funkcja totalna, nie rzuca dla poprawnego drzewa.
"""
from __future__ import annotations

import math
from decimal import Decimal

from contracts import Expression
from ports.expression_visitor import ExpressionVisitor


def format_number(value: float) -> str:
    """
    Domyślna dziesiętna postać liczby: bez części ułamkowej dla wartości
    całkowitych (6.0 → "6") i bez notacji wykładniczej (1e-07 → "0.0000001").
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class PrettyPrinter(ExpressionVisitor[str]):
    def visit_number(self, value: float) -> str:
        return format_number(value)

    def visit_add(self, left: Expression, right: Expression) -> str:
        return self._binary(left, "+", right)

    def visit_subtract(self, left: Expression, right: Expression) -> str:
        return self._binary(left, "-", right)

    def visit_multiply(self, left: Expression, right: Expression) -> str:
        return self._binary(left, "*", right)

    def visit_divide(self, left: Expression, right: Expression) -> str:
        return self._binary(left, "/", right)

    def visit_negate(self, operand: Expression) -> str:
        return f"-{self.visit_expression(operand)}"

    def visit_grouping(self, operand: Expression) -> str:
        return f"({self.visit_expression(operand)})"

    def _binary(self, left: Expression, op: str, right: Expression) -> str:
        return f"{self.visit_expression(left)} {op} {self.visit_expression(right)}"


def pretty_print(node: Expression) -> str:
    return PrettyPrinter().visit_expression(node)
