"""
Port: ExpressionVisitor
Odpowiedzialność: operacje na drzewie AST bez modyfikowania typów węzłów.

Implementacja podaje po jednej metodzie na wariant węzła; visit_expression()
rozpoznaje wariant i kieruje do właściwej metody. Błędy propagują jako wyjątki.
"""
from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from contracts import (
    AddNode,
    DivideNode,
    Expression,
    GroupingNode,
    MultiplyNode,
    NegateNode,
    NumberNode,
    SubtractNode,
)

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class ExpressionVisitor(Protocol[T_co]):
    def visit_number(self, value: float) -> T_co:
        ...

    def visit_add(self, left: Expression, right: Expression) -> T_co:
        ...

    def visit_subtract(self, left: Expression, right: Expression) -> T_co:
        ...

    def visit_multiply(self, left: Expression, right: Expression) -> T_co:
        ...

    def visit_divide(self, left: Expression, right: Expression) -> T_co:
        ...

    def visit_negate(self, operand: Expression) -> T_co:
        ...

    def visit_grouping(self, operand: Expression) -> T_co:
        ...

    def visit_expression(self, node: Expression) -> T_co:
        """
        Dispatches a node to the visit_* method matching its variant.
        Children are visited by the concrete methods calling back here,
        so the same result type flows through the whole tree.
        Raises TypeError for objects that are not Expression nodes.
        """
        if isinstance(node, NumberNode):
            return self.visit_number(node.value)
        if isinstance(node, AddNode):
            return self.visit_add(node.left, node.right)
        if isinstance(node, SubtractNode):
            return self.visit_subtract(node.left, node.right)
        if isinstance(node, MultiplyNode):
            return self.visit_multiply(node.left, node.right)
        if isinstance(node, DivideNode):
            return self.visit_divide(node.left, node.right)
        if isinstance(node, NegateNode):
            return self.visit_negate(node.operand)
        if isinstance(node, GroupingNode):
            return self.visit_grouping(node.operand)
        raise TypeError(f"Nieznany typ węzła AST: {type(node)}")
