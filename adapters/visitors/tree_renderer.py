"""
Adapter: TreeRenderer
Implementuje port ExpressionVisitor[Tree]: zarys AST jako rich.tree.Tree
(podkomenda `calc.py tree`).
"""
from __future__ import annotations

from rich.tree import Tree

from contracts import Expression
from ports.expression_visitor import ExpressionVisitor
from adapters.visitors.pretty_printer import format_number


class TreeRenderer(ExpressionVisitor[Tree]):
    def visit_number(self, value: float) -> Tree:
        return Tree(f"Number {format_number(value)}")

    def visit_add(self, left: Expression, right: Expression) -> Tree:
        return self._branch("Add (+)", left, right)

    def visit_subtract(self, left: Expression, right: Expression) -> Tree:
        return self._branch("Subtract (-)", left, right)

    def visit_multiply(self, left: Expression, right: Expression) -> Tree:
        return self._branch("Multiply (*)", left, right)

    def visit_divide(self, left: Expression, right: Expression) -> Tree:
        return self._branch("Divide (/)", left, right)

    def visit_negate(self, operand: Expression) -> Tree:
        return self._branch("Negate (-)", operand)

    def visit_grouping(self, operand: Expression) -> Tree:
        return self._branch("Grouping ( )", operand)

    def _branch(self, label: str, *children: Expression) -> Tree:
        tree = Tree(label)
        for child in children:
            tree.children.append(self.visit_expression(child))
        return tree
