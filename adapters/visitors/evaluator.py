"""
Adapter: Evaluator
Implementuje port ExpressionVisitor[float]: liczy wartość drzewa AST.

Arytmetyka IEEE-754 (float): przepełnienie do inf i NaN propagują bez błędu.
Jedynym błędem jest dzielenie przez dokładne 0.0. Dzielnik liczony jest
pierwszy, a lewy operand dopiero po sprawdzeniu zera (każdy dokładnie raz).
"""
from __future__ import annotations

from contracts import EvaluatorError, Expression
from ports.expression_visitor import ExpressionVisitor

DIVISION_BY_ZERO = "Division by zero"


class Evaluator(ExpressionVisitor[float]):
    def visit_number(self, value: float) -> float:
        return value

    def visit_add(self, left: Expression, right: Expression) -> float:
        return self.visit_expression(left) + self.visit_expression(right)

    def visit_subtract(self, left: Expression, right: Expression) -> float:
        return self.visit_expression(left) - self.visit_expression(right)

    def visit_multiply(self, left: Expression, right: Expression) -> float:
        return self.visit_expression(left) * self.visit_expression(right)

    def visit_divide(self, left: Expression, right: Expression) -> float:
        divisor = self.visit_expression(right)
        if divisor == 0.0:
            raise EvaluatorError(DIVISION_BY_ZERO)
        return self.visit_expression(left) / divisor

    def visit_negate(self, operand: Expression) -> float:
        return -self.visit_expression(operand)

    def visit_grouping(self, operand: Expression) -> float:
        return self.visit_expression(operand)


def evaluate(node: Expression) -> float:
    return Evaluator().visit_expression(node)
