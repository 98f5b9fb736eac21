from __future__ import annotations

import math

import pytest

from adapters.parser.recursive_descent_parser import parse_expression
from adapters.visitors import (
    Evaluator,
    PrettyPrinter,
    TreeRenderer,
    evaluate,
    format_number,
    pretty_print,
)
from contracts import (
    AddNode,
    DivideNode,
    EvaluatorError,
    Expression,
    GroupingNode,
    MultiplyNode,
    NegateNode,
    NumberNode,
    SubtractNode,
)
from ports.expression_visitor import ExpressionVisitor


@pytest.fixture
def expression() -> Expression:
    return MultiplyNode(
        left=GroupingNode(operand=AddNode(left=NumberNode(value=1), right=NumberNode(value=2))),
        right=GroupingNode(operand=SubtractNode(left=NumberNode(value=3), right=NumberNode(value=4))),
    )


# -- Evaluator -------------------------------------------------------------

def test_evaluate_expression_with_visitor(expression):
    assert Evaluator().visit_expression(expression) == -3.0


@pytest.mark.parametrize(
    "expr, expected",
    [
        ("2 * 4 + 6 / 2", 11.0),
        ("1 - 2 - 3", -4.0),
        ("--1", 1.0),
        ("1 * 2 * 3", 6.0),
        ("(1 + 2) * (10 / 5)", 6.0),
        ("8 / 2 / 2", 2.0),
        ("-(2 + 3) * 2", -10.0),
        ("0.1 + 0.2", 0.1 + 0.2),
    ],
)
def test_evaluate_parsed_expression(expr, expected):
    assert evaluate(parse_expression(expr)) == expected


def test_evaluate_division_by_zero():
    node = DivideNode(left=NumberNode(value=1), right=NumberNode(value=0))

    with pytest.raises(EvaluatorError) as exc_info:
        evaluate(node)

    assert exc_info.value.message == "Division by zero"


def test_evaluate_division_by_negative_zero_fails():
    node = DivideNode(left=NumberNode(value=1), right=NegateNode(operand=NumberNode(value=0)))

    with pytest.raises(EvaluatorError):
        evaluate(node)


def test_evaluate_division_by_half():
    node = DivideNode(left=NumberNode(value=1), right=NumberNode(value=0.5))

    assert evaluate(node) == 2.0


def test_evaluate_division_by_zero_subexpression():
    with pytest.raises(EvaluatorError):
        evaluate(parse_expression("1 / (2 - 2)"))


class _RecordingEvaluator(Evaluator):
    def __init__(self):
        self.seen: list[float] = []

    def visit_number(self, value: float) -> float:
        self.seen.append(value)
        return value


def test_divide_checks_divisor_before_dividend():
    evaluator = _RecordingEvaluator()

    with pytest.raises(EvaluatorError):
        evaluator.visit_expression(DivideNode(left=NumberNode(value=7), right=NumberNode(value=0)))

    assert evaluator.seen == [0.0]


def test_divide_evaluates_each_operand_once():
    evaluator = _RecordingEvaluator()

    assert evaluator.visit_expression(DivideNode(left=NumberNode(value=6), right=NumberNode(value=3))) == 2.0
    assert evaluator.seen == [3.0, 6.0]


def test_evaluate_overflow_propagates_as_infinity():
    big = NumberNode(value=1e308)

    assert evaluate(MultiplyNode(left=big, right=NumberNode(value=10))) == math.inf


# -- PrettyPrinter ---------------------------------------------------------

def test_pretty_print_expression_with_visitor(expression):
    assert PrettyPrinter().visit_expression(expression) == "(1 + 2) * (3 - 4)"


@pytest.mark.parametrize(
    "expr",
    [
        "(1 + 2) * (3 - 4)",
        "((1))",
        "-(2.5 / 4)",
        "--1",
        "(1 - (2 - 3)) * -4",
    ],
)
def test_pretty_print_round_trips_brackets(expr):
    assert pretty_print(parse_expression(expr)) == expr


def test_pretty_print_normalizes_whitespace():
    assert pretty_print(parse_expression("(1+2)*3")) == "(1 + 2) * 3"


# -- format_number ---------------------------------------------------------

@pytest.mark.parametrize(
    "value, expected",
    [
        (6.0, "6"),
        (0.5, "0.5"),
        (-3.0, "-3"),
        (100.0, "100"),
        (1e20, "100000000000000000000"),
        (1e-7, "0.0000001"),
        (-0.0, "-0"),
        (math.inf, "inf"),
        (-math.inf, "-inf"),
        (math.nan, "NaN"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


# -- TreeRenderer ----------------------------------------------------------

def test_tree_renderer_outlines_ast():
    tree = TreeRenderer().visit_expression(parse_expression("-(1 + 2)"))

    assert tree.label == "Negate (-)"
    (grouping,) = tree.children
    assert grouping.label == "Grouping ( )"
    (add,) = grouping.children
    assert add.label == "Add (+)"
    assert [child.label for child in add.children] == ["Number 1", "Number 2"]


# -- ExpressionVisitor -----------------------------------------------------

def test_visitors_satisfy_protocol():
    assert isinstance(Evaluator(), ExpressionVisitor)
    assert isinstance(PrettyPrinter(), ExpressionVisitor)
    assert isinstance(TreeRenderer(), ExpressionVisitor)


class _NodeCounter(ExpressionVisitor[int]):
    def visit_number(self, value):
        return 1

    def visit_add(self, left, right):
        return 1 + self.visit_expression(left) + self.visit_expression(right)

    visit_subtract = visit_multiply = visit_divide = visit_add

    def visit_negate(self, operand):
        return 1 + self.visit_expression(operand)

    visit_grouping = visit_negate


def test_new_operation_needs_no_changes_to_nodes():
    assert _NodeCounter().visit_expression(parse_expression("-(1 + 2) * 3")) == 7


def test_visit_expression_rejects_unknown_node():
    with pytest.raises(TypeError):
        Evaluator().visit_expression("1 + 2")
