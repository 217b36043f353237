"""Tests for AST nodes: evaluation, printing, serialization."""

import json
import math

import pytest

from calcparse.core.ast_nodes import (
    BinaryOperationNode, NumberNode, Operator, format_number, format_value,
)
from calcparse.core.errors import DivisionByZeroError, UnknownOperatorError


def binop(left, op, right):
    return BinaryOperationNode(left, right, op)


class TestOperator:
    def test_symbols(self):
        assert [op.value for op in Operator] == ["+", "-", "*", "/", "<", ">", "="]

    def test_precedence(self):
        assert Operator.MUL.precedence == 2
        assert Operator.DIV.precedence == 2
        for op in (Operator.ADD, Operator.SUB, Operator.LT, Operator.GT, Operator.EQ):
            assert op.precedence == 1

    def test_is_operator(self):
        assert Operator.is_operator("+")
        assert Operator.is_operator(Operator.EQ)
        assert not Operator.is_operator("(")
        assert not Operator.is_operator("%")
        assert not Operator.is_operator(["+"])
        assert not Operator.is_operator(None)


class TestNumberNode:
    def test_evaluate(self):
        assert NumberNode(5).evaluate() == 5.0
        assert isinstance(NumberNode(5).evaluate(), float)

    def test_print_integral(self):
        assert NumberNode(10).print() == "10"
        assert NumberNode(-3.0).print() == "-3"

    def test_print_fractional(self):
        assert NumberNode(1.5).print() == "1.5"
        assert NumberNode(0.1).print() == "0.1"

    def test_serialize(self):
        assert NumberNode(42).serialize() == {"type": "NumberNode", "value": 42.0}

    def test_size_and_depth(self):
        n = NumberNode(1)
        assert n.size() == 1
        assert n.depth() == 1

    def test_immutable(self):
        n = NumberNode(1)
        with pytest.raises(AttributeError):
            n.value = 2.0

    def test_structural_equality(self):
        assert NumberNode(3) == NumberNode(3.0)
        assert NumberNode(3) != NumberNode(4)


class TestBinaryOperationNode:
    def test_arithmetic(self):
        assert binop(NumberNode(2), "+", NumberNode(3)).evaluate() == 5
        assert binop(NumberNode(2), "-", NumberNode(3)).evaluate() == -1
        assert binop(NumberNode(2), "*", NumberNode(3)).evaluate() == 6
        assert binop(NumberNode(3), "/", NumberNode(2)).evaluate() == 1.5

    def test_comparisons(self):
        assert binop(NumberNode(2), "<", NumberNode(3)).evaluate() is True
        assert binop(NumberNode(2), ">", NumberNode(3)).evaluate() is False
        assert binop(NumberNode(3), "=", NumberNode(3)).evaluate() is True
        assert binop(NumberNode(3), "=", NumberNode(4)).evaluate() is False

    def test_division_by_zero(self):
        node = binop(NumberNode(10), "/", NumberNode(0))
        with pytest.raises(DivisionByZeroError, match="Division by zero"):
            node.evaluate()

    def test_division_by_computed_zero(self):
        node = binop(NumberNode(1), "/", binop(NumberNode(2), "-", NumberNode(2)))
        with pytest.raises(ZeroDivisionError):
            node.evaluate()

    def test_division_by_false(self):
        cmp = binop(NumberNode(1), ">", NumberNode(2))
        with pytest.raises(DivisionByZeroError):
            binop(NumberNode(1), "/", cmp).evaluate()

    def test_boolean_coerces_in_arithmetic(self):
        cmp = binop(NumberNode(1), "<", NumberNode(2))
        assert binop(cmp, "+", NumberNode(1)).evaluate() == 2.0
        assert binop(cmp, "*", cmp).evaluate() == 1.0

    def test_strict_equality_between_number_and_boolean(self):
        true_node = binop(NumberNode(1), "<", NumberNode(2))
        assert binop(true_node, "=", NumberNode(1)).evaluate() is False
        assert binop(true_node, "=", true_node).evaluate() is True

    def test_print_fully_parenthesized(self):
        inner = binop(NumberNode(4), "*", NumberNode(2))
        node = binop(NumberNode(3), "+", inner)
        assert node.print() == "(3 + (4 * 2))"
        assert str(node) == "(3 + (4 * 2))"

    def test_operator_string_coerced(self):
        node = binop(NumberNode(1), "+", NumberNode(2))
        assert node.operator is Operator.ADD

    def test_unknown_operator_rejected(self):
        with pytest.raises(UnknownOperatorError, match="Unknown operator: %"):
            binop(NumberNode(1), "%", NumberNode(2))

    def test_evaluate_rejects_operator_outside_enum(self):
        node = object.__new__(BinaryOperationNode)
        object.__setattr__(node, "left", NumberNode(1))
        object.__setattr__(node, "right", NumberNode(2))
        object.__setattr__(node, "operator", "%")
        with pytest.raises(UnknownOperatorError, match="Unknown operator: %"):
            node.evaluate()

    def test_serialize(self):
        node = binop(NumberNode(1), "<", binop(NumberNode(2), "/", NumberNode(4)))
        assert node.serialize() == {
            "type": "BinaryOperationNode",
            "operator": "<",
            "left": {"type": "NumberNode", "value": 1.0},
            "right": {
                "type": "BinaryOperationNode",
                "operator": "/",
                "left": {"type": "NumberNode", "value": 2.0},
                "right": {"type": "NumberNode", "value": 4.0},
            },
        }

    def test_to_json(self):
        node = binop(NumberNode(1), "+", NumberNode(2))
        assert json.loads(node.to_json()) == node.serialize()

    def test_size_and_depth(self):
        inner = binop(NumberNode(1), "+", NumberNode(2))
        outer = binop(inner, "*", NumberNode(3))
        assert outer.size() == 5
        assert outer.depth() == 3

    def test_hashable(self):
        a = binop(NumberNode(1), "+", NumberNode(2))
        b = binop(NumberNode(1), "+", NumberNode(2))
        assert a == b
        assert len({a, b}) == 1


class TestFormatting:
    def test_format_number(self):
        assert format_number(15.0) == "15"
        assert format_number(-0.0) == "0"
        assert format_number(2.5) == "2.5"
        assert format_number(math.inf) == "Infinity"
        assert format_number(-math.inf) == "-Infinity"
        assert format_number(math.nan) == "NaN"

    def test_format_number_exponents(self):
        assert format_number(1e-7) == "1e-7"
        assert format_number(1.5e-10) == "1.5e-10"
        assert format_number(1e21) == "1e+21"
        assert format_number(-2e300) == "-2e+300"

    def test_format_number_small_positional(self):
        assert format_number(1e-5) == "0.00001"
        assert format_number(-2.5e-6) == "-0.0000025"
        assert format_number(0.0001) == "0.0001"

    def test_format_value(self):
        assert format_value(True) == "true"
        assert format_value(False) == "false"
        assert format_value(8.0) == "8"
