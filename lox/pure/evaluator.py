"""Tree-walking evaluator for Lox expressions.

Type rules are strict: there is no truthiness and no implicit conversion between numbers and strings. The first type
error in an expression raises EvaluationError, since a failed subexpression has no value to keep computing with.
Arithmetic follows IEEE-754, so division by zero gives inf or NaN rather than an error, and NaN is unequal to itself.
"""

import math
import operator

from lox.lang.error import Diagnostic, EvaluationError
from lox.pure.expr import ExprVisitor
from lox.pure.tokens import TokenType
from lox.pure.values import Bool, Nil, Number, String


def divide(left, right):
    """left / right with IEEE-754 semantics for a zero divisor."""
    if right != 0:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


class Evaluator(ExprVisitor):
    """Computes the LoxValue of an expression tree."""
    ARITHMETIC = {
        TokenType.MINUS: operator.sub,
        TokenType.STAR: operator.mul,
        TokenType.SLASH: divide,
    }
    COMPARISON = {
        TokenType.GREATER: operator.gt,
        TokenType.GREATER_EQUAL: operator.ge,
        TokenType.LESS: operator.lt,
        TokenType.LESS_EQUAL: operator.le,
    }

    def interpret(self, expr):
        """Returns the value of expr. Raises EvaluationError with a single diagnostic on the first runtime error."""
        return self.evaluate(expr)

    def evaluate(self, expr):
        return expr.accept(self)

    def visit_literal(self, expr):
        if expr.type is TokenType.NUMBER:
            return Number(float(expr.value))
        elif expr.type is TokenType.STRING:
            return String(expr.value)
        elif expr.type is TokenType.TRUE:
            return Bool(True)
        elif expr.type is TokenType.FALSE:
            return Bool(False)
        elif expr.type is TokenType.NIL:
            return Nil()

        # the parser only produces other literals alongside a syntax error, which gates evaluation
        raise AssertionError(f"cannot evaluate {expr.type.name} literal")

    def visit_grouping(self, expr):
        return self.evaluate(expr.expression)

    def visit_unary(self, expr):
        right = self.evaluate(expr.right)

        if expr.operator.type is TokenType.MINUS:
            return Number(-self.get_number(expr.operator, right))
        elif expr.operator.type is TokenType.BANG:
            return Bool(not self.get_bool(expr.operator, right))

        raise AssertionError(f"unary with invalid operator '{expr.operator.lexeme}'")

    def visit_binary(self, expr):
        left = self.evaluate(expr.left)
        right = self.evaluate(expr.right)
        op = expr.operator

        if op.type in Evaluator.ARITHMETIC:
            left_val, right_val = self.get_numbers(op, left, right)
            return Number(Evaluator.ARITHMETIC[op.type](left_val, right_val))

        elif op.type is TokenType.PLUS:
            if isinstance(left, Number) and isinstance(right, Number):
                return Number(left.value + right.value)
            elif isinstance(left, String) and isinstance(right, String):
                return String(left.value + right.value)
            raise EvaluationError(Diagnostic("Mismatched types", op))

        elif op.type in Evaluator.COMPARISON:
            left_val, right_val = self.get_numbers(op, left, right)
            return Bool(Evaluator.COMPARISON[op.type](left_val, right_val))

        elif op.type is TokenType.EQUAL_EQUAL:
            return Bool(self.is_equal(left, right))
        elif op.type is TokenType.BANG_EQUAL:
            return Bool(not self.is_equal(left, right))

        raise AssertionError(f"binary with invalid operator '{op.lexeme}'")

    @staticmethod
    def get_number(op, value):
        if not isinstance(value, Number):
            raise EvaluationError(Diagnostic(f"Expected number but found {value.name}", op))
        return value.value

    @staticmethod
    def get_bool(op, value):
        if not isinstance(value, Bool):
            raise EvaluationError(Diagnostic(f"Expected bool but found {value.name}", op))
        return value.value

    @staticmethod
    def get_numbers(op, left, right):
        return Evaluator.get_number(op, left), Evaluator.get_number(op, right)

    @staticmethod
    def is_equal(left, right):
        """Lox equality: values of different types are never equal, and never an error."""
        if type(left) is not type(right):
            return False
        if isinstance(left, Nil):
            return True
        return left.value == right.value
