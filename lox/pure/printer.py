"""Renders expression trees as fully parenthesized prefix notation, e.g. -1 * (2) -> (* (- 1) (group 2)). Only used to
show what the parser built.
"""

from lox.pure.expr import ExprVisitor
from lox.pure.tokens import TokenType
from lox.pure.values import format_number


class AstPrinter(ExprVisitor):

    def print(self, expr):
        return expr.accept(self)

    def visit_literal(self, expr):
        if expr.type is TokenType.NUMBER:
            return format_number(float(expr.value))
        elif expr.type is TokenType.STRING:
            return f'"{expr.value}"'  # quoted, so "1" and 1 print differently
        elif expr.type is TokenType.ERROR:
            return "<error>"
        return expr.type.value  # true, false, nil

    def visit_grouping(self, expr):
        return self.parenthesize("group", expr.expression)

    def visit_unary(self, expr):
        return self.parenthesize(expr.operator.lexeme, expr.right)

    def visit_binary(self, expr):
        return self.parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def parenthesize(self, name, *exprs):
        return "(" + " ".join([name] + [expr.accept(self) for expr in exprs]) + ")"
