import unittest

from lox.lang.scanner import Scanner
from lox.pure.expr import Binary, Grouping, Literal, Unary
from lox.pure.parser import Parser
from lox.pure.printer import AstPrinter
from lox.pure.tokens import Token, TokenType


def parse(source):
    parser = Parser(Scanner(source).scan_tokens())
    return parser.parse(), parser.errors


class ParserTestCase(unittest.TestCase):

    def test_productions(self):
        cases = {
            "123": "123",
            "45.67": "45.67",
            "1.50": "1.5",
            '"abc"': '"abc"',
            "true": "true",
            "false": "false",
            "nil": "nil",
            "(1)": "(group 1)",
            "(((1)))": "(group (group (group 1)))",
            "-1": "(- 1)",
            "!true": "(! true)",
            "!!true": "(! (! true))",
            "--1": "(- (- 1))",
            "-(-1)": "(- (group (- 1)))",
            "-1 * (2)": "(* (- 1) (group 2))",
            "123 * (45.67)": "(* 123 (group 45.67))",
            "1 + 2 * 3": "(+ 1 (* 2 3))",
            "(1 + 2) * 3": "(* (group (+ 1 2)) 3)",
            "1 - 2 - 3": "(- (- 1 2) 3)",
            "8 / 4 / 2": "(/ (/ 8 4) 2)",
            "1 < 2 == 3 >= 4": "(== (< 1 2) (>= 3 4))",
            "1 <= 2 != 3 > 4": "(!= (<= 1 2) (> 3 4))",
            "1 == 2 == 3": "(== (== 1 2) 3)",
            '"a" + "b"': '(+ "a" "b")',
            "nil != false": "(!= nil false)",
            "-2 * 3 + 4 / 5 < 6": "(< (+ (* (- 2) 3) (/ 4 5)) 6)",
        }
        for case, expected in cases.items():
            expr, errors = parse(case)
            self.assertEqual(0, len(errors), case)
            self.assertEqual(expected, AstPrinter().print(expr), case)

    def test_tree_shape(self):
        minus = Token(TokenType.MINUS, "-", 1)
        star = Token(TokenType.STAR, "*", 1)
        expected = Binary(
            Unary(minus, Literal(TokenType.NUMBER, "1")),
            star,
            Grouping(Literal(TokenType.NUMBER, "2")),
        )

        expr, __ = parse("-1 * (2)")
        self.assertEqual(expected, expr)

    def test_hand_built_tokens(self):
        tokens = [
            Token(TokenType.BANG, "!", 4),
            Token(TokenType.FALSE, "false", 4),
            Token(TokenType.EOF, "", 4),
        ]
        parser = Parser(tokens)
        self.assertEqual(Unary(tokens[0], Literal(TokenType.FALSE)), parser.parse())
        self.assertEqual(0, len(parser.errors))

        self.assertRaises(AssertionError, Parser, [])
        self.assertRaises(AssertionError, Parser, [Token(TokenType.NUMBER, "1", 1, "1")])
        self.assertRaises(AssertionError, Parser, [Token(TokenType.EOF, "", 1), Token(TokenType.NUMBER, "1", 1, "1")])

    def test_syntax_errors(self):
        cases = {
            "(1 + 2": ["1: at end - Expect ')' after expression."],
            "(1 + (2": ["1: at end - Expect ')' after expression.", "1: at end - Expect ')' after expression."],
            "(1 + 2 == (3": ["1: at end - Expect ')' after expression.", "1: at end - Expect ')' after expression."],
            "(1 * (2 + 3)": ["1: at end - Expect ')' after expression."],
            "(1 2)": ["1: at '2' - Expect ')' after expression."],
            "": ["1: at end - Expect expression."],
            "1 +": ["1: at end - Expect expression."],
            ")": ["1: at ')' - Expect expression."],
            "1 + )": ["1: at ')' - Expect expression."],
            "x + 1": ["1: at 'x' - Expect expression."],
            "* 2": ["1: at '*' - Expect expression."],
            "1 2": ["1: at '2' - Expect end of expression."],
            "\n\n(1 + 2": ["3: at end - Expect ')' after expression."],
            "(\n1 +\n)": ["3: at ')' - Expect expression."],
        }
        for case, expected in cases.items():
            expr, errors = parse(case)
            self.assertIsNone(expr, case)
            self.assertEqual(expected, errors.render(), case)

    def test_errors_accumulate(self):
        expr, errors = parse("(1 + (2 * (3")
        self.assertIsNone(expr)
        self.assertEqual(3, len(errors))

    def test_synchronize(self):
        cases = {
            "+ 1 ; var x": TokenType.VAR,
            "+ 1 2 print 3": TokenType.PRINT,
            "+ 1 2 3": TokenType.EOF,
            "+ while": TokenType.WHILE,
            "+": TokenType.EOF,
        }
        for case, expected in cases.items():
            parser = Parser(Scanner(case).scan_tokens())
            parser.synchronize()
            self.assertIs(expected, parser.peek().type, case)

    def test_consume(self):
        parser = Parser(Scanner(") 1").scan_tokens())
        self.assertIs(TokenType.ERROR, parser.consume(TokenType.NUMBER, "Expect number."))
        self.assertIs(TokenType.RIGHT_PAREN, parser.peek().type)  # not consumed
        self.assertEqual(["1: at ')' - Expect number."], parser.errors.render())

        self.assertIs(TokenType.RIGHT_PAREN, parser.consume(TokenType.RIGHT_PAREN, "Expect ')'."))
        self.assertIs(TokenType.NUMBER, parser.peek().type)


if __name__ == '__main__':
    unittest.main()
