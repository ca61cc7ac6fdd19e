import unittest

from lox.lang.scanner import Scanner
from lox.pure.tokens import Token, TokenType


def types(source):
    return [token.type for token in Scanner(source).scan_tokens()]


class ScannerTestCase(unittest.TestCase):

    def test_punctuation(self):
        cases = {
            "(){},.-+;/*": [
                TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN, TokenType.LEFT_BRACE, TokenType.RIGHT_BRACE,
                TokenType.COMMA, TokenType.DOT, TokenType.MINUS, TokenType.PLUS, TokenType.SEMICOLON,
                TokenType.SLASH, TokenType.STAR, TokenType.EOF,
            ],
            "! != = == > >= < <=": [
                TokenType.BANG, TokenType.BANG_EQUAL, TokenType.EQUAL, TokenType.EQUAL_EQUAL, TokenType.GREATER,
                TokenType.GREATER_EQUAL, TokenType.LESS, TokenType.LESS_EQUAL, TokenType.EOF,
            ],
            "!!=!": [TokenType.BANG, TokenType.BANG_EQUAL, TokenType.BANG, TokenType.EOF],
            "===": [TokenType.EQUAL_EQUAL, TokenType.EQUAL, TokenType.EOF],
            "/": [TokenType.SLASH, TokenType.EOF],
            "": [TokenType.EOF],
            " \t\r\n": [TokenType.EOF],
        }
        for case, expected in cases.items():
            self.assertEqual(expected, types(case), repr(case))

    def test_literals(self):
        cases = {
            "123": [Token(TokenType.NUMBER, "123", 1, "123")],
            "45.67": [Token(TokenType.NUMBER, "45.67", 1, "45.67")],
            "1.": [Token(TokenType.NUMBER, "1", 1, "1"), Token(TokenType.DOT, ".", 1)],
            ".5": [Token(TokenType.DOT, ".", 1), Token(TokenType.NUMBER, "5", 1, "5")],
            '"hello world"': [Token(TokenType.STRING, '"hello world"', 1, "hello world")],
            '""': [Token(TokenType.STRING, '""', 1, "")],
            '"a\nb"': [Token(TokenType.STRING, '"a\nb"', 2, "a\nb")],
        }
        for case, expected in cases.items():
            scanner = Scanner(case)
            self.assertEqual(expected, scanner.scan_tokens()[:-1], repr(case))
            self.assertEqual(0, len(scanner.errors), repr(case))

    def test_identifiers(self):
        cases = {
            "and class else false fun for if nil or print return super this true var while": [
                TokenType.AND, TokenType.CLASS, TokenType.ELSE, TokenType.FALSE, TokenType.FUN, TokenType.FOR,
                TokenType.IF, TokenType.NIL, TokenType.OR, TokenType.PRINT, TokenType.RETURN, TokenType.SUPER,
                TokenType.THIS, TokenType.TRUE, TokenType.VAR, TokenType.WHILE, TokenType.EOF,
            ],
            "foo _bar x1 nil_ trueish": [TokenType.IDENTIFIER] * 5 + [TokenType.EOF],
        }
        for case, expected in cases.items():
            self.assertEqual(expected, types(case), case)

    def test_lines_and_comments(self):
        tokens = Scanner("1 // one\n// nothing here\n2 /\n3").scan_tokens()
        expected = [
            Token(TokenType.NUMBER, "1", 1, "1"),
            Token(TokenType.NUMBER, "2", 3, "2"),
            Token(TokenType.SLASH, "/", 3),
            Token(TokenType.NUMBER, "3", 4, "3"),
            Token(TokenType.EOF, "", 4),
        ]
        self.assertEqual(expected, tokens)

    def test_errors(self):
        cases = {
            '"abc': ["1: Unterminated string."],
            '"abc\n\n': ["3: Unterminated string."],
            "1 @ 2": ["1: Unexpected character."],
            "#\n$": ["1: Unexpected character.", "2: Unexpected character."],
            "é": ["1: Unexpected character."],
        }
        for case, expected in cases.items():
            scanner = Scanner(case)
            tokens = scanner.scan_tokens()
            self.assertIs(TokenType.EOF, tokens[-1].type, repr(case))
            self.assertEqual(expected, scanner.errors.render(), repr(case))

        # scanning carries on after an error
        self.assertEqual([TokenType.NUMBER, TokenType.NUMBER, TokenType.EOF], types("1 @ 2"))


if __name__ == '__main__':
    unittest.main()
