"""Token vocabulary shared by the scanner, parser, evaluator and printer.

Each TokenType's value is its canonical symbol text, so TokenType("(") is TokenType.LEFT_PAREN. Kinds without a fixed
spelling (literals, EOF, the parser's error placeholder) use a descriptive name instead.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TokenType(Enum):
    # single-character tokens
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    COMMA = ","
    DOT = "."
    MINUS = "-"
    PLUS = "+"
    SEMICOLON = ";"
    SLASH = "/"
    STAR = "*"

    # one or two character tokens
    BANG = "!"
    BANG_EQUAL = "!="
    EQUAL = "="
    EQUAL_EQUAL = "=="
    GREATER = ">"
    GREATER_EQUAL = ">="
    LESS = "<"
    LESS_EQUAL = "<="

    # literals
    IDENTIFIER = "identifier"
    STRING = "string"
    NUMBER = "number"

    # keywords
    AND = "and"
    CLASS = "class"
    ELSE = "else"
    FALSE = "false"
    FUN = "fun"
    FOR = "for"
    IF = "if"
    NIL = "nil"
    OR = "or"
    PRINT = "print"
    RETURN = "return"
    SUPER = "super"
    THIS = "this"
    TRUE = "true"
    VAR = "var"
    WHILE = "while"

    EOF = "eof"
    ERROR = "error"  # placeholder substituted by the parser after a syntax error

    def __str__(self):
        return self.value


LITERALS = frozenset({TokenType.IDENTIFIER, TokenType.STRING, TokenType.NUMBER})

KEYWORDS = {
    token_type.value: token_type
    for token_type in TokenType
    if token_type.value.isalpha() and token_type not in LITERALS | {TokenType.EOF, TokenType.ERROR}
}

SYMBOLS = {token_type.value: token_type for token_type in TokenType if not token_type.value.isalpha()}


def keyword(text):
    """Returns the keyword TokenType spelled by text, or None if text is an ordinary identifier."""
    return KEYWORDS.get(text)


@dataclass(frozen=True)
class Token:
    """Smallest lexical unit. literal holds the numeral text of a NUMBER (converted to a float only when evaluated) or
    the unquoted content of a STRING.
    """
    type: TokenType
    lexeme: str
    line: int
    literal: Optional[str] = None

    def __str__(self):
        return f"{self.type.name} {self.lexeme} [{self.line}]"
