"""Lexical scanning for Lox source text. Produces the token list the parser consumes.

```
<number>     ::= <digit>+ ( "." <digit>+ )?      ; "1." is NUMBER followed by DOT
<string>     ::= '"' <char>* '"'                  ; may span lines, no escapes
<identifier> ::= ( <alpha> | "_" ) ( <alpha> | <digit> | "_" )*
<comment>    ::= "//" <char>*                     ; to end of line
```

Like the parser, the scanner does not stop at the first problem: unexpected characters and unterminated strings are
recorded in Scanner.errors and scanning carries on.
"""

from lox.lang.error import Diagnostic, DiagnosticList
from lox.pure.tokens import SYMBOLS, Token, TokenType, keyword


class Scanner:
    """Scans one source string. A Scanner is single use."""
    WHITESPACE = " \r\t"

    def __init__(self, source):
        self.source = source
        self.tokens = []
        self.errors = DiagnosticList()

        self.start = 0
        self.current = 0
        self.line = 1

    def scan_tokens(self):
        """Returns the list of tokens in self.source, always terminated by an EOF token."""
        while not self.is_at_end():
            self.start = self.current
            self.scan_token()

        self.tokens.append(Token(TokenType.EOF, "", self.line))
        return self.tokens

    def scan_token(self):
        char = self.advance()

        if char in Scanner.WHITESPACE:
            return
        elif char == "\n":
            self.line += 1
        elif char == "/" and self.match("/"):
            while self.peek() != "\n" and not self.is_at_end():
                self.advance()
        elif char == '"':
            self.string()
        elif self.is_digit(char):
            self.number()
        elif self.is_alpha(char):
            self.identifier()
        elif self.peek() and char + self.peek() in SYMBOLS:  # two-character operators: != == <= >=
            self.advance()
            self.add_token(SYMBOLS[self.source[self.start:self.current]])
        elif char in SYMBOLS:
            self.add_token(SYMBOLS[char])
        else:
            self.errors.push(Diagnostic("Unexpected character.", line=self.line))

    def string(self):
        while self.peek() != '"' and not self.is_at_end():
            if self.peek() == "\n":
                self.line += 1
            self.advance()

        if self.is_at_end():
            self.errors.push(Diagnostic("Unterminated string.", line=self.line))
            return

        self.advance()  # closing "
        self.add_token(TokenType.STRING, self.source[self.start + 1:self.current - 1])

    def number(self):
        while self.is_digit(self.peek()):
            self.advance()

        if self.peek() == "." and self.is_digit(self.peek_next()):
            self.advance()
            while self.is_digit(self.peek()):
                self.advance()

        self.add_token(TokenType.NUMBER, self.source[self.start:self.current])

    def identifier(self):
        while self.is_alpha(self.peek()) or self.is_digit(self.peek()):
            self.advance()

        text = self.source[self.start:self.current]
        self.add_token(keyword(text) or TokenType.IDENTIFIER)

    def add_token(self, token_type, literal=None):
        self.tokens.append(Token(token_type, self.source[self.start:self.current], self.line, literal))

    def match(self, expected):
        if self.peek() != expected:
            return False
        self.current += 1
        return True

    def advance(self):
        self.current += 1
        return self.source[self.current - 1]

    def peek(self):
        return self.source[self.current] if not self.is_at_end() else ""

    def peek_next(self):
        return self.source[self.current + 1] if self.current + 1 < len(self.source) else ""

    def is_at_end(self):
        return self.current >= len(self.source)

    @staticmethod
    def is_digit(char):
        return len(char) == 1 and "0" <= char <= "9"

    @staticmethod
    def is_alpha(char):
        return len(char) == 1 and ("a" <= char <= "z" or "A" <= char <= "Z" or char == "_")
