"""Recursive-descent parser for Lox expressions.

Grammar, loosest binding first:

```
<expression> ::= <equality>
<equality>   ::= <comparison> ( ( "!=" | "==" ) <comparison> )*
<comparison> ::= <term> ( ( ">" | ">=" | "<" | "<=" ) <term> )*
<term>       ::= <factor> ( ( "-" | "+" ) <factor> )*
<factor>     ::= <unary> ( ( "/" | "*" ) <unary> )*
<unary>      ::= ( "!" | "-" ) <unary>                      ; right-associative: !!x = !(!x)
               | <primary>
<primary>    ::= NUMBER | STRING | "true" | "false" | "nil"
               | "(" <expression> ")"
```

Binary operators associate by left: 1 - 2 - 3 = ((1 - 2) - 3). The parser looks exactly one token ahead and never
backtracks.

Syntax errors never stop a parse. Each one is recorded in Parser.errors and a placeholder is substituted so the
surrounding rules still complete, which means every syntax error in a source is reported in one pass.
"""

from lox.lang.error import Diagnostic, DiagnosticList
from lox.pure.expr import Binary, Grouping, Literal, Unary
from lox.pure.tokens import TokenType


class Parser:
    """Parses one token list into one expression tree. A Parser is single use."""
    STATEMENT_STARTS = frozenset({
        TokenType.CLASS,
        TokenType.FUN,
        TokenType.VAR,
        TokenType.FOR,
        TokenType.IF,
        TokenType.WHILE,
        TokenType.PRINT,
        TokenType.RETURN,
    })

    def __init__(self, tokens):
        """tokens must end with an EOF token."""
        if not tokens or tokens[-1].type is not TokenType.EOF:
            raise AssertionError("token list must end with EOF")

        self.tokens = tokens
        self.current = 0
        self.errors = DiagnosticList()

    def parse(self):
        """Returns the root of the parsed tree, or None if any syntax errors were recorded in self.errors."""
        expr = self.expression()

        if not self.is_at_end() and not self.errors:
            self.error(self.peek(), "Expect end of expression.")

        if self.errors:
            return None
        return expr

    def expression(self):
        return self.equality()

    def equality(self):
        return self._left_assoc(self.comparison, TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)

    def comparison(self):
        return self._left_assoc(
            self.term, TokenType.GREATER, TokenType.GREATER_EQUAL, TokenType.LESS, TokenType.LESS_EQUAL
        )

    def term(self):
        return self._left_assoc(self.factor, TokenType.MINUS, TokenType.PLUS)

    def factor(self):
        return self._left_assoc(self.unary, TokenType.SLASH, TokenType.STAR)

    def unary(self):
        if self.match(TokenType.BANG, TokenType.MINUS):
            operator = self.previous()
            return Unary(operator, self.unary())
        return self.primary()

    def primary(self):
        if self.match(TokenType.FALSE, TokenType.TRUE, TokenType.NIL, TokenType.NUMBER, TokenType.STRING):
            token = self.previous()
            return Literal(token.type, token.literal)

        if self.match(TokenType.LEFT_PAREN):
            expr = self.expression()
            self.consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr)

        # not consumed: whatever comes next gets a chance to match it
        self.error(self.peek(), "Expect expression.")
        return Literal(TokenType.ERROR)

    def _left_assoc(self, operand, *types):
        """Parses operand (operator operand)*, folding each new operator into the left operand."""
        expr = operand()

        while self.match(*types):
            operator = self.previous()
            right = operand()
            expr = Binary(expr, operator, right)

        return expr

    def match(self, *types):
        """Consumes the current token and returns True if it is any of types."""
        for token_type in types:
            if self.check(token_type):
                self.advance()
                return True
        return False

    def check(self, token_type):
        if self.is_at_end():
            return False
        return self.peek().type is token_type

    def consume(self, token_type, msg):
        """Consumes and returns the type of the current token if it is token_type. Otherwise records msg against the
        current token and returns TokenType.ERROR without consuming anything.
        """
        if self.check(token_type):
            return self.advance().type

        self.error(self.peek(), msg)
        return TokenType.ERROR

    def error(self, token, msg):
        self.errors.push(Diagnostic(msg, token))

    def synchronize(self):
        """Discards tokens until a likely statement boundary: just after a ';' or just before a keyword that starts a
        statement. Expressions have no such boundaries yet, so nothing calls this during an expression parse.
        """
        self.advance()

        while not self.is_at_end():
            if self.previous().type is TokenType.SEMICOLON:
                return
            if self.peek().type in Parser.STATEMENT_STARTS:
                return
            self.advance()

    def is_at_end(self):
        return self.peek().type is TokenType.EOF

    def peek(self):
        return self.tokens[self.current]

    def previous(self):
        return self.tokens[self.current - 1]

    def advance(self):
        if not self.is_at_end():
            self.current += 1
        return self.previous()
