"""Error handling for the Lox interpreter. Syntax and runtime problems are recorded as Diagnostics; only LoxExceptions
should be encountered while running. If another type of error makes it all the way to ErrorHandler, it is assumed to be
an internal issue.
"""

import sys

from termcolor import colored

from lox.pure.tokens import TokenType


class Diagnostic:
    """A single error record. token and line are both optional: scanner errors only know their line, and some errors
    know neither.
    """

    def __init__(self, message, token=None, line=None):
        if line is None and token is not None:
            line = token.line

        self.message = message
        self.token = token
        self.line = line

    def render(self):
        """Returns the user-facing text of this diagnostic."""
        if self.token is not None and self.token.type is TokenType.EOF:
            msg = f"at end - {self.message}"
        elif self.token is not None:
            msg = f"at '{self.token.lexeme}' - {self.message}"
        else:
            msg = self.message

        if self.line is not None:
            return f"{self.line}: {msg}"
        return msg

    def __repr__(self):
        return f"Diagnostic({self.render()!r})"

    def __str__(self):
        return self.render()

    def __eq__(self, other):
        return isinstance(other, Diagnostic) and (self.message, self.token, self.line) == (
            other.message, other.token, other.line
        )


class DiagnosticList:
    """Ordered, append-only collection of Diagnostics. Lists are merged by value with append."""

    def __init__(self, diagnostics=None):
        self._diagnostics = list(diagnostics) if diagnostics else []

    @classmethod
    def single(cls, diagnostic):
        return cls([diagnostic])

    def push(self, diagnostic):
        """Adds one diagnostic to the end of this list."""
        self._diagnostics.append(diagnostic)

    def append(self, other):
        """Adds every diagnostic in other to the end of this list, preserving the order of both."""
        self._diagnostics.extend(other)

    def render(self):
        return [diagnostic.render() for diagnostic in self._diagnostics]

    def __iter__(self):
        return iter(self._diagnostics)

    def __len__(self):
        return len(self._diagnostics)

    def __getitem__(self, idx):
        return self._diagnostics[idx]

    def __repr__(self):
        return f"DiagnosticList({self._diagnostics!r})"


class LoxException(Exception):
    """Carries one or more Diagnostics up to ErrorHandler. msg may be a plain string, a Diagnostic or a DiagnosticList.
    """

    def __init__(self, msg, internal=False):
        if isinstance(msg, str):
            msg = Diagnostic(msg)
        if isinstance(msg, Diagnostic):
            msg = DiagnosticList.single(msg)

        super().__init__("\n".join(msg.render()))
        self.diagnostics = msg
        self.internal = internal


class ParseError(LoxException):
    """Raised when scanning or parsing produced any diagnostics. Gates evaluation."""


class EvaluationError(LoxException):
    """Raised by the evaluator on the first runtime/type error in an expression."""

    @property
    def diagnostic(self):
        return self.diagnostics[0]


class ErrorHandler:
    """Context manager that will silently suppress Python errors and report Lox diagnostics instead."""
    ERROR = "red"

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.errors = 0
        self.path = None

    def register_file(self, path):
        """Registers the file that diagnostics will be reported against."""
        self.path = path

    def report(self, diagnostics):
        """Prints every diagnostic in diagnostics, one per line, in order."""
        for diagnostic in diagnostics:
            print(colored(diagnostic.render(), ErrorHandler.ERROR))

    def throw(self, error):
        """Reports error, a LoxException. Exits if this handler is fatal."""
        self.errors += len(error.diagnostics)

        if error.internal:
            location = f"{self.path}: " if self.path else ""
            print(colored(f"{location}[internal] error: ", ErrorHandler.ERROR, attrs=["bold"]) + str(error))
        else:
            self.report(error.diagnostics)

        if self.fatal:
            sys.exit(1)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(LoxException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(LoxException("expression is nested too deeply"))
        elif exc_type is not None and issubclass(exc_type, LoxException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(LoxException(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True))
            do_exit = True

        return not do_exit
