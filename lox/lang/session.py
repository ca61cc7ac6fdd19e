"""Session control for the Lox interpreter: feeds source text through scanner, parser and evaluator, either for a whole
file or for one line at a time from the shell.
"""

from termcolor import colored

from lox.lang.error import DiagnosticList, LoxException, ParseError
from lox.lang.scanner import Scanner
from lox.pure.evaluator import Evaluator
from lox.pure.parser import Parser
from lox.pure.printer import AstPrinter


class Session:
    """Governs a Lox session. Nothing carries over from one expression to the next: there are no variables yet."""
    SH_FILE = "<in>"  # command-line interpreter filename
    TREE = "yellow"

    def __init__(self, error_handler, path, cmd_line, show_tokens=False):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path                # used for error messages
        self.cmd_line = cmd_line        # whether or not in command-line mode
        self.show_tokens = show_tokens  # whether or not to print scanned tokens and the tree dump

        self.printer = AstPrinter()
        self.evaluator = Evaluator()

        self.to_exec = []  # parsed expressions waiting for run
        self.results = []  # values run but not yet popped

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            try:
                with open(path, "r") as file:
                    source = file.read()
            except OSError:
                raise LoxException(f"'{path}' could not be opened")

            self.add(source)

        elif not cmd_line:
            raise LoxException(f"'{Session.SH_FILE}' is a reserved filename")

    def add(self, source):
        """Scans and parses source, prints its tree and queues it for run. Raises ParseError with every scanner and
        parser diagnostic if there were any, in which case nothing is queued.
        """
        scanner = Scanner(source)
        tokens = scanner.scan_tokens()

        if self.show_tokens:
            for token in tokens:
                print(token)

        parser = Parser(tokens)
        expr = parser.parse()

        errors = DiagnosticList()
        errors.append(scanner.errors)
        errors.append(parser.errors)
        if errors:
            raise ParseError(errors)

        if self.show_tokens:
            print(expr.display())

        print(colored(self.printer.print(expr), Session.TREE))
        self.to_exec.append(expr)
        return expr

    def run(self):
        """Evaluates every queued expression in order. Stops at the first EvaluationError, which is raised.

        Outside command-line mode each value is printed as it is computed. In command-line mode printing is left to the
        shell, which pops the result.
        """
        try:
            while self.to_exec:
                value = self.evaluator.interpret(self.to_exec.pop(0))
                self.results.append(value)
                if not self.cmd_line:
                    print(value)
        finally:
            self.to_exec = []

    def pop(self):
        """Returns and removes the most recent result."""
        return self.results.pop()
