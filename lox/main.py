"""Runs Lox expressions from a file or in command-line mode. Also uses error handling context manager. Called from the
lox console script.

Program flow:
    1. Scanner (lang/scanner.py): source text to tokens
    2. Parser (pure/parser.py): tokens to an expression tree, collecting every syntax error
    3. Printer (pure/printer.py): the tree is echoed as an s-expression
    4. Evaluator (pure/evaluator.py): walks the tree to a value, stopping at the first type error
"""

import argparse
import sys

from lox.lang.error import ErrorHandler
from lox.lang.session import Session
from lox.lang.shell import Shell


def main(argv=None):
    """Runs the Lox interpreter. Called from the lox console script."""
    assert sys.version_info >= (3, 7), "lox cannot be run with python < 3.7"

    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(prog="lox")
        parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
        parser.add_argument("--tokens", help="print scanned tokens and the parsed tree before evaluating",
                            action="store_true")
        args = parser.parse_args(argv)

        if args.file is not None:
            sess = Session(error_handler, args.file, cmd_line=False, show_tokens=args.tokens)
            sess.run()

        else:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True, show_tokens=args.tokens)).cmdloop()


if __name__ == "__main__":
    main()
