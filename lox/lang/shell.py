"""Handles interactive/command-line mode for the Lox interpreter. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """Lox expression shell. Each line is a complete, independent expression."""
    intro = "Lox expression interpreter :: Python backend\nType 'help' for more information, ^D to end."
    prompt = "> "

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.sess = sess

    def default(self, line):
        """Parses, prints and evaluates a Lox expression."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.sess.add(line)
            self.sess.run()
            if self.sess.results:
                print(self.sess.pop())

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the Lox expression interpreter!\n\n"
              "Type an expression made of numbers, strings, true, false, nil, parentheses and \n"
              "the operators ! - + * / == != < <= > >=. The interpreter prints the parsed \n"
              "tree, then its value. Try '-1 * (2 + 3)' or '\"lo\" + \"x\"'.")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
