"""
DPPI Language Interpreter

This is the main entry point for the DPPI language interpreter.

Workflow:
1. Each `.dppi` script named on the command line is read in turn.
2. The Lexer scans the source code into tokens on demand.
3. The Parser processes tokens into an AST following the language grammar.
4. The Evaluator walks the AST, binding names and printing values.

A script that fails to parse stops the run with a non-zero exit status.
"""
import os
import sys

from dppilang.environment import Environment
from dppilang.evaluator import Evaluator
from dppilang.exceptions import DppiError, UnexpectedToken
from dppilang.lexer import tokenize
from dppilang.parser import Parser
from dppilang.tokens import TokenKind
from dppilang.values import NullValue

SCRIPT_SUFFIX = ".dppi"
SEPARATOR = "-" * 36


def print_usage():
    """
    Print usage.
    """
    print()
    print("DPPI Language Interpreter")
    print()
    print("Usage:")
    print("    dppi <script.dppi> [<script.dppi> ...]")
    print()
    print("Arguments:")
    print("    <script.dppi>")
    print("        Path to a DPPI language source file to execute. Files run in")
    print("        the order given, each in its own fresh environment.")
    print()
    print("Example:")
    print("    dppi hello.dppi")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")
    print()
    print("Environment:")
    print("    DPPIDEBUG")
    print("        When set, print the tokens and AST of each script before running it.")


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    print(tokens)
    print("\nAST:\n")
    print(ast)
    print(" ")


def run_script(index: int, script_name: str) -> bool:
    """
    Run a DPPI script, returning ``False`` if it failed to parse.
    """
    with open(script_name, "r", encoding="utf-8") as f:
        code = f.read()

    print(f"Output for file {index}: {script_name}:")

    try:
        if os.environ.get('DPPIDEBUG'):
            debug_print_tokens_ast(tokenize(code), Parser(code).parse_program())

        Evaluator(code).eval_program()
    except DppiError as e:
        print(f"| DPPI Error |\n{e}", file=sys.stderr)
        return False

    print(SEPARATOR)
    return True


def run_repl():
    """
    Run the interactive REPL

    Input that stops at end of input mid-statement (an open ``scope {``,
    a dangling ``=``) is buffered and continued on the next line.
    """
    print("DPPI Language Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    env = Environment()
    buffer: list[str] = []
    while True:
        try:
            prompt = ">>> " if not buffer else "... "
            line = input(prompt)
            if line.strip() in {"exit", "quit"}:
                break
            buffer.append(line)
            source = "\n".join(buffer)
            try:
                results = Evaluator(source, env).eval_program()
            except UnexpectedToken as e:
                # Unfinished input, a failed parse has evaluated nothing yet
                if e.token.kind == TokenKind.EOF:
                    continue
                print(f"{type(e).__name__}: {e}")
            except DppiError as e:
                print(f"{type(e).__name__}: {e}")
            else:
                for value in results:
                    if not isinstance(value, NullValue):
                        print(value)
            buffer.clear()
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One or more `.dppi` paths: run each script in order, stopping at the
      first one that fails.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = argv[1:]
    if not args:
        run_repl()
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if all(arg.endswith(SCRIPT_SUFFIX) for arg in args):
        for index, script_name in enumerate(args, start=1):
            if not run_script(index, script_name):
                return 1
        return 0
    print_usage()
    return 1


def run():
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    run()
