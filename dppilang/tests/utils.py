"""
Utility functions shared across DPPI Language tests.
"""
from pathlib import Path

from dppilang.evaluator import Evaluator
from dppilang.lexer import tokenize
from dppilang.parser import Parser

EXAMPLES_DIR = Path(__file__).resolve().parent / "examples"


def parse_source(source: str):
    """
    Parse source code and return the AST.
    """
    return Parser(source).parse_program()


def token_pairs(source: str) -> list[tuple]:
    """
    Tokenize source code and return ``(kind, literal)`` pairs.
    """
    return [(tok.kind, tok.literal) for tok in tokenize(source)]


def run_file(path: Path) -> list:
    """
    Run a file and return the per-statement results.
    """
    return Evaluator(path.read_text(encoding="utf-8")).eval_program()
