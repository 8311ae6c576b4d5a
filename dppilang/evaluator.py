"""Evaluator.

This is a tree-walk evaluator for DPPI programs.

1. Execution Model
The whole program is parsed first; a parse error propagates before any
statement runs. Top-level statements are then evaluated in source order
and each one yields a value, collected into the result list.

2. Environment
The evaluator holds one current environment. A block swaps in a fresh
environment enclosed by the current one, evaluates its statements and
restores the previous environment afterward, so nothing bound inside the
block is visible once it finishes.

3. Statements
- assignment binds the value in the current environment and yields null.
- print writes the value's text on its own line and yields null.
- a block yields the value of its last statement, or null when empty.
- an expression statement yields the expression's value.

4. Error Handling
Evaluation cannot fail. The only errors are the
:class:`~dppilang.exceptions.ParserError` subclasses raised while parsing.


File: evaluator.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
from typing import List, Optional

from dppilang.ast import (
    AssignStatement,
    BlockStatement,
    Expression,
    ExpressionStatement,
    Identifier,
    IntegerLiteral,
    PrintStatement,
    Statement,
)
from dppilang.environment import Environment
from dppilang.parser import Parser
from dppilang.values import NULL, IntegerValue, Value


class Evaluator:
    """
    Tree-walk evaluator for one DPPI program.
    """
    def __init__(self, source: str, env: Optional[Environment] = None):
        """
        Initialize the evaluator.

        Parameters:
            source (str): The program text.
            env (Environment): Root environment to evaluate in. A fresh one
                is created when omitted.
        """
        self.parser = Parser(source)
        self.env = env if env is not None else Environment()

    def eval_program(self) -> List[Value]:
        """
        Parse and evaluate the program.

        Returns:
            list[Value]: One value per top-level statement.

        Raises:
            ParserError: If the program does not parse. Nothing is evaluated.
        """
        program = self.parser.parse_program()
        return [self.eval_statement(statement) for statement in program]

    def eval_statement(self, statement: Statement) -> Value:
        """
        Evaluate a single statement against the current environment.
        """
        match statement:
            case AssignStatement(name, value):
                self.env.set(name, self.eval_expression(value))
                return NULL
            case ExpressionStatement(expression):
                return self.eval_expression(expression)
            case PrintStatement(expression):
                print(self.eval_expression(expression))
                return NULL
            case BlockStatement(statements):
                return self._eval_block(statements)
            case _:
                raise TypeError(f"Unknown statement {statement!r}")

    def _eval_block(self, statements) -> Value:
        """
        Evaluate a block and every block nested in it.

        Open blocks are kept on an explicit stack of
        ``(remaining statements, environment to restore)`` frames, so
        nesting depth is not bounded by the call stack. ``result`` always
        holds the value of the last statement finished, which is also the
        value of a block once its frame is exhausted.
        """
        outer = self.env
        frames = [(iter(statements), outer)]
        self.env = outer.enclosed()
        result = NULL
        try:
            while frames:
                remaining, parent = frames[-1]
                statement = next(remaining, None)
                if statement is None:
                    frames.pop()
                    self.env = parent
                elif isinstance(statement, BlockStatement):
                    frames.append((iter(statement.statements), self.env))
                    self.env = self.env.enclosed()
                    result = NULL
                else:
                    result = self.eval_statement(statement)
        finally:
            self.env = outer
        return result

    def eval_expression(self, expression: Expression) -> Value:
        """
        Evaluate an expression node to a value.
        """
        match expression:
            case IntegerLiteral(value):
                return IntegerValue(value)
            case Identifier(name):
                return self.env.get(name)
            case _:
                raise TypeError(f"Unknown expression {expression!r}")


def evaluate(source: str) -> List[Value]:
    """
    Evaluate ``source`` with a fresh evaluator and return its results.
    """
    return Evaluator(source).eval_program()
