"""Syntax tree for DPPI.

Statements and expressions are immutable dataclasses. Each node renders
back to source-like text with ``str()``, which the debug printer and the
language server use.


File: ast.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Identifier:
    """
    Reference to a bound name.
    """
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class IntegerLiteral:
    """
    Signed 64-bit integer literal.
    """
    value: int

    def __str__(self) -> str:
        return str(self.value)


Expression = Union[Identifier, IntegerLiteral]


@dataclass(frozen=True)
class AssignStatement:
    """
    ``name = value``
    """
    name: str
    value: Expression

    def __str__(self) -> str:
        return f"{self.name} = {self.value}"


@dataclass(frozen=True)
class ExpressionStatement:
    expression: Expression

    def __str__(self) -> str:
        return str(self.expression)


@dataclass(frozen=True)
class PrintStatement:
    """
    ``print expression``
    """
    expression: Expression

    def __str__(self) -> str:
        return f"print {self.expression}"


@dataclass(frozen=True)
class BlockStatement:
    """
    ``scope { statement* }``, evaluated in a fresh enclosed environment.
    """
    statements: tuple[Statement, ...]

    def __str__(self) -> str:
        # Walks nested blocks with a stack so deep nesting renders too.
        parts = ["{"]
        stack = [[iter(self.statements), True]]
        while stack:
            frame = stack[-1]
            statement = next(frame[0], None)
            if statement is None:
                stack.pop()
                parts.append("}")
                continue
            if not frame[1]:
                parts.append(" ")
            frame[1] = False
            if isinstance(statement, BlockStatement):
                parts.append("{")
                stack.append([iter(statement.statements), True])
            else:
                parts.append(str(statement))
        return "".join(parts)


Statement = Union[AssignStatement, ExpressionStatement, PrintStatement, BlockStatement]


@dataclass(frozen=True)
class Program:
    """
    Top-level statements in source order.
    """
    statements: tuple[Statement, ...]

    def __iter__(self):
        return iter(self.statements)

    def __len__(self) -> int:
        return len(self.statements)

    def __getitem__(self, index):
        return self.statements[index]

    def __str__(self) -> str:
        return "\n".join(str(statement) for statement in self.statements)
