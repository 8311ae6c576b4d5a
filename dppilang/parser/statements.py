"""Statement parsing utilities for DPPI.

These functions operate on a :class:`dppilang.parser.Parser` instance and
handle the statement forms of the language: blocks, print statements,
assignments and bare expressions. Each one is entered with the first token
of its statement as ``parser.current`` and returns with the last token of
the statement as ``parser.current``.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from dppilang.ast import (
    AssignStatement,
    BlockStatement,
    ExpressionStatement,
    PrintStatement,
    Statement,
)
from dppilang.exceptions import UnexpectedToken
from dppilang.tokens import TokenKind

if TYPE_CHECKING:
    from dppilang.parser import Parser


def parse_statement(parser: 'Parser') -> Statement:
    """
    Parse a single statement, dispatching on the current token.

    Syntax:
        <block> | <print> | <assign> | <expression>

    Args:
        parser: The parser instance.

    Returns:
        Statement: The parsed statement node.
    """
    kind = parser.current.kind
    if kind == TokenKind.SCOPE:
        return parser.parse_block()
    elif kind == TokenKind.PRINT:
        return parser.parse_print()
    elif kind == TokenKind.ID and parser.next.kind == TokenKind.ASSIGN:
        return parser.parse_assign()
    else:
        return parser.parse_expression_statement()


def _open_block(parser: 'Parser') -> None:
    """
    Step over ``scope {``, leaving the first token inside the block current.
    """
    # keyword
    parser.advance()
    if parser.current.kind != TokenKind.LBRACE:
        raise UnexpectedToken(parser.current)

    # left brace
    parser.advance()


def parse_block(parser: 'Parser') -> BlockStatement:
    """
    Parse a scoped block of statements.

    Nested blocks are collected on an explicit stack of open blocks rather
    than by recursion, so nesting depth is not bounded by the call stack.

    Syntax:
        scope { <statement>* }

    Args:
        parser: The parser instance.

    Returns:
        BlockStatement: The block, ending on its closing brace.

    Raises:
        UnexpectedToken: If ``scope`` is not followed by ``{``, or input
            ends before the closing ``}``.
    """
    _open_block(parser)
    open_blocks: list[list[Statement]] = [[]]
    while True:
        kind = parser.current.kind
        if kind == TokenKind.RBRACE:
            block = BlockStatement(tuple(open_blocks.pop()))
            if not open_blocks:
                return block
            open_blocks[-1].append(block)
        elif kind == TokenKind.SCOPE:
            _open_block(parser)
            open_blocks.append([])
            continue
        else:
            open_blocks[-1].append(parser.parse_statement())
        parser.advance()


def parse_print(parser: 'Parser') -> PrintStatement:
    """
    Parse a print statement.

    Syntax:
        print <expression>

    Args:
        parser: The parser instance.

    Returns:
        PrintStatement
    """
    parser.advance()
    return PrintStatement(parser.parse_expression())


def parse_assign(parser: 'Parser') -> AssignStatement:
    """
    Parse an assignment.

    Syntax:
        <identifier> = <expression>

    Args:
        parser: The parser instance.

    Returns:
        AssignStatement
    """
    name = parser.current.literal
    parser.expect(TokenKind.ASSIGN)
    value = parser.parse_expression(pre_advance=True)
    return AssignStatement(name, value)


def parse_expression_statement(parser: 'Parser') -> ExpressionStatement:
    """
    Parse a bare expression used as a statement.
    """
    return ExpressionStatement(parser.parse_expression())
