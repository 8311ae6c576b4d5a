"""Expression parsing utilities for DPPI.

An expression is a single token: an integer literal or an identifier.
There are no operators and no grouping.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re
from typing import TYPE_CHECKING

from dppilang.ast import Expression, Identifier, IntegerLiteral
from dppilang.exceptions import (
    IntegerLiteralParseError,
    IntegerLiteralRangeError,
    UnexpectedToken,
)
from dppilang.tokens import Token, TokenKind

if TYPE_CHECKING:
    from dppilang.parser import Parser

INT_MIN = -2**63
INT_MAX = 2**63 - 1

_INTEGER_TEXT = re.compile(r'[+-]?[0-9]+')
_MAX_DIGITS = len(str(INT_MAX))


def parse_integer_literal(token: Token) -> int:
    """
    Convert the text of an integer token to a signed 64-bit value.

    Args:
        token: The INTEGER token.

    Returns:
        int: The literal value.

    Raises:
        IntegerLiteralParseError: If the text is not a decimal digit run.
        IntegerLiteralRangeError: If the value does not fit in 64 bits.
    """
    text = token.literal
    if not _INTEGER_TEXT.fullmatch(text):
        raise IntegerLiteralParseError(text, token.line)

    # Skip converting huge digit runs, they can never fit.
    if len(text.lstrip('+-').lstrip('0')) > _MAX_DIGITS:
        raise IntegerLiteralRangeError(text, token.line)

    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        raise IntegerLiteralRangeError(text, token.line)
    return value


def parse_expression(parser: 'Parser', pre_advance: bool = False) -> Expression:
    """
    Parse a single-token expression.

    Syntax:
        <integer> | <identifier>

    Args:
        parser: The parser instance.
        pre_advance: Advance before reading, for callers that have not
            yet moved onto the expression's token.

    Returns:
        Expression: The parsed expression node.

    Raises:
        UnexpectedToken: If the token is neither an integer nor an identifier.
    """
    if pre_advance:
        parser.advance()

    tok = parser.current
    if tok.kind == TokenKind.INTEGER:
        return IntegerLiteral(parse_integer_literal(tok))
    elif tok.kind == TokenKind.ID:
        return Identifier(tok.literal)
    raise UnexpectedToken(tok)
