"""Parser.

This is a recursive descent parser with two tokens of lookahead.

1. Lookahead State
The parser holds the token under examination (``current``) and the token
after it (``next``). :meth:`Parser.advance` shifts ``next`` into
``current`` and pulls a fresh token from the lexer; it is the only way the
lookahead state changes. Two advances at construction fill both slots.

2. Grammar Rules
Statement and expression rules live in :mod:`.statements` and
:mod:`.expressions` as plain functions taking the parser, and are bound
here as methods. Each statement rule leaves ``current`` on the last token
it consumed; the caller advances past it.

3. Errors
Parsing is fail-fast. The first unexpected token or bad integer literal
raises a :class:`~dppilang.exceptions.ParserError` and no partial program
is returned.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dppilang.ast import Program
from dppilang.exceptions import UnexpectedToken
from dppilang.lexer import Lexer
from dppilang.tokens import Token, TokenKind

from .expressions import parse_expression
from .statements import (
    parse_assign,
    parse_block,
    parse_expression_statement,
    parse_print,
    parse_statement,
)


class Parser:
    """
    DPPI parser.
    """
    def __init__(self, source: str):
        """
        Initialize the parser over ``source`` and prime the lookahead.

        Parameters:
            source (str): The program text.
        """
        self._lexer = Lexer(source)
        self.current = Token(TokenKind.EOF, '')
        self.next = Token(TokenKind.EOF, '')

        self.advance()
        self.advance()

    parse_statement = parse_statement
    parse_block = parse_block
    parse_print = parse_print
    parse_assign = parse_assign
    parse_expression_statement = parse_expression_statement
    parse_expression = parse_expression

    def advance(self) -> None:
        """
        Shift ``next`` into ``current`` and read a new ``next`` token.
        """
        self.current, self.next = self.next, self._lexer.next_token()

    def expect(self, kind: TokenKind) -> Token:
        """
        Advance onto the next token if it has the expected kind.

        Parameters:
            kind (TokenKind): The required kind of the next token.

        Returns:
            Token: The token now current.

        Raises:
            UnexpectedToken: If the next token has any other kind.
        """
        if self.next.kind != kind:
            raise UnexpectedToken(self.next)
        self.advance()
        return self.current

    def parse_program(self) -> Program:
        """
        Parse statements until the end of input.

        Returns:
            Program: The top-level statements in source order.

        Raises:
            ParserError: On the first syntax or literal error.
        """
        statements = []
        while self.current.kind != TokenKind.EOF:
            statements.append(self.parse_statement())
            self.advance()
        return Program(tuple(statements))
