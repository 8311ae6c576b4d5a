"""Lexer for DPPI.

The lexer scans source text on demand: each call to
:meth:`Lexer.next_token` skips whitespace, then makes a single decision on
the class of the character under the cursor and consumes the matching run.

Tokens cover identifiers, the ``scope`` and ``print`` keywords, decimal
integer literals and the ``=``, ``{`` and ``}`` delimiters. Any other
character becomes an ``ILLEGAL`` token rather than an error, so scanning
never fails and the parser decides what to reject.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re
from typing import Iterator

from dppilang.tokens import Token, TokenKind, lookup_identifier

_WHITESPACE_RUN = re.compile(r'\s+')
_IDENTIFIER_RUN = re.compile(r'\w+')
_DIGIT_RUN = re.compile(r'[0-9]+')

_SINGLE_CHAR_TOKENS = {
    '=': TokenKind.ASSIGN,
    '{': TokenKind.LBRACE,
    '}': TokenKind.RBRACE,
}

_ASCII_DIGITS = frozenset('0123456789')


class Lexer:
    """
    On-demand tokenizer over a source string.
    """
    def __init__(self, source: str):
        """
        Initialize the lexer at the start of ``source``.

        Parameters:
            source (str): The program text to scan.
        """
        self._source = source
        self._position = 0
        self._line = 1
        self._line_start = 0

    def __iter__(self) -> Iterator[Token]:
        """
        Yield tokens up to and including the first EOF token.
        """
        while True:
            token = self.next_token()
            yield token
            if token.kind == TokenKind.EOF:
                return

    def _column(self) -> int:
        return self._position - self._line_start + 1

    def _eat(self, pattern: re.Pattern) -> str:
        """
        Consume the run matched by ``pattern`` at the cursor and return it.
        """
        match = pattern.match(self._source, self._position)
        text = match.group()
        self._position = match.end()
        return text

    def _skip_whitespace(self) -> None:
        match = _WHITESPACE_RUN.match(self._source, self._position)
        if match is None:
            return
        text = match.group()
        newlines = text.count('\n')
        if newlines:
            self._line += newlines
            self._line_start = match.start() + text.rindex('\n') + 1
        self._position = match.end()

    def next_token(self) -> Token:
        """
        Return the next token and advance past it.

        Once the end of input is reached every further call returns an
        EOF token.

        Returns:
            Token: The scanned token.
        """
        self._skip_whitespace()
        line, column = self._line, self._column()

        if self._position >= len(self._source):
            return Token(TokenKind.EOF, '', line, column)

        char = self._source[self._position]

        kind = _SINGLE_CHAR_TOKENS.get(char)
        if kind is not None:
            self._position += 1
            return Token(kind, char, line, column)

        if char.isalpha() or char == '_':
            literal = self._eat(_IDENTIFIER_RUN)
            return Token(lookup_identifier(literal), literal, line, column)

        if char in _ASCII_DIGITS:
            literal = self._eat(_DIGIT_RUN)
            return Token(TokenKind.INTEGER, literal, line, column)

        self._position += 1
        return Token(TokenKind.ILLEGAL, char, line, column)


def tokenize(source: str) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        source (str): The source code to tokenize.

    Returns:
        list[Token]: The tokens, ending with a single EOF token.
    """
    return list(Lexer(source))
