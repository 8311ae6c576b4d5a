"""Token model for DPPI.

Every token carries its kind, the literal source text it was scanned from
and the 1-based line and column of its first character.


File: tokens.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    """
    Enumeration of token kinds produced by the lexer.
    """

    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    ID = "ID"
    INTEGER = "INTEGER"

    ASSIGN = "ASSIGN"

    LBRACE = "LBRACE"
    RBRACE = "RBRACE"

    # Keywords
    SCOPE = "SCOPE"
    PRINT = "PRINT"

    def __str__(self) -> str:
        """
        Return the human-readable form used in diagnostics.
        """
        return _DISPLAY[self]


_DISPLAY = {
    TokenKind.ILLEGAL: "illegal",
    TokenKind.EOF: "eof",
    TokenKind.ID: "identifier",
    TokenKind.INTEGER: "integer",
    TokenKind.ASSIGN: "=",
    TokenKind.LBRACE: "{",
    TokenKind.RBRACE: "}",
    TokenKind.SCOPE: "scope",
    TokenKind.PRINT: "print",
}

KEYWORDS: dict[str, TokenKind] = {
    "scope": TokenKind.SCOPE,
    "print": TokenKind.PRINT,
}


def lookup_identifier(text: str) -> TokenKind:
    """
    Classify identifier text as a keyword or a plain identifier.

    Parameters:
        text (str): The scanned identifier text.

    Returns:
        TokenKind: The keyword kind, or ``TokenKind.ID``.
    """
    return KEYWORDS.get(text, TokenKind.ID)


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token with a kind and literal text.
    """

    kind: TokenKind
    literal: str
    line: int = 1
    column: int = 1

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.kind.value}, {self.literal!r}, line={self.line})"
