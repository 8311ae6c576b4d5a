"""Errors.

Parsing is fail-fast: the first error aborts the whole parse and surfaces
through the evaluator unchanged. Evaluation itself raises nothing.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class DppiError(Exception):
    """
    Base class for all DPPI language errors.
    """


class ParserError(DppiError):
    """
    Error raised while turning source text into a syntax tree.
    """


class UnexpectedToken(ParserError):
    """
    Error for a token that is not allowed at its position in the grammar.
    """
    def __init__(self, token):
        self.token = token
        self.line = token.line
        literal = token.literal if token.literal else str(token.kind)
        message = (
            f"Unexpected token '{literal}' of kind {token.kind} "
            f"on line {token.line}, column {token.column}"
        )
        super().__init__(message)


class IntegerLiteralParseError(ParserError):
    """
    Error for integer literal text that is not a decimal digit run.
    """
    def __init__(self, literal, line=None):
        self.literal = literal
        self.line = line
        message = f"Failed to parse '{literal}' as an integer"
        if line is not None:
            message += f" on line {line}"
        super().__init__(message)


class IntegerLiteralRangeError(ParserError):
    """
    Error for integer literals outside the signed 64-bit range.
    """
    def __init__(self, literal, line=None):
        self.literal = literal
        self.line = line
        message = f"Integer literal {literal} does not fit in a signed 64-bit integer"
        if line is not None:
            message += f" on line {line}"
        super().__init__(message)
