"""Parser package for DPPI.

The parser functionality is split across modules: :mod:`.parser` holds
the token-lookahead state, :mod:`.statements` and :mod:`.expressions` the
grammar rules. The :class:`Parser` class is exposed at the package level
for convenience.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from .parser import Parser

__all__ = ["Parser"]
