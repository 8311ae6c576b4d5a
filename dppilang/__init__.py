"""DPPI language package.

A tree-walking interpreter for a small scripting language with integer
literals, assignment, lexically scoped ``scope { ... }`` blocks and a
``print`` statement.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from .evaluator import Evaluator, evaluate

__all__ = ["Evaluator", "evaluate"]
