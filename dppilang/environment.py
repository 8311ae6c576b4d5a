"""Lexical environments for DPPI.

An environment maps names to values and links to the environment that
encloses it. Lookups walk outward through the links until a binding is
found; writes only ever touch the local table, so assigning a name inside
a block shadows an enclosing binding instead of changing it.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from typing import Dict, Optional

from dppilang.values import NULL, Value


class Environment:
    """
    Name bindings for one scope.
    """
    def __init__(self, outer: Optional[Environment] = None) -> None:
        self.store: Dict[str, Value] = {}
        self.outer = outer

    def __contains__(self, name: str) -> bool:
        return name in self.store

    def __repr__(self) -> str:
        return f"Environment({self.store!r}, outer={self.outer is not None})"

    def get(self, name: str) -> Value:
        """
        Look up ``name`` here, then in each enclosing environment.

        Returns:
            Value: The bound value, or null when no scope binds the name.
        """
        env = self
        while env is not None:
            if name in env.store:
                return env.store[name]
            env = env.outer
        return NULL

    def set(self, name: str, value: Value) -> None:
        """
        Bind ``name`` in this environment, never in an enclosing one.
        """
        self.store[name] = value

    def enclosed(self) -> Environment:
        """
        Create a child environment whose outer link is this one.
        """
        return Environment(outer=self)
