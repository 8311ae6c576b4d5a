"""Runtime values for DPPI.

A value is either a signed integer or null. Null is the result of
assignments, print statements, empty blocks and unbound names.


File: values.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class IntegerValue:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class NullValue:
    def __str__(self) -> str:
        return "null"


NULL = NullValue()

Value = Union[IntegerValue, NullValue]
