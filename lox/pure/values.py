"""Runtime values produced by evaluating Lox expressions: nil, booleans, double-precision numbers and strings.

Values are immutable; every evaluation produces fresh ones. Python's own equality is deliberately not the Lox equality
(True == 1.0 in Python); use Evaluator.is_equal for Lox semantics.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass


class LoxValue(ABC):
    """Superclass of the four runtime value variants."""
    name = None  # type name used in error messages

    @abstractmethod
    def __str__(self):
        """Renders this value the way the interpreter prints it."""


@dataclass(frozen=True)
class Nil(LoxValue):
    name = "nil"

    def __str__(self):
        return "nil"


@dataclass(frozen=True)
class Bool(LoxValue):
    value: bool
    name = "bool"

    def __str__(self):
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Number(LoxValue):
    value: float
    name = "number"

    def __str__(self):
        return format_number(self.value)


@dataclass(frozen=True)
class String(LoxValue):
    value: str
    name = "string"

    def __str__(self):
        return self.value


def format_number(num):
    """Natural decimal form of num: integral values drop the fraction (3.0 -> "3"), others keep Python's shortest
    round-tripping repr (0.1 -> "0.1").
    """
    if math.isnan(num):
        return "NaN"
    if math.isinf(num):
        return "inf" if num > 0 else "-inf"
    if num.is_integer():
        return f"{'-' if math.copysign(1.0, num) < 0 else ''}{abs(int(num))}"
    return repr(num)
