'''
Operations that make up an RPN program.

There are exactly three kinds: operands, unary operators and binary operators.
Each is an immutable record with a ``symbol``, which is what the operation
serializes to.

Binary operator functions are always called as ``function(first, second)``,
where ``first`` is the operand nearer the top of the stack and ``second`` the
deeper one. The builtins are written so that ``8 2 −`` is 6, as on any RPN
calculator.
'''

from dataclasses import dataclass
from typing import Callable, Union
import operator
import math

from .util import wrap_user_errors


@dataclass(frozen=True)
class Operand:
    value: float

    def __post_init__(self):
        object.__setattr__(self, 'value', float(self.value))

    @property
    def symbol(self) -> str:
        return repr(self.value)

    def __str__(self):
        return self.symbol


@dataclass(frozen=True)
class UnaryOperator:
    symbol: str
    function: Callable[[float], float]

    @wrap_user_errors('Cannot apply {0.symbol} to {1!r}')
    def apply(self, only):
        return self.function(only)

    def __str__(self):
        return self.symbol


@dataclass(frozen=True)
class BinaryOperator:
    symbol: str
    function: Callable[[float, float], float]

    @wrap_user_errors('Cannot apply {0.symbol} to {1!r} and {2!r}')
    def apply(self, first, second):
        return self.function(first, second)

    def __str__(self):
        return self.symbol


Operation = Union[Operand, UnaryOperator, BinaryOperator]


def _unary(f):
    '''
    Wrap a math function so domain errors give nan rather than raise.

    That's what a double would do anyway.
    '''
    def wrapped(only):
        try:
            return f(only)
        except ValueError:
            return math.nan
    wrapped.__doc__ = f.__doc__
    wrapped.__name__ = f.__name__
    return wrapped


def _deeper_first(f):
    '''
    Adapt a conventional f(left, right) to be called nearest operand first.

    If you don't swap, you'll do 2 - 8 when you say 8 2 −.
    '''
    def wrapped(first, second):
        return f(second, first)
    wrapped.__doc__ = f.__doc__
    wrapped.__name__ = f.__name__
    return wrapped


def _divide(dividend, divisor):
    '''
    True division, IEEE 754 style on a zero divisor.
    '''
    try:
        return dividend / divisor
    except ZeroDivisionError:
        if dividend == 0 or math.isnan(dividend):
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)


def _power(base, exponent):
    '''
    math.pow, IEEE 754 style on overflow and domain errors.
    '''
    odd = exponent % 2 == 1
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return -math.inf if base < 0 and odd else math.inf
    except ValueError:
        # 0 to a negative power, or a negative base to a fractional power.
        if base == 0:
            return math.copysign(math.inf, base) if odd else math.inf
        return math.nan


# In registration order; a later symbol would replace an earlier one.
BUILTINS = (
    BinaryOperator('×', operator.__mul__),
    BinaryOperator('÷', _deeper_first(_divide)),
    BinaryOperator('+', operator.__add__),
    BinaryOperator('−', _deeper_first(operator.__sub__)),
    UnaryOperator('√', _unary(math.sqrt)),
    BinaryOperator('^', _deeper_first(_power)),
    UnaryOperator('sin', _unary(math.sin)),
    UnaryOperator('cos', _unary(math.cos)),
)


__all__ = ('Operand', 'UnaryOperator', 'BinaryOperator', 'Operation',
           'BUILTINS')
