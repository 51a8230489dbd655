from functools import total_ordering, wraps
import math

from .errors import DivisionByZero
from .utils import int_pow, trunc_divmod


def _int_operand(method):
    """Operator accepting int or BigInt, other types are left to the other operand."""
    @wraps(method)
    def wrapper(self, other):
        if isinstance(other, bool) or not isinstance(other, (int, BigInt)):
            return NotImplemented
        return method(self, BigInt.convert(other))
    return wrapper


@total_ordering
class BigInt:
    """
    Arbitrary-precision signed integer.

    Immutable and hashable, equal values are interchangeable.
    Operations accept BigInt or plain int operands and return new BigInt values.
    """

    __slots__ = ('_v',)

    def __init__(self, value=0):
        if isinstance(value, BigInt):
            value = value._v
        elif isinstance(value, bool) or not isinstance(value, int):
            raise TypeError("BigInt needs an integer, got {!r}".format(value))
        object.__setattr__(self, '_v', value)

    def __setattr__(self, name, value):
        raise AttributeError("BigInt is immutable")

    @classmethod
    def convert(cls, x):
        if isinstance(x, cls):
            return x
        return cls(x)

    @classmethod
    def from_string(cls, text):
        """Parse decimal representation with an optional sign, e.g., '-1234'."""
        text = text.strip()
        digits = text[1:] if text[:1] in '+-' else text
        if not digits.isdigit():
            raise ValueError("invalid BigInt literal: {!r}".format(text))
        return cls(int(text))

    def to_string(self):
        return str(self._v)

    @property
    def value(self) -> int:
        return self._v

    # predicates

    def is_zero(self) -> bool:
        return self._v == 0

    def sign(self) -> int:
        """-1, 0 or 1."""
        return (self._v > 0) - (self._v < 0)

    def equals(self, other) -> bool:
        return self == other

    def bits(self):
        """Number of bits in the magnitude."""
        return BigInt(self._v.bit_length())

    # ring operations

    def add(self, other):
        return BigInt(self._v + BigInt.convert(other)._v)

    def negate(self):
        return BigInt(-self._v)

    def subtract(self, other):
        return self.add(BigInt.convert(other).negate())

    def multiply(self, other):
        return BigInt(self._v * BigInt.convert(other)._v)

    def gcd(self, other):
        return BigInt(math.gcd(self._v, BigInt.convert(other)._v))

    @_int_operand
    def __pow__(self, exp):
        """Non-negative integer power, computed by squaring."""
        if exp.sign() < 0:
            raise ValueError("negative BigInt exponent: {}".format(exp))
        return BigInt(int_pow(self._v, exp._v))

    @_int_operand
    def __rpow__(self, other):
        return other ** self

    __add__ = _int_operand(add)
    __radd__ = _int_operand(add)
    __sub__ = _int_operand(subtract)
    __mul__ = _int_operand(multiply)
    __rmul__ = _int_operand(multiply)
    __neg__ = negate

    @_int_operand
    def __rsub__(self, other):
        return other.subtract(self)

    def __abs__(self):
        return BigInt(abs(self._v))

    # division truncates toward zero, remainder has the sign of the dividend

    @_int_operand
    def __truediv__(self, other):
        return BigInt(trunc_divmod(self._v, other._v)[0])

    @_int_operand
    def __rtruediv__(self, other):
        return other / self

    @_int_operand
    def __mod__(self, other):
        return BigInt(trunc_divmod(self._v, other._v)[1])

    @_int_operand
    def __rmod__(self, other):
        return other % self

    # bitwise operations act on the two's complement representation

    @_int_operand
    def __and__(self, other):
        return BigInt(self._v & other._v)

    @_int_operand
    def __or__(self, other):
        return BigInt(self._v | other._v)

    @_int_operand
    def __xor__(self, other):
        return BigInt(self._v ^ other._v)

    __rand__ = __and__
    __ror__ = __or__
    __rxor__ = __xor__

    def __invert__(self):
        return BigInt(~self._v)

    def __lshift__(self, shift):
        return BigInt(self._v << int(shift))

    def __rshift__(self, shift):
        return BigInt(self._v >> int(shift))

    @_int_operand
    def __rlshift__(self, other):
        return other << self

    @_int_operand
    def __rrshift__(self, other):
        return other >> self

    def min(self, other):
        other = BigInt.convert(other)
        return self if self._v <= other._v else other

    def max(self, other):
        other = BigInt.convert(other)
        return self if self._v >= other._v else other

    def __eq__(self, other):
        if isinstance(other, BigInt):
            return self._v == other._v
        if isinstance(other, int) and not isinstance(other, bool):
            return self._v == other
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, BigInt):
            return self._v < other._v
        if isinstance(other, int) and not isinstance(other, bool):
            return self._v < other
        return NotImplemented

    def __hash__(self):
        return hash(self._v)

    def __bool__(self):
        return self._v != 0

    def __int__(self):
        return self._v

    __index__ = __int__

    def __str__(self):
        return str(self._v)

    def __repr__(self):
        return 'BigInt({})'.format(self._v)

    def __reduce__(self):
        return (BigInt, (self._v,))
