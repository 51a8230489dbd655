import logging
from functools import total_ordering

from quicktions import Fraction  # type: ignore

from .bigint import BigInt
from .errors import DivisionByZero, NonIntegerExponent, InexactResult
from .utils import int_root, round_half_away


logger = logging.getLogger(__name__)


@total_ordering
class BigRat:
    """
    Exact rational number numer/denom of two BigInt values.

    Always kept in canonical form: denom > 0, gcd(numer, denom) = 1, zero is 0/1.
    Thus equality is just equality of pairs. Immutable and hashable.
    """

    __slots__ = ('numer', 'denom')

    def __init__(self, numer, denom=1):
        numer = BigInt.convert(numer)
        denom = BigInt.convert(denom)
        if denom.is_zero():
            raise DivisionByZero("BigRat with zero denominator: {}/0".format(numer))
        if denom.sign() < 0:
            numer = -numer
            denom = -denom
        g = numer.gcd(denom)
        # gcd(0, d) = d, so zero always becomes 0/1
        object.__setattr__(self, 'numer', numer / g)
        object.__setattr__(self, 'denom', denom / g)

    @classmethod
    def _canonical(cls, numer, denom):
        """Wrap a pair that is known to be canonical."""
        obj = object.__new__(cls)
        object.__setattr__(obj, 'numer', numer)
        object.__setattr__(obj, 'denom', denom)
        return obj

    def __setattr__(self, name, value):
        raise AttributeError("BigRat is immutable")

    @classmethod
    def convert(cls, x):
        if isinstance(x, cls):
            return x
        elif isinstance(x, (BigInt, int)) and not isinstance(x, bool):
            return cls(x, 1)
        elif isinstance(x, Fraction):
            return cls.from_fraction(x)
        else:
            raise TypeError("Can't convert {!r} to BigRat".format(x))

    @classmethod
    def parse(cls, fraction_str):
        """Parse 'n/d' or 'n'."""
        if '/' in fraction_str:
            n, d = fraction_str.split('/')
        else:
            n, d = fraction_str, '1'
        return cls(BigInt.from_string(n), BigInt.from_string(d))

    @classmethod
    def from_fraction(cls, fraction):
        return cls(fraction.numerator, fraction.denominator)

    @property
    def value(self) -> Fraction:
        return Fraction(int(self.numer), int(self.denom))

    def is_zero(self) -> bool:
        return self.numer.is_zero()

    def is_integer(self) -> bool:
        return self.denom == 1

    def sign(self) -> int:
        return self.numer.sign()

    # arithmetic

    def equals(self, other) -> bool:
        return self == other

    def not_equals(self, other) -> bool:
        return not self.equals(other)

    def negate(self):
        return BigRat._canonical(-self.numer, self.denom)

    def add(self, other):
        other = BigRat.convert(other)
        return BigRat(self.numer * other.denom + other.numer * self.denom, self.denom * other.denom)

    def subtract(self, other):
        return self.add(BigRat.convert(other).negate())

    def multiply(self, other):
        other = BigRat.convert(other)
        return BigRat(self.numer * other.numer, self.denom * other.denom)

    def divide(self, other):
        other = BigRat.convert(other)
        if other.is_zero():
            raise DivisionByZero("division of {} by zero".format(self))
        return BigRat(self.numer * other.denom, self.denom * other.numer)

    def invert(self):
        if self.is_zero():
            raise DivisionByZero("inverse of zero")
        return BigRat(self.denom, self.numer)

    def pow(self, exponent):
        """
        Raise to an integer power.

        The exponent is a BigRat (or int/BigInt) with denominator 1, of any magnitude.
        Conventions: x**0 = 1 for all x, including 0; 0**(-n) is a division by zero.

        Raises:
            NonIntegerExponent: exponent is not an integer (checked before anything else)
            DivisionByZero: zero base and negative exponent
        """
        exponent = BigRat.convert(exponent)
        if not exponent.is_integer():
            raise NonIntegerExponent("non-integer exponent: {}".format(exponent))
        e = exponent.numer
        if e.is_zero():
            return BigRat._canonical(BigInt(1), BigInt(1))
        if self.is_zero():
            if e.sign() > 0:
                return self
            raise DivisionByZero("zero raised to negative power {}".format(e))

        logger.debug('pow: base %s, exponent of %d bits', self, int(e.bits()))
        # powers of coprime numbers stay coprime, so no reduction needed
        numer = self.numer ** abs(e)
        denom = self.denom ** abs(e)
        if e.sign() > 0:
            return BigRat._canonical(numer, denom)
        return BigRat(denom, numer)

    __add__ = add
    __radd__ = add
    __sub__ = subtract
    __mul__ = multiply
    __rmul__ = multiply
    __truediv__ = divide
    __pow__ = pow
    __neg__ = negate

    def __rsub__(self, other):
        return BigRat.convert(other).subtract(self)

    def __rtruediv__(self, other):
        return BigRat.convert(other).divide(self)

    def __rpow__(self, other):
        return BigRat.convert(other).pow(self)

    def __abs__(self):
        return BigRat._canonical(abs(self.numer), self.denom)

    def min(self, other):
        other = BigRat.convert(other)
        return self if self <= other else other

    def max(self, other):
        other = BigRat.convert(other)
        return self if self >= other else other

    # rounding to integral values

    def floor(self):
        return BigRat(BigInt(int(self.numer) // int(self.denom)))

    def ceil(self):
        return BigRat(BigInt(-(-int(self.numer) // int(self.denom))))

    def round(self):
        """Nearest integer, half-way cases rounded away from zero."""
        return BigRat(BigInt(round_half_away(int(self.numer), int(self.denom))))

    # exact roots

    def _root(self, k):
        n = int(self.numer)
        neg = n < 0
        if neg and k % 2 == 0:
            raise InexactResult("even root of negative number {}".format(self))
        rn = int_root(abs(n), k)
        rd = int_root(int(self.denom), k)
        if rn is None or rd is None:
            raise InexactResult("{}-th root of {} is not rational".format(k, self))
        return BigRat._canonical(BigInt(-rn if neg else rn), BigInt(rd))

    def sqrt(self):
        return self._root(2)

    def cbrt(self):
        return self._root(3)

    def log(self):
        """Natural logarithm; the only rational value is log(1) = 0."""
        if self != 1:
            raise InexactResult("log of {} is not rational".format(self))
        return BigRat._canonical(BigInt(0), BigInt(1))

    # comparison

    @classmethod
    def _comparable(cls, other):
        """BigRat for int, BigInt or Fraction operand, None for other types."""
        if isinstance(other, cls):
            return other
        if isinstance(other, (BigInt, int)) and not isinstance(other, bool):
            return cls(other)
        if isinstance(other, Fraction):
            return cls.from_fraction(other)
        return None

    def __eq__(self, other):
        other = BigRat._comparable(other)
        if other is None:
            return NotImplemented
        return (self.numer, self.denom) == (other.numer, other.denom)

    def __lt__(self, other):
        other = BigRat._comparable(other)
        if other is None:
            return NotImplemented
        return self.numer * other.denom < other.numer * self.denom

    def __hash__(self):
        # equal int, BigInt and Fraction values hash the same
        if self.denom == 1:
            return hash(self.numer)
        return hash(self.value)

    def __bool__(self):
        return not self.is_zero()

    def __str__(self):
        if self.denom == 1:
            return str(self.numer)
        else:
            return '{}/{}'.format(self.numer, self.denom)

    def __repr__(self):
        return 'BigRat({}, {})'.format(self.numer, self.denom)

    def __reduce__(self):
        return (BigRat, (self.numer, self.denom))
