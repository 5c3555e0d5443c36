"""
Immutable double precision complex value type.

Components are stored as numpy float64 so that every IEEE-754 special
value (signed zeros, infinities, NaN) survives construction untouched and
arithmetic on the components never raises. All operations are free
functions in the sibling modules; the methods here only delegate to them.
"""

import numbers
from typing import Any, Optional, Union

import numpy as np

from ..errors import UnsupportedOperationError

Real = Union[int, float, np.floating, np.integer]


class Complex:
    """
    Complex number ``re + im*i`` with C99 Annex G semantics.

    Instances are immutable. The magnitude is computed lazily on first
    access of :attr:`mag` and cached in a write-once slot.

    Example:
        >>> z = Complex(3, 4)
        >>> z.mag
        5.0
        >>> str(z.conj())
        '3 - 4i'
    """

    __slots__ = ("_re", "_im", "_mag")

    def __init__(self, re: Real = 0.0, im: Real = 0.0):
        object.__setattr__(self, "_re", np.float64(re))
        object.__setattr__(self, "_im", np.float64(im))
        object.__setattr__(self, "_mag", None)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_real(cls, re: Real) -> "Complex":
        """Create a complex number with imaginary part +0."""
        return cls(re, 0.0)

    @classmethod
    def coerce(cls, value: Any) -> "Complex":
        """
        Convert a number-like value to :class:`Complex`.

        Args:
            value: Complex, builtin complex, numpy complex, or real scalar

        Returns:
            Equivalent Complex instance (``value`` itself when already Complex)

        Raises:
            TypeError: If the value is not numeric
        """
        if isinstance(value, Complex):
            return value
        if isinstance(value, (bool, np.bool_)):
            raise TypeError(f"Cannot convert {type(value).__name__} to Complex")
        if isinstance(value, (complex, np.complexfloating)):
            return cls(value.real, value.imag)
        if isinstance(value, (numbers.Real, np.floating, np.integer)):
            return cls(value, 0.0)
        raise TypeError(f"Cannot convert {type(value).__name__} to Complex")

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def re(self) -> np.float64:
        """Real part."""
        return self._re

    @property
    def im(self) -> np.float64:
        """Imaginary part."""
        return self._im

    @property
    def real(self) -> np.float64:
        return self._re

    @property
    def imag(self) -> np.float64:
        return self._im

    @property
    def mag(self) -> np.float64:
        """Magnitude ``hypot(re, im)``, computed once."""
        if self._mag is None:
            with np.errstate(all="ignore"):
                object.__setattr__(self, "_mag", np.hypot(self._re, self._im))
        return self._mag

    @property
    def phase(self) -> np.float64:
        """Phase ``atan2(im, re)`` in radians."""
        return np.arctan2(self._im, self._re)

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def is_zero(self) -> bool:
        return bool(self._re == 0 and self._im == 0)

    def is_one(self) -> bool:
        return bool(self._re == 1 and self._im == 0)

    def is_imaginary_unit(self) -> bool:
        return bool(self._re == 0 and self._im == 1)

    is_im_one = is_imaginary_unit

    def is_nan(self) -> bool:
        """True when either part is NaN."""
        return bool(np.isnan(self._re) or np.isnan(self._im))

    def is_infinite(self) -> bool:
        """True when either part is +inf or -inf."""
        return bool(np.isinf(self._re) or np.isinf(self._im))

    def is_real(self) -> bool:
        return bool(self._im == 0)

    def is_finite(self) -> bool:
        return bool(np.isfinite(self._re) and np.isfinite(self._im))

    # ------------------------------------------------------------------
    # Elementary arithmetic
    # ------------------------------------------------------------------

    def clone(self) -> "Complex":
        return _arithmetic.clone(self)

    def add(self, other: "Complex") -> "Complex":
        return _arithmetic.add(self, other)

    def sub(self, other: "Complex") -> "Complex":
        return _arithmetic.sub(self, other)

    def mul(self, other: "Complex") -> "Complex":
        return _arithmetic.mul(self, other)

    def div(self, other: "Complex") -> "Complex":
        return _arithmetic.div(self, other)

    def neg(self) -> "Complex":
        return _arithmetic.neg(self)

    def conj(self) -> "Complex":
        return _arithmetic.conj(self)

    def recip(self) -> "Complex":
        return _arithmetic.recip(self)

    def abs(self) -> np.float64:
        return _arithmetic.abs_(self)

    def arg(self) -> np.float64:
        return _arithmetic.arg(self)

    def sign(self) -> "Complex":
        return _arithmetic.sign(self)

    def ceil(self) -> "Complex":
        return _arithmetic.ceil(self)

    def floor(self) -> "Complex":
        return _arithmetic.floor(self)

    def round(self, ndigits: Optional[Real] = None) -> "Complex":
        return _arithmetic.round_(self, ndigits)

    def equals(self, other: Any) -> bool:
        return _arithmetic.equals(self, other)

    def less_than(self, other: "Complex") -> bool:
        return _arithmetic.less_than(self, other)

    def greater_than(self, other: "Complex") -> bool:
        return _arithmetic.greater_than(self, other)

    def mult_i(self) -> "Complex":
        return _arithmetic.mult_i(self)

    def mult_minus_i(self) -> "Complex":
        return _arithmetic.mult_minus_i(self)

    # ------------------------------------------------------------------
    # Exponential and logarithmic
    # ------------------------------------------------------------------

    def exp(self) -> "Complex":
        return _explog.exp(self)

    def ln(self) -> "Complex":
        return _explog.ln(self)

    log = ln

    def log2(self) -> "Complex":
        return _explog.log2(self)

    def log10(self) -> "Complex":
        return _explog.log10(self)

    def sqrt(self) -> "Complex":
        return _explog.sqrt(self)

    def pow(self, exponent: "Complex") -> "Complex":
        return _explog.pow_(self, exponent)

    # ------------------------------------------------------------------
    # Circular and hyperbolic
    # ------------------------------------------------------------------

    def sin(self) -> "Complex":
        return _trig.sin(self)

    def cos(self) -> "Complex":
        return _trig.cos(self)

    def tan(self) -> "Complex":
        return _trig.tan(self)

    def cot(self) -> "Complex":
        return _trig.cot(self)

    def sec(self) -> "Complex":
        return _trig.sec(self)

    def csc(self) -> "Complex":
        return _trig.csc(self)

    def sinh(self) -> "Complex":
        return _hyperbolic.sinh(self)

    def cosh(self) -> "Complex":
        return _hyperbolic.cosh(self)

    def tanh(self) -> "Complex":
        return _hyperbolic.tanh(self)

    def coth(self) -> "Complex":
        return _hyperbolic.coth(self)

    def sech(self) -> "Complex":
        return _hyperbolic.sech(self)

    def csch(self) -> "Complex":
        return _hyperbolic.csch(self)

    # ------------------------------------------------------------------
    # Inverse functions
    # ------------------------------------------------------------------

    def asin(self) -> "Complex":
        return _inverse_trig.asin(self)

    def acos(self) -> "Complex":
        return _inverse_trig.acos(self)

    def atan(self) -> "Complex":
        return _inverse_trig.atan(self)

    def acot(self) -> "Complex":
        return _inverse_trig.acot(self)

    def asec(self) -> "Complex":
        return _inverse_trig.asec(self)

    def acsc(self) -> "Complex":
        return _inverse_trig.acsc(self)

    def asinh(self) -> "Complex":
        return _inverse_hyperbolic.asinh(self)

    def acosh(self) -> "Complex":
        return _inverse_hyperbolic.acosh(self)

    def atanh(self) -> "Complex":
        return _inverse_hyperbolic.atanh(self)

    def acoth(self) -> "Complex":
        return _inverse_hyperbolic.acoth(self)

    def asech(self) -> "Complex":
        return _inverse_hyperbolic.asech(self)

    def acsch(self) -> "Complex":
        return _inverse_hyperbolic.acsch(self)

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def to_string(self, explicit: bool = True) -> str:
        from ..io.formatting import to_string

        return to_string(self, explicit)

    @classmethod
    def parse(cls, text: str) -> "Complex":
        from ..io.parsing import parse

        return parse(text)

    def __str__(self) -> str:
        return self.to_string(explicit=False)

    def __repr__(self) -> str:
        return f"Complex({float(self._re)!r}, {float(self._im)!r})"

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        re_text = format(float(self._re), spec)
        im_text = format(abs(float(self._im)), spec)
        op = "-" if np.signbit(self._im) else "+"
        return f"{re_text} {op} {im_text}i"

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __complex__(self) -> complex:
        return complex(float(self._re), float(self._im))

    def __iter__(self):
        yield self._re
        yield self._im

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Complex):
            try:
                other = Complex.coerce(other)
            except TypeError:
                return NotImplemented
        return bool(self._re == other.re and self._im == other.im)

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(complex(self))

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __neg__(self) -> "Complex":
        return _arithmetic.neg(self)

    def __pos__(self) -> "Complex":
        return self

    def __abs__(self) -> np.float64:
        return _arithmetic.abs_(self)

    def _binary(self, other: Any, func, reflected: bool = False):
        try:
            other = Complex.coerce(other)
        except TypeError:
            return NotImplemented
        return func(other, self) if reflected else func(self, other)

    def __add__(self, other):
        return self._binary(other, _arithmetic.add)

    def __radd__(self, other):
        return self._binary(other, _arithmetic.add, reflected=True)

    def __sub__(self, other):
        return self._binary(other, _arithmetic.sub)

    def __rsub__(self, other):
        return self._binary(other, _arithmetic.sub, reflected=True)

    def __mul__(self, other):
        return self._binary(other, _arithmetic.mul)

    def __rmul__(self, other):
        return self._binary(other, _arithmetic.mul, reflected=True)

    def __truediv__(self, other):
        return self._binary(other, _arithmetic.div)

    def __rtruediv__(self, other):
        return self._binary(other, _arithmetic.div, reflected=True)

    def __pow__(self, other):
        return self._binary(other, _explog.pow_)

    def __rpow__(self, other):
        return self._binary(other, _explog.pow_, reflected=True)

    # The complex plane has no total order
    def __lt__(self, other):
        raise UnsupportedOperationError("<")

    def __le__(self, other):
        raise UnsupportedOperationError("<=")

    def __gt__(self, other):
        raise UnsupportedOperationError(">")

    def __ge__(self, other):
        raise UnsupportedOperationError(">=")

    def __reduce__(self):
        return (Complex, (float(self._re), float(self._im)))


def zero() -> Complex:
    """Return ``0 + 0i``."""
    return Complex(0.0, 0.0)


def one() -> Complex:
    """Return ``1 + 0i``."""
    return Complex(1.0, 0.0)


def im_one() -> Complex:
    """Return the imaginary unit ``0 + 1i``."""
    return Complex(0.0, 1.0)


def complex_(re: Real = 0.0, im: Real = 0.0) -> Complex:
    """Functional constructor, equivalent to ``Complex(re, im)``."""
    return Complex(re, im)


# Operation modules import Complex from here; bind them once the class exists.
from . import arithmetic as _arithmetic  # noqa: E402
from . import explog as _explog  # noqa: E402
from . import trig as _trig  # noqa: E402
from . import hyperbolic as _hyperbolic  # noqa: E402
from . import inverse_trig as _inverse_trig  # noqa: E402
from . import inverse_hyperbolic as _inverse_hyperbolic  # noqa: E402
