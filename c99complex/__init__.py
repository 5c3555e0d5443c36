# MIT License
# See LICENSE file in the project root for full license text.
"""
c99complex: double precision complex arithmetic with C99 Annex G semantics.

Every elementary and transcendental complex function returns the value the
C99 standard prescribes for signed zeros, infinities and NaNs instead of
raising. Only malformed text (``parse``) and the undefined ordering of the
complex plane (``less_than``/``greater_than``) raise.
"""

import logging
import os

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

_level = os.environ.get("C99COMPLEX_LOG_LEVEL")
if _level:
    logging.getLogger(__name__).setLevel(_level.upper())

from .core import (  # noqa: E402
    LN2,
    LN10,
    PI,
    PI_OVER_2,
    PI_OVER_4,
    POLICY,
    Complex,
    NumericPolicy,
    abs_,
    acos,
    acosh,
    acot,
    acoth,
    acsc,
    acsch,
    add,
    arg,
    asec,
    asech,
    asin,
    asinh,
    atan,
    atanh,
    ceil,
    clone,
    complex_,
    conj,
    cos,
    cosh,
    cot,
    coth,
    csc,
    csch,
    div,
    equals,
    exp,
    floor,
    greater_than,
    im_one,
    less_than,
    ln,
    log,
    log2,
    log10,
    mul,
    mult_i,
    mult_minus_i,
    neg,
    normalize_phase,
    one,
    polar,
    pow_,
    recip,
    round_,
    sec,
    sech,
    sign,
    sin,
    sinh,
    sqrt,
    sub,
    tan,
    tanh,
    zero,
)
from .errors import C99ComplexError, ComplexFormatError, UnsupportedOperationError  # noqa: E402
from .io import parse, to_string  # noqa: E402
from .bridge import (  # noqa: E402
    from_builtin,
    from_numpy,
    from_pair,
    to_builtin,
    to_numpy,
    to_pair,
)

__all__ = [
    # Version info
    "__version__",
    # Value type and policy
    "Complex",
    "NumericPolicy",
    "POLICY",
    # Factories
    "zero",
    "one",
    "im_one",
    "complex_",
    "polar",
    # Constants
    "PI",
    "PI_OVER_2",
    "PI_OVER_4",
    "LN2",
    "LN10",
    # Arithmetic
    "clone",
    "add",
    "sub",
    "mul",
    "div",
    "neg",
    "conj",
    "recip",
    "abs_",
    "arg",
    "sign",
    "ceil",
    "floor",
    "round_",
    "equals",
    "less_than",
    "greater_than",
    "mult_i",
    "mult_minus_i",
    # Exponential and logarithmic
    "exp",
    "ln",
    "log",
    "log2",
    "log10",
    "sqrt",
    "pow_",
    # Trigonometric and hyperbolic
    "sin",
    "cos",
    "tan",
    "cot",
    "sec",
    "csc",
    "sinh",
    "cosh",
    "tanh",
    "coth",
    "sech",
    "csch",
    # Inverse functions
    "asin",
    "acos",
    "atan",
    "acot",
    "asec",
    "acsc",
    "asinh",
    "acosh",
    "atanh",
    "acoth",
    "asech",
    "acsch",
    "normalize_phase",
    # Text
    "parse",
    "to_string",
    # Bridge
    "to_builtin",
    "from_builtin",
    "to_numpy",
    "from_numpy",
    "to_pair",
    "from_pair",
    # Errors
    "C99ComplexError",
    "ComplexFormatError",
    "UnsupportedOperationError",
]
