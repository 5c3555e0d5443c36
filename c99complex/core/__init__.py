"""Complex value type and C99 Annex G operations."""

# complex_number binds the operation modules at its end; import it first.
from .complex_number import Complex, complex_, im_one, one, zero

from .numeric_policy import (
    LN2,
    LN10,
    PI,
    PI_OVER_2,
    PI_OVER_4,
    POLICY,
    NumericPolicy,
)

from .arithmetic import (
    abs_,
    add,
    arg,
    ceil,
    clone,
    conj,
    div,
    equals,
    floor,
    greater_than,
    less_than,
    mul,
    mult_i,
    mult_minus_i,
    neg,
    recip,
    round_,
    sign,
    sub,
)

from .explog import exp, ln, log, log2, log10, pow_, sqrt
from .trig import cos, cot, csc, sec, sin, tan
from .hyperbolic import cosh, coth, csch, sech, sinh, tanh
from .inverse_trig import acos, acot, acsc, asec, asin, atan
from .inverse_hyperbolic import acosh, acoth, acsch, asech, asinh, atanh
from .polar import normalize_phase, polar

__all__ = [
    # Types
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

    # Circular
    "sin",
    "cos",
    "tan",
    "cot",
    "sec",
    "csc",

    # Hyperbolic
    "sinh",
    "cosh",
    "tanh",
    "coth",
    "sech",
    "csch",

    # Inverse circular
    "asin",
    "acos",
    "atan",
    "acot",
    "asec",
    "acsc",

    # Inverse hyperbolic
    "asinh",
    "acosh",
    "atanh",
    "acoth",
    "asech",
    "acsch",

    # Angles
    "normalize_phase",
]
