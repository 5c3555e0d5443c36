"""
Conversions between Complex and IEEE-754 complex representations.

Every conversion is bit-exact on both components: signed zeros, infinities
and NaN payloads pass through unchanged. The arithmetic of Python's builtin
``complex`` and of ``numpy.complex128`` does not follow C99 Annex G, so these
helpers only move values across the boundary and never compute with them.
"""

from typing import Iterable, Tuple, Union

import numpy as np

from ..core.complex_number import Complex

ComplexLike = Union[complex, np.complexfloating]


def to_builtin(z: Complex) -> complex:
    """Convert to Python ``complex``."""
    return complex(float(z.re), float(z.im))


def from_builtin(value: complex) -> Complex:
    """
    Convert a Python ``complex`` (or a real number) to Complex.

    Raises:
        TypeError: If ``value`` is not numeric
    """
    if isinstance(value, complex):
        return Complex(value.real, value.imag)
    return Complex.coerce(value)


def to_numpy(z: Complex) -> np.complex128:
    """Convert to a ``numpy.complex128`` scalar."""
    return np.complex128(to_builtin(z))


def from_numpy(value: ComplexLike) -> Complex:
    """Convert a NumPy complex or real scalar to Complex."""
    value = np.asarray(value)
    if value.ndim != 0:
        raise ValueError(f"Expected a scalar, got array of shape {value.shape}")
    if np.iscomplexobj(value):
        return Complex(value.real, value.imag)
    return Complex.coerce(value[()])


def to_pair(z: Complex) -> Tuple[float, float]:
    """Return ``(re, im)`` as builtin floats."""
    return float(z.re), float(z.im)


def from_pair(pair: Iterable[float]) -> Complex:
    """
    Build a Complex from an ``(re, im)`` pair.

    Raises:
        ValueError: If ``pair`` does not have exactly two items
    """
    parts = tuple(pair)
    if len(parts) != 2:
        raise ValueError(f"Expected (re, im), got {len(parts)} items")
    return Complex(parts[0], parts[1])


def to_numpy_array(values: Iterable[Complex]) -> np.ndarray:
    """Pack a sequence of Complex values into a 1-D ``complex128`` array."""
    items = list(values)
    out = np.empty(len(items), dtype=np.complex128)
    out.real = [z.re for z in items]
    out.imag = [z.im for z in items]
    return out


def from_numpy_array(array: np.ndarray) -> list:
    """Unpack an array of complex (or real) values into a flat list of Complex."""
    array = np.asarray(array)
    if not np.iscomplexobj(array):
        array = array.astype(np.float64)
        return [Complex(x, 0.0) for x in array.ravel()]
    return [Complex(re, im) for re, im in zip(array.real.ravel(), array.imag.ravel())]
