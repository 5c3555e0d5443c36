"""Text rendering of complex values."""

import numpy as np

from ..core.complex_number import Complex


def format_number(x) -> str:
    """
    Shortest round-tripping text for one component.

    Integral values drop the trailing ``.0`` (``1``, ``-250``, ``1e+22``);
    non-finite values print as ``inf``, ``-inf`` and ``nan``.
    """
    x = float(x)
    text = repr(x)
    if text.endswith(".0"):
        text = text[:-2]
    return text


def to_string(z: Complex, explicit: bool = True) -> str:
    """
    Render ``z`` as ``"a + bi"``.

    Args:
        z: Value to render
        explicit: Print zero parts too (``"0 + 0i"``, ``"-0 - 0i"``). When
            False a zero real part and a zero imaginary part are omitted,
            ``0 + 0i`` becomes ``"0"`` and a unit coefficient is written as
            a bare ``i``.

    Returns:
        Text form. ``parse`` reads it back for finite values whose
        imaginary coefficient is not exactly 1
    """
    r = z.re
    i = z.im

    if not explicit and r == 0 and i == 0:
        return "0"

    im_sign = "-" if i < 0 or (i == 0 and np.signbit(i)) else "+"

    if explicit:
        real_text = "-0" if r == 0 and np.signbit(r) else format_number(r)
    else:
        real_text = "" if r == 0 else format_number(r)

    if i != 0:
        magnitude = abs(i)
        imag_text = "i" if magnitude == 1 else format_number(magnitude) + "i"
    elif explicit:
        imag_text = "0i"
    else:
        imag_text = ""

    if not real_text:
        # no leading plus on a lone imaginary part
        return ("-" if im_sign == "-" else "") + imag_text
    if not imag_text:
        return real_text
    return f"{real_text} {im_sign} {imag_text}"
