"""
Parser for complex literals in en-US notation.

Accepted forms::

    "1234.56 + 789.01i"   full, either sign between the parts
    "-4.2i", "i", "-i"    imaginary only
    "45", ".45", "5e2"    real only

Numbers may use scientific notation; thousands separators are rejected.
"""

import logging
import re

from ..core.complex_number import Complex
from ..errors import ComplexFormatError

logger = logging.getLogger(__name__)

_NUMBER = r"[+-]?(?:\d+\.?\d*|\d*\.\d+)(?:[eE][+-]?\d+)?"

COMPLEX_RE = re.compile(
    rf"^\s*(?:({_NUMBER})\s*([-+])\s*({_NUMBER})\s*i|([-+]?{_NUMBER}\s*i|[+-]?i)|({_NUMBER}))\s*$"
)
SCIENTIFIC_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\d*\.\d+)[eE][+-]?\d+$")


def _check_scientific(text: str, source: str, part: str) -> None:
    if "e" not in text and "E" not in text:
        return
    if not SCIENTIFIC_RE.match(text):
        raise ComplexFormatError(f"Invalid scientific notation in {part} part", source)


def parse(text: str) -> Complex:
    """
    Parse a complex literal.

    Args:
        text: Literal such as ``"1.5e2 + 2.3e-1i"``, ``"-i"`` or ``"45"``

    Returns:
        Parsed value; missing parts are +0

    Raises:
        ComplexFormatError: If ``text`` is empty, not a string, or does not
            match the grammar
    """
    if not isinstance(text, str) or not text:
        raise ComplexFormatError("Invalid complex number format", text)

    match = COMPLEX_RE.match(text)
    if match is None:
        raise ComplexFormatError("Invalid complex number format", text)

    full_re, op, full_im, imag_only, real_only = match.groups()
    sign = 1.0

    if full_re is not None:
        logger.debug("parse %r: real and imaginary parts", text)
        real_text, imag_text = full_re, full_im
        if op == "-":
            sign = -1.0
    elif imag_only is not None:
        logger.debug("parse %r: imaginary part only", text)
        real_text = "0"
        if imag_only in ("i", "+i"):
            imag_text = "1"
        elif imag_only == "-i":
            imag_text = "1"
            sign = -1.0
        else:
            imag_text = imag_only[:-1].rstrip()
            if imag_text.startswith("-"):
                sign = -1.0
            imag_text = imag_text.lstrip("+-")
    else:
        logger.debug("parse %r: real part only", text)
        real_text, imag_text = real_only, "0"

    _check_scientific(real_text, text, "real")
    _check_scientific(imag_text, text, "imaginary")

    return Complex(float(real_text), float(imag_text) * sign)
