"""Basic usage example of the c99complex library.

This example walks through construction, operators, the special value
rules for signed zeros and infinities, and text round-tripping.
"""

import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import c99complex as cc
from c99complex import Complex


def demonstrate_arithmetic():
    """Show operators and the free-function API."""
    print("=== Arithmetic ===\n")

    z = Complex(3, 4)
    w = cc.parse("1 - 2i")

    print(f"z = {z}, w = {w}")
    print(f"z + w = {z + w}")
    print(f"z * w = {z * w}")
    print(f"z / w = {cc.div(z, w)}")
    print(f"|z| = {abs(z)}, arg(z) = {cc.arg(z):.6f}")
    print(f"conj(z) = {z.conj()}")

    # Division by zero follows the numerator's signs
    print(f"\n(1 - 1i) / 0 = {Complex(1, -1) / cc.zero()}")
    print(f"0 / 0 = {cc.div(cc.zero(), cc.zero())}")


def demonstrate_special_values():
    """Show how branch cuts use the sign of zero."""
    print("\n=== Signed Zeros and Branch Cuts ===\n")

    above = Complex(-4.0, 0.0)
    below = Complex(-4.0, -0.0)
    print(f"ln({above}) = {cc.ln(above)}")
    print(f"ln({below}) = {cc.ln(below)}")
    print(f"ln(-0 + 0i) = {cc.ln(Complex(-0.0, 0.0))}")

    inf = float("inf")
    nan = float("nan")
    print(f"\nexp(+inf + pi*i) = {cc.exp(Complex(inf, cc.PI))}")
    print(f"exp(-inf + nan*i) = {cc.exp(Complex(-inf, nan))}")
    print(f"atanh(1) = {cc.atanh(cc.one())}")
    print(f"acosh(-inf + 1i) = {cc.acosh(Complex(-inf, 1.0))}")
    print(f"tanh(+inf + nan*i) = {cc.tanh(Complex(inf, nan))}")


def demonstrate_inverse_functions():
    """Evaluate the inverse functions at a few points."""
    print("\n=== Inverse Functions ===\n")

    z = Complex(0.5, 0.5)
    for name in ("asin", "acos", "atan", "asinh", "acosh", "atanh", "acsch"):
        print(f"{name}({z}) = {getattr(cc, name)(z):.12g}")

    # asin(sin(z)) only returns z inside the principal strip
    print(f"\nasin(sin(0.3 + 0.2i)) = {cc.asin(cc.sin(Complex(0.3, 0.2))):.15g}")


def demonstrate_text_and_bridge():
    """Parse, format and convert to builtin and NumPy types."""
    print("\n=== Text and Interop ===\n")

    for text in ("1.5e2 + 2.3e-1i", "-4.2i", "i", "45"):
        z = cc.parse(text)
        print(f"parse({text!r}) -> {z!r} -> {cc.to_string(z, explicit=False)!r}")

    try:
        cc.parse("1,234.56 + 789.01i")
    except cc.ComplexFormatError as e:
        print(f"\nRejected {e.text!r}: {e}")

    z = Complex(-0.0, float("inf"))
    print(f"\nto_builtin({z}) = {cc.to_builtin(z)}")
    print(f"to_numpy({z}) = {cc.to_numpy(z)!r}")


def main():
    """Run all demonstrations."""
    print("c99complex Basic Usage Examples")
    print("=" * 40)

    demonstrate_arithmetic()
    demonstrate_special_values()
    demonstrate_inverse_functions()
    demonstrate_text_and_bridge()

    print("\n" + "=" * 40)
    print("Examples completed successfully!")


if __name__ == "__main__":
    main()
