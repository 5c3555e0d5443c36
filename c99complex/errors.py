"""Exception hierarchy for c99complex.

Numeric edge cases are never errors: they are encoded as NaN, signed zero
or signed infinity results. Only malformed text and the undefined total
ordering of the complex plane raise.
"""


class C99ComplexError(Exception):
    """Base class for all c99complex errors."""


class ComplexFormatError(C99ComplexError, ValueError):
    """Raised when text cannot be parsed as a complex literal."""

    def __init__(self, message: str, text=None):
        super().__init__(message)
        self.text = text


class UnsupportedOperationError(C99ComplexError, TypeError):
    """Raised for operations that are undefined on the complex plane."""

    def __init__(self, operation: str, message: str = None):
        if message is None:
            message = f"'{operation}' is not defined for complex numbers"
        super().__init__(message)
        self.operation = operation
