"""Text input and output for complex values."""

from .formatting import format_number, to_string
from .parsing import parse

__all__ = ["parse", "to_string", "format_number"]
