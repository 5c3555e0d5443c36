"""Bridges between Complex and Python/NumPy complex representations."""

from .ieee_bridge import (
    from_builtin,
    from_numpy,
    from_numpy_array,
    from_pair,
    to_builtin,
    to_numpy,
    to_numpy_array,
    to_pair,
)

__all__ = [
    # Scalars
    "to_builtin",
    "from_builtin",
    "to_numpy",
    "from_numpy",
    "to_pair",
    "from_pair",
    # Arrays
    "to_numpy_array",
    "from_numpy_array",
]
