"""
Core math modules

Точная целочисленная и рациональная арифметика для восстановления секретов.
"""

# Radix Decoder
from src.core.math.radix import (
    MAX_BASE,
    MIN_BASE,
    InvalidBaseError,
    InvalidDigitError,
    RadixError,
    decode,
    digit_value,
    validate_base,
)

# Exact Fractions
from src.core.math.exact_fractions import (
    ZERO,
    ExactFraction,
    add_fractions,
    fractions_equal,
    gcd,
    reduce_fraction,
)

# Lagrange Interpolation
from src.core.math.lagrange import (
    DuplicateCoordinateError,
    InsufficientPointsError,
    InterpolationError,
    NonIntegerResultError,
    interpolate_at_zero,
    interpolate_fraction_at_zero,
)

__all__ = [
    # Radix — Constants
    "MAX_BASE",
    "MIN_BASE",
    # Radix — Exceptions
    "InvalidBaseError",
    "InvalidDigitError",
    "RadixError",
    # Radix — Functions
    "decode",
    "digit_value",
    "validate_base",
    # Exact Fractions — Types
    "ZERO",
    "ExactFraction",
    # Exact Fractions — Functions
    "add_fractions",
    "fractions_equal",
    "gcd",
    "reduce_fraction",
    # Lagrange — Exceptions
    "DuplicateCoordinateError",
    "InsufficientPointsError",
    "InterpolationError",
    "NonIntegerResultError",
    # Lagrange — Functions
    "interpolate_at_zero",
    "interpolate_fraction_at_zero",
]
