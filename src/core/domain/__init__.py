"""
Domain models and value objects.

Contains the input entities: Point, EncodedShare, ThresholdKeys, ReconstructionCase.
"""

from src.core.domain.point import Point
from src.core.domain.reconstruction_case import (
    THRESHOLD_FIELD,
    EncodedShare,
    InsufficientSharesError,
    MissingThresholdError,
    ReconstructionCase,
    ThresholdKeys,
    extract_threshold,
)

__all__ = [
    # Point model
    "Point",
    # Reconstruction case
    "THRESHOLD_FIELD",
    "EncodedShare",
    "ThresholdKeys",
    "ReconstructionCase",
    "extract_threshold",
    # Exceptions
    "MissingThresholdError",
    "InsufficientSharesError",
]
