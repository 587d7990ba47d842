"""
Public exceptions namespace.

Everything raised by udpkit derives from :class:`UDPKitError`; catch
:class:`ProblemError` for contract violations of a wrapped problem.
"""

from __future__ import annotations

from .foundation.exceptions import (
    BoundsError,
    ConfigurationError,
    DimensionMismatchError,
    EvaluationError,
    InvalidProblemError,
    ProblemDimensionError,
    ProblemError,
    SparsityError,
    UDPKitError,
    UnsupportedCapabilityError,
)

# Short names for the three contract violations.
DimensionMismatch = DimensionMismatchError
BoundsInvalid = BoundsError
UnsupportedCapability = UnsupportedCapabilityError

__all__ = [
    "UDPKitError",
    "ConfigurationError",
    "ProblemError",
    "InvalidProblemError",
    "ProblemDimensionError",
    "DimensionMismatchError",
    "BoundsError",
    "SparsityError",
    "UnsupportedCapabilityError",
    "EvaluationError",
    "DimensionMismatch",
    "BoundsInvalid",
    "UnsupportedCapability",
]
