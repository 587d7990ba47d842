"""
udpkit exception hierarchy.

Provides user-friendly exceptions with helpful error messages and suggestions.
All udpkit-specific exceptions inherit from UDPKitError for easy catching.

Example:
    try:
        problem = ProblemContainer(MyProblem())
    except UDPKitError as e:
        print(f"Invalid problem: {e}")
        print(f"Suggestion: {e.suggestion}")
"""

from __future__ import annotations

from typing import Any


class UDPKitError(Exception):
    """
    Base exception for all udpkit errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(UDPKitError):
    """Raised when settings are invalid or incomplete."""

    pass


# =============================================================================
# Problem Errors
# =============================================================================


class ProblemError(UDPKitError):
    """Base class for problem-related errors."""

    pass


class InvalidProblemError(ProblemError):
    """Raised when an unknown problem is requested or an object breaks the problem contract."""

    def __init__(self, problem: str, available: list[str] | None = None, *, reason: str | None = None) -> None:
        if reason is not None:
            message = f"Object '{problem}' is not a valid problem: {reason}."
            suggestion = "A problem must implement fitness(x), get_n(), get_nf() and get_bounds()."
        else:
            message = f"Unknown problem '{problem}'."
            if available:
                suggestion = f"Available problems: {', '.join(available)}."
            else:
                suggestion = "Use available_problem_names() to see registered problems."
        super().__init__(message, suggestion, {"problem": problem, "available": available or []})


class ProblemDimensionError(ProblemError):
    """Raised when problem dimensions are invalid."""

    def __init__(
        self,
        message: str,
        n: int | None = None,
        nf: int | None = None,
    ) -> None:
        suggestion = "Check problem dimensions: get_n() (variables) and get_nf() (fitness components) must be positive"
        super().__init__(message, suggestion, {"n": n, "nf": nf})


class DimensionMismatchError(ProblemError, ValueError):
    """Raised when a decision vector does not have the problem's dimension."""

    def __init__(self, expected: int, got: int, *, what: str = "decision vector") -> None:
        message = f"Length of the {what} is {got}, expected {expected}."
        suggestion = "Vectors are never truncated or padded; pass exactly get_n() values"
        super().__init__(message, suggestion, {"expected": expected, "got": got, "what": what})


class BoundsError(ProblemError, ValueError):
    """Raised when bounds are invalid or inconsistent."""

    def __init__(self, message: str) -> None:
        suggestion = "Ensure lower <= upper for all variables and both bounds have length get_n()"
        super().__init__(message, suggestion)


class SparsityError(ProblemError, ValueError):
    """Raised when a gradient sparsity pattern is malformed."""

    def __init__(self, message: str, pattern: Any = None) -> None:
        suggestion = "dsparsity() must return unique (objective, variable) index pairs within range"
        super().__init__(message, suggestion, {"pattern": pattern})


class UnsupportedCapabilityError(ProblemError, NotImplementedError):
    """Raised when an optional capability is requested from a problem that does not provide it."""

    def __init__(self, capability: str, problem: str | None = None) -> None:
        owner = f"'{problem}'" if problem else "This problem"
        message = f"{owner} does not implement the optional capability '{capability}'."
        suggestion = "Check problem.capabilities before calling optional methods"
        if capability == "gradient":
            suggestion += ", or use gradient_or_estimate() for a numerical estimate"
        super().__init__(message, suggestion, {"capability": capability, "problem": problem})


# =============================================================================
# Runtime Errors
# =============================================================================


class EvaluationError(UDPKitError):
    """Raised when a problem returns a result of the wrong shape."""

    def __init__(self, message: str, solution: Any = None) -> None:
        suggestion = "Check your problem's fitness() and gradient() return values"
        super().__init__(message, suggestion, {"solution": solution})


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Base
    "UDPKitError",
    # Configuration
    "ConfigurationError",
    # Problem
    "ProblemError",
    "InvalidProblemError",
    "ProblemDimensionError",
    "DimensionMismatchError",
    "BoundsError",
    "SparsityError",
    "UnsupportedCapabilityError",
    # Runtime
    "EvaluationError",
]
