"""
Type-erasing container for user-defined problems.

``ProblemContainer`` accepts any object satisfying the problem contract,
validates it once, counts evaluations and exposes a uniform interface to
downstream code regardless of which optional methods the wrapped problem
implements.
"""

from __future__ import annotations

import logging
import threading
from typing import TypeVar

import numpy as np

from udpkit.foundation.exceptions import (
    BoundsError,
    DimensionMismatchError,
    EvaluationError,
    InvalidProblemError,
    ProblemDimensionError,
    UnsupportedCapabilityError,
)
from udpkit.foundation.problem.base import capabilities_of
from udpkit.foundation.problem.sparsity import check_sparsity, dense_sparsity
from udpkit.foundation.problem.types import (
    Bounds,
    Capabilities,
    DecisionVector,
    FitnessVector,
    GradientVector,
    SparsityPattern,
    VectorLike,
)

_REQUIRED_METHODS = ("fitness", "get_n", "get_nf", "get_bounds")

T = TypeVar("T")


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def _format_vector(values: np.ndarray) -> str:
    return "[" + ", ".join(f"{v:g}" for v in values) + "]"


def _as_dimension(value: object, method: str) -> int:
    try:
        dim = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError) as exc:
        raise ProblemDimensionError(f"{method}() must return an integer, got {value!r}.") from exc
    if dim != value:
        raise ProblemDimensionError(f"{method}() must return an integer, got {value!r}.")
    return dim


class ProblemContainer:
    """Uniform, counted access to a user-defined problem.

    Parameters
    ----------
    udp : object
        Any object with ``fitness``, ``get_n``, ``get_nf`` and
        ``get_bounds``.  ``UserProblem`` subclasses are the usual choice.

    Raises
    ------
    InvalidProblemError
        If a required method is missing.
    ProblemDimensionError
        If ``get_n()`` or ``get_nf()`` is not positive.
    BoundsError
        If the bounds have the wrong length, contain NaN, or
        ``lower[i] > upper[i]`` for some ``i``.
    SparsityError
        If ``dsparsity()`` is implemented and returns a malformed pattern.
    """

    def __init__(self, udp: object) -> None:
        if isinstance(udp, ProblemContainer):
            udp = udp._udp
        missing = [name for name in _REQUIRED_METHODS if not callable(getattr(udp, name, None))]
        if missing:
            raise InvalidProblemError(type(udp).__name__, reason=f"missing {', '.join(missing)}")

        self._udp = udp
        self._capabilities = capabilities_of(udp)

        n = _as_dimension(udp.get_n(), "get_n")
        nf = _as_dimension(udp.get_nf(), "get_nf")
        if n < 1 or nf < 1:
            raise ProblemDimensionError(f"Problem dimensions must be positive, got n={n}, nf={nf}.", n=n, nf=nf)
        self._n = n
        self._nf = nf

        self._lb, self._ub = self._validated_bounds(udp.get_bounds())
        self._name = str(udp.get_name()) if self._capabilities.name else type(udp).__name__

        if self._capabilities.gradient_sparsity:
            self._sparsity = check_sparsity(udp.dsparsity(), n, nf)
        else:
            self._sparsity = dense_sparsity(n, nf)

        self._counter_lock = threading.Lock()
        self._fevals = 0
        self._gevals = 0
        _logger().debug(
            "Wrapped problem %r (n=%d, nf=%d, capabilities=%s)",
            self._name,
            n,
            nf,
            ",".join(self._capabilities.available()) or "none",
        )

    def _validated_bounds(self, bounds: tuple[VectorLike, VectorLike]) -> Bounds:
        try:
            lower, upper = bounds
        except (TypeError, ValueError) as exc:
            raise BoundsError(f"get_bounds() must return a (lower, upper) pair, got {bounds!r}.") from exc
        lb = np.array(lower, dtype=float).reshape(-1)
        ub = np.array(upper, dtype=float).reshape(-1)
        if lb.shape[0] != self._n or ub.shape[0] != self._n:
            raise BoundsError(f"Bounds must have length {self._n}, got {lb.shape[0]} (lower) and {ub.shape[0]} (upper).")
        if np.isnan(lb).any() or np.isnan(ub).any():
            raise BoundsError("Bounds must not contain NaN.")
        inverted = np.flatnonzero(lb > ub)
        if inverted.size:
            i = int(inverted[0])
            raise BoundsError(f"Lower bound {lb[i]:g} exceeds upper bound {ub[i]:g} at index {i}.")
        return lb, ub

    def _checked_input(self, x: VectorLike) -> DecisionVector:
        arr = np.asarray(x, dtype=float)
        if arr.ndim != 1 or arr.shape[0] != self._n:
            raise DimensionMismatchError(self._n, int(arr.size))
        return arr

    @staticmethod
    def _returned_vector(raw: object, method: str, x: DecisionVector) -> np.ndarray:
        # None and scalars would otherwise coerce to a length-1 array.
        if raw is None:
            raise EvaluationError(f"{method}() returned None, expected a sequence of floats.", solution=x)
        try:
            result = np.asarray(raw, dtype=float)
        except (TypeError, ValueError) as exc:
            raise EvaluationError(f"{method}() returned a value that is not a numeric vector: {raw!r}.", solution=x) from exc
        if result.ndim == 0:
            raise EvaluationError(f"{method}() returned a scalar, expected a sequence of floats.", solution=x)
        return result.reshape(-1)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def fitness(self, x: VectorLike) -> FitnessVector:
        """Evaluate the fitness at ``x`` and increment the evaluation counter."""
        arr = self._checked_input(x)
        result = self._returned_vector(self._udp.fitness(arr.copy()), "fitness", arr)
        if result.shape[0] != self._nf:
            raise EvaluationError(f"fitness() returned {result.shape[0]} values, expected {self._nf}.", solution=arr)
        with self._counter_lock:
            self._fevals += 1
        return result

    def gradient(self, x: VectorLike) -> GradientVector:
        """Evaluate the analytic gradient at ``x`` in :meth:`gradient_sparsity` order."""
        if not self._capabilities.gradient:
            raise UnsupportedCapabilityError("gradient", self._name)
        arr = self._checked_input(x)
        result = self._returned_vector(self._udp.gradient(arr.copy()), "gradient", arr)
        expected = self._sparsity.shape[0]
        if result.shape[0] != expected:
            raise EvaluationError(
                f"gradient() returned {result.shape[0]} values, expected {expected} (one per sparsity entry).",
                solution=arr,
            )
        with self._counter_lock:
            self._gevals += 1
        return result

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def capabilities(self) -> Capabilities:
        return self._capabilities

    def has_gradient(self) -> bool:
        return self._capabilities.gradient

    def has_gradient_sparsity(self) -> bool:
        """True when the wrapped problem supplies its own sparsity pattern."""
        return self._capabilities.gradient_sparsity

    def gradient_sparsity(self) -> SparsityPattern:
        return self._sparsity.copy()

    def get_n(self) -> int:
        return self._n

    def get_nf(self) -> int:
        return self._nf

    def get_bounds(self) -> Bounds:
        return self._lb.copy(), self._ub.copy()

    def get_lb(self) -> np.ndarray:
        return self._lb.copy()

    def get_ub(self) -> np.ndarray:
        return self._ub.copy()

    def get_name(self) -> str:
        return self._name

    def get_extra_info(self) -> str:
        if not self._capabilities.extra_info:
            return ""
        return str(self._udp.extra_info())

    def best_known(self) -> list[DecisionVector]:
        if not self._capabilities.best_known:
            raise UnsupportedCapabilityError("best_known", self._name)
        return [np.asarray(x, dtype=float) for x in self._udp.best_known()]

    def get_fevals(self) -> int:
        with self._counter_lock:
            return self._fevals

    def get_gevals(self) -> int:
        with self._counter_lock:
            return self._gevals

    def reset_counters(self) -> None:
        with self._counter_lock:
            self._fevals = 0
            self._gevals = 0

    # ------------------------------------------------------------------
    # Extraction
    # ------------------------------------------------------------------

    def extract(self, cls: type[T]) -> T | None:
        """Return the wrapped problem if its type is exactly ``cls``, else ``None``."""
        if type(self._udp) is cls:
            return self._udp  # type: ignore[return-value]
        return None

    def is_(self, cls: type) -> bool:
        return type(self._udp) is cls

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        lines = [
            f"Problem name: {self._name}",
            f"\tGlobal dimension:\t\t\t{self._n}",
            f"\tFitness dimension:\t\t\t{self._nf}",
            f"\tNumber of objectives:\t\t\t{self._nf}",
            f"\tLower bounds: {_format_vector(self._lb)}",
            f"\tUpper bounds: {_format_vector(self._ub)}",
            "",
            f"\tHas gradient: {str(self.has_gradient()).lower()}",
            f"\tUser implemented gradient sparsity: {str(self.has_gradient_sparsity()).lower()}",
        ]
        if self.has_gradient():
            lines.append(f"\tExpected gradients: {self._sparsity.shape[0]}")
        lines.extend(
            [
                "",
                f"\tFunction evaluations: {self.get_fevals()}",
                f"\tGradient evaluations: {self.get_gevals()}",
            ]
        )
        text = "\n".join(lines) + "\n"
        extra = self.get_extra_info()
        if extra:
            text += f"\nExtra info:\n{extra}"
        return text

    def __repr__(self) -> str:
        return f"ProblemContainer(name={self._name!r}, n={self._n}, nf={self._nf})"


__all__ = ["ProblemContainer"]
