"""
Finite-difference gradients and sparsity estimation.

Used as the fallback when a problem does not implement ``gradient`` and
to cross-check analytic gradients that it does implement.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import numpy as np

from udpkit.foundation.config import GradientSettings
from udpkit.foundation.exceptions import EvaluationError, ProblemDimensionError
from udpkit.foundation.problem.container import ProblemContainer
from udpkit.foundation.problem.types import GradientVector, SparsityPattern, VectorLike

VectorFunction = Callable[[np.ndarray], VectorLike]


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def _steps(x: np.ndarray, dx: float) -> np.ndarray:
    # Relative step, never smaller than dx itself.
    return dx * np.maximum(1.0, np.abs(x))


def _point(x: VectorLike) -> np.ndarray:
    x0 = np.asarray(x, dtype=float).reshape(-1)
    if x0.size == 0:
        raise ProblemDimensionError("Finite differences need at least one variable, got an empty point.", n=0)
    return x0


def _call(func: VectorFunction, x: np.ndarray) -> np.ndarray:
    return np.asarray(func(x), dtype=float).reshape(-1)


def estimate_gradient(
    func: VectorFunction,
    x: VectorLike,
    dx: float = 1e-8,
    method: str = "central",
) -> GradientVector:
    """
    Dense finite-difference gradient of a vector-valued function.

    Returns the flattened Jacobian, row-major by output component then
    variable, which matches the dense sparsity pattern.
    """
    settings = GradientSettings(step=dx, method=method).validate()
    x0 = _point(x)
    h = _steps(x0, settings.step)
    f0 = _call(func, x0) if settings.method == "forward" else None

    columns = []
    for j in range(x0.shape[0]):
        xp = x0.copy()
        xp[j] += h[j]
        if settings.method == "forward":
            columns.append((_call(func, xp) - f0) / h[j])
        else:
            xm = x0.copy()
            xm[j] -= h[j]
            columns.append((_call(func, xp) - _call(func, xm)) / (2.0 * h[j]))
    jacobian = np.column_stack(columns)
    return jacobian.reshape(-1)


def estimate_sparsity(func: VectorFunction, x: VectorLike, dx: float = 1e-8) -> SparsityPattern:
    """
    Detect which (component, variable) pairs change when each variable is perturbed.

    A single point can miss structural non-zeros that vanish there, so the
    result is a lower bound on the true pattern.
    """
    x0 = _point(x)
    h = _steps(x0, dx)
    f0 = _call(func, x0)
    pairs: list[tuple[int, int]] = []
    for j in range(x0.shape[0]):
        xp = x0.copy()
        xp[j] += h[j]
        changed = np.flatnonzero(_call(func, xp) != f0)
        pairs.extend((int(i), j) for i in changed)
    if not pairs:
        return np.empty((0, 2), dtype=np.int64)
    arr = np.asarray(pairs, dtype=np.int64)
    order = np.lexsort((arr[:, 1], arr[:, 0]))
    return arr[order]


def _estimate_on_pattern(problem: ProblemContainer, x: VectorLike, settings: GradientSettings) -> GradientVector:
    dense = estimate_gradient(problem.fitness, x, settings.step, settings.method)
    pattern = problem.gradient_sparsity()
    return dense[pattern[:, 0] * problem.get_n() + pattern[:, 1]]


def gradient_or_estimate(
    problem: ProblemContainer,
    x: VectorLike,
    settings: GradientSettings | None = None,
) -> GradientVector:
    """
    Analytic gradient when the problem has one, otherwise a numerical estimate.

    The estimate goes through ``problem.fitness`` so the function-evaluation
    counter reflects its cost, and is reduced to the entries of
    ``problem.gradient_sparsity()``.
    """
    if problem.has_gradient():
        return problem.gradient(x)
    settings = (settings or GradientSettings()).validate()
    _logger().debug(
        "Problem %r has no analytic gradient; estimating with %s differences (step=%g)",
        problem.get_name(),
        settings.method,
        settings.step,
    )
    return _estimate_on_pattern(problem, x, settings)


def check_gradient(
    problem: ProblemContainer,
    x: VectorLike,
    settings: GradientSettings | None = None,
) -> float:
    """Largest absolute difference between the analytic gradient and its estimate."""
    settings = (settings or GradientSettings()).validate()
    analytic = problem.gradient(x)
    numeric = _estimate_on_pattern(problem, x, settings)
    if not np.all(np.isfinite(numeric)):
        raise EvaluationError("Numerical gradient estimate is not finite.", solution=np.asarray(x, dtype=float))
    if analytic.size == 0:
        return 0.0
    return float(np.max(np.abs(analytic - numeric)))


__all__ = ["check_gradient", "estimate_gradient", "estimate_sparsity", "gradient_or_estimate"]
