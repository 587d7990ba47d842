"""
Base class for user-defined optimization problems.
"""

from __future__ import annotations

import numpy as np

from udpkit.foundation.exceptions import DimensionMismatchError, UnsupportedCapabilityError
from udpkit.foundation.problem.types import (
    OPTIONAL_METHODS,
    Bounds,
    Capabilities,
    DecisionVector,
    FitnessVector,
    GradientVector,
    SparsityPattern,
    VectorLike,
)


class UserProblem:
    """Base class for user-defined optimization problems (UDPs).

    **Required:** override ``fitness``, ``get_n``, ``get_nf`` and
    ``get_bounds``.
    **Optional:** override ``gradient``, ``dsparsity``, ``get_name``,
    ``extra_info`` and ``best_known``.  Which of them a subclass overrides
    is reported by :meth:`capabilities`, so consumers never have to call a
    method to find out whether it exists.

    Example::

        import numpy as np
        from udpkit import ProblemContainer, UserProblem

        class Paraboloid(UserProblem):
            def fitness(self, x):
                x = self.check_dimension(x)
                return np.array([x[0] ** 2 + x[1] ** 2])

            def gradient(self, x):
                x = self.check_dimension(x)
                return 2.0 * x

            def get_n(self):
                return 2

            def get_nf(self):
                return 1

            def get_bounds(self):
                return np.full(2, -1.0), np.full(2, 1.0)

        p = ProblemContainer(Paraboloid())
        p.fitness([0.5, 0.5])   # array([0.5])
        p.has_gradient()        # True

    Bounds are advisory: ``fitness`` evaluates points outside of them.
    """

    # ------------------------------------------------------------------
    # Required interface
    # ------------------------------------------------------------------

    def fitness(self, x: VectorLike) -> FitnessVector:
        """Return the fitness vector (length ``get_nf()``) at ``x``.

        Implementations must reject vectors whose length differs from
        ``get_n()``; :meth:`check_dimension` does that.
        """
        raise NotImplementedError(f"{type(self).__name__} must implement fitness(self, x).")

    def get_n(self) -> int:
        raise NotImplementedError(f"{type(self).__name__} must implement get_n(self).")

    def get_nf(self) -> int:
        raise NotImplementedError(f"{type(self).__name__} must implement get_nf(self).")

    def get_bounds(self) -> Bounds:
        """Return ``(lower, upper)``, each of length ``get_n()``."""
        raise NotImplementedError(f"{type(self).__name__} must implement get_bounds(self).")

    # ------------------------------------------------------------------
    # Optional interface
    # ------------------------------------------------------------------

    def gradient(self, x: VectorLike) -> GradientVector:
        """Return the non-zero partial derivatives at ``x``.

        Entry ``k`` is the derivative of fitness component
        ``dsparsity()[k][0]`` with respect to variable ``dsparsity()[k][1]``.
        Without ``dsparsity`` the pattern is dense, row-major by objective.
        """
        raise UnsupportedCapabilityError("gradient", self.get_name())

    def dsparsity(self) -> SparsityPattern:
        raise UnsupportedCapabilityError("gradient_sparsity", self.get_name())

    def get_name(self) -> str:
        return type(self).__name__

    def extra_info(self) -> str:
        return ""

    def best_known(self) -> list[DecisionVector]:
        raise UnsupportedCapabilityError("best_known", self.get_name())

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @classmethod
    def capabilities(cls) -> Capabilities:
        """Report which optional methods this class overrides."""
        flags = {
            capability: getattr(cls, method) is not getattr(UserProblem, method)
            for capability, method in OPTIONAL_METHODS.items()
        }
        return Capabilities(**flags)

    def check_dimension(self, x: VectorLike) -> DecisionVector:
        """Convert ``x`` to a float array and check its length against ``get_n()``."""
        arr = np.asarray(x, dtype=float)
        n = self.get_n()
        if arr.ndim != 1 or arr.shape[0] != n:
            raise DimensionMismatchError(n, int(arr.size))
        return arr


def capabilities_of(udp: object) -> Capabilities:
    """Capabilities of any problem object.

    ``UserProblem`` subclasses report the methods they override.  Other
    objects are probed for callable attributes, once, when wrapped.
    """
    if isinstance(udp, UserProblem):
        return type(udp).capabilities()
    flags = {capability: callable(getattr(udp, method, None)) for capability, method in OPTIONAL_METHODS.items()}
    return Capabilities(**flags)


__all__ = ["UserProblem", "capabilities_of"]
