# problem/rosenbrock.py
import numpy as np

from udpkit.foundation.exceptions import ProblemDimensionError
from udpkit.foundation.problem.base import UserProblem


class RosenbrockProblem(UserProblem):
    """
    Rosenbrock valley, sum(100 (x[i+1] - x[i]^2)^2 + (1 - x[i])^2) on [-5, 10]^n.

    No analytic gradient: consumers fall back to finite differences.
    """

    def __init__(self, n_var: int = 2) -> None:
        if n_var < 2:
            raise ProblemDimensionError(f"Rosenbrock needs at least 2 variables, got {n_var}.", n=n_var, nf=1)
        self.n_var = int(n_var)

    def fitness(self, x) -> np.ndarray:
        x = self.check_dimension(x)
        head, tail = x[:-1], x[1:]
        return np.array([np.sum(100.0 * (tail - head**2) ** 2 + (1.0 - head) ** 2)])

    def get_n(self) -> int:
        return self.n_var

    def get_nf(self) -> int:
        return 1

    def get_bounds(self) -> tuple[np.ndarray, np.ndarray]:
        return np.full(self.n_var, -5.0), np.full(self.n_var, 10.0)

    def best_known(self) -> list[np.ndarray]:
        return [np.ones(self.n_var)]
