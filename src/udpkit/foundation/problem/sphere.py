# problem/sphere.py
import numpy as np

from udpkit.foundation.problem.base import UserProblem

_N_VAR = 4


class SphereGradientProblem(UserProblem):
    """
    Minimize f(x) = x0^2 + x1^2 + x2^2 + x3^2 with -10 <= xi <= 10.

    Single objective, no constraints, fixed dimension 4, with an analytic
    gradient df/dxi = 2 xi over a dense sparsity pattern.
    """

    def fitness(self, x) -> np.ndarray:
        x = self.check_dimension(x)
        return np.array([np.dot(x, x)])

    def gradient(self, x) -> np.ndarray:
        # df/dx0, df/dx1, df/dx2, df/dx3
        x = self.check_dimension(x)
        return 2.0 * x

    def dsparsity(self) -> np.ndarray:
        return np.array([(0, i) for i in range(_N_VAR)], dtype=np.int64)

    def get_n(self) -> int:
        return _N_VAR

    def get_nf(self) -> int:
        return 1

    def get_bounds(self) -> tuple[np.ndarray, np.ndarray]:
        return np.full(_N_VAR, -10.0), np.full(_N_VAR, 10.0)

    def get_name(self) -> str:
        return "My Problem"

    def extra_info(self) -> str:
        return (
            "This is a simple toy problem with one fitness, \n"
            "no constraint and a fixed dimension of 4.\n"
            "The fitness function gradients are also implemented\n"
        )

    def best_known(self) -> list[np.ndarray]:
        return [np.zeros(_N_VAR)]
