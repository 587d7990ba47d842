from __future__ import annotations

from ..rosenbrock import RosenbrockProblem
from ..sphere import SphereGradientProblem
from .common import ProblemFactory, ProblemSpec

_PROBLEM_SPECS: dict[str, ProblemSpec] | None = None


def _build_problem_specs() -> dict[str, ProblemSpec]:
    return {
        "sphere4": ProblemSpec(
            key="sphere4",
            label="Sphere (4 variables, analytic gradient)",
            default_n_var=4,
            allow_n_var_override=False,
            description="Separable quadratic bowl on [-10, 10]^4 with a dense analytic gradient.",
            factory=lambda _n_var: SphereGradientProblem(),
        ),
        "rosenbrock": ProblemSpec(
            key="rosenbrock",
            label="Rosenbrock",
            default_n_var=2,
            description="Curved valley on [-5, 10]^n without an analytic gradient.",
            factory=lambda n_var: RosenbrockProblem(n_var=n_var),
        ),
    }


def get_problem_specs() -> dict[str, ProblemSpec]:
    global _PROBLEM_SPECS
    if _PROBLEM_SPECS is None:
        _PROBLEM_SPECS = _build_problem_specs()
    return _PROBLEM_SPECS


def available_problem_names() -> tuple[str, ...]:
    return tuple(get_problem_specs().keys())


__all__ = ["ProblemSpec", "ProblemFactory", "available_problem_names", "get_problem_specs"]
