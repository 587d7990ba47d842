from .foundation.config import GradientSettings, load_settings
from .foundation.exceptions import (
    BoundsError,
    DimensionMismatchError,
    UDPKitError,
    UnsupportedCapabilityError,
)
from .foundation.gradients import (
    check_gradient,
    estimate_gradient,
    estimate_sparsity,
    gradient_or_estimate,
)
from .foundation.logging import configure_udpkit_logging
from .foundation.problem.base import UserProblem, capabilities_of
from .foundation.problem.container import ProblemContainer
from .foundation.problem.registry import available_problem_names, make_problem
from .foundation.problem.rosenbrock import RosenbrockProblem
from .foundation.problem.sparsity import dense_sparsity
from .foundation.problem.sphere import SphereGradientProblem
from .foundation.problem.types import Capabilities
from .foundation.version import get_version

__all__ = [
    "UserProblem",
    "ProblemContainer",
    "Capabilities",
    "capabilities_of",
    "dense_sparsity",
    "SphereGradientProblem",
    "RosenbrockProblem",
    "make_problem",
    "available_problem_names",
    "estimate_gradient",
    "estimate_sparsity",
    "gradient_or_estimate",
    "check_gradient",
    "GradientSettings",
    "load_settings",
    "configure_udpkit_logging",
    "UDPKitError",
    "DimensionMismatchError",
    "BoundsError",
    "UnsupportedCapabilityError",
    "get_version",
]


def __getattr__(name: str):
    if name == "__version__":
        return get_version()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
