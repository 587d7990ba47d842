"""
Problem registry: specs and factories.
"""

from .selection import make_problem  # noqa: F401
from .specs import ProblemSpec, available_problem_names, get_problem_specs  # noqa: F401

__all__ = [
    "ProblemSpec",
    "available_problem_names",
    "get_problem_specs",
    "make_problem",
]
