from __future__ import annotations

from difflib import get_close_matches

from udpkit.foundation.exceptions import InvalidProblemError

from ..container import ProblemContainer
from .specs import get_problem_specs


def _suggest_names(name: str, options: list[str]) -> list[str]:
    if not name or not options:
        return []
    lookup = {option.lower(): option for option in options}
    matches = get_close_matches(name.lower(), lookup.keys(), n=3, cutoff=0.6)
    return [lookup[match] for match in matches]


def make_problem(key: str, *, n_var: int | None = None) -> ProblemContainer:
    """Instantiate a registered problem by *key* and wrap it in a container.

    Parameters
    ----------
    key : str
        Registered problem name (e.g. ``"sphere4"``, ``"rosenbrock"``).
    n_var : int, optional
        Override the default number of decision variables (only for
        problems that allow it).

    Raises
    ------
    InvalidProblemError
        If *key* is not registered.  Close matches are suggested first.
    """
    specs = get_problem_specs()
    spec = specs.get(key.lower())
    if spec is None:
        options = sorted(specs)
        raise InvalidProblemError(key, _suggest_names(key, options) or options)
    return ProblemContainer(spec.factory(spec.resolve_n_var(n_var)))


__all__ = ["make_problem"]
