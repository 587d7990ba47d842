from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Callable

ProblemFactory = Callable[[int], object]


@dataclass(frozen=True)
class ProblemSpec:
    """Metadata and factory for a named example problem."""

    key: str
    label: str
    default_n_var: int
    factory: ProblemFactory
    allow_n_var_override: bool = True
    description: str = ""

    def resolve_n_var(self, n_var: int | None) -> int:
        """
        Apply the default dimension and enforce override rules.
        """
        if n_var is None:
            return self.default_n_var
        if not self.allow_n_var_override and n_var != self.default_n_var:
            raise ValueError(f"Problem '{self.label}' has a fixed dimension ({self.default_n_var}). n_var overrides are not supported.")
        if n_var <= 0:
            raise ValueError("n_var must be a positive integer.")
        return n_var


__all__ = ["ProblemSpec", "ProblemFactory"]
