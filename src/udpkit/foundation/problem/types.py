from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, fields
from typing import Protocol, Union

import numpy as np

DecisionVector = np.ndarray
FitnessVector = np.ndarray
GradientVector = np.ndarray
# Shape (k, 2): row k is the (objective index, variable index) of gradient entry k.
SparsityPattern = np.ndarray
Bounds = tuple[np.ndarray, np.ndarray]
VectorLike = Union[Sequence[float], np.ndarray]

OPTIONAL_METHODS: dict[str, str] = {
    "gradient": "gradient",
    "gradient_sparsity": "dsparsity",
    "name": "get_name",
    "extra_info": "extra_info",
    "best_known": "best_known",
}


@dataclass(frozen=True)
class Capabilities:
    """Which optional methods a problem implements."""

    gradient: bool = False
    gradient_sparsity: bool = False
    name: bool = False
    extra_info: bool = False
    best_known: bool = False

    def available(self) -> tuple[str, ...]:
        return tuple(f.name for f in fields(self) if getattr(self, f.name))


class ProblemProtocol(Protocol):
    def fitness(self, x: VectorLike) -> VectorLike: ...

    def get_n(self) -> int: ...

    def get_nf(self) -> int: ...

    def get_bounds(self) -> tuple[VectorLike, VectorLike]: ...


class GradientProblemProtocol(ProblemProtocol, Protocol):
    def gradient(self, x: VectorLike) -> VectorLike: ...


class SparseGradientProblemProtocol(GradientProblemProtocol, Protocol):
    def dsparsity(self) -> VectorLike: ...


__all__ = [
    "Bounds",
    "Capabilities",
    "DecisionVector",
    "FitnessVector",
    "GradientProblemProtocol",
    "GradientVector",
    "OPTIONAL_METHODS",
    "ProblemProtocol",
    "SparseGradientProblemProtocol",
    "SparsityPattern",
    "VectorLike",
]
