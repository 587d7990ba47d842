"""
Defining a problem with an analytic gradient and querying it through a container.

The problem is to minimize f = x0^2 + x1^2 + x2^2 + x3^2 with -10 <= xi <= 10.
A problem only needs fitness, get_n, get_nf and get_bounds; gradient,
dsparsity, get_name, extra_info and best_known are optional.

Usage:
    python examples/gradient_tutorial.py
"""
from __future__ import annotations

import numpy as np

from udpkit import ProblemContainer, SphereGradientProblem


def main() -> None:
    p0 = ProblemContainer(SphereGradientProblem())
    print(p0)
    print("Calling the dimension getter:", p0.get_n())
    print("Calling the fitness dimension getter:", p0.get_nf())
    print("Calling the bounds getter:", p0.get_bounds())

    # The evaluation counter starts at zero and grows with each fitness call.
    print("fevals:", p0.get_fevals())
    x = np.array([2.0, 2.0, 2.0, 2.0])
    print("calling fitness in x=[2,2,2,2]:", p0.fitness(x))
    print("fevals:", p0.get_fevals())

    print("calling gradient in x=[2,2,2,2]:", p0.gradient(x))
    print(p0.gradient_sparsity().tolist())

    # The wrapped problem is still reachable through extract().
    print("Accessing best_known:", p0.extract(SphereGradientProblem).best_known())


if __name__ == "__main__":
    main()
