import numpy as np
import pytest

from udpkit.foundation.exceptions import InvalidProblemError
from udpkit.foundation.problem.registry import available_problem_names, get_problem_specs, make_problem
from udpkit.foundation.problem.rosenbrock import RosenbrockProblem
from udpkit.foundation.problem.sphere import SphereGradientProblem


def test_registered_names():
    assert available_problem_names() == ("sphere4", "rosenbrock")
    assert get_problem_specs() is get_problem_specs()


def test_sphere_defaults():
    problem = make_problem("sphere4")
    assert problem.get_n() == 4
    assert problem.is_(SphereGradientProblem)
    np.testing.assert_array_equal(problem.fitness([2, 2, 2, 2]), [16.0])


def test_lookup_is_case_insensitive():
    assert make_problem("Sphere4").get_name() == "My Problem"


def test_sphere_dimension_is_fixed():
    with pytest.raises(ValueError, match="fixed dimension"):
        make_problem("sphere4", n_var=5)
    assert make_problem("sphere4", n_var=4).get_n() == 4


def test_rosenbrock_dimension_override():
    problem = make_problem("rosenbrock", n_var=5)
    assert problem.get_n() == 5
    assert problem.extract(RosenbrockProblem).n_var == 5
    np.testing.assert_array_equal(problem.fitness(np.ones(5)), [0.0])


def test_invalid_dimension_override():
    with pytest.raises(ValueError):
        make_problem("rosenbrock", n_var=0)


def test_invalid_problem_raises_with_suggestion():
    with pytest.raises(InvalidProblemError) as excinfo:
        make_problem("sphere")
    assert "sphere4" in str(excinfo.value)


def test_invalid_problem_without_close_match_lists_all():
    with pytest.raises(InvalidProblemError) as excinfo:
        make_problem("does_not_exist")
    assert "rosenbrock" in str(excinfo.value)
    assert "sphere4" in str(excinfo.value)
