"""Capability detection on UserProblem subclasses and plain objects."""

from __future__ import annotations

import numpy as np
import pytest

from udpkit.foundation.exceptions import DimensionMismatchError, UnsupportedCapabilityError
from udpkit.foundation.problem.base import UserProblem, capabilities_of
from udpkit.foundation.problem.types import Capabilities


class MinimalProblem(UserProblem):
    def fitness(self, x):
        x = self.check_dimension(x)
        return np.array([x.sum()])

    def get_n(self):
        return 3

    def get_nf(self):
        return 1

    def get_bounds(self):
        return np.zeros(3), np.ones(3)


class GradientOnlyProblem(MinimalProblem):
    def gradient(self, x):
        self.check_dimension(x)
        return np.ones(3)


class PlainObject:
    """Satisfies the contract without inheriting from UserProblem."""

    def fitness(self, x):
        return [float(np.sum(np.square(x)))]

    def gradient(self, x):
        return 2.0 * np.asarray(x, dtype=float)

    def get_n(self):
        return 2

    def get_nf(self):
        return 1

    def get_bounds(self):
        return [-1.0, -1.0], [1.0, 1.0]


def test_minimal_problem_has_no_optional_capabilities():
    assert MinimalProblem.capabilities() == Capabilities()
    assert MinimalProblem.capabilities().available() == ()


def test_gradient_override_is_detected_alone():
    caps = GradientOnlyProblem.capabilities()
    assert caps.gradient is True
    assert caps.gradient_sparsity is False
    assert caps.best_known is False


def test_defaults_for_name_and_extra_info():
    udp = MinimalProblem()
    assert udp.get_name() == "MinimalProblem"
    assert udp.extra_info() == ""


@pytest.mark.parametrize("method", ["gradient", "dsparsity", "best_known"])
def test_missing_optional_methods_raise(method):
    udp = MinimalProblem()
    args = ([0.0, 0.0, 0.0],) if method == "gradient" else ()
    with pytest.raises(UnsupportedCapabilityError):
        getattr(udp, method)(*args)


def test_required_methods_on_base_raise():
    udp = UserProblem()
    with pytest.raises(NotImplementedError, match="fitness"):
        udp.fitness([1.0])
    with pytest.raises(NotImplementedError, match="get_n"):
        udp.get_n()
    with pytest.raises(NotImplementedError, match="get_bounds"):
        udp.get_bounds()


def test_check_dimension_converts_and_validates():
    udp = MinimalProblem()
    arr = udp.check_dimension([1, 2, 3])
    assert arr.dtype == float
    with pytest.raises(DimensionMismatchError):
        udp.check_dimension([1, 2])
    with pytest.raises(DimensionMismatchError):
        udp.check_dimension([[1, 2, 3]])


def test_capabilities_of_plain_object_probes_attributes():
    caps = capabilities_of(PlainObject())
    assert caps.gradient is True
    assert caps.gradient_sparsity is False
    assert caps.name is False


def test_capabilities_of_user_problem_uses_class():
    assert capabilities_of(GradientOnlyProblem()) == GradientOnlyProblem.capabilities()
