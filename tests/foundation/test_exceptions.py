"""Tests for the udpkit exception hierarchy."""

from __future__ import annotations

import pytest


class TestUDPKitError:
    """Test base UDPKitError class."""

    def test_basic_error(self):
        """UDPKitError should work with just a message."""
        from udpkit.foundation.exceptions import UDPKitError

        err = UDPKitError("Something went wrong")
        assert "Something went wrong" in str(err)
        assert err.message == "Something went wrong"
        assert err.suggestion is None

    def test_error_with_suggestion(self):
        """UDPKitError should include suggestion in message."""
        from udpkit.foundation.exceptions import UDPKitError

        err = UDPKitError("Something went wrong", suggestion="Try this instead")
        assert "Suggestion: Try this instead" in str(err)
        assert err.suggestion == "Try this instead"

    def test_error_with_details(self):
        from udpkit.foundation.exceptions import UDPKitError

        err = UDPKitError("Error", details={"key": "value"})
        assert err.details == {"key": "value"}


class TestProblemErrors:
    """Test problem-related errors."""

    def test_dimension_mismatch_reports_lengths(self):
        from udpkit.foundation.exceptions import DimensionMismatchError

        err = DimensionMismatchError(4, 3)
        assert "3" in str(err)
        assert "expected 4" in str(err)
        assert err.details == {"expected": 4, "got": 3, "what": "decision vector"}

    def test_dimension_mismatch_is_value_error(self):
        from udpkit.foundation.exceptions import DimensionMismatchError

        with pytest.raises(ValueError):
            raise DimensionMismatchError(4, 5)

    def test_bounds_error_suggests_fix(self):
        from udpkit.foundation.exceptions import BoundsError

        err = BoundsError("bad bounds")
        assert "lower <= upper" in str(err)

    def test_unsupported_capability_is_not_implemented(self):
        from udpkit.foundation.exceptions import UnsupportedCapabilityError

        err = UnsupportedCapabilityError("gradient", "Toy")
        assert isinstance(err, NotImplementedError)
        assert "'Toy'" in str(err)
        assert "gradient_or_estimate" in str(err)

    def test_unsupported_capability_without_gradient_hint(self):
        from udpkit.foundation.exceptions import UnsupportedCapabilityError

        err = UnsupportedCapabilityError("best_known")
        assert "gradient_or_estimate" not in str(err)
        assert "This problem" in str(err)

    def test_invalid_problem_lists_available(self):
        from udpkit.foundation.exceptions import InvalidProblemError

        err = InvalidProblemError("sphere", available=["sphere4"])
        assert "Unknown problem 'sphere'" in str(err)
        assert "sphere4" in str(err)

    def test_invalid_problem_contract_reason(self):
        from udpkit.foundation.exceptions import InvalidProblemError

        err = InvalidProblemError("Thing", reason="missing fitness")
        assert "not a valid problem" in str(err)
        assert "missing fitness" in str(err)


class TestExceptionHierarchy:
    def test_all_problem_errors_share_base(self):
        from udpkit.foundation import exceptions as exc

        for cls in (
            exc.InvalidProblemError,
            exc.ProblemDimensionError,
            exc.DimensionMismatchError,
            exc.BoundsError,
            exc.SparsityError,
            exc.UnsupportedCapabilityError,
        ):
            assert issubclass(cls, exc.ProblemError)
            assert issubclass(cls, exc.UDPKitError)

    def test_public_namespace_reexports(self):
        import udpkit.exceptions as public
        from udpkit.foundation import exceptions as canonical

        assert public.DimensionMismatchError is canonical.DimensionMismatchError
        assert "SparsityError" in dir(public)
        with pytest.raises(AttributeError):
            getattr(public, "NotAnError")


class TestContractAliases:
    def test_short_names_alias_the_canonical_classes(self):
        from udpkit.exceptions import (
            BoundsError,
            BoundsInvalid,
            DimensionMismatch,
            DimensionMismatchError,
            UnsupportedCapability,
            UnsupportedCapabilityError,
        )

        assert DimensionMismatch is DimensionMismatchError
        assert BoundsInvalid is BoundsError
        assert UnsupportedCapability is UnsupportedCapabilityError

    def test_alias_catches_container_error(self):
        from udpkit import ProblemContainer, SphereGradientProblem
        from udpkit.exceptions import DimensionMismatch

        with pytest.raises(DimensionMismatch):
            ProblemContainer(SphereGradientProblem()).fitness([1.0, 2.0, 3.0])
