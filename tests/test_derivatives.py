"""Tests for derivatives — catalog, secant vs tangent slopes and display segments."""

from __future__ import annotations

import numpy as np
import pytest

from derivatives import (
    FunctionKind,
    FunctionSpec,
    approximate_derivative,
    catalog,
    derivative_error,
    exact_derivative,
    get_function,
    is_close_approximation,
    sample_function,
    secant_segment,
    tangent_segment,
)
from errors import DomainError


@pytest.fixture
def quadratic() -> FunctionSpec:
    return catalog()["quadratic"]


# ── Catalog ──


class TestCatalog:
    def test_keys(self):
        assert set(catalog()) == {"quadratic", "linear", "cubic"}

    def test_same_object_every_call(self):
        assert catalog() is catalog()
        for key in catalog():
            assert catalog()[key] is catalog()[key]
            assert catalog()[key].evaluate(1.7) == catalog()[key].evaluate(1.7)

    def test_read_only(self):
        with pytest.raises(TypeError):
            catalog()["sine"] = None

    @pytest.mark.parametrize(
        "key,x,fx,dfx",
        [
            ("quadratic", 3.0, 9.0, 6.0),
            ("linear", 3.0, 7.0, 2.0),
            ("cubic", -2.0, -8.0, 12.0),
        ],
    )
    def test_closed_forms(self, key, x, fx, dfx):
        spec = catalog()[key]
        assert spec.evaluate(x) == fx
        assert spec.derivative(x) == dfx

    def test_labels(self):
        assert catalog()["quadratic"].name == "f(x) = x²"
        assert catalog()["linear"].derivative_formula == "f'(x) = 2"
        assert catalog()["cubic"].derivative_formula == "f'(x) = 3x²"

    def test_get_function_by_kind_or_key(self):
        assert get_function(FunctionKind.CUBIC) is catalog()["cubic"]
        assert get_function("linear") is catalog()["linear"]

    def test_unknown_key_raises(self):
        with pytest.raises(DomainError):
            get_function("sine")

    def test_linear_derivative_keeps_array_shape(self):
        slopes = catalog()["linear"].derivative(np.array([0.0, 1.0, 2.0]))
        assert slopes.shape == (3,)
        assert np.all(slopes == 2)


# ── Slopes ──


class TestSlopes:
    def test_worked_example(self, quadratic):
        assert quadratic.evaluate(2) == 4
        assert quadratic.evaluate(2.5) == 6.25
        assert approximate_derivative(quadratic, 2, 0.5) == pytest.approx(4.5)
        assert exact_derivative(quadratic, 2) == 4
        assert derivative_error(quadratic, 2, 0.5) == pytest.approx(0.5)

    def test_converges_as_h_shrinks(self, quadratic):
        assert approximate_derivative(quadratic, 2, 1) == pytest.approx(5)
        assert approximate_derivative(quadratic, 2, 1e-4) == pytest.approx(4.0001, abs=1e-6)
        errors = [derivative_error(quadratic, 2, h) for h in (1, 0.1, 0.01, 0.001)]
        assert errors == sorted(errors, reverse=True)

    def test_negative_h_is_backward_difference(self, quadratic):
        assert approximate_derivative(quadratic, 2, -0.5) == pytest.approx(3.5)

    def test_linear_secant_is_exact(self):
        spec = get_function("linear")
        assert approximate_derivative(spec, -1.3, 0.7) == pytest.approx(2)

    @pytest.mark.parametrize("key", ["quadratic", "linear", "cubic"])
    @pytest.mark.parametrize("x", [-2.0, 0.0, 3.5])
    def test_zero_h_raises(self, key, x):
        with pytest.raises(DomainError):
            approximate_derivative(catalog()[key], x, 0)

    def test_close_verdict(self, quadratic):
        assert is_close_approximation(quadratic, 2, 0.005)
        assert not is_close_approximation(quadratic, 2, 0.5)
        assert is_close_approximation(quadratic, 2, 0.5, tolerance=1.0)


# ── Curves and segments ──


class TestSampleFunction:
    def test_grid_and_values(self):
        points = sample_function(get_function("cubic"), -3, 5, 0.1)
        assert len(points) == 81
        assert points[0].x == -3 and points[0].y == -27
        assert points[-1].x == pytest.approx(5)
        assert points[-1].y == pytest.approx(125)


class TestTangentSegment:
    @pytest.mark.parametrize("key", ["quadratic", "linear", "cubic"])
    @pytest.mark.parametrize("x", [-2.0, 0.3, 2.0, 4.0])
    def test_midpoint_on_curve(self, key, x):
        spec = catalog()[key]
        points = tangent_segment(spec, x, 2, 0.1)
        mid = points[len(points) // 2]
        assert mid.x == pytest.approx(x)
        assert mid.y == pytest.approx(spec.evaluate(x))

    def test_slope_is_exact_derivative(self, quadratic):
        points = tangent_segment(quadratic, 2, 2, 0.1)
        assert len(points) == 41
        assert points[0].x == pytest.approx(0) and points[0].y == pytest.approx(-4)
        assert points[-1].x == pytest.approx(4) and points[-1].y == pytest.approx(12)


class TestSecantSegment:
    def test_four_point_shape(self, quadratic):
        points = secant_segment(quadratic, 2, 0.5)
        assert [p.x for p in points] == [1, 2, 2.5, 3.5]
        assert [p.y for p in points] == pytest.approx([-0.5, 4, 6.25, 10.75])

    def test_custom_extend(self, quadratic):
        points = secant_segment(quadratic, 2, 0.5, extend=2)
        assert points[0].x == 0 and points[0].y == pytest.approx(-5)
        assert points[-1].x == 4.5 and points[-1].y == pytest.approx(15.25)

    def test_zero_h_raises(self, quadratic):
        with pytest.raises(DomainError):
            secant_segment(quadratic, 2, 0)
