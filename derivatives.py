"""
Derivative explorer core: a closed catalog of scalar functions, each with a
closed-form derivative, plus the forward-difference (secant) approximation
and the tangent / secant segments drawn around a point.
"""
import logging
from abc import ABC, abstractmethod
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from errors import DomainError
from sampling import CurvePoint, sample_grid, symmetric_grid

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Function catalog: each spec pairs f(x) with its closed-form f'(x)
# -----------------------------------------------------------------------------

class FunctionSpec(ABC):
    """Scalar function with a known derivative. Works on floats and numpy arrays."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Display label, e.g. 'f(x) = x²'."""
        pass

    @property
    @abstractmethod
    def derivative_formula(self) -> str:
        """Display label for the derivative, e.g. "f'(x) = 2x"."""
        pass

    @abstractmethod
    def _f(self, x):
        pass

    @abstractmethod
    def _f_prime(self, x):
        pass

    def evaluate(self, x):
        return self._f(x)

    def derivative(self, x):
        return self._f_prime(x)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"


class Quadratic(FunctionSpec):
    """f(x) = x^2, f'(x) = 2x."""

    @property
    def name(self) -> str:
        return "f(x) = x²"

    @property
    def derivative_formula(self) -> str:
        return "f'(x) = 2x"

    def _f(self, x):
        return x * x

    def _f_prime(self, x):
        return 2 * x


class Linear(FunctionSpec):
    """f(x) = 2x + 1, f'(x) = 2."""

    @property
    def name(self) -> str:
        return "f(x) = 2x + 1"

    @property
    def derivative_formula(self) -> str:
        return "f'(x) = 2"

    def _f(self, x):
        return 2 * x + 1

    def _f_prime(self, x):
        # keep the input's shape so array inputs give an array of slopes
        return 2 + 0 * x


class Cubic(FunctionSpec):
    """f(x) = x^3, f'(x) = 3x^2."""

    @property
    def name(self) -> str:
        return "f(x) = x³"

    @property
    def derivative_formula(self) -> str:
        return "f'(x) = 3x²"

    def _f(self, x):
        return x * x * x

    def _f_prime(self, x):
        return 3 * x * x


class FunctionKind(str, Enum):
    QUADRATIC = "quadratic"
    LINEAR = "linear"
    CUBIC = "cubic"


_CATALOG = MappingProxyType({
    FunctionKind.QUADRATIC.value: Quadratic(),
    FunctionKind.LINEAR.value: Linear(),
    FunctionKind.CUBIC.value: Cubic(),
})


def catalog() -> Mapping[str, FunctionSpec]:
    """Read-only key -> FunctionSpec mapping. Same object on every call."""
    return _CATALOG


def get_function(key) -> FunctionSpec:
    """Look up a spec by its key string or FunctionKind."""
    if isinstance(key, FunctionKind):
        key = key.value
    try:
        return _CATALOG[key]
    except KeyError:
        raise DomainError(f"unknown function {key!r}; expected one of {sorted(_CATALOG)}") from None


# -----------------------------------------------------------------------------
# Sampling the curve and its slopes
# -----------------------------------------------------------------------------

def sample_function(spec: FunctionSpec, x_min: float, x_max: float, step: float) -> list[CurvePoint]:
    xs = sample_grid(x_min, x_max, step)
    ys = spec.evaluate(xs)
    return [CurvePoint(float(x), float(y)) for x, y in zip(xs, ys)]


def approximate_derivative(spec: FunctionSpec, x: float, h: float) -> float:
    """Forward difference (f(x + h) - f(x)) / h, the slope of the secant."""
    if h == 0:
        raise DomainError("step size h must be non-zero")
    slope = (spec.evaluate(x + h) - spec.evaluate(x)) / h
    logger.debug("secant slope of %s at x=%s, h=%s: %s", spec.name, x, h, slope)
    return float(slope)


def exact_derivative(spec: FunctionSpec, x: float) -> float:
    return float(spec.derivative(x))


def derivative_error(spec: FunctionSpec, x: float, h: float) -> float:
    """|secant slope - tangent slope|; shrinks toward 0 as h -> 0."""
    return abs(approximate_derivative(spec, x, h) - exact_derivative(spec, x))


def is_close_approximation(spec: FunctionSpec, x: float, h: float, tolerance: float = 0.01) -> bool:
    return derivative_error(spec, x, h) < tolerance


# -----------------------------------------------------------------------------
# Line segments for display: y = y0 + slope * (t - x0)
# -----------------------------------------------------------------------------

def tangent_segment(spec: FunctionSpec, x: float, half_width: float, step: float) -> list[CurvePoint]:
    """Tangent at (x, f(x)) sampled over [x - half_width, x + half_width].

    The grid is symmetric about x, so the middle sample is exactly (x, f(x)).
    """
    y0 = spec.evaluate(x)
    slope = exact_derivative(spec, x)
    ts = symmetric_grid(x, half_width, step)
    ys = y0 + slope * (ts - x)
    return [CurvePoint(float(t), float(y)) for t, y in zip(ts, ys)]


def secant_segment(spec: FunctionSpec, x: float, h: float, extend: float = 1.0) -> list[CurvePoint]:
    """Secant through (x, f(x)) and (x + h, f(x + h)), drawn `extend` past each end."""
    slope = approximate_derivative(spec, x, h)
    x2 = x + h
    y1 = float(spec.evaluate(x))
    y2 = float(spec.evaluate(x2))
    return [
        CurvePoint(x - extend, y1 - slope * extend),
        CurvePoint(x, y1),
        CurvePoint(x2, y2),
        CurvePoint(x2 + extend, y2 + slope * extend),
    ]
