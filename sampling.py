"""Evenly spaced sample grids shared by the cost and derivative explorers."""
import math
from dataclasses import dataclass

import numpy as np

from errors import DomainError


@dataclass(frozen=True)
class CurvePoint:
    """One sample of a plotted curve or line segment."""
    x: float
    y: float

# Absorbs representation error in (stop - start) / step, e.g. 0.05 / 0.001.
_COUNT_EPS = 1e-9


def grid_count(start: float, stop: float, step: float) -> int:
    """Number of samples start + i * step that stay within [start, stop]."""
    if not step > 0 or not math.isfinite(step):
        raise DomainError(f"grid step must be a positive finite number, got {step!r}")
    span = stop - start
    if not math.isfinite(span):
        raise DomainError(f"grid bounds must be finite, got [{start!r}, {stop!r}]")
    if span < 0:
        return 0
    return int(math.floor(span / step + _COUNT_EPS)) + 1


def sample_grid(start: float, stop: float, step: float) -> np.ndarray:
    """start, start + step, ..., up to stop inclusive.

    Each sample is computed as start + i * step rather than by repeated
    addition, so the endpoint is included the same way on every call.
    """
    n = grid_count(start, stop, step)
    return start + step * np.arange(n, dtype=float)


def symmetric_grid(center: float, half_width: float, step: float) -> np.ndarray:
    """Grid over [center - half_width, center + half_width] with center as the middle sample."""
    n = grid_count(0.0, half_width, step) - 1
    if n < 0:
        return np.asarray([center], dtype=float)
    return center + step * np.arange(-n, n + 1, dtype=float)
