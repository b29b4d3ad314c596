"""
Cost function J(w, b) for a single-feature linear model y_hat = w * x + b.
Every function is pure: inputs in, freshly built results out.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

import numpy as np

from errors import DomainError
from sampling import CurvePoint, sample_grid

logger = logging.getLogger(__name__)

# Square feet -> house price sample used by the explorer.
DEFAULT_DATASET = ((100.0, 1.0), (200.0, 2.0), (300.0, 3.0), (400.0, 4.0))


@dataclass(frozen=True)
class RegressionParams:
    w: float
    b: float


@dataclass(frozen=True)
class PredictionRow:
    """One row of the calculation table: y_hat = w * x + b, error = y_hat - y."""
    x: float
    actual: float
    prediction: float
    error: float
    squared_error: float


@dataclass(frozen=True)
class CostSample:
    w: float
    cost: float


class FitQuality(Enum):
    EXCELLENT = "excellent"
    DECENT = "decent"
    POOR = "poor"


# -----------------------------------------------------------------------------
# Forward pass: predictions and residuals
# -----------------------------------------------------------------------------

def _as_arrays(dataset: Iterable[Sequence[float]]) -> tuple[np.ndarray, np.ndarray]:
    pairs = np.asarray(list(dataset), dtype=float)
    if pairs.size == 0:
        raise DomainError("dataset is empty; cost is undefined for zero examples")
    if pairs.ndim != 2 or pairs.shape[1] != 2:
        raise DomainError(f"dataset must be a sequence of (x, y) pairs, got shape {pairs.shape}")
    return pairs[:, 0], pairs[:, 1]


def _squared_errors(x: np.ndarray, y: np.ndarray, params: RegressionParams) -> np.ndarray:
    return (params.w * x + params.b - y) ** 2


def compute_predictions(dataset, params: RegressionParams) -> list[PredictionRow]:
    """One PredictionRow per (x, y), in dataset order."""
    x, y = _as_arrays(dataset)
    y_hat = params.w * x + params.b
    error = y_hat - y
    return [
        PredictionRow(float(x_i), float(y_i), float(p_i), float(e_i), float(e_i * e_i))
        for x_i, y_i, p_i, e_i in zip(x, y, y_hat, error)
    ]


# -----------------------------------------------------------------------------
# Cost: J(w, b) = (1 / 2m) * sum((y_hat - y)^2)
# -----------------------------------------------------------------------------

def sum_squared_errors(dataset, params: RegressionParams) -> float:
    x, y = _as_arrays(dataset)
    return float(np.sum(_squared_errors(x, y, params)))


def compute_cost(dataset, params: RegressionParams) -> float:
    """Mean squared error halved: sum((w*x + b - y)^2) / (2 * m)."""
    x, y = _as_arrays(dataset)
    m = x.shape[0]
    cost = float(np.sum(_squared_errors(x, y, params)) / (2 * m))
    logger.debug("J(w=%s, b=%s) = %s over %d examples", params.w, params.b, cost, m)
    return cost


def compute_cost_curve(dataset, b: float, w_range: tuple[float, float], w_step: float) -> list[CostSample]:
    """J(w, b) for w = w_min + i * w_step up to w_max inclusive, b held fixed."""
    x, y = _as_arrays(dataset)
    m = x.shape[0]
    ws = sample_grid(w_range[0], w_range[1], w_step)
    # (n_w, m): one row of squared errors per candidate w
    residuals = ws[:, np.newaxis] * x[np.newaxis, :] + b - y[np.newaxis, :]
    costs = np.sum(residuals ** 2, axis=1) / (2 * m)
    return [CostSample(float(w), float(c)) for w, c in zip(ws, costs)]


def generate_model_line(params: RegressionParams, x_range: tuple[float, float], x_step: float) -> list[CurvePoint]:
    """Samples of the fitted line y = w * x + b, independent of any dataset."""
    xs = sample_grid(x_range[0], x_range[1], x_step)
    return [CurvePoint(float(x), float(params.w * x + params.b)) for x in xs]


def fit_quality(cost: float) -> FitQuality:
    """Verdict shown beside J(w, b): < 1 excellent, < 100 decent, otherwise poor."""
    if cost < 1:
        return FitQuality.EXCELLENT
    if cost < 100:
        return FitQuality.DECENT
    return FitQuality.POOR
