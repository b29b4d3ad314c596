"""
Matplotlib renderings of the two explorers. These only draw what the numeric
modules return; all formatting of the readouts happens here.
"""
import logging
from datetime import datetime
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

import config
from derivatives import (
    FunctionSpec,
    approximate_derivative,
    exact_derivative,
    sample_function,
    secant_segment,
    tangent_segment,
)
from regression_cost import (
    RegressionParams,
    compute_cost,
    compute_cost_curve,
    fit_quality,
    generate_model_line,
)

logger = logging.getLogger(__name__)

_FIT_LABELS = {
    "excellent": "Excellent fit!",
    "decent": "Decent fit",
    "poor": "Poor fit - adjust parameters!",
}


def plot_path(plot_type: str, run_ts: str | None = None) -> Path:
    """[OUTPUT_DIR]/[timestamp]_[RUN_NAME]_[plot_type].png"""
    run_ts = run_ts or datetime.now().strftime("%m_%d_%Y_%H_%M_%S")
    return config.output_dir() / f"{run_ts}_{config.RUN_NAME}_{plot_type}.png"


def save_figure(fig, plot_type: str, run_ts: str | None = None) -> Path:
    path = plot_path(plot_type, run_ts)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=150, bbox_inches="tight")
    logger.info("saved %s plot to %s", plot_type, path)
    return path


def _xy(points):
    return np.asarray([p.x for p in points]), np.asarray([p.y for p in points])


# -----------------------------------------------------------------------------
# Cost function explorer: model fit (left) and cost vs weight (right)
# -----------------------------------------------------------------------------

def plot_cost_explorer(
    dataset,
    params: RegressionParams,
    w_range=config.W_RANGE,
    w_step=config.W_STEP,
    x_range=config.MODEL_LINE_X_RANGE,
    x_step=config.MODEL_LINE_X_STEP,
):
    # read several times below; a generator would be spent after the first
    dataset = tuple(dataset)
    cost = compute_cost(dataset, params)
    line_x, line_y = _xy(generate_model_line(params, x_range, x_step))
    curve = compute_cost_curve(dataset, params.b, w_range, w_step)
    data = np.asarray(list(dataset), dtype=float)

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))
    ax1.plot(line_x, line_y, color="#3b82f6", linewidth=2, label="Model line")
    ax1.scatter(data[:, 0], data[:, 1], color="#ef4444", zorder=3, label="Actual data")
    ax1.set_xlabel("Square Feet")
    ax1.set_ylabel("Price")
    ax1.set_title("Model fit: predictions vs actual data")
    ax1.legend()
    ax1.grid(True, alpha=0.3)

    ax2.plot([s.w for s in curve], [s.cost for s in curve], color="#8b5cf6", linewidth=2, label="Cost")
    ax2.scatter([params.w], [cost], color="#ef4444", zorder=3, label="Current w")
    ax2.set_xlabel("Weight (w)")
    ax2.set_ylabel("Cost J(w)")
    ax2.set_title("Cost function surface")
    ax2.legend()
    ax2.grid(True, alpha=0.3)

    verdict = _FIT_LABELS[fit_quality(cost).value]
    fig.suptitle(f"Cost J(w,b) = {cost:.2f}  ({verdict})")
    fig.tight_layout()
    return fig


# -----------------------------------------------------------------------------
# Derivative explorer: f(x), tangent (true slope), secant (approximate slope)
# -----------------------------------------------------------------------------

def plot_derivative_explorer(
    spec: FunctionSpec,
    x: float,
    h: float,
    x_range=config.FUNCTION_X_RANGE,
    x_step=config.FUNCTION_X_STEP,
    half_width=config.TANGENT_HALF_WIDTH,
    extend=config.SECANT_EXTEND,
):
    fx, fy = _xy(sample_function(spec, x_range[0], x_range[1], x_step))
    tx, ty = _xy(tangent_segment(spec, x, half_width, config.TANGENT_STEP))
    sx, sy = _xy(secant_segment(spec, x, h, extend))
    approx = approximate_derivative(spec, x, h)
    exact = exact_derivative(spec, x)

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(fx, fy, color="#3b82f6", linewidth=3, label="f(x)")
    ax.plot(tx, ty, color="#22c55e", linewidth=2, linestyle="--", label="Tangent (actual derivative)")
    ax.plot(sx, sy, color="#a855f7", linewidth=2, label="Secant (approximation)")
    ax.scatter([x], [spec.evaluate(x)], color="#ef4444", s=50, zorder=3)
    ax.scatter([x + h], [spec.evaluate(x + h)], color="#f97316", s=50, zorder=3)
    ax.set_xlim(*x_range)
    ax.set_ylim(-5, 25)
    ax.set_xlabel("x")
    ax.set_ylabel("f(x)")
    ax.set_title(f"Function: {spec.name}\nsecant slope {approx:.4f} vs tangent slope {exact:.4f}")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    return fig
