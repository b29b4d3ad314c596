from datetime import datetime

import matplotlib.pyplot as plt

import config
from derivatives import approximate_derivative, exact_derivative, get_function, is_close_approximation
from plots import plot_cost_explorer, plot_derivative_explorer, save_figure
from regression_cost import (
    DEFAULT_DATASET,
    RegressionParams,
    compute_cost,
    compute_predictions,
    fit_quality,
    sum_squared_errors,
)


def clamp(value: float, bounds: tuple[float, float]) -> float:
    """Keep a slider value inside its range, e.g. h never reaches 0."""
    lo, hi = bounds
    return min(max(value, lo), hi)


def initial_params() -> RegressionParams:
    """Starting slider state. b is kept in its slider range; w starts off-slider at 10 like the explorer."""
    return RegressionParams(config.INITIAL_W, clamp(config.INITIAL_B, config.B_RANGE))


def report_cost(dataset, params: RegressionParams) -> None:
    dataset = tuple(dataset)
    rows = compute_predictions(dataset, params)
    cost = compute_cost(dataset, params)

    print("=== Cost function ===")
    print(f"{'x':>8} {'y':>8} {'y_hat':>12} {'error':>12} {'squared error':>16}")
    for row in rows:
        print(f"{row.x:>8g} {row.actual:>8g} {row.prediction:>12.2f} {row.error:>12.2f} {row.squared_error:>16.2f}")
    print(f"sum of squared errors = {sum_squared_errors(dataset, params):.2f}")
    print(f"number of examples (m) = {len(rows)}")
    print(f"cost J(w,b) = (1 / 2m) * sum = {cost:.2f} [{fit_quality(cost).value}]")


def report_derivative(key: str, x: float, h: float) -> None:
    spec = get_function(key)
    y1, y2 = spec.evaluate(x), spec.evaluate(x + h)
    approx = approximate_derivative(spec, x, h)
    exact = exact_derivative(spec, x)

    print("=== Derivative ===")
    print(f"{spec.name}, x = {x:.2f}, h = {h:.3f}")
    print(f"approximate (secant): ({y2:.3f} - {y1:.3f}) / {h:.3f} = {approx:.4f}")
    print(f"actual (tangent): {spec.derivative_formula} -> {exact:.4f}")
    verdict = "very close" if is_close_approximation(spec, x, h, config.CLOSE_TOLERANCE) else "try a smaller step"
    print(f"difference: {abs(approx - exact):.6f} ({verdict})")


def main():
    run_ts = datetime.now().strftime("%m_%d_%Y_%H_%M_%S")
    params = initial_params()
    x = clamp(config.INITIAL_X, config.X_POINT_RANGE)
    h = clamp(config.INITIAL_H, config.H_RANGE)

    report_cost(DEFAULT_DATASET, params)
    report_derivative(config.INITIAL_FUNCTION, x, h)

    fig = plot_cost_explorer(DEFAULT_DATASET, params)
    save_figure(fig, "cost", run_ts)
    fig = plot_derivative_explorer(get_function(config.INITIAL_FUNCTION), x, h)
    save_figure(fig, "derivative", run_ts)

    if config.SHOW_PLOTS:
        plt.show()
    plt.close("all")


if __name__ == "__main__":
    main()
