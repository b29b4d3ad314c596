"""Run configuration and the explorers' default state."""

import os
import logging
from pathlib import Path

import petname

_LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, _LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Saved plots: [timestamp]_[RUN_NAME]_[plot_type].png
RUN_NAME = os.environ.get("RUN_NAME") or petname.Generate(2, "_")
SHOW_PLOTS = os.environ.get("SHOW_PLOTS", "").lower() in ("1", "true", "yes")


def output_dir() -> Path:
    return Path(os.environ.get("OUTPUT_DIR", "outputs"))


# -----------------------------------------------------------------------------
# Cost function explorer: sliders and chart ranges
# -----------------------------------------------------------------------------

INITIAL_W = 10.0
INITIAL_B = 0.0
W_RANGE = (0.0, 0.05)
W_STEP = 0.001
B_RANGE = (-10.0, 10.0)
MODEL_LINE_X_RANGE = (0.0, 450.0)
MODEL_LINE_X_STEP = 50.0

# -----------------------------------------------------------------------------
# Derivative explorer: sliders and chart ranges
# -----------------------------------------------------------------------------

INITIAL_FUNCTION = "quadratic"
INITIAL_X = 2.0
X_POINT_RANGE = (-2.0, 4.0)
INITIAL_H = 0.5
H_RANGE = (0.01, 2.0)
FUNCTION_X_RANGE = (-3.0, 5.0)
FUNCTION_X_STEP = 0.1
TANGENT_HALF_WIDTH = 2.0
TANGENT_STEP = 0.1
SECANT_EXTEND = 1.0
CLOSE_TOLERANCE = 0.01
