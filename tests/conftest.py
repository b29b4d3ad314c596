"""Shared fixtures: headless matplotlib and a throwaway output directory."""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest


@pytest.fixture(autouse=True)
def output_dir(tmp_path: Path, monkeypatch) -> Path:
    out = tmp_path / "outputs"
    monkeypatch.setenv("OUTPUT_DIR", str(out))
    yield out
    plt.close("all")


@pytest.fixture
def house_prices():
    return [(100, 1), (200, 2), (300, 3), (400, 4)]
