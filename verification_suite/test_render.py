"""Axis sizing, colours and PNG output of the matplotlib renderer."""
from __future__ import annotations

import sys
from pathlib import Path

import matplotlib.image as mpimg
from matplotlib.colors import to_rgba
import pytest

BASE = Path(__file__).resolve().parents[1]
if str(BASE) not in sys.path:
    sys.path.insert(0, str(BASE))

from deadreckon import render  # noqa: E402
from deadreckon.config import PlotConfig  # noqa: E402
from deadreckon.render import PALETTE, MatplotlibRenderer, axis_range, series_color  # noqa: E402
from deadreckon.series import Points, TimeSeries  # noqa: E402


def _ramp(cycle: float = 0.5, duration: float = 5.0, slope: float = 1.5) -> TimeSeries:
    series = TimeSeries(cycle, duration, 0.0)
    for i in range(1, series.length):
        series.record(slope * i)
    return series


def test_axis_range_floors_and_ceils() -> None:
    points = Points(2)
    points.data[0].x, points.data[0].y = -1.5, 2.2
    points.data[1].x, points.data[1].y = 3.1, 7.9
    assert axis_range(points) == ((-2, 4), (2, 8))


def test_axis_range_rejects_degenerate_series() -> None:
    points = Points(3)
    for pt in points.data:
        pt.x, pt.y = 1.0, 2.0
    with pytest.raises(ValueError):
        axis_range(points)


def test_palette_offset_by_one() -> None:
    assert series_color(0) == PALETTE[1]
    assert series_color(1) == PALETTE[2]
    assert series_color(len(PALETTE) - 1) == PALETTE[0]


def test_scatter_png_has_fixed_size(tmp_path: Path) -> None:
    points = Points(50)
    for i, pt in enumerate(points.data):
        pt.x = float(i)
        pt.y = float(i % 7)
    path = tmp_path / "scatter.png"
    MatplotlibRenderer().draw_scatter(points, path, "scatter")
    image = mpimg.imread(path)
    assert image.shape[:2] == (500, 500)


def test_time_plot_creates_missing_directory(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "plots" / "ramp.png"
    config = PlotConfig(width=300, height=200)
    MatplotlibRenderer(config).draw_time_series([_ramp(), _ramp(slope=3.0)], path, "ramp")
    assert path.exists()
    assert mpimg.imread(path).shape[:2] == (200, 300)


def test_time_plot_needs_a_series(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        MatplotlibRenderer().draw_time_series([], tmp_path / "none.png", "none")
    assert not (tmp_path / "none.png").exists()


def test_time_plot_sized_by_first_series(tmp_path: Path, monkeypatch) -> None:
    closed = []
    monkeypatch.setattr(render.plt, "close", closed.append)
    MatplotlibRenderer().draw_time_series(
        [_ramp(slope=1.0), _ramp(slope=3.0)], tmp_path / "ramps.png", "ramps"
    )
    ax = closed[0].axes[0]
    # the second ramp reaches 27 but only the first one sizes the axes
    assert ax.get_xlim() == (0.0, 5.0)
    assert ax.get_ylim() == (0.0, 9.0)
    colors = [tuple(c.get_facecolor()[0]) for c in ax.collections]
    assert colors == [to_rgba(PALETTE[1]), to_rgba(PALETTE[2])]
    assert colors == [(0.0, 0.0, 1.0, 1.0), (0.0, 1.0, 0.0, 1.0)]
